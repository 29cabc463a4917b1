from __future__ import annotations
import logging

import requests

log = logging.getLogger(__name__)

PAGE_HEADERS = {
    "User-Agent": "feedfinder/0.1 (+https://github.com/feedfinder/feedfinder)",
    "Accept": "text/html,application/xhtml+xml,*/*;q=0.8",
}
PAGE_TIMEOUT = 10


def get(url: str, headers: dict | None = None) -> requests.Response:
    """GET ``url`` following redirects; raises requests.HTTPError on 4xx/5xx."""
    r = requests.get(url, headers={**PAGE_HEADERS, **(headers or {})}, timeout=PAGE_TIMEOUT, allow_redirects=True)
    log.info("fetch %s -> %s %s", url, r.status_code, r.url)
    r.raise_for_status()
    return r


def fetch_page(url: str) -> tuple[str, str]:
    """Return (final url after redirects, html)."""
    r = get(url)
    return r.url, r.text
