from __future__ import annotations
import logging

from ..core import BaseURL, Feed
from ..document import parse_html
from .. import urls
from .anchors import body_links
from .declared import declared_links
from .guess import guess
from .youtube import youtube

log = logging.getLogger(__name__)

# most authoritative first; the first one that finds anything wins
STRATEGIES = (
    ("declared_links", declared_links),
    ("youtube", youtube),
    ("body_links", body_links),
    ("guess", guess),
)


def detect_feeds(base_url: str, html: str, *, strict: bool = True) -> list[Feed]:
    """
    Candidate feed URLs for the page at ``base_url`` with markup ``html``.

    Returns an empty list when nothing looks like a feed. Raises
    ``UrlResolutionError`` or ``QueryError`` (both ``DetectionError``); with
    ``strict=False`` references that fail to resolve are skipped instead.
    """
    base = BaseURL(urls.parse_base(base_url), strict=strict)
    doc = parse_html(html)

    for name, strategy in STRATEGIES:
        feeds = strategy(doc, base)
        if feeds:
            log.debug("%s found %d feed(s) for %s", name, len(feeds), base.url)
            return feeds
        log.debug("%s found nothing for %s", name, base.url)
    return []
