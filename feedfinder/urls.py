from __future__ import annotations
import urllib.parse

from .errors import UrlResolutionError


def parse(text: str) -> str:
    """Return ``text`` as an absolute URL, or raise UrlResolutionError."""
    try:
        parts = urllib.parse.urlsplit((text or "").strip())
        # .port validates the authority (non-numeric ports and the like)
        parts.port
    except ValueError as e:
        raise UrlResolutionError(text, e) from e
    if not parts.scheme:
        raise UrlResolutionError(text, ValueError("relative URL without a base"))
    path = parts.path
    if parts.netloc and not path:
        path = "/"
    return urllib.parse.urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def join(base: str, reference: str) -> str:
    reference = (reference or "").strip()
    try:
        joined = urllib.parse.urljoin(base, reference)
    except ValueError as e:
        raise UrlResolutionError(reference, e) from e
    try:
        return parse(joined)
    except UrlResolutionError as e:
        raise UrlResolutionError(reference, e.cause) from e.cause


def path_segments(url: str) -> list[str]:
    """Path segments of ``url`` up to, not including, the first empty one."""
    out = []
    for seg in urllib.parse.urlsplit(url).path.split("/")[1:]:
        if not seg:
            break
        out.append(seg)
    return out


def parse_base(text: str) -> str:
    """Like parse, but only for URLs relative references can be joined against."""
    url = parse(text)
    parts = urllib.parse.urlsplit(url)
    if parts.scheme not in urllib.parse.uses_relative or not parts.netloc:
        raise UrlResolutionError(
            text, ValueError(f"{parts.scheme}: URLs cannot be a base for relative references")
        )
    return url
