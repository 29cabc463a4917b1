from __future__ import annotations
import urllib.parse
from typing import Callable, NamedTuple, Optional

from bs4 import BeautifulSoup

from ..core import BaseURL, Feed, FeedKind
from ..document import serialize
from ..urls import path_segments


def climb(base: BaseURL, filename: str) -> list[Feed]:
    """
    One candidate per directory level of the page path, root first.

    ``http://x/blog/post/`` with ``index.xml`` gives ``http://x/index.xml``,
    ``http://x/blog/index.xml`` and ``http://x/blog/post/index.xml``.
    """
    parts = urllib.parse.urlsplit(base.url)
    root = f"{parts.scheme}://{parts.netloc}"
    segments = path_segments(base.url)
    feeds = []
    for depth in range(len(segments) + 1):
        path = "/".join(["", *segments[:depth], filename])
        feed = base.feed(root + path, FeedKind.GUESS)
        if feed:
            feeds.append(feed)
    return feeds


def _fixed(path: str) -> Callable[[BaseURL], list[Feed]]:
    def _inner(base: BaseURL) -> list[Feed]:
        feed = base.feed(path, FeedKind.GUESS)
        return [feed] if feed else []
    return _inner


def _is_jekyll(text: str, host: str) -> bool:
    return "jekyll" in text or host.endswith("github.io")


class Signature(NamedTuple):
    name: str
    matches: Callable[[str, str], bool]   # (lowercased page text, host)
    candidates: Callable[[BaseURL], list[Feed]]


# order matters, a page can carry more than one of these
SIGNATURES = [
    Signature("tumblr", lambda text, host: "tumblr.com" in text, _fixed("/rss")),
    Signature("wordpress", lambda text, host: "wordpress" in text, _fixed("/feed")),
    Signature("hugo", lambda text, host: "hugo" in text, lambda base: climb(base, "index.xml")),
    Signature("jekyll", _is_jekyll, lambda base: climb(base, "atom.xml")),
    Signature("ghost", lambda text, host: "ghost" in text, _fixed("/rss/")),
]


def generator_for(text: str, host: str) -> Optional[Signature]:
    text = text.lower()
    for sig in SIGNATURES:
        if sig.matches(text, host):
            return sig
    return None


def guess(doc: BeautifulSoup, base: BaseURL) -> list[Feed]:
    host = urllib.parse.urlsplit(base.url).hostname or ""
    sig = generator_for(serialize(doc), host)
    return sig.candidates(base) if sig else []
