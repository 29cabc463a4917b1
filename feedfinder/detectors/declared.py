from __future__ import annotations
from bs4 import BeautifulSoup

from ..core import BaseURL, Feed, FeedKind
from ..document import select

# <meta rel=alternate> is not valid HTML but older pages still carry it
ALTERNATE_SELECTOR = "link[rel='alternate'], meta[rel='alternate']"

FEED_TYPES = {
    "application/rss+xml": FeedKind.RSS,
    "application/atom+xml": FeedKind.ATOM,
    "application/json": FeedKind.JSON,
}


def declared_links(doc: BeautifulSoup, base: BaseURL) -> list[Feed]:
    feeds = []
    for el in select(doc, ALTERNATE_SELECTOR):
        kind = FEED_TYPES.get((el.get("type") or "").strip().lower())
        href = el.get("href")
        if kind is None or href is None:
            continue
        feed = base.feed(href, kind)
        if feed:
            feeds.append(feed)
    return feeds
