from __future__ import annotations
from bs4 import BeautifulSoup

from ..core import BaseURL, Feed, FeedKind
from ..document import select

# case-sensitive, matched anywhere in the raw href
KEYWORDS = ("feed", "xml", "rss", "atom")


def body_links(doc: BeautifulSoup, base: BaseURL) -> list[Feed]:
    feeds = []
    for a in select(doc, "a[href]"):
        href = a["href"]
        if not any(k in href for k in KEYWORDS):
            continue
        feed = base.feed(href, FeedKind.LINK)
        if feed:
            feeds.append(feed)
    return feeds
