from __future__ import annotations
import urllib.parse
from typing import Optional

from bs4 import BeautifulSoup

from ..core import BaseURL, Feed, FeedKind
from ..urls import path_segments

YOUTUBE_HOSTS = {"youtube.com", "www.youtube.com", "m.youtube.com"}
# feeds are only served from the canonical origin
FEED_URL = "https://www.youtube.com/feeds/videos.xml"


def _list_param(query: str) -> Optional[str]:
    values = urllib.parse.parse_qs(query).get("list")
    return values[0] if values else None


def _feed_query(url: str) -> Optional[str]:
    """Query string of the videos.xml feed for a YouTube page, if it has one."""
    parts = urllib.parse.urlsplit(url)
    segments = path_segments(url)
    section = segments[0] if segments else ""

    if section in ("channel", "user"):
        if len(segments) < 2:
            return None
        key = "channel_id" if section == "channel" else "user"
        return urllib.parse.urlencode({key: urllib.parse.unquote(segments[1])})
    if parts.path in ("/playlist", "/watch"):
        playlist = _list_param(parts.query)
        if not playlist:
            return None
        return urllib.parse.urlencode({"playlist_id": playlist})
    return None


def youtube(doc: BeautifulSoup, base: BaseURL) -> list[Feed]:
    if (urllib.parse.urlsplit(base.url).hostname or "") not in YOUTUBE_HOSTS:
        return []
    query = _feed_query(base.url)
    if query is None:
        return []
    feed = base.feed(f"{FEED_URL}?{query}", FeedKind.ATOM)
    return [feed] if feed else []
