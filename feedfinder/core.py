from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from . import urls
from .errors import DetectionError, QueryError, UrlResolutionError

__all__ = ["BaseURL", "DetectionError", "Feed", "FeedKind", "QueryError", "UrlResolutionError"]

log = logging.getLogger(__name__)


class FeedKind(str, Enum):
    RSS = "rss"
    ATOM = "atom"
    JSON = "json"
    LINK = "link"     # anchor in the page body, type unknown
    GUESS = "guess"   # inferred from the page generator, never declared


@dataclass(frozen=True)
class Feed:
    url: str
    kind: FeedKind


@dataclass(frozen=True)
class BaseURL:
    """
    The page URL every candidate is resolved against.

    ``strict`` decides what happens to a reference that will not resolve:
    raise (abort the whole detection) or log and skip that one candidate.
    """
    url: str
    strict: bool = True

    def feed(self, reference: str, kind: FeedKind) -> Optional[Feed]:
        try:
            return Feed(urls.join(self.url, reference), kind)
        except UrlResolutionError:
            if self.strict:
                raise
            log.warning("skipping unresolvable %s reference %r", kind.value, reference)
            return None
