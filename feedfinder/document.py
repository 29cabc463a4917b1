from __future__ import annotations
from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from .errors import QueryError


def parse_html(html: str) -> BeautifulSoup:
    # html.parser accepts anything, broken markup included
    return BeautifulSoup(html or "", "html.parser")


def select(doc: BeautifulSoup, selector: str) -> list[Tag]:
    """All elements matching the CSS ``selector``, in document order."""
    try:
        return doc.select(selector)
    except (SelectorSyntaxError, NotImplementedError) as e:
        raise QueryError(selector, e) from e


def serialize(doc: BeautifulSoup) -> str:
    return str(doc)
