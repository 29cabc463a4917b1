import pytest

from feedfinder.core import BaseURL, Feed, FeedKind, UrlResolutionError
from feedfinder.detectors.declared import declared_links
from feedfinder.document import parse_html

BASE = BaseURL("http://example.com/")


def _detect(html, base=BASE):
    return declared_links(parse_html(html), base)


@pytest.mark.parametrize("mime,kind", [
    ("application/rss+xml", FeedKind.RSS),
    ("application/atom+xml", FeedKind.ATOM),
    ("application/json", FeedKind.JSON),
])
def test_link_types(mime, kind):
    html = f'<html><head><link rel="alternate" type="{mime}" href="http://example.com/feed"></head></html>'
    assert _detect(html) == [Feed("http://example.com/feed", kind)]


def test_legacy_meta_alternate():
    html = '<html><head><meta rel="alternate" type="application/atom+xml" href="http://example.com/feed.atom"></head></html>'
    assert _detect(html) == [Feed("http://example.com/feed.atom", FeedKind.ATOM)]


def test_relative_hrefs():
    html = '''<head>
    <link rel="alternate" type="application/rss+xml" href="/feed.rss">
    <link rel="alternate" type="application/rss+xml" href="./rss">
    </head>'''
    assert _detect(html) == [
        Feed("http://example.com/feed.rss", FeedKind.RSS),
        Feed("http://example.com/rss", FeedKind.RSS),
    ]


def test_document_order_and_skips():
    html = '''<head>
    <link rel="stylesheet" type="text/css" href="/style.css">
    <link rel="alternate" type="application/atom+xml" href="/atom.xml">
    <link rel="alternate" hreflang="de" href="/de/">
    <link rel="alternate" type="application/rss+xml">
    <link rel="alternate" type="text/html" href="/mobile">
    <link rel="alternate" type="Application/RSS+XML" href="/rss.xml">
    </head>'''
    assert _detect(html) == [
        Feed("http://example.com/atom.xml", FeedKind.ATOM),
        Feed("http://example.com/rss.xml", FeedKind.RSS),
    ]


def test_nothing_declared():
    assert _detect("<html><head><title>hi</title></head></html>") == []


def test_bad_href_raises():
    html = '<link rel="alternate" type="application/rss+xml" href="http://[bad">'
    with pytest.raises(UrlResolutionError):
        _detect(html)


def test_bad_href_skipped_when_lenient():
    html = '''<link rel="alternate" type="application/rss+xml" href="http://[bad">
    <link rel="alternate" type="application/atom+xml" href="/atom.xml">'''
    assert _detect(html, BaseURL("http://example.com/", strict=False)) == [
        Feed("http://example.com/atom.xml", FeedKind.ATOM),
    ]


def test_empty_href_is_the_page_itself():
    html = '<link rel="alternate" type="application/rss+xml" href="">'
    assert _detect(html, BaseURL("http://example.com/blog/")) == [
        Feed("http://example.com/blog/", FeedKind.RSS),
    ]
