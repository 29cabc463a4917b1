from __future__ import annotations
import json
import logging
import os

import requests
import streamlit as st

from feedfinder.core import DetectionError
from feedfinder.detectors.orchestrator import detect_feeds
from feedfinder.http import fetch_page

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
log = logging.getLogger(__name__)

st.set_page_config(page_title="Find Feeds", page_icon="📰")

st.title("Find Feeds")
st.caption("Paste a page URL, and optionally its HTML. Lists the RSS, Atom and JSON feeds the page points to or most likely has.")

with st.form("detector"):
    page_url = st.text_input("Page URL", placeholder="https://example.com/blog/")
    html = st.text_area("Page HTML (leave blank to fetch it)", height=200)
    lenient = st.checkbox("Skip links that do not resolve instead of failing")
    submitted = st.form_submit_button("Find feeds")

if submitted:
    base_url = page_url.strip()
    try:
        if not html.strip():
            with st.spinner("Fetching page..."):
                base_url, html = fetch_page(base_url)
        feeds = detect_feeds(base_url, html, strict=not lenient)
    except requests.RequestException as e:
        log.warning("fetch failed for %s: %s", base_url, e)
        st.error(f"Unable to fetch page: {e}")
    except DetectionError as e:
        st.error(f"Unable to find feeds due to error: {e}")
    else:
        if feeds:
            st.success(f"Possible feeds for {base_url}")
            for feed in feeds:
                st.markdown(f"- `{feed.kind.value}` {feed.url}")
        else:
            st.warning("No feed found")

        st.divider()
        st.subheader("Debug JSON")
        st.code(
            json.dumps([{"url": f.url, "kind": f.kind.value} for f in feeds], ensure_ascii=False, indent=2),
            language="json",
        )

st.markdown(
    """
    ---  
    **Notes**  
    - Declared `<link rel="alternate">` feeds win, then YouTube URLs, then links in the page, then guesses from the site generator.  
    - Candidates are not fetched; check them before subscribing.  
    """
)
