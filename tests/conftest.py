"""Shared test fixtures for tabby."""

from __future__ import annotations

from datetime import date
from xml.etree.ElementTree import Element, fromstring

import pytest

from tabby.records import UrlRecord, VideoRecord

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
IMAGE_NS = "http://www.google.com/schemas/sitemap-image/1.1"
VIDEO_NS = "http://www.google.com/schemas/sitemap-video/1.1"
NEWS_NS = "http://www.google.com/schemas/sitemap-news/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"


def parse(xml: str) -> Element:
    """Parse a generated document (declaration included) into its root element."""
    return fromstring(xml.encode("utf-8"))


def locs(xml: str) -> list[str]:
    """Return the ``<loc>`` text of every ``<url>`` or ``<sitemap>`` entry, in order."""
    root = parse(xml)
    return [el.text or "" for el in root.iter(f"{{{SITEMAP_NS}}}loc")]


def make_urls(count: int) -> list[UrlRecord]:
    """``count`` minimal URL records named page0, page1, ..."""
    return [UrlRecord(loc=f"http://www.example.com/page{i}") for i in range(count)]


def make_video(**overrides: object) -> VideoRecord:
    """A valid video record with a content location; fields overridable."""
    fields: dict[str, object] = {
        "thumbnail_loc": "http://www.example.com/thumbs/video1.jpg",
        "title": "Grilling steaks for summer",
        "description": "A tutorial on how to grill steaks perfectly",
        "content_loc": "http://www.example.com/videos/video1.mp4",
    }
    fields.update(overrides)
    return VideoRecord(**fields)  # type: ignore[arg-type]


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-01-15 for reproducible index output."""
    return lambda: date(2024, 1, 15)
