"""Namespace resolution — declare only the extension namespaces a batch uses."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tabby.records import UrlRecord

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
IMAGE_NS = "http://www.google.com/schemas/sitemap-image/1.1"
VIDEO_NS = "http://www.google.com/schemas/sitemap-video/1.1"
NEWS_NS = "http://www.google.com/schemas/sitemap-news/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"


def resolve_namespaces(urls: Iterable[UrlRecord]) -> dict[str, str]:
    """Map namespace prefix to URI for every feature used in ``urls``.

    The default sitemap namespace is always present under the empty prefix.
    Extension prefixes follow in a fixed order (image, video, news, xhtml)
    so identical input always yields identical declarations.
    """
    has_images = has_videos = has_news = has_alternates = False
    for record in urls:
        has_images = has_images or bool(record.images)
        has_videos = has_videos or bool(record.videos)
        has_news = has_news or record.news is not None
        has_alternates = has_alternates or bool(record.alternates)

    namespaces = {"": SITEMAP_NS}
    if has_images:
        namespaces["image"] = IMAGE_NS
    if has_videos:
        namespaces["video"] = VIDEO_NS
    if has_news:
        namespaces["news"] = NEWS_NS
    if has_alternates:
        namespaces["xhtml"] = XHTML_NS
    return namespaces


def xmlns_attributes(namespaces: dict[str, str]) -> dict[str, str]:
    """Turn a prefix mapping into ``xmlns`` / ``xmlns:prefix`` attributes."""
    return {
        f"xmlns:{prefix}" if prefix else "xmlns": uri
        for prefix, uri in namespaces.items()
    }
