"""Sitemap documents — ``<urlset>`` and ``<sitemapindex>`` generation.

Both generators validate the whole input before returning anything: a
single bad record aborts the call with a
:class:`~tabby._errors.ValidationError` and no partial document.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from xml.etree.ElementTree import Element

from tabby._xml import format_number, optional_element, render_document, text_element
from tabby.extensions import add_alternate, add_image, add_news, add_video
from tabby.namespaces import SITEMAP_NS, resolve_namespaces, xmlns_attributes
from tabby.records import SitemapEntry, UrlRecord
from tabby.validate import (
    check_changefreq,
    check_image_count,
    check_lastmod,
    check_priority,
    check_sitemap_count,
    check_sitemap_loc,
    check_url,
    check_url_loc,
    check_urls_present,
)


def build_url(record: UrlRecord) -> Element:
    """Validate one record and build its ``<url>`` element.

    Core fields come first (``loc``, then ``lastmod``, ``changefreq`` and
    ``priority`` when present), followed by images, videos, news, and
    alternate links.
    """
    check_url_loc(record.loc)
    check_lastmod(record.lastmod)
    check_changefreq(record.changefreq)
    check_priority(record.priority)

    url = Element("url")
    text_element(url, "loc", record.loc)
    optional_element(url, "lastmod", record.lastmod)
    optional_element(url, "changefreq", record.changefreq)
    if record.priority is not None:
        text_element(url, "priority", format_number(record.priority))

    if record.images:
        check_image_count(record.images)
        for image in record.images:
            add_image(url, image)
    for video in record.videos:
        add_video(url, video)
    if record.news is not None:
        add_news(url, record.news)
    for alternate in record.alternates:
        add_alternate(url, alternate)
    return url


def urlset_root(urls: Sequence[UrlRecord]) -> Element:
    """Create an empty ``<urlset>`` declaring the namespaces ``urls`` need."""
    return Element("urlset", xmlns_attributes(resolve_namespaces(urls)))


def iter_url_elements(urls: Sequence[UrlRecord]) -> Iterator[Element]:
    """Build ``<url>`` elements lazily, in input order."""
    for record in urls:
        yield build_url(record)


def validate_urls(urls: Sequence[UrlRecord]) -> None:
    """Check a whole batch up front without building any elements.

    Raises:
        ValidationError: On the first violation, in record order.

    """
    check_urls_present(urls)
    for record in urls:
        check_url(record)


def generate_sitemap(urls: Sequence[UrlRecord], *, pretty_print: bool = True) -> str:
    """Generate a ``<urlset>`` sitemap document.

    Args:
        urls: URL records, emitted in the given order.
        pretty_print: Indent the output; ``False`` renders one line.

    Returns:
        The complete XML document, including the XML declaration.

    Raises:
        ValidationError: If ``urls`` is empty or any record is invalid.

    """
    validate_urls(urls)
    root = urlset_root(urls)
    return render_document(root, iter_url_elements(urls), pretty_print=pretty_print)


def build_sitemap_entry(entry: SitemapEntry) -> Element:
    """Validate one index entry and build its ``<sitemap>`` element."""
    check_sitemap_loc(entry.loc)
    check_lastmod(entry.lastmod)

    sitemap = Element("sitemap")
    text_element(sitemap, "loc", entry.loc)
    optional_element(sitemap, "lastmod", entry.lastmod)
    return sitemap


def generate_sitemap_index(
    sitemaps: Sequence[SitemapEntry],
    *,
    pretty_print: bool = True,
) -> str:
    """Generate a ``<sitemapindex>`` document.

    Args:
        sitemaps: Sitemap locations with optional last-modified dates.
        pretty_print: Indent the output; ``False`` renders one line.

    Returns:
        The complete XML document, including the XML declaration.

    Raises:
        ValidationError: If ``sitemaps`` is empty, holds more than 50,000
            entries, or any entry is invalid.

    """
    check_sitemap_count(sitemaps)
    elements = [build_sitemap_entry(entry) for entry in sitemaps]
    root = Element("sitemapindex", {"xmlns": SITEMAP_NS})
    return render_document(root, elements, pretty_print=pretty_print)
