"""Sitemap collections — split large URL sets across several sitemaps.

URLs are cut into contiguous chunks of at most ``max_urls_per_sitemap``
records.  Each chunk becomes one ``<urlset>`` document, and a
``<sitemapindex>`` lists every chunk's public location stamped with
today's date.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING

from tabby.document import generate_sitemap, generate_sitemap_index
from tabby.records import SitemapCollection, SitemapEntry
from tabby.validate import (
    MAX_URLS_PER_SITEMAP,
    check_max_urls_per_sitemap,
    check_prefix,
    check_urls_present,
)

if TYPE_CHECKING:
    from tabby._types import Clock, LocationNamer, Prefix
    from tabby.records import UrlRecord


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def chunked(urls: Sequence[UrlRecord], size: int) -> list[Sequence[UrlRecord]]:
    """Split ``urls`` into contiguous slices of ``size`` (the last may be shorter)."""
    return [urls[start : start + size] for start in range(0, len(urls), size)]


def template_namer(base_url: str, prefix: str) -> LocationNamer:
    """Name chunk ``i`` as ``{base_url}/{prefix}-{i}.xml``."""
    base = base_url.rstrip("/")

    def name(index: int) -> str:
        return f"{base}/{prefix}-{index}.xml"

    return name


def generate_sitemap_collection(
    base_url: str,
    urls: Sequence[UrlRecord],
    *,
    max_urls_per_sitemap: int = MAX_URLS_PER_SITEMAP,
    prefix: Prefix = "sitemap",
    pretty_print: bool = True,
    clock: Clock | None = None,
) -> SitemapCollection:
    """Partition ``urls`` into sitemaps and build an index over them.

    Args:
        base_url: Public URL the chunk files are served under.
        urls: URL records; order is preserved within and across chunks.
        max_urls_per_sitemap: Chunk size, 1 to 50,000.
        prefix: File-name prefix for ``{base_url}/{prefix}-{i}.xml``, or a
            callable mapping the zero-based chunk index to a full location.
        pretty_print: Indent every generated document.
        clock: Returns the date stamped on index entries.  Defaults to the
            current UTC date, read once per call.

    Returns:
        The index document, the chunk documents, and their locations.

    Raises:
        ValidationError: If ``urls`` is empty, the chunk size is out of
            range, a string prefix is too long, or any record is invalid.

    """
    check_urls_present(urls)
    check_max_urls_per_sitemap(max_urls_per_sitemap)
    if isinstance(prefix, str):
        check_prefix(prefix)
        namer = template_namer(base_url, prefix)
    else:
        namer = prefix

    chunks = chunked(urls, max_urls_per_sitemap)
    sitemaps = tuple(generate_sitemap(chunk, pretty_print=pretty_print) for chunk in chunks)
    locations = tuple(namer(index) for index in range(len(chunks)))

    today = (clock or utc_today)().isoformat()
    index = generate_sitemap_index(
        [SitemapEntry(loc=loc, lastmod=today) for loc in locations],
        pretty_print=pretty_print,
    )
    return SitemapCollection(sitemap_index=index, sitemaps=sitemaps, locations=locations)
