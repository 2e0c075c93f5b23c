"""Streaming sitemap generation.

Produces the same document as :func:`tabby.document.generate_sitemap`, but
as an iterator of UTF-8 byte chunks: the declaration and ``<urlset>`` open
tag, one chunk per ``<url>``, then the close tag.  Each ``<url>`` element
is built only when its chunk is requested, so memory stays bounded by a
single record rather than the whole document.

The iterator is single-use and forward-only.  A consumer cancels simply by
not requesting further chunks.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from tabby._xml import render_fragments
from tabby.document import iter_url_elements, urlset_root, validate_urls

if TYPE_CHECKING:
    from tabby.records import UrlRecord


def generate_sitemap_stream(
    urls: Sequence[UrlRecord],
    *,
    pretty_print: bool = True,
) -> Iterator[bytes]:
    """Validate ``urls`` now and return a lazy iterator over the document bytes.

    Validation happens before this function returns, so invalid input
    raises here and never midway through consumption.

    Raises:
        ValidationError: If ``urls`` is empty or any record is invalid.

    """
    validate_urls(urls)
    root = urlset_root(urls)
    return _encode(render_fragments(root, iter_url_elements(urls), pretty_print=pretty_print))


def _encode(fragments: Iterator[str]) -> Iterator[bytes]:
    for fragment in fragments:
        yield fragment.encode("utf-8")
