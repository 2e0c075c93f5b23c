"""News sitemap extension (``news:`` namespace).

Every field is required, and ``publication_date`` is passed through as
given: news accepts full W3C datetimes, unlike ``<lastmod>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement

from tabby._xml import text_element

if TYPE_CHECKING:
    from tabby.records import NewsRecord


def add_news(parent: Element, news: NewsRecord) -> Element:
    """Append a ``<news:news>`` block for ``news`` to ``parent``."""
    el = SubElement(parent, "news:news")
    publication = SubElement(el, "news:publication")
    text_element(publication, "news:name", news.publication.name)
    text_element(publication, "news:language", news.publication.language)
    text_element(el, "news:publication_date", news.publication_date)
    text_element(el, "news:title", news.title)
    return el
