"""Alternate-language links (``xhtml:`` namespace)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement

if TYPE_CHECKING:
    from tabby.records import AlternateRecord


def add_alternate(parent: Element, alternate: AlternateRecord) -> Element:
    """Append an empty ``<xhtml:link rel="alternate">`` to ``parent``."""
    return SubElement(
        parent,
        "xhtml:link",
        {"rel": "alternate", "hreflang": alternate.hreflang, "href": alternate.href},
    )
