"""Image sitemap extension (``image:`` namespace)."""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement

from tabby._xml import optional_element, text_element

if TYPE_CHECKING:
    from tabby.records import ImageRecord


def add_image(parent: Element, image: ImageRecord) -> Element:
    """Append an ``<image:image>`` block for ``image`` to ``parent``."""
    el = SubElement(parent, "image:image")
    text_element(el, "image:loc", image.loc)
    optional_element(el, "image:caption", image.caption)
    optional_element(el, "image:geo_location", image.geo_location)
    optional_element(el, "image:title", image.title)
    optional_element(el, "image:license", image.license)
    return el
