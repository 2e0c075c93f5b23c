"""Serialization helpers shared by the document, index, and stream writers.

Documents are rendered as a sequence of string fragments: the XML
declaration plus the root open tag, one fragment per top-level child, and
the root close tag.  Joining the fragments gives the materialized
document; encoding them one at a time gives the stream.  Both paths share
this code, so their output is byte-identical.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from decimal import Decimal
from xml.etree.ElementTree import Element, SubElement, indent, tostring

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_INDENT = "  "


def format_number(value: float) -> str:
    """Render a number as a plain decimal (``1.0`` -> ``"1"``, ``1e-05`` -> ``"0.00001"``)."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def format_flag(value: bool) -> str:
    return "yes" if value else "no"


def text_element(
    parent: Element,
    tag: str,
    text: str,
    attrib: dict[str, str] | None = None,
) -> Element:
    """Append ``<tag>text</tag>`` to ``parent`` and return the new child."""
    child = SubElement(parent, tag, attrib or {})
    child.text = text
    return child


def optional_element(parent: Element, tag: str, value: str | None) -> None:
    """Append ``<tag>value</tag>`` only when ``value`` is present."""
    if value is not None:
        text_element(parent, tag, value)


def render_fragments(
    root: Element,
    children: Iterable[Element],
    *,
    pretty_print: bool,
) -> Iterator[str]:
    """Yield the serialized document fragment by fragment.

    ``root`` must be childless; ``children`` are rendered as its direct
    children, lazily, one fragment each.
    """
    shell = tostring(root, encoding="unicode", short_empty_elements=False)
    close = f"</{root.tag}>"
    open_tag = shell[: -len(close)]

    if not pretty_print:
        yield XML_DECLARATION + open_tag
        for child in children:
            yield tostring(child, encoding="unicode")
        yield close
        return

    yield f"{XML_DECLARATION}\n{open_tag}"
    for child in children:
        indent(child, space=_INDENT, level=1)
        yield f"\n{_INDENT}" + tostring(child, encoding="unicode")
    yield f"\n{close}\n"


def render_document(root: Element, children: Iterable[Element], *, pretty_print: bool) -> str:
    """Render a complete document as one string."""
    return "".join(render_fragments(root, children, pretty_print=pretty_print))
