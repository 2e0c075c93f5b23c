"""Video sitemap extension (``video:`` namespace).

Children are emitted in schema order: the three required elements first,
then each optional element only when its field is present.  Booleans are
rendered as ``yes``/``no``; restriction and platform lists are
space-joined into the element body.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement

from tabby._xml import format_flag, format_number, optional_element, text_element
from tabby.validate import check_video

if TYPE_CHECKING:
    from tabby.records import VideoRecord


def add_video(parent: Element, video: VideoRecord) -> Element:
    """Validate ``video`` and append a ``<video:video>`` block to ``parent``.

    Raises:
        ValidationError: If the video has no content/player location, or its
            duration, rating, or tag count is out of range.

    """
    check_video(video)

    el = SubElement(parent, "video:video")
    text_element(el, "video:thumbnail_loc", video.thumbnail_loc)
    text_element(el, "video:title", video.title)
    text_element(el, "video:description", video.description)
    optional_element(el, "video:content_loc", video.content_loc)
    optional_element(el, "video:player_loc", video.player_loc)

    if video.duration is not None:
        text_element(el, "video:duration", format_number(video.duration))
    optional_element(el, "video:expiration_date", video.expiration_date)
    if video.rating is not None:
        text_element(el, "video:rating", format_number(video.rating))
    if video.view_count is not None:
        text_element(el, "video:view_count", format_number(video.view_count))
    optional_element(el, "video:publication_date", video.publication_date)

    if video.family_friendly is not None:
        text_element(el, "video:family_friendly", format_flag(video.family_friendly))
    if video.requires_subscription is not None:
        text_element(
            el, "video:requires_subscription", format_flag(video.requires_subscription),
        )
    if video.live is not None:
        text_element(el, "video:live", format_flag(video.live))

    for tag in video.tags:
        text_element(el, "video:tag", tag)
    optional_element(el, "video:category", video.category)

    if video.restriction is not None:
        text_element(
            el,
            "video:restriction",
            " ".join(video.restriction.countries),
            {"relationship": video.restriction.relationship},
        )
    if video.platform is not None:
        text_element(
            el,
            "video:platform",
            " ".join(video.platform.platforms),
            {"relationship": video.platform.relationship},
        )
    if video.price is not None:
        attrib = {"currency": video.price.currency}
        if video.price.type is not None:
            attrib["type"] = video.price.type
        if video.price.resolution is not None:
            attrib["resolution"] = video.price.resolution
        text_element(el, "video:price", format_number(video.price.value), attrib)
    if video.uploader is not None:
        attrib = {}
        if video.uploader.info is not None:
            attrib["info"] = video.uploader.info
        text_element(el, "video:uploader", video.uploader.name, attrib)

    return el
