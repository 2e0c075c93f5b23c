"""Tests for tabby.extensions — image, video, news, and alternate builders."""

from __future__ import annotations

from xml.etree.ElementTree import Element

import pytest

from tabby._errors import ValidationError
from tabby.extensions import add_alternate, add_image, add_news, add_video
from tabby.records import (
    AlternateRecord,
    ImageRecord,
    NewsPublication,
    NewsRecord,
    VideoPlatform,
    VideoPrice,
    VideoRestriction,
    VideoUploader,
)
from tests.conftest import make_video


def _tags(el: Element) -> list[str]:
    return [child.tag for child in el]


def _child(el: Element, tag: str) -> Element:
    for child in el:
        if child.tag == tag:
            return child
    raise AssertionError(f"missing <{tag}>")


def _text(el: Element, tag: str) -> str | None:
    return _child(el, tag).text


# ---------------------------------------------------------------------------
# Image
# ---------------------------------------------------------------------------


class TestAddImage:
    """add_image — loc first, optional fields only when present."""

    def test_loc_only(self) -> None:
        el = add_image(Element("url"), ImageRecord(loc="http://www.example.com/image.jpg"))
        assert el.tag == "image:image"
        assert _tags(el) == ["image:loc"]
        assert _text(el, "image:loc") == "http://www.example.com/image.jpg"

    def test_all_fields_in_order(self) -> None:
        image = ImageRecord(
            loc="http://www.example.com/photo.jpg",
            caption="A beautiful sunset over the mountains",
            geo_location="Limerick, Ireland",
            title="Sunset Photo",
            license="http://www.example.com/license",
        )
        el = add_image(Element("url"), image)
        assert _tags(el) == [
            "image:loc", "image:caption", "image:geo_location", "image:title", "image:license",
        ]
        assert _text(el, "image:geo_location") == "Limerick, Ireland"

    def test_empty_caption_is_present(self) -> None:
        el = add_image(Element("url"), ImageRecord(loc="http://x/i.jpg", caption=""))
        assert _tags(el) == ["image:loc", "image:caption"]

    def test_appends_to_parent(self) -> None:
        parent = Element("url")
        add_image(parent, ImageRecord(loc="http://x/1.jpg"))
        add_image(parent, ImageRecord(loc="http://x/2.jpg"))
        assert len(parent) == 2


# ---------------------------------------------------------------------------
# Video
# ---------------------------------------------------------------------------


class TestAddVideo:
    """add_video — required triple, then optional fields in schema order."""

    def test_minimal_content_loc(self) -> None:
        el = add_video(Element("url"), make_video())
        assert _tags(el) == [
            "video:thumbnail_loc", "video:title", "video:description", "video:content_loc",
        ]

    def test_minimal_player_loc(self) -> None:
        video = make_video(content_loc=None, player_loc="http://www.example.com/player?video=video1")
        el = add_video(Element("url"), video)
        assert _tags(el)[-1] == "video:player_loc"
        assert "video:content_loc" not in _tags(el)

    def test_all_fields_in_order(self) -> None:
        video = make_video(
            player_loc="http://www.example.com/player?video=video1",
            duration=600,
            expiration_date="2025-12-31",
            rating=4.5,
            view_count=15000,
            publication_date="2024-06-15",
            family_friendly=True,
            requires_subscription=False,
            live=False,
            tags=["grilling", "cooking"],
            category="Cooking",
            restriction=VideoRestriction(relationship="allow", countries=["US", "CA", "GB"]),
            platform=VideoPlatform(relationship="deny", platforms=["tv"]),
            price=VideoPrice(currency="USD", value=1.99, type="rent", resolution="hd"),
            uploader=VideoUploader(name="GrillingChannel", info="http://www.example.com/users/gc"),
        )
        el = add_video(Element("url"), video)
        assert _tags(el) == [
            "video:thumbnail_loc",
            "video:title",
            "video:description",
            "video:content_loc",
            "video:player_loc",
            "video:duration",
            "video:expiration_date",
            "video:rating",
            "video:view_count",
            "video:publication_date",
            "video:family_friendly",
            "video:requires_subscription",
            "video:live",
            "video:tag",
            "video:tag",
            "video:category",
            "video:restriction",
            "video:platform",
            "video:price",
            "video:uploader",
        ]
        assert _text(el, "video:duration") == "600"
        assert _text(el, "video:rating") == "4.5"
        assert _text(el, "video:view_count") == "15000"
        assert _text(el, "video:family_friendly") == "yes"
        assert _text(el, "video:requires_subscription") == "no"
        assert _text(el, "video:live") == "no"

    def test_restriction_and_platform_bodies(self) -> None:
        video = make_video(
            restriction=VideoRestriction(relationship="deny", countries=["US", "CA"]),
            platform=VideoPlatform(relationship="allow", platforms=["web", "mobile"]),
        )
        el = add_video(Element("url"), video)
        restriction = _child(el, "video:restriction")
        platform = _child(el, "video:platform")
        assert restriction.get("relationship") == "deny"
        assert restriction.text == "US CA"
        assert platform.get("relationship") == "allow"
        assert platform.text == "web mobile"

    def test_price_attributes(self) -> None:
        el = add_video(Element("url"), make_video(price=VideoPrice(currency="EUR", value=2.0)))
        price = _child(el, "video:price")
        assert price.attrib == {"currency": "EUR"}
        assert price.text == "2"

    def test_price_full_attributes_in_order(self) -> None:
        price_record = VideoPrice(currency="USD", value=1.99, type="rent", resolution="hd")
        el = add_video(Element("url"), make_video(price=price_record))
        price = _child(el, "video:price")
        assert list(price.attrib) == ["currency", "type", "resolution"]
        assert price.text == "1.99"

    def test_uploader_without_info(self) -> None:
        el = add_video(Element("url"), make_video(uploader=VideoUploader(name="Someone")))
        uploader = _child(el, "video:uploader")
        assert uploader.attrib == {}
        assert uploader.text == "Someone"

    def test_small_price_written_as_plain_decimal(self) -> None:
        el = add_video(Element("url"), make_video(price=VideoPrice(currency="USD", value=0.00005)))
        assert _text(el, "video:price") == "0.00005"

    def test_zero_view_count_emitted(self) -> None:
        el = add_video(Element("url"), make_video(view_count=0))
        assert _text(el, "video:view_count") == "0"

    def test_invalid_video_appends_nothing(self) -> None:
        parent = Element("url")
        with pytest.raises(ValidationError, match="Video must have either contentLoc or playerLoc"):
            add_video(parent, make_video(content_loc=None))
        assert len(parent) == 0

    def test_tag_count_validated(self) -> None:
        with pytest.raises(ValidationError, match="Maximum 32 tags per video"):
            add_video(Element("url"), make_video(tags=["t"] * 33))


# ---------------------------------------------------------------------------
# News
# ---------------------------------------------------------------------------


class TestAddNews:
    """add_news — fixed structure, datetime passed through."""

    def test_structure(self) -> None:
        news = NewsRecord(
            publication=NewsPublication(name="The Example Times", language="en"),
            publication_date="2024-01-15",
            title="Breaking News: Something Important Happened",
        )
        el = add_news(Element("url"), news)
        assert _tags(el) == ["news:publication", "news:publication_date", "news:title"]
        publication = _child(el, "news:publication")
        assert _tags(publication) == ["news:name", "news:language"]
        assert _text(publication, "news:name") == "The Example Times"

    def test_full_datetime_accepted(self) -> None:
        news = NewsRecord(
            publication=NewsPublication(name="El Diario Ejemplo", language="es"),
            publication_date="2024-01-15T14:30:00+00:00",
            title="Noticias de última hora",
        )
        el = add_news(Element("url"), news)
        assert _text(el, "news:publication_date") == "2024-01-15T14:30:00+00:00"


# ---------------------------------------------------------------------------
# Alternates
# ---------------------------------------------------------------------------


class TestAddAlternate:
    """add_alternate — empty link element with three attributes."""

    def test_attributes(self) -> None:
        el = add_alternate(
            Element("url"), AlternateRecord(href="http://www.example.com/de/page", hreflang="de"),
        )
        assert el.tag == "xhtml:link"
        assert el.attrib == {
            "rel": "alternate",
            "hreflang": "de",
            "href": "http://www.example.com/de/page",
        }
        assert el.text is None
        assert len(el) == 0

    def test_input_order_preserved(self) -> None:
        parent = Element("url")
        for lang in ("x-default", "en", "fr"):
            add_alternate(parent, AlternateRecord(href=f"http://x/{lang}", hreflang=lang))
        assert [child.get("hreflang") for child in parent] == ["x-default", "en", "fr"]
