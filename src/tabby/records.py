"""Record types — the structured input and output of every generator.

All records are frozen dataclasses.  A field set to ``None`` (or an empty
sequence) is *absent* and emits no element; any other value, including
``0``, ``False`` and ``""``, is *present* and is validated and emitted.

Thread Safety:
    Records are immutable and safe to share across threads.  Generators
    never retain references to them after returning.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tabby._types import ChangeFrequency, Relationship


# ---------------------------------------------------------------------------
# Image extension
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ImageRecord:
    """An ``<image:image>`` entry attached to a URL.

    Attributes:
        loc: Location of the image file.
        caption: Caption of the image.
        geo_location: Geographic location of the image (e.g. ``"Limerick, Ireland"``).
        title: Title of the image.
        license: URL of the image license.

    """

    loc: str
    caption: str | None = None
    geo_location: str | None = None
    title: str | None = None
    license: str | None = None


# ---------------------------------------------------------------------------
# Video extension
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class VideoRestriction:
    """Countries where the video may (``allow``) or may not (``deny``) play."""

    relationship: Relationship
    countries: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class VideoPlatform:
    """Platforms (``web``, ``mobile``, ``tv``) where the video may or may not play."""

    relationship: Relationship
    platforms: Sequence[str] = ()


@dataclass(frozen=True, slots=True)
class VideoPrice:
    """Price to download or view the video."""

    currency: str
    value: float
    type: str | None = None
    resolution: str | None = None


@dataclass(frozen=True, slots=True)
class VideoUploader:
    """Uploader of the video, with an optional link to more information."""

    name: str
    info: str | None = None


@dataclass(frozen=True, slots=True)
class VideoRecord:
    """A ``<video:video>`` entry attached to a URL.

    At least one of ``content_loc`` and ``player_loc`` must be set.

    Attributes:
        thumbnail_loc: URL of the video thumbnail image.
        title: Title of the video.
        description: Description of the video.
        content_loc: URL of the raw video media file.
        player_loc: URL of an embeddable player for the video.
        duration: Length in seconds, 1 to 28800.
        expiration_date: W3C date after which the video is unavailable.
        rating: Rating from 0.0 to 5.0.
        view_count: Number of times the video has been viewed.
        publication_date: W3C date the video was first published.
        family_friendly: Whether the video is suitable for all audiences.
        requires_subscription: Whether a subscription is needed to watch.
        live: Whether the video is a live stream.
        tags: Up to 32 free-form tags.
        category: Broad category of the video.
        restriction: Country allow/deny list.
        platform: Platform allow/deny list.
        price: Price to view the video.
        uploader: Uploader of the video.

    """

    thumbnail_loc: str
    title: str
    description: str
    content_loc: str | None = None
    player_loc: str | None = None
    duration: int | None = None
    expiration_date: str | None = None
    rating: float | None = None
    view_count: int | None = None
    publication_date: str | None = None
    family_friendly: bool | None = None
    requires_subscription: bool | None = None
    live: bool | None = None
    tags: Sequence[str] = ()
    category: str | None = None
    restriction: VideoRestriction | None = None
    platform: VideoPlatform | None = None
    price: VideoPrice | None = None
    uploader: VideoUploader | None = None


# ---------------------------------------------------------------------------
# News extension
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NewsPublication:
    """The publication a news article belongs to."""

    name: str
    language: str


@dataclass(frozen=True, slots=True)
class NewsRecord:
    """A ``<news:news>`` entry attached to a URL.

    ``publication_date`` accepts any W3C datetime, not only ``YYYY-MM-DD``.
    """

    publication: NewsPublication
    publication_date: str
    title: str


# ---------------------------------------------------------------------------
# Alternate-language links
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AlternateRecord:
    """An ``<xhtml:link rel="alternate">`` pointing at a localized variant."""

    href: str
    hreflang: str


# ---------------------------------------------------------------------------
# Sitemap entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class UrlRecord:
    """One ``<url>`` entry of a sitemap document.

    Attributes:
        loc: Absolute URL of the page, at most 2048 characters.
        lastmod: Last modification date, strictly ``YYYY-MM-DD``.
        changefreq: How often the page is likely to change.
        priority: Priority relative to other pages of the site, 0 to 1.
        images: Up to 1000 images on the page.
        videos: Videos on the page.
        news: News article metadata for the page.
        alternates: Localized variants of the page.

    """

    loc: str
    lastmod: str | None = None
    changefreq: ChangeFrequency | None = None
    priority: float | None = None
    images: Sequence[ImageRecord] = ()
    videos: Sequence[VideoRecord] = ()
    news: NewsRecord | None = None
    alternates: Sequence[AlternateRecord] = ()


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    """One ``<sitemap>`` entry of a sitemap index."""

    loc: str
    lastmod: str | None = None


@dataclass(frozen=True, slots=True)
class SitemapCollection:
    """Result of partitioning URLs across several sitemap documents.

    Attributes:
        sitemap_index: The ``<sitemapindex>`` document referencing every chunk.
        sitemaps: One ``<urlset>`` document per chunk, in chunk order.
        locations: Public location of each chunk, parallel to ``sitemaps``.

    """

    sitemap_index: str
    sitemaps: tuple[str, ...]
    locations: tuple[str, ...] = ()
