"""Field-level validators for the Sitemaps Protocol and its extensions.

Every check is a pure function that returns ``None`` on success and raises
:class:`~tabby._errors.ValidationError` with a fixed message on failure.
The messages are part of the public contract; callers match on them.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from tabby._errors import ValidationError

if TYPE_CHECKING:
    from tabby.records import UrlRecord, VideoRecord

MAX_LOC_LENGTH = 2048
MAX_URLS_PER_SITEMAP = 50_000
MAX_SITEMAPS_PER_INDEX = 50_000
MAX_IMAGES_PER_URL = 1000
MAX_TAGS_PER_VIDEO = 32
MIN_VIDEO_DURATION = 1
MAX_VIDEO_DURATION = 28_800
MIN_VIDEO_RATING = 0.0
MAX_VIDEO_RATING = 5.0

CHANGE_FREQUENCIES = frozenset(
    {"always", "hourly", "daily", "weekly", "monthly", "yearly", "never"}
)

# Bare calendar date only; any time component is rejected
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def check_url_loc(loc: str) -> None:
    if len(loc) > MAX_LOC_LENGTH:
        raise ValidationError("URL length must be less than 2048 characters")


def check_sitemap_loc(loc: str) -> None:
    if len(loc) > MAX_LOC_LENGTH:
        raise ValidationError("Sitemap location length must be less than 2048 characters")


def check_lastmod(lastmod: str | None) -> None:
    """Require ``YYYY-MM-DD`` when a last-modified date is present."""
    if lastmod is not None and not _DATE_RE.fullmatch(lastmod):
        raise ValidationError("Last modified date must be in YYYY-MM-DD format")


def check_changefreq(changefreq: str | None) -> None:
    if changefreq is not None and changefreq not in CHANGE_FREQUENCIES:
        raise ValidationError("Invalid change frequency")


def check_priority(priority: float | None) -> None:
    """Require ``0 <= priority <= 1``.  Zero is a valid, present priority."""
    if priority is not None and (isinstance(priority, bool) or not 0 <= priority <= 1):
        raise ValidationError("Priority must be between 0 and 1")


def check_image_count(images: Sequence[object]) -> None:
    if len(images) > MAX_IMAGES_PER_URL:
        raise ValidationError("Maximum 1000 images per URL")


def check_video(video: VideoRecord) -> None:
    """Check the endpoint, duration, rating and tag constraints of a video."""
    if video.content_loc is None and video.player_loc is None:
        raise ValidationError("Video must have either contentLoc or playerLoc")
    if video.duration is not None and (
        isinstance(video.duration, bool)
        or not MIN_VIDEO_DURATION <= video.duration <= MAX_VIDEO_DURATION
    ):
        raise ValidationError("Video duration must be between 1 and 28800 seconds")
    if video.rating is not None and (
        isinstance(video.rating, bool)
        or not MIN_VIDEO_RATING <= video.rating <= MAX_VIDEO_RATING
    ):
        raise ValidationError("Video rating must be between 0.0 and 5.0")
    if len(video.tags) > MAX_TAGS_PER_VIDEO:
        raise ValidationError("Maximum 32 tags per video")


def check_url(record: UrlRecord) -> None:
    """Run every check that applies to one URL record and its extensions.

    Checks run in the same order the element builders apply them, so a
    record with several problems always reports the same one first.
    """
    check_url_loc(record.loc)
    check_lastmod(record.lastmod)
    check_changefreq(record.changefreq)
    check_priority(record.priority)
    check_image_count(record.images)
    for video in record.videos:
        check_video(video)


def check_urls_present(urls: Sequence[object]) -> None:
    if not urls:
        raise ValidationError("No URLs provided")


def check_sitemap_count(sitemaps: Sequence[object]) -> None:
    if not sitemaps:
        raise ValidationError("No sitemaps provided")
    if len(sitemaps) > MAX_SITEMAPS_PER_INDEX:
        raise ValidationError("Sitemap index can contain up to 50,000 sitemaps")


def check_max_urls_per_sitemap(max_urls: int) -> None:
    if not 1 <= max_urls <= MAX_URLS_PER_SITEMAP:
        raise ValidationError("Max URLs per sitemap must be between 1 and 50,000")


def check_prefix(prefix: str) -> None:
    if len(prefix) > MAX_LOC_LENGTH:
        raise ValidationError("Prefix must be less than 2048 characters")
