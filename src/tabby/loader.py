"""Record loading — build URL records from JSON or YAML data.

Accepts the camelCase keys used by JavaScript sitemap tooling
(``thumbnailLoc``, ``geoLocation``, ``publicationDate``) as well as the
snake_case field names of :mod:`tabby.records`.  The shape of the data and
the type of each scalar field are checked here; protocol constraints are
left to the generators.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import MISSING, fields
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from tabby._errors import InputError
from tabby.records import (
    AlternateRecord,
    ImageRecord,
    NewsPublication,
    NewsRecord,
    UrlRecord,
    VideoPlatform,
    VideoPrice,
    VideoRecord,
    VideoRestriction,
    VideoUploader,
)

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")

_INTEGER_FIELDS = frozenset({"duration", "view_count"})
_NUMBER_FIELDS = frozenset({"priority", "rating", "value"})
_FLAG_FIELDS = frozenset({"family_friendly", "requires_subscription", "live"})


def _snake(key: str) -> str:
    return _CAMEL_RE.sub("_", key).lower()


def _type_name(value: object) -> str:
    return "null" if value is None else type(value).__name__


def _scalar(name: str, value: object, where: str) -> object:
    """Check a scalar field value against the kind its record declares."""
    if name in _INTEGER_FIELDS:
        ok, expected = isinstance(value, int) and not isinstance(value, bool), "an integer"
    elif name in _NUMBER_FIELDS:
        ok, expected = isinstance(value, int | float) and not isinstance(value, bool), "a number"
    elif name in _FLAG_FIELDS:
        ok, expected = isinstance(value, bool), "a boolean"
    else:
        # YAML reads unquoted dates as date/datetime objects
        if isinstance(value, date):
            return value.isoformat()
        ok, expected = isinstance(value, str), "a string"
    if not ok:
        msg = f"{where}: expected {expected}, got {_type_name(value)}"
        raise InputError(msg)
    return value


def _record(cls: type, data: object, where: str, **nested: Any) -> Any:
    """Instantiate ``cls`` from a mapping, normalizing keys to snake_case.

    ``nested`` maps a field name to a converter applied to its raw value;
    every other field is a scalar and is type-checked.  ``None`` on a field
    with a default leaves the default in place.
    """
    if not isinstance(data, Mapping):
        msg = f"{where}: expected a mapping, got {_type_name(data)}"
        raise InputError(msg)

    optional = {f.name for f in fields(cls) if f.default is not MISSING}
    known = {f.name for f in fields(cls)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = _snake(str(key))
        if name not in known:
            msg = f"{where}: unknown key {key!r}"
            raise InputError(msg)
        if value is None and name in optional:
            continue
        convert = nested.get(name)
        if convert is not None:
            kwargs[name] = convert(value, f"{where}.{key}")
        else:
            kwargs[name] = _scalar(name, value, f"{where}.{key}")

    try:
        return cls(**kwargs)
    except TypeError as exc:
        msg = f"{where}: {exc}"
        raise InputError(msg) from exc


def _sequence(convert: Any) -> Any:
    def convert_all(value: object, where: str) -> tuple[Any, ...]:
        if not isinstance(value, list | tuple):
            msg = f"{where}: expected a list, got {type(value).__name__}"
            raise InputError(msg)
        return tuple(convert(item, f"{where}[{i}]") for i, item in enumerate(value))

    return convert_all


def _strings(value: object, where: str) -> tuple[str, ...]:
    if not isinstance(value, list | tuple):
        msg = f"{where}: expected a list, got {type(value).__name__}"
        raise InputError(msg)
    return tuple(str(item) for item in value)


def _image(data: object, where: str) -> ImageRecord:
    return _record(ImageRecord, data, where)


def _video(data: object, where: str) -> VideoRecord:
    return _record(
        VideoRecord,
        data,
        where,
        tags=_strings,
        restriction=lambda d, w: _record(VideoRestriction, d, w, countries=_strings),
        platform=lambda d, w: _record(VideoPlatform, d, w, platforms=_strings),
        price=lambda d, w: _record(VideoPrice, d, w),
        uploader=lambda d, w: _record(VideoUploader, d, w),
    )


def _news(data: object, where: str) -> NewsRecord:
    return _record(
        NewsRecord,
        data,
        where,
        publication=lambda d, w: _record(NewsPublication, d, w),
    )


def _alternate(data: object, where: str) -> AlternateRecord:
    return _record(AlternateRecord, data, where)


def url_from_dict(data: object, where: str = "url") -> UrlRecord:
    """Build a :class:`UrlRecord` (with extensions) from a plain mapping.

    Raises:
        InputError: If the data is not a mapping, has unknown keys, or
            misses a required field.

    """
    return _record(
        UrlRecord,
        data,
        where,
        images=_sequence(_image),
        videos=_sequence(_video),
        news=_news,
        alternates=_sequence(_alternate),
    )


def urls_from_data(data: object) -> list[UrlRecord]:
    """Build URL records from a list of mappings or ``{"urls": [...]}``."""
    if isinstance(data, Mapping) and "urls" in data:
        data = data["urls"]
    if not isinstance(data, list):
        msg = "URL data must be a list of records or a mapping with a 'urls' list"
        raise InputError(msg)
    return [url_from_dict(item, f"urls[{i}]") for i, item in enumerate(data)]


def load_urls(path: Path) -> list[UrlRecord]:
    """Read URL records from a ``.json``, ``.yaml`` or ``.yml`` file."""
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
        if suffix == ".json":
            data = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            msg = f"Unsupported records file type: {path.name}"
            raise InputError(msg)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise InputError(msg) from exc
    return urls_from_data(data)
