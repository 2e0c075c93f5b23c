"""Sitemap export — write generated documents to disk.

The generators in :mod:`tabby.document` and :mod:`tabby.collection` are
pure; this module is the only part of tabby that touches the filesystem.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING, Literal
from urllib.parse import urlsplit

from tabby._errors import ConfigError, ExportError
from tabby.collection import generate_sitemap_collection
from tabby.stream import generate_sitemap_stream

if TYPE_CHECKING:
    from tabby._types import Clock
    from tabby.config import TabbyConfig
    from tabby.records import UrlRecord


@dataclass(frozen=True, slots=True)
class ExportedFile:
    """Record of a single file written during export.

    Attributes:
        location: Public URL of the file (empty for standalone sitemaps).
        output_path: Filesystem path of the written file.
        kind: Whether the file is a chunk sitemap or the index.
        size_bytes: Size of the written file in bytes.
        duration_ms: Time taken to write this file.

    """

    location: str
    output_path: Path
    kind: Literal["sitemap", "index"]
    size_bytes: int
    duration_ms: float


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Aggregate result of writing a sitemap collection.

    Attributes:
        files: All files written, chunk sitemaps first and the index last.
        total_urls: Number of URL records across all sitemaps.
        total_sitemaps: Number of chunk sitemaps written.
        duration_ms: Total wall-clock time for generation and writing.
        output_dir: Directory the files were written to.

    """

    files: tuple[ExportedFile, ...]
    total_urls: int
    total_sitemaps: int
    duration_ms: float
    output_dir: Path


def file_name_for(location: str) -> str:
    """File name of a chunk: the last path segment of its location."""
    name = PurePosixPath(urlsplit(location).path).name
    if not name:
        msg = f"Sitemap location has no file name: {location!r}"
        raise ExportError(msg)
    return name


def _staging_path(path: Path) -> Path:
    return path.with_name(f".{path.name}.tmp")


def _write(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        msg = f"Cannot write {path}: {exc}"
        raise ExportError(msg) from exc


def write_collection(
    urls: Sequence[UrlRecord],
    output_dir: Path,
    *,
    config: TabbyConfig,
    clock: Clock | None = None,
) -> ExportResult:
    """Generate a sitemap collection and write it to ``output_dir``.

    Each chunk is written under the file name of its location
    (``sitemap-0.xml``, ``sitemap-1.xml``, ...) and the index under
    ``config.index_name``.  Every file is first written to a hidden
    temporary name; they are renamed into place only once all writes
    have succeeded, so a failed write leaves no partial collection.

    Raises:
        ConfigError: If ``config.base_url`` is empty.
        ValidationError: If the URLs or config values are invalid.
        ExportError: If two files would share a name or a write fails.

    """
    if not config.base_url:
        msg = "base_url is required to build a sitemap collection"
        raise ConfigError(msg)

    t0 = time.perf_counter()
    collection = generate_sitemap_collection(
        config.base_url,
        urls,
        max_urls_per_sitemap=config.max_urls_per_sitemap,
        prefix=config.prefix,
        pretty_print=config.pretty_print,
        clock=clock,
    )

    names = [file_name_for(loc) for loc in collection.locations]
    if len(set(names) | {config.index_name}) != len(names) + 1:
        msg = f"Sitemap file names collide: {', '.join(names)} / {config.index_name}"
        raise ExportError(msg)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Cannot create output directory {output_dir}: {exc}"
        raise ExportError(msg) from exc

    entries = [
        (loc, output_dir / name, "sitemap", doc)
        for loc, name, doc in zip(collection.locations, names, collection.sitemaps, strict=True)
    ]
    index_loc = f"{config.base_url.rstrip('/')}/{config.index_name}"
    entries.append((index_loc, output_dir / config.index_name, "index", collection.sitemap_index))

    files: list[ExportedFile] = []
    staged: list[tuple[Path, Path]] = []
    try:
        for location, path, kind, doc in entries:
            t_file = time.perf_counter()
            data = doc.encode("utf-8")
            tmp = _staging_path(path)
            _write(tmp, data)
            staged.append((tmp, path))
            files.append(
                ExportedFile(
                    location=location,
                    output_path=path,
                    kind=kind,  # type: ignore[arg-type]
                    size_bytes=len(data),
                    duration_ms=(time.perf_counter() - t_file) * 1000,
                )
            )
    except ExportError:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise

    for tmp, path in staged:
        try:
            tmp.replace(path)
        except OSError as exc:
            msg = f"Cannot write {path}: {exc}"
            raise ExportError(msg) from exc

    return ExportResult(
        files=tuple(files),
        total_urls=len(urls),
        total_sitemaps=len(collection.sitemaps),
        duration_ms=(time.perf_counter() - t0) * 1000,
        output_dir=output_dir,
    )


def write_sitemap_stream(
    urls: Sequence[UrlRecord],
    path: Path,
    *,
    pretty_print: bool = True,
) -> ExportedFile:
    """Write a single sitemap to ``path``, one ``<url>`` chunk at a time.

    Invalid input raises before ``path`` is created.
    """
    t0 = time.perf_counter()
    chunks = generate_sitemap_stream(urls, pretty_print=pretty_print)
    size = 0
    try:
        with path.open("wb") as fh:
            for chunk in chunks:
                fh.write(chunk)
                size += len(chunk)
    except OSError as exc:
        msg = f"Cannot write {path}: {exc}"
        raise ExportError(msg) from exc

    return ExportedFile(
        location="",
        output_path=path,
        kind="sitemap",
        size_bytes=size,
        duration_ms=(time.perf_counter() - t0) * 1000,
    )
