"""Tabby — Sitemaps Protocol generator.

Turns structured URL records into ``<urlset>`` sitemaps with image, video,
news, and alternate-language extensions, builds ``<sitemapindex>`` files,
and splits large URL sets across as many sitemaps as the protocol's
50,000-URL limit requires.

Quick start::

    from tabby import UrlRecord, generate_sitemap

    xml = generate_sitemap([UrlRecord(loc="https://example.com/", priority=0.8)])

Four generators::

    generate_sitemap(urls)                        # One <urlset> document
    generate_sitemap_index(entries)               # One <sitemapindex> document
    generate_sitemap_collection(base_url, urls)   # Index + chunked sitemaps
    generate_sitemap_stream(urls)                 # <urlset> as lazy byte chunks

Every generator is pure: no I/O, no shared state, safe to call from many
threads at once.  Invalid input raises :class:`ValidationError` before any
output is produced.

"""

from tabby._errors import (
    ConfigError,
    ExportError,
    InputError,
    TabbyError,
    ValidationError,
)
from tabby.records import (
    AlternateRecord,
    ImageRecord,
    NewsPublication,
    NewsRecord,
    SitemapCollection,
    SitemapEntry,
    UrlRecord,
    VideoPlatform,
    VideoPrice,
    VideoRecord,
    VideoRestriction,
    VideoUploader,
)

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "AlternateRecord",
    "ConfigError",
    "ExportError",
    "ImageRecord",
    "InputError",
    "NewsPublication",
    "NewsRecord",
    "SitemapCollection",
    "SitemapEntry",
    "TabbyConfig",
    "TabbyError",
    "UrlRecord",
    "ValidationError",
    "VideoPlatform",
    "VideoPrice",
    "VideoRecord",
    "VideoRestriction",
    "VideoUploader",
    "__version__",
    "generate_sitemap",
    "generate_sitemap_collection",
    "generate_sitemap_index",
    "generate_sitemap_stream",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import tabby`` fast; the XML machinery loads on first use.
    """
    if name == "TabbyConfig":
        from tabby.config import TabbyConfig

        return TabbyConfig

    if name == "generate_sitemap":
        from tabby.document import generate_sitemap

        return generate_sitemap

    if name == "generate_sitemap_index":
        from tabby.document import generate_sitemap_index

        return generate_sitemap_index

    if name == "generate_sitemap_collection":
        from tabby.collection import generate_sitemap_collection

        return generate_sitemap_collection

    if name == "generate_sitemap_stream":
        from tabby.stream import generate_sitemap_stream

        return generate_sitemap_stream

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
