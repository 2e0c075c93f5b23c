"""Export layer — write sitemaps and sitemap indexes to disk."""

from tabby.export.writer import (
    ExportedFile,
    ExportResult,
    write_collection,
    write_sitemap_stream,
)

__all__ = ["ExportResult", "ExportedFile", "write_collection", "write_sitemap_stream"]
