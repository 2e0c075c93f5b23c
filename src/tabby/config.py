"""Tabby configuration.

TabbyConfig holds the options of a sitemap build, frozen after creation.
"""

from dataclasses import dataclass, field
from pathlib import Path

from tabby._errors import ConfigError
from tabby.validate import MAX_URLS_PER_SITEMAP


@dataclass(frozen=True, slots=True)
class TabbyConfig:
    """Configuration for writing a sitemap collection.

    Attributes:
        base_url: Public URL the sitemap files are served under.
        output: Directory the sitemap files are written to.
        prefix: File-name prefix of the chunk sitemaps (``{prefix}-{i}.xml``).
        max_urls_per_sitemap: Maximum number of URLs per chunk sitemap.
        pretty_print: Indent generated documents.
        index_name: File name of the sitemap index.

    """

    base_url: str = ""
    output: Path = field(default_factory=lambda: Path("dist"))
    prefix: str = "sitemap"
    max_urls_per_sitemap: int = MAX_URLS_PER_SITEMAP
    pretty_print: bool = True
    index_name: str = "sitemap.xml"

    def __post_init__(self) -> None:
        if not isinstance(self.output, Path):
            object.__setattr__(self, "output", Path(str(self.output)))
        if isinstance(self.max_urls_per_sitemap, bool) or not isinstance(
            self.max_urls_per_sitemap, int
        ):
            msg = f"max_urls_per_sitemap must be an integer, got {self.max_urls_per_sitemap!r}"
            raise ConfigError(msg)
        if not isinstance(self.pretty_print, bool):
            msg = f"pretty_print must be true or false, got {self.pretty_print!r}"
            raise ConfigError(msg)

    def output_path(self, root: Path) -> Path:
        """Absolute output directory, resolved against ``root`` when relative."""
        if self.output.is_absolute():
            return self.output
        return root.resolve() / self.output
