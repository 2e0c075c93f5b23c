"""Shared type definitions for tabby."""

from collections.abc import Callable
from datetime import date
from typing import Literal, TypeAlias

# Valid <changefreq> tokens
ChangeFrequency: TypeAlias = Literal[
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never",
]

# Allow/deny tag on video restriction and platform elements
Relationship: TypeAlias = Literal["allow", "deny"]

# Chunk index -> public location of that chunk's sitemap
LocationNamer: TypeAlias = Callable[[int], str]

# String prefix for "{base}/{prefix}-{i}.xml", or a custom namer
Prefix: TypeAlias = str | LocationNamer

# Source of "today" for synthesized index lastmod values
Clock: TypeAlias = Callable[[], date]
