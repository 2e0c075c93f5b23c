"""Load TabbyConfig from tabby.yaml or tabby.toml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from dataclasses import fields
from pathlib import Path

import yaml

from tabby._errors import ConfigError
from tabby.config import TabbyConfig

_CONFIG_KEYS = frozenset(f.name for f in fields(TabbyConfig))


def load_config(root: Path, **overrides: object) -> TabbyConfig:
    """Load TabbyConfig from root, optionally merging tabby.yaml.

    Looks for tabby.yaml, tabby.yml, or tabby.toml in root. If found, loads
    and merges with overrides. Overrides take precedence; overrides set to
    ``None`` are treated as not given.
    """
    file_config = _read_tabby_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    unknown = sorted(set(merged) - _CONFIG_KEYS)
    if unknown:
        msg = f"Unknown config key(s): {', '.join(unknown)}"
        raise ConfigError(msg)
    return TabbyConfig(**merged)


def _read_tabby_config(root: Path) -> dict[str, object]:
    """Read tabby config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("tabby.yaml", "tabby.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "tabby.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping"
        raise ConfigError(msg)
    return _flatten_tabby_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        msg = f"Cannot read {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_tabby_section(data)


def _flatten_tabby_section(data: dict[str, object]) -> dict[str, object]:
    """Extract tabby.* keys into top-level config."""
    result: dict[str, object] = {}
    tabby = data.get("tabby")
    if isinstance(tabby, dict):
        result.update(tabby)
    for k, v in data.items():
        if k != "tabby":
            result[k] = v
    return result
