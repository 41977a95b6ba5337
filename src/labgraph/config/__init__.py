"""
labgraph.config - Configuration loading and defaults

Configuration is read from ``.labgraph.toml`` (found by walking up from
the working directory), merged over DEFAULT_CONFIG, then overridden by
``LABGRAPH_<SECTION>_<KEY>`` environment variables.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.toml_document import TOMLDocument

CONFIG_FILENAME = ".labgraph.toml"
ENV_PREFIX = "LABGRAPH_"

DEFAULT_CONFIG: dict[str, Any] = {
    "site": {
        "base_url": "https://sunriselabs.io",
        "home_path": "/index.html",
        "pages_dir": "/pages",
        "page_extension": ".html",
        "home_id": "index",
    },
    "docs": {
        "dirs": ["documentation"],
        "patterns": ["*.md"],
        "skip_dirs": [],
        "skip_files": [],
    },
    "digest": {
        "latest_projects": 10,
        "latest_insights": 6,
        "latest_milestones": 6,
        "latest_experiments": 6,
    },
    "logging": {
        "level": "WARNING",
    },
}


def parse_toml_document(content: str) -> TOMLDocument:
    """Parse TOML keeping comments and layout, for round-trip edits."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML content into plain Python values."""
    return parse_toml_document(content).unwrap()


def find_config_file(start: Path) -> Path | None:
    """Find .labgraph.toml in start or any parent directory.

    Args:
        start: Directory to begin the search from.

    Returns:
        Path to the config file, or None if there is none.
    """
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a config file merged over the defaults.

    Raises:
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    content = config_path.read_text(encoding="utf-8")
    return merge_configs(DEFAULT_CONFIG, parse_toml(content))


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into a bool, list, dict or string.

    Malformed JSON is returned as the original string.
    """
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value.strip().startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply LABGRAPH_<SECTION>_<KEY> environment variables.

    The section is the first underscore-separated part after the prefix,
    the rest (lower-cased) is the key: LABGRAPH_SITE_BASE_URL sets
    config["site"]["base_url"].
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        remainder = name[len(ENV_PREFIX):].lower()
        section, sep, key = remainder.partition("_")
        if not sep or not key:
            continue
        config.setdefault(section, {})
        if isinstance(config[section], dict):
            config[section][key] = _try_parse_env_value(raw)
    return config


def get_config(config_path: Path | None = None, start_dir: Path | None = None) -> dict[str, Any]:
    """Resolve the effective configuration.

    Args:
        config_path: Explicit config file (optional).
        start_dir: Directory to search from when no path is given.

    Returns:
        Defaults, merged with the config file if any, then env overrides.
    """
    if config_path is None:
        config_path = find_config_file(start_dir or Path.cwd())

    if config_path is not None and config_path.exists():
        config = load_config(config_path)
    else:
        config = copy.deepcopy(DEFAULT_CONFIG)

    return _apply_env_overrides(config)


def get_docs_directories(
    docs_dir_override: Path | None,
    config: dict[str, Any],
    base_dir: Path | None = None,
) -> list[Path]:
    """Resolve documentation directories.

    Args:
        docs_dir_override: Directory from the command line, used alone.
        config: Effective configuration.
        base_dir: Base for relative [docs] dirs (default: cwd).

    Returns:
        Existing directories to load documents from.
    """
    if docs_dir_override is not None:
        return [docs_dir_override]

    base_dir = base_dir or Path.cwd()
    dirs = config.get("docs", {}).get("dirs", [])
    if isinstance(dirs, str):
        dirs = [dirs]
    resolved = [base_dir / d for d in dirs]
    return [d for d in resolved if d.exists()]


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "find_config_file",
    "get_config",
    "get_docs_directories",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
]
