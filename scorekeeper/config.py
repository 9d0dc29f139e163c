"""
Runtime settings: which catalog to load and which sport unknown names fall back to.
"""
from __future__ import annotations

import os
from pathlib import Path

from scorekeeper.catalog import DEFAULT_SPORT, FormatCatalog, builtin_catalog, load_catalog

CATALOG_PATH_ENV = "SCOREKEEPER_CATALOG_PATH"
DEFAULT_SPORT_ENV = "SCOREKEEPER_DEFAULT_SPORT"

_catalog_path: Path | None = None


def set_catalog_path(path: str | Path | None) -> None:
    """Use a JSON catalog file instead of the built-in formats. None resets to the env/default."""
    global _catalog_path
    _catalog_path = Path(path) if path is not None else None


def get_catalog_path() -> Path | None:
    """Explicit path, else $SCOREKEEPER_CATALOG_PATH, else None (built-in catalog)."""
    if _catalog_path is not None:
        return _catalog_path
    env = os.environ.get(CATALOG_PATH_ENV)
    return Path(env) if env else None


def get_default_sport() -> str:
    return os.environ.get(DEFAULT_SPORT_ENV, DEFAULT_SPORT)


def load_configured_catalog() -> FormatCatalog:
    path = get_catalog_path()
    if path is None:
        return builtin_catalog(default_sport=get_default_sport())
    return load_catalog(path, default_sport=os.environ.get(DEFAULT_SPORT_ENV))
