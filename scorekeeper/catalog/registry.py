"""
Format Catalog: sport name -> SportScoringProfile.

Built once (from the built-in table or a JSON file) and read-only afterwards,
so one instance can be shared by every caller without locking.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .builtin import BUILTIN_SPORTS, DEFAULT_SPORT
from .schemas import CatalogError, SportScoringProfile

logger = logging.getLogger(__name__)


def normalize_sport_name(sport_name: str | None) -> str:
    return (sport_name or "").strip().lower()


class FormatCatalog:
    """
    Immutable registry of sport profiles keyed by lower-case sport id.
    resolve_profile never fails: unknown or empty names get the default sport.
    """

    def __init__(self, profiles: Iterable[SportScoringProfile], default_sport: str = DEFAULT_SPORT) -> None:
        by_id: dict[str, SportScoringProfile] = {}
        for profile in profiles:
            key = normalize_sport_name(profile.sport_id)
            if key in by_id:
                raise CatalogError(f"Duplicate sport '{key}' in catalog")
            by_id[key] = profile
        default_key = normalize_sport_name(default_sport)
        if default_key not in by_id:
            raise CatalogError(f"Default sport '{default_sport}' is not in the catalog")
        self._profiles: Mapping[str, SportScoringProfile] = MappingProxyType(by_id)
        self._default = by_id[default_key]

    @property
    def default_profile(self) -> SportScoringProfile:
        return self._default

    def get(self, sport_name: str | None) -> SportScoringProfile | None:
        """Strict lookup: None when the sport is not registered."""
        return self._profiles.get(normalize_sport_name(sport_name))

    def resolve_profile(self, sport_name: str | None) -> SportScoringProfile:
        """Case-insensitive lookup falling back to the default sport."""
        key = normalize_sport_name(sport_name)
        profile = self._profiles.get(key)
        if profile is not None:
            return profile
        if key:
            logger.warning(
                "Unknown sport %r, falling back to %r scoring formats", sport_name, self._default.sport_id
            )
        else:
            logger.debug("No sport given, using %r scoring formats", self._default.sport_id)
        return self._default

    def sports(self) -> list[SportScoringProfile]:
        return list(self._profiles.values())

    def __contains__(self, sport_name: object) -> bool:
        return isinstance(sport_name, str) and normalize_sport_name(sport_name) in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_sport": self._default.sport_id,
            "sports": {key: p.to_dict() for key, p in self._profiles.items()},
        }


def build_catalog(sports: Mapping[str, Any], default_sport: str = DEFAULT_SPORT) -> FormatCatalog:
    """Build a catalog from {sport_id: profile mapping}. Raises CatalogError on bad data."""
    if not isinstance(sports, Mapping) or not sports:
        raise CatalogError("Catalog must be a non-empty mapping of sport id to profile")
    profiles = [
        SportScoringProfile.from_dict(normalize_sport_name(sport_id), raw)
        for sport_id, raw in sports.items()
    ]
    return FormatCatalog(profiles, default_sport=default_sport)


def builtin_catalog(default_sport: str = DEFAULT_SPORT) -> FormatCatalog:
    return build_catalog(BUILTIN_SPORTS, default_sport=default_sport)


def load_catalog(path: str | Path, default_sport: str | None = None) -> FormatCatalog:
    """
    Load a catalog from JSON: {"default_sport": ..., "sports": {...}}.
    default_sport argument overrides the file's value.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Failed to parse catalog JSON: {path}: {e}") from e
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog file must hold a JSON object: {path}")
    sports = data.get("sports")
    if sports is None:
        raise CatalogError(f"Missing required key 'sports' in {path}")
    catalog = build_catalog(sports, default_sport=default_sport or data.get("default_sport", DEFAULT_SPORT))
    logger.info("Loaded scoring catalog from %s (%d sports)", path, len(catalog))
    return catalog
