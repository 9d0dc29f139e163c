"""
Format Catalog: per-sport scoring formats and the lookup from sport name to
profile (with fallback to the default sport).
"""
from .schemas import (
    CatalogError,
    PeriodBasedFormat,
    ScoringFormat,
    SetBasedFormat,
    SportScoringProfile,
    format_from_dict,
)
from .builtin import BUILTIN_SPORTS, DEFAULT_SPORT
from .registry import (
    FormatCatalog,
    build_catalog,
    builtin_catalog,
    load_catalog,
    normalize_sport_name,
)

__all__ = [
    "CatalogError",
    "PeriodBasedFormat",
    "ScoringFormat",
    "SetBasedFormat",
    "SportScoringProfile",
    "format_from_dict",
    "BUILTIN_SPORTS",
    "DEFAULT_SPORT",
    "FormatCatalog",
    "build_catalog",
    "builtin_catalog",
    "load_catalog",
    "normalize_sport_name",
]
