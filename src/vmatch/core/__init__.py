"""Core configuration, errors and types for vmatch."""

from .config import COLLATIONS, Config, RankingConfig, TaxonomyConfig
from .exceptions import (
    ConfigError,
    TaxonomyDriftError,
    TaxonomyError,
    TaxonomyLoadError,
    VendorRecordError,
    VMatchError,
)
from .types import RankedVendor, RelevanceResult, TagSource, Vendor, VendorLike

__all__ = [
    "COLLATIONS",
    "Config",
    "RankingConfig",
    "TaxonomyConfig",
    "VMatchError",
    "ConfigError",
    "TaxonomyError",
    "TaxonomyLoadError",
    "TaxonomyDriftError",
    "VendorRecordError",
    "TagSource",
    "Vendor",
    "VendorLike",
    "RelevanceResult",
    "RankedVendor",
]
