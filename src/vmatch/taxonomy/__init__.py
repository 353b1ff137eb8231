"""Asset tag taxonomy and vendor category vocabulary.

Provides:
- TagTaxonomy: Canonical, ordered asset tags with display metadata
- CategoryVocabulary: Vendor business categories and their groups
"""

from vmatch.taxonomy.model import (
    DEFAULT_TAG_COLOR,
    AssetTag,
    CategoryVocabulary,
    TagTaxonomy,
    load_default_taxonomy,
    load_default_vocabulary,
    load_taxonomy,
    load_vocabulary,
)

__all__ = [
    "DEFAULT_TAG_COLOR",
    "AssetTag",
    "TagTaxonomy",
    "CategoryVocabulary",
    "load_taxonomy",
    "load_vocabulary",
    "load_default_taxonomy",
    "load_default_vocabulary",
]
