"""Custom exceptions for vmatch."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vmatch.matching.consistency import ConsistencyReport


class VMatchError(Exception):
    """Base exception for all vmatch errors."""

    pass


class ConfigError(VMatchError):
    """Configuration value is invalid."""

    pass


class TaxonomyError(VMatchError):
    """Taxonomy data is unusable."""

    pass


class TaxonomyLoadError(TaxonomyError):
    """Taxonomy data file has the wrong shape."""

    def __init__(self, path: Path | str, reason: str):
        """Initialize exception with the offending file and reason.

        Args:
            path: Path of the data file that failed to load.
            reason: What was wrong with it.
        """
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Invalid taxonomy data in {self.path}: {reason}")


class TaxonomyDriftError(TaxonomyError):
    """Taxonomy and translation table have diverged."""

    def __init__(self, report: "ConsistencyReport"):
        """Initialize exception with the consistency report.

        Args:
            report: Report describing the drift.
        """
        self.report = report
        super().__init__(f"Taxonomy drift detected: {report.summary()}")


class VendorRecordError(VMatchError):
    """Vendor record is missing a required field."""

    pass
