"""Configuration management for vmatch."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigError

COLLATIONS = ("codepoint", "casefold")

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _as_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUTHY:
            return True
        if word in _FALSY:
            return False
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


@dataclass
class TaxonomyConfig:
    """Where taxonomy data is loaded from.

    A path left as None means the data file shipped with the package.
    """

    taxonomy_path: Path | None = None
    translation_path: Path | None = None
    legacy_translation_path: Path | None = None
    # Raise instead of warn when the loaded tables have drifted
    strict: bool = False


@dataclass
class RankingConfig:
    """Vendor ranking configuration."""

    collation: str = "codepoint"
    tie_break_on_id: bool = True

    def validate(self) -> None:
        """Check that the configured values are supported.

        Raises:
            ConfigError: If the collation is unknown.
        """
        if self.collation not in COLLATIONS:
            raise ConfigError(
                f"Unknown collation {self.collation!r} "
                f"(expected one of: {', '.join(COLLATIONS)})"
            )


@dataclass
class Config:
    """Main application configuration."""

    taxonomy: TaxonomyConfig = field(default_factory=TaxonomyConfig)
    ranking: RankingConfig = field(default_factory=RankingConfig)
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config.apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides.

        Args:
            path: Path to the TOML file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ConfigError: If the file is not valid TOML.
        """
        path = Path(path)
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        config = cls()
        config._apply_mapping(data)
        config.apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, then VMATCH_CONFIG, then env only."""
        if path is None:
            path = os.environ.get("VMATCH_CONFIG") or None
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    def apply_env(self) -> None:
        """Override values from environment variables."""
        if path := os.environ.get("VMATCH_TAXONOMY_PATH"):
            self.taxonomy.taxonomy_path = Path(path)
        if path := os.environ.get("VMATCH_TRANSLATION_PATH"):
            self.taxonomy.translation_path = Path(path)
        if path := os.environ.get("VMATCH_LEGACY_TRANSLATION_PATH"):
            self.taxonomy.legacy_translation_path = Path(path)
        if strict := os.environ.get("VMATCH_STRICT_TAXONOMY"):
            self.taxonomy.strict = strict.strip().lower() in _TRUTHY

        if collation := os.environ.get("VMATCH_COLLATION"):
            self.ranking.collation = collation.strip().lower()

        if level := os.environ.get("VMATCH_LOG_LEVEL"):
            self.log_level = level.strip().upper()

    def _apply_mapping(self, data: dict[str, Any]) -> None:
        if "log_level" in data:
            self.log_level = str(data["log_level"]).upper()

        taxonomy = data.get("taxonomy", {})
        for key in ("taxonomy_path", "translation_path", "legacy_translation_path"):
            if taxonomy.get(key):
                setattr(self.taxonomy, key, Path(taxonomy[key]))
        if "strict" in taxonomy:
            self.taxonomy.strict = _as_bool(taxonomy["strict"], "taxonomy.strict")

        ranking = data.get("ranking", {})
        if "collation" in ranking:
            self.ranking.collation = str(ranking["collation"]).lower()
        if "tie_break_on_id" in ranking:
            self.ranking.tie_break_on_id = _as_bool(
                ranking["tie_break_on_id"], "ranking.tie_break_on_id"
            )
