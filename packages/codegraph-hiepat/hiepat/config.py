"""hiepat Configuration.

Central configuration for the pattern library.

The HIE AST schema differs between GHC releases: starting with GHC 8.10 a
pattern-matching branch on ``_`` carries an explicit ``WildPat`` child. The
target schema is chosen once, when patterns are built, never while matching.

Environment variables use the ``HIEPAT_`` prefix:
    HIEPAT_GHC_VERSION=8.10
    HIEPAT_LOG_LEVEL=DEBUG
    HIEPAT_STRUCTURED_LOGS=true
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hiepat.errors import ConfigurationError

logger = logging.getLogger(__name__)

MIN_GHC_VERSION: tuple[int, int] = (8, 8)
WILDCARD_MATCH_CHILD_SINCE: tuple[int, int] = (8, 10)

_VERSION_RE = re.compile(r"^\s*(\d+)\.(\d+)(?:\.\d+)*\s*$")
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _parse_version(raw: str) -> tuple[int, int]:
    match = _VERSION_RE.match(raw)
    if not match:
        raise ConfigurationError(f"Invalid GHC version: {raw!r}", expected="MAJOR.MINOR")
    version = (int(match.group(1)), int(match.group(2)))
    if version < MIN_GHC_VERSION:
        raise ConfigurationError(
            f"Unsupported GHC version: {raw}",
            minimum=".".join(map(str, MIN_GHC_VERSION)),
        )
    return version


@dataclass(frozen=True)
class SchemaConfig:
    """Target HIE AST schema.

    Tag vocabulary is shared by every supported GHC release; only the arity of
    some nodes changes.
    """

    ghc_version: tuple[int, int] = (9, 2)

    def __post_init__(self) -> None:
        if tuple(self.ghc_version) < MIN_GHC_VERSION:
            raise ConfigurationError(
                f"Unsupported GHC version: {self.ghc_version}",
                minimum=MIN_GHC_VERSION,
            )

    @classmethod
    def parse(cls, raw: str) -> "SchemaConfig":
        """Build from a ``"MAJOR.MINOR"`` string such as ``"8.10"``."""
        return cls(ghc_version=_parse_version(raw))

    @property
    def has_wildcard_match_child(self) -> bool:
        """Whether ``Match`` nodes on ``_`` start with a ``WildPat`` child."""
        return self.ghc_version >= WILDCARD_MATCH_CHILD_SINCE


class HiepatSettings(BaseSettings):
    """hiepat settings, read from ``HIEPAT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HIEPAT_",
        extra="ignore",
        frozen=True,
    )

    ghc_version: str = "9.2"
    log_level: str = "WARNING"
    structured_logs: bool = False

    @field_validator("ghc_version")
    @classmethod
    def validate_ghc_version(cls, value: str) -> str:
        try:
            _parse_version(value)
        except ConfigurationError as e:
            raise ValueError(e.message) from e
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    def schema_config(self) -> SchemaConfig:
        return SchemaConfig.parse(self.ghc_version)


@lru_cache(maxsize=1)
def get_settings() -> HiepatSettings:
    """Settings from the environment, read once per process."""
    try:
        return HiepatSettings()
    except ValidationError as e:
        raise ConfigurationError("Invalid hiepat settings", errors=e.errors()) from e


@lru_cache(maxsize=1)
def get_schema_config() -> SchemaConfig:
    """Schema targeted by builders that are not given one explicitly."""
    schema = get_settings().schema_config()
    logger.debug("Resolved HIE schema for GHC %d.%d", *schema.ghc_version)
    return schema


def reset_config_cache() -> None:
    """Forget cached settings so the next access re-reads the environment."""
    get_settings.cache_clear()
    get_schema_config.cache_clear()
