"""
chronoscroll Configuration
==========================

This module handles configuration loading for the scroll-mapping engine.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    CHRONOSCROLL_MARGIN_START       -> mapping.margin_start
    CHRONOSCROLL_MARGIN_END         -> mapping.margin_end
    CHRONOSCROLL_FALLBACK_MIN_YEAR  -> mapping.fallback_min_year
    CHRONOSCROLL_FALLBACK_MAX_YEAR  -> mapping.fallback_max_year
    CHRONOSCROLL_LOG_LEVEL          -> logging.level
    CHRONOSCROLL_LOG_FORMAT         -> logging.format

The weight multipliers are empirically tuned pacing constants. Changing them
changes how the rendered timeline feels to scroll, so they are only exposed
through config.yaml, not through the environment.

Example:
    from chronoscroll.config import settings

    print(settings.mapping.margin_start)
    print(settings.weights.milestone_base)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, model_validator


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class MappingConfig(BaseModel):
    """Position table layout configuration."""

    margin_start: float = Field(
        default=0.02,
        ge=0,
        lt=1.0,
        description="Normalized position of the first grid year",
    )
    margin_end: float = Field(
        default=0.02,
        ge=0,
        lt=1.0,
        description="Distance of the last grid year from position 1.0",
    )
    fallback_min_year: int = Field(
        default=-4000,
        description="First year of the identity mapping used for empty datasets",
    )
    fallback_max_year: int = Field(
        default=100,
        description="Last year of the identity mapping used for empty datasets",
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "MappingConfig":
        """Margins must leave room for the table; fallback range must be ordered."""
        if self.margin_start + self.margin_end >= 1.0:
            raise ValueError("margin_start + margin_end must be less than 1")
        if self.fallback_min_year >= self.fallback_max_year:
            raise ValueError("fallback_min_year must be less than fallback_max_year")
        return self


class WeightConfig(BaseModel):
    """Segment weight multipliers."""

    density_base: float = Field(
        default=4.0,
        gt=0,
        description="Multiplier applied when any entity is active",
    )
    density_per_entity: float = Field(
        default=1.5,
        ge=0,
        description="Additional multiplier per active entity",
    )
    short_duration_threshold: float = Field(
        default=100,
        gt=0,
        description="Entities shorter than this (years) earn a duration bonus",
    )
    duration_bonus_max: float = Field(
        default=4.0,
        ge=1.0,
        description="Duration bonus for a zero-length entity",
    )
    duration_bonus_divisor: float = Field(
        default=33.0,
        gt=0,
        description="Years of duration that cost one unit of bonus",
    )
    milestone_base: float = Field(
        default=40.0,
        gt=0,
        description="Multiplier applied when only milestones are active",
    )
    milestone_per_entity: float = Field(
        default=20.0,
        ge=0,
        description="Additional multiplier per active milestone",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Complete chronoscroll configuration.

    mapping shapes the position table, weights sets the pacing
    multipliers, logging is applied by setup_logging.
    """

    mapping: MappingConfig = Field(default_factory=MappingConfig)
    weights: WeightConfig = Field(default_factory=WeightConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

# Searched in order when no explicit path is given
CONFIG_SEARCH_PATHS = (
    Path("config.yaml"),
    Path("config.yml"),
    Path(__file__).parent.parent.parent / "config.yaml",
)

# Environment variable -> (section, key, parser)
ENV_OVERRIDES = {
    "CHRONOSCROLL_MARGIN_START": ("mapping", "margin_start", float),
    "CHRONOSCROLL_MARGIN_END": ("mapping", "margin_end", float),
    "CHRONOSCROLL_FALLBACK_MIN_YEAR": ("mapping", "fallback_min_year", int),
    "CHRONOSCROLL_FALLBACK_MAX_YEAR": ("mapping", "fallback_max_year", int),
    "CHRONOSCROLL_LOG_LEVEL": ("logging", "level", str),
    "CHRONOSCROLL_LOG_FORMAT": ("logging", "format", str),
}


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Build chronoscroll Settings from defaults, config.yaml and CHRONOSCROLL_* variables.

    The weight multipliers can only come from the file; margins, the
    empty-dataset fallback range and logging can also be overridden
    from the environment.

    Args:
        config_path: Explicit YAML path. None searches CONFIG_SEARCH_PATHS;
            a path that does not exist means defaults plus environment.

    Returns:
        Validated Settings

    Raises:
        pydantic.ValidationError: If a margin, year range or multiplier is out of range
        ValueError: If a numeric environment override does not parse
    """
    if config_path is None:
        found = next((path for path in CONFIG_SEARCH_PATHS if path.exists()), None)
        config_path = str(found) if found else None

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading chronoscroll config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No chronoscroll config file found, using built-in pacing defaults")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Merge CHRONOSCROLL_* variables into the raw config sections in place."""
    for name, (section, key, parse) in ENV_OVERRIDES.items():
        if raw := os.environ.get(name):
            config_data.setdefault(section, {})[key] = parse(raw)


JSON_LOG_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", '
    '"module": "%(name)s", "message": "%(message)s"}'
)
TEXT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings) -> None:
    """
    Configure the root logger from settings.logging.

    The engine never calls this itself; an application embedding the
    timeline calls it once at startup. Existing root handlers are
    replaced, so a second call with different settings takes effect.
    Unknown level names fall back to INFO.
    """
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)
    log_format = JSON_LOG_FORMAT if settings.logging.format == "json" else TEXT_LOG_FORMAT

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        force=True,
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Default configuration for build_year_mapping; read-only by convention
settings = load_config()
