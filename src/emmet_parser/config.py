"""Configuration parsing for emmet.yaml"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from emmet_parser.exceptions import ConfigError

log = logging.getLogger(__name__)

CONFIG_FILENAME = "emmet.yaml"

SELF_CLOSING_TAGS = ["img", "input", "br", "hr", "meta", "link"]


class EmmetConfig(BaseModel):
    """Parser and renderer settings.

    The defaults reproduce the standard expansion rules exactly, so an
    empty or missing emmet.yaml changes nothing.
    """

    model_config = {"extra": "forbid"}

    default_tag: str = Field(
        default="div", min_length=1, description="Tag used when none is written"
    )
    self_closing_tags: list[str] = Field(
        default_factory=lambda: list(SELF_CLOSING_TAGS),
        description="Tags rendered as `<tag ... />` without content",
    )
    max_multiplier: int | None = Field(
        default=None, ge=0, description="Largest accepted `*N`, unlimited if unset"
    )

    @classmethod
    def load(cls, path: Path) -> "EmmetConfig":
        """Load config from yaml file"""
        if not path.exists():
            log.debug("No config at %s, using defaults", path)
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Could not read config {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping at the top level")

        try:
            config = cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config {path}: {exc}") from exc

        log.debug("Loaded config from %s", path)
        return config


def find_config_file(start: Path | None = None) -> Path | None:
    """Find emmet.yaml in the given directory (default: cwd) or its parents."""
    cwd = start or Path.cwd()
    for parent in [cwd] + list(cwd.parents):
        candidate = parent / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None
