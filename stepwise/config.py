"""Library settings, read from ``STEPWISE_*`` environment variables.

Settings are looked up once when a step or composition is built, so changing
them never alters a composition that already exists.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "STEPWISE_"


class Settings(BaseModel):
    """Behaviour switches for steps and compositions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    strict_outcomes: bool = Field(
        default=True,
        description=(
            "Reject callables that return a bare value instead of an Outcome. "
            "When off, bare values are wrapped in Success."
        ),
    )
    trace: bool = Field(
        default=False,
        description="Log every short-circuit inside a composition at DEBUG level",
    )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        dotenv_path: Union[str, Path, None] = None,
    ) -> "Settings":
        """Build settings from ``STEPWISE_*`` variables.

        Values from *dotenv_path* are used as a base layer; the process
        environment (or *environ*) wins on conflicts.
        """
        source: dict[str, Any] = {}
        if dotenv_path is not None:
            source.update(
                (k, v) for k, v in dotenv_values(dotenv_path).items() if v is not None
            )
        source.update(os.environ if environ is None else environ)

        values = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in source:
                values[name] = source[key]
        return cls(**values)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.debug("Loaded stepwise settings: %s", _settings)
    return _settings


def configure(**overrides: Any) -> Settings:
    """Validate *overrides* on top of the current settings and install them."""
    global _settings
    current = get_settings()
    _settings = Settings(**{**current.model_dump(), **overrides})
    return _settings


def reset_settings() -> None:
    """Forget installed settings; the next lookup re-reads the environment."""
    global _settings
    _settings = None
