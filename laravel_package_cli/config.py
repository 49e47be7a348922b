"""Laravel package scaffolder configuration.

Typed configuration for the generator.  All settings use Pydantic v2 models
so they are validated at construction time and can be serialised to/from
JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return None
    return raw.strip().lower() in _TRUE_VALUES


class GenerationOptions(BaseModel):
    """Per-run switches supplied by the caller.

    ``license`` is matched case-insensitively against ``mit``,
    ``apache 2.0`` and ``gnu gpl v3``.  An empty value produces an empty
    ``LICENSE`` file; any other value produces no license file unless
    ``strict_license`` is set, in which case generation fails.
    """

    model_config = ConfigDict(frozen=True)

    force: bool = Field(default=False, description="Write into an existing package directory")
    skip_config: bool = Field(default=False, description="Do not generate config/<package>.php")
    license: str = Field(default="", description="License name, empty for a blank LICENSE")
    strict_license: bool = Field(
        default=False, description="Raise on an unrecognized license instead of skipping it"
    )


class Config(BaseModel):
    """Global scaffolder configuration.

    Created once by the caller (or from the environment) and handed to
    ``PackageGenerator``.
    """

    destination_root: Path = Field(default=Path("."))
    template_dir: Path | None = Field(
        default=None, description="Override for the bundled template directory"
    )
    staging_suffix: str = Field(default=".stub")
    quiet: bool = Field(default=False, description="Suppress console progress output")
    defaults: GenerationOptions = Field(default_factory=GenerationOptions)

    @field_validator("staging_suffix")
    @classmethod
    def _suffix_is_extension(cls, value: str) -> str:
        if len(value) < 2 or not value.startswith(".") or "/" in value:
            raise ValueError("staging_suffix must look like '.ext'")
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            LPC_DESTINATION_ROOT, LPC_TEMPLATE_DIR, LPC_STAGING_SUFFIX,
            LPC_QUIET, LPC_LICENSE, LPC_FORCE, LPC_SKIP_CONFIG.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("LPC_DESTINATION_ROOT"):
            kwargs["destination_root"] = Path(os.environ["LPC_DESTINATION_ROOT"])
        if os.environ.get("LPC_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["LPC_TEMPLATE_DIR"])
        if os.environ.get("LPC_STAGING_SUFFIX"):
            kwargs["staging_suffix"] = os.environ["LPC_STAGING_SUFFIX"]
        quiet = _env_flag("LPC_QUIET")
        if quiet is not None:
            kwargs["quiet"] = quiet

        option_kwargs: dict[str, Any] = {}
        if "LPC_LICENSE" in os.environ:
            option_kwargs["license"] = os.environ["LPC_LICENSE"]
        force = _env_flag("LPC_FORCE")
        if force is not None:
            option_kwargs["force"] = force
        skip_config = _env_flag("LPC_SKIP_CONFIG")
        if skip_config is not None:
            option_kwargs["skip_config"] = skip_config

        return cls(defaults=GenerationOptions(**option_kwargs), **kwargs)
