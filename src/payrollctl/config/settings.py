"""PayrollSettings: CLI flags, environment and payrollctl.toml in one object.

Highest priority first:

1. keyword arguments (the global CLI flags)
2. ``PAYROLLCTL_*`` environment variables, ``__`` between nested keys
   (``PAYROLLCTL_VALIDATION__ID_GRAMMAR=numeric``)
3. the TOML file named by ``config_path``
4. defaults in :mod:`payrollctl.config.models`
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from payrollctl.config.discovery import resolve_config
from payrollctl.config.models import ReportConfig, ValidationConfig


class PayrollSettings(BaseSettings):
    """Frozen settings for one payrollctl process, held by ``AppContext``."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="PAYROLLCTL_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    report: ReportConfig = Field(default_factory=ReportConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The TOML file is whatever config_path the caller passed in.
        toml_file = None
        if isinstance(init_settings, InitSettingsSource):
            toml_file = init_settings.init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> PayrollSettings:
        """Build settings for a CLI invocation.

        *config_path* is the ``--config`` value; without it the file is
        discovered from *start_dir* (default: cwd).

        Raises:
            click.ClickException: If the config file is not valid TOML.
        """
        toml_path = resolve_config(config_path, start_dir)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
