"""Unified settings: CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``TEMPCONV_*`` prefix, ``__`` for nested sections
  3. Code defaults: baked into the section models

Configuration files (TOML, dotenv, secrets dirs) are deliberately not
read: only the two sources above are wired in.
"""

from __future__ import annotations

from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from tempconv.config.models import DisplayConfig


class TempSettings(BaseSettings):
    """Settings for the tempconv CLI, frozen after construction.

    Stored on the :class:`~tempconv.commands._context.AppContext` created
    by the root command.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TEMPCONV_",
        "env_nested_delimiter": "__",
    }

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- Sections ---
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use CLI kwargs and env vars only."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> TempSettings:
        """Construct settings from a CLI invocation.

        Flags left at ``None`` or ``False`` are dropped so that env vars can
        still supply them.
        """
        overrides = {k: v for k, v in cli_flags.items() if v not in (None, False)}
        try:
            return cls(**overrides)
        except ValidationError as exc:
            msg = f"Invalid tempconv settings: {exc}"
            raise click.ClickException(msg) from exc
