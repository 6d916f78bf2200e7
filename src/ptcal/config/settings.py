"""Unified settings — CLI flags in one frozen object.

Only init kwargs (the Click flags) are a settings source. Environment
variables and config files are never read, so nothing outside the
command line can change what ``cal`` prints.

Settings only affect presentation and diagnostics; the calendar itself
has no configuration.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class CalSettings(BaseSettings):
    """Unified settings for the ``cal`` command.

    Stored on the :class:`~ptcal.context.AppContext` created by the CLI.
    """

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    highlight_today: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """CLI flags are the only source."""
        return (init_settings,)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> CalSettings:
        """Construct settings from a CLI invocation."""
        return cls(**cli_flags)
