"""
settings.py

This module provides application configuration management for the CMDLEX application.

Features:
- Centralized application configuration using Pydantic settings
- Defaults for the parser front end (prefixes, delimiters, unbundling, policy)
- Constants for the REPL history location

Usage:
Import appsettings for application configuration values.

Environment:
    CMDLEX_PREFIXES='["-", "--"]'   CMDLEX_PREFIXPOLICY=any   CMDLEX_BEQUIET=true
"""

from pathlib import Path
from typing import Final
from appdirs import user_config_dir
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from cmdlex.lib.configuration import DEFAULT_DELIMITERS, DEFAULT_PREFIXES
from cmdlex.models.dataModel import PrefixPolicy

# Console instance for rich output
console: Final[Console] = Console()

CONFIG_DIR: Final[Path] = Path(user_config_dir("cmdlex", ""))
HISTORY_FILE: Final[Path] = CONFIG_DIR / "history"


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with CMDLEX_ prefix.

    Attributes:
        beQuiet: Suppress detailed logging output
        prefixes: Accepted alias prefixes, in declaration order
        delimiters: Single-character option/value delimiters
        allowUnbundling: Allow `-abc` to stand for `-a -b -c`
        prefixPolicy: Alias prefix predicate, "all" or "any"
    """

    beQuiet: bool = False

    prefixes: list[str] = list(DEFAULT_PREFIXES)
    delimiters: list[str] = list(DEFAULT_DELIMITERS)
    allowUnbundling: bool = True
    prefixPolicy: PrefixPolicy = PrefixPolicy.ALL

    model_config = SettingsConfigDict(
        env_prefix="CMDLEX_",  # Environment variables with this prefix override settings
        case_sensitive=False,
        extra="allow",
    )

    @field_validator("delimiters")
    @classmethod
    def delimiters_check(cls, value: list[str]) -> list[str]:
        for delimiter in value:
            if len(delimiter) != 1:
                raise ValueError(
                    f"Delimiters must be single characters, got {delimiter!r}"
                )
        return value


# Create the application settings instance
appsettings: Final[App] = App()
