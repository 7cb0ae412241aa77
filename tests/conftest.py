"""Shared fixtures for CMDLEX tests."""

from typing import Generator
import pytest
from cmdlex.config.settings import appsettings

_SESSION_FIELDS = ("prefixes", "delimiters", "allowUnbundling", "prefixPolicy")


@pytest.fixture(autouse=True)
def appsettings_restore() -> Generator[None, None, None]:
    """Undo session changes REPL commands make to the global settings."""
    saved = {name: getattr(appsettings, name) for name in _SESSION_FIELDS}
    yield
    for name, value in saved.items():
        setattr(appsettings, name, value)
