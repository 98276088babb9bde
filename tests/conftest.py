"""Shared pytest fixtures for tempconv tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from tempconv.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip TEMPCONV_* settings and forced color from the environment."""
    for name in list(os.environ):
        if name.startswith("TEMPCONV_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI installs a stderr handler bound to CliRunner's stream, which
    is closed once the invocation returns.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("tempconv")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    yield
    disable_telemetry()
    _current_span.set(None)
