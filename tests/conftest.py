# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest
from typer.testing import CliRunner

from minimado_cli.api import TaskClient
from minimado_cli.logging_setup import PACKAGE_LOGGER, CliLogHandler
from minimado_cli.main import AppContext
from minimado_cli.storage import ConfigStore

from .fakes import FakeSession, ScriptedInput

BASE_URL = "https://minimado.test"


@pytest.fixture()
def config_path(tmp_path: Path) -> Path:
    # Nested so that save() has to create the directory
    return tmp_path / ".minimado-cli" / "config.json"


@pytest.fixture()
def store(config_path: Path) -> ConfigStore:
    return ConfigStore(config_path)


@pytest.fixture()
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture()
def client(session: FakeSession) -> TaskClient:
    return TaskClient(BASE_URL, session=session)


@pytest.fixture()
def now() -> datetime:
    return datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def make_context(store: ConfigStore, client: TaskClient):
    """
    Build an AppContext around the tmp store and fake HTTP session.

    Usage: ctx = make_context(answers=["user_abc"])
    """

    def _make(answers=()) -> AppContext:
        return AppContext(store=store, ask=ScriptedInput(answers), client=client)

    return _make


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """Drop the handler setup_logging installs so tests don't leak it."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, CliLogHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
