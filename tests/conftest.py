"""Shared pytest fixtures for all tests."""

from pathlib import Path
from typing import Generator

import pytest

from cli.config import Config
from common.types import CallContext
from registry.database import init_database
from registry.ledger import LedgerClock
from registry.service_locator import set_record_registry
from registry.services.deployment import deploy_registry
from registry.storage.layout import RegistryLayout

OPERATOR_HEX = "0x" + "11" * 32
OPERATOR = bytes.fromhex("11" * 32)
UPLOADER = bytes.fromhex("22" * 32)
STRANGER = bytes.fromhex("33" * 32)
FIXED_TIME = 1700000000


@pytest.fixture
def test_db(monkeypatch, tmp_path) -> Generator[Path, None, None]:
    """
    Point the registry at a fresh SQLite database for each test.
    """
    db_path = tmp_path / "registry.db"
    monkeypatch.setattr("registry.database.DATABASE_PATH", str(db_path))
    monkeypatch.setattr("registry.config.DATABASE_PATH", str(db_path))
    init_database()
    set_record_registry(None)
    yield db_path
    set_record_registry(None)


@pytest.fixture
def registry(test_db):
    """
    Registry deployed with OPERATOR and a clock frozen at FIXED_TIME.
    """
    clock = LedgerClock(RegistryLayout.build().ledger_height, time_source=lambda: FIXED_TIME)
    return deploy_registry(OPERATOR_HEX, clock=clock)


@pytest.fixture
def context():
    """
    Build a CallContext for UPLOADER (or another caller) at a given height.
    """
    def make(height: int = 100, timestamp: int = FIXED_TIME, caller: bytes = UPLOADER) -> CallContext:
        return CallContext(caller=caller, block_height=height, timestamp=timestamp)
    return make


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Returns:
        Path to temporary .scribe directory
    """
    config_dir = tmp_path / '.scribe'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.
    """
    return Config(temp_config_dir / 'config.json')
