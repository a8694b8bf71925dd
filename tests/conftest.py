"""Pytest fixtures for tests."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from huesync.core import ColorEngine
from huesync.models import EngineConfig
from huesync.protocols import ColorObserver


@pytest.fixture
def config():
    """Default engine configuration."""
    return EngineConfig()


@pytest.fixture
def engine(config):
    """Engine starting from the default color (#667eea)."""
    return ColorEngine(config)


@pytest.fixture
def observer(engine):
    """Mock observer registered on the engine."""
    obs = Mock(spec=ColorObserver)
    engine.register_observer(obs)
    return obs


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Path for a config file inside a temp directory (not created)."""
    return tmp_path / "config.json"
