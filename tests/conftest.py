"""Shared test fixtures for the spring-motion settings core."""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from managers import ConfigManager
from services.data_assembler import DataAssembler
from services.animation_settings_service import AnimationSettingsService
from services.canvas_service import CanvasService
from services.event_bus import EventBus


@pytest.fixture
def config_manager():
    """ConfigManager loaded from the shipped config/config.yaml"""
    cm = ConfigManager()
    cm.load()
    return cm


@pytest.fixture
def empty_config_manager(tmp_path):
    """ConfigManager pointing at a missing file (built-in defaults only)"""
    cm = ConfigManager(tmp_path / "missing.yaml")
    cm.load()
    return cm


@pytest.fixture
def assembler(config_manager):
    return DataAssembler(config_manager)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def settings_service(assembler):
    """Fresh store, no event bus"""
    return AnimationSettingsService(assembler)


@pytest.fixture
def canvas_service(assembler):
    return CanvasService(assembler)


@pytest.fixture
def write_config(tmp_path):
    """Write YAML files into tmp_path and return the main config path"""
    def _write(files: dict, main: str = "config.yaml") -> Path:
        for name, content in files.items():
            (tmp_path / name).write_text(content, encoding="utf-8")
        return tmp_path / main
    return _write
