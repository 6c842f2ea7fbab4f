"""
Pytest configuration and fixtures for i18n-sync tests.
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Generator

import pytest
import structlog

from i18n_sync.config import SyncConfig
from i18n_sync.localization import MemoryLocaleStore


@pytest.fixture(autouse=True)
def no_logger_caching(monkeypatch):
    """Stop CLI runs from freezing module-level logger proxies across tests."""
    original_configure = structlog.configure

    def _configure(*args, **kwargs):
        kwargs["cache_logger_on_first_use"] = False
        return original_configure(*args, **kwargs)

    monkeypatch.setattr(structlog, "configure", _configure)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI runs."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root_logger.removeHandler(handler)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def locales_dir(temp_dir: Path) -> Path:
    path = temp_dir / "locales"
    path.mkdir()
    return path


@pytest.fixture
def config(locales_dir: Path) -> SyncConfig:
    """Config pointing at the temporary locales directory."""
    return SyncConfig(locales_dir=locales_dir)


@pytest.fixture
def write_locale(locales_dir: Path) -> Callable[[str, Any], Path]:
    """Helper to write a locale's common.json (dicts are dumped, strings written raw)."""
    def _write(locale: str, content: Any) -> Path:
        file_path = locales_dir / locale / "common.json"
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            file_path.write_text(content, encoding="utf-8")
        else:
            file_path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return file_path
    return _write


@pytest.fixture
def read_locale(locales_dir: Path) -> Callable[[str], Dict[str, Any]]:
    def _read(locale: str) -> Dict[str, Any]:
        return json.loads((locales_dir / locale / "common.json").read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def english() -> Dict[str, Any]:
    """Sample reference tree."""
    return {
        "app": {
            "title": "Dashboard",
            "greeting": "Hello",
        },
        "buttons": {
            "save": "Save",
            "cancel": "Cancel",
            "nested": {"deep": "Deep value"},
        },
        "weekdays": ["Mon", "Tue"],
        "max_items": 10,
    }


@pytest.fixture
def memory_store(english: Dict[str, Any]) -> MemoryLocaleStore:
    """In-memory store with the reference locale and a partial French locale."""
    return MemoryLocaleStore({
        "en": english,
        "fr": {
            "app": {
                "title": "Tableau de bord",
                "greeting": "TODO_TRANSLATE: Bonjour",
                "obsolete": "Ancien",
            },
            "buttons": {"save": "Enregistrer"},
            "legacy": {"old": "x"},
        },
    })
