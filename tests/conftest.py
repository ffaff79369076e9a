"""
Pytest configuration and fixtures for checker tests.
"""

import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging setup done by CLI runs."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def create_test_file(temp_dir: Path):
    """Helper to create test files."""
    def _create_file(filename: str, content: str = "test content") -> Path:
        file_path = temp_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _create_file


@pytest.fixture
def write_translations(temp_dir: Path, create_test_file):
    """Write ``{lang: {file_name: document}}`` under ``i18n/`` and return its path."""
    def _write(tree: Dict[str, Dict[str, Any]]) -> Path:
        root = temp_dir / "i18n"
        root.mkdir(exist_ok=True)
        for lang, files in tree.items():
            (root / lang).mkdir(exist_ok=True)
            for file_name, document in files.items():
                create_test_file(f"i18n/{lang}/{file_name}", json.dumps(document, ensure_ascii=False))
        return root

    return _write


@pytest.fixture
def sample_tree() -> Dict[str, Dict[str, Any]]:
    """Base language fr plus a consistent en and a drifting de."""
    return {
        "fr": {
            "common.json": {"greeting": "Bonjour {name}", "footer": {"copyright": "© {year}"}},
            "home.json": {"home": {"title": "Accueil", "count": "{count} éléments"}},
        },
        "en": {
            "common.json": {"greeting": "Hello {name}", "footer": {"copyright": "© {year}"}},
            "home.json": {"home": {"title": "Home", "count": "{count} items"}},
        },
        "de": {
            "common.json": {"greeting": "Hallo {nom}", "orphan": "x"},
            "home.json": {"home": {"title": "Startseite", "count": "{count} Elemente"}},
        },
    }
