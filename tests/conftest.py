"""
Pytest configuration for the phpsolver test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Isolation from the real ~/.phpsolver config
- Index-building fixtures
"""

import json
import os
from pathlib import Path

import pytest

from phpsolver.logging_config import setup_logging
from phpsolver.cli.config import CLIConfig
from phpsolver.index import MemorySymbolIndex
from phpsolver.schemas import IndexSnapshot
from phpsolver.user_config import reset_user_config


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Keep CLI runs quiet: no console log sink."""
    os.environ.setdefault("PHPSOLVER_MACHINE_MODE", "1")


# ============================================================================
# LOGGING / CONFIG FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Point HOME at an empty directory and drop cached config and CLI mode
    so that no test sees the developer's own settings.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("PHPSOLVER_HUMAN_MODE", raising=False)
    reset_user_config()
    CLIConfig.set_machine_mode(None)
    yield home
    reset_user_config()
    CLIConfig.set_machine_mode(None)


# ============================================================================
# INDEX FIXTURES
# ============================================================================

def build_index(data: dict) -> MemorySymbolIndex:
    """Build a MemorySymbolIndex from the snapshot dict form."""
    return MemorySymbolIndex.from_snapshot(IndexSnapshot.model_validate(data))


ZOO_SNAPSHOT = {
    "classes": {
        "Animal": {
            "methods": {
                "create": {"typ": "static", "is_static": True},
                "speak": {"typ": "string"},
            },
            "properties": {
                "legs": {"typ": "int"},
                "registry": {"typ": "@arrayof(static)", "is_static": True},
            },
        },
        "Dog": {
            "parent": "Animal",
            "methods": {
                "speak": {"typ": "Bark"},
                "clone": {"typ": "@scall(Dog,create)"},
            },
        },
        "Magic": {
            "methods": {"__get": {"typ": "Value"}},
        },
        "RepoInterface": {
            "is_interface": True,
            "constants": {"TABLE": {"typ": "string", "value": "'repo'"}},
            "methods": {
                "save": {
                    "is_abstract": True,
                    "params": [
                        {"name": "entity", "typ": "Entity"},
                        {"name": "flags", "typ": "int"},
                    ],
                },
            },
        },
        "Repo": {
            "interfaces": ["RepoInterface"],
            "constants": {"TABLE": {"typ": "string", "value": "'own'"}},
            "methods": {"save": {"params": [{"name": "entity"}, {"name": "flags"}]}},
        },
    },
    "functions": {
        "\\strlen": {"typ": "int"},
        "\\App\\make_dog": {"typ": "Dog"},
    },
    "constants": {
        "VERSION": {"typ": "string", "value": "'1.0'"},
    },
    "globals": {
        "g": "@global(g)",
        "ping": "@global(pong)",
        "pong": "@global(ping)|int",
        "dog": "Dog",
        "pets": "Animal|Magic",
        "items": "empty_array|Item[]",
        "anything": "mixed",
    },
}


@pytest.fixture
def make_index():
    """Factory fixture: snapshot dict -> MemorySymbolIndex."""
    return build_index


@pytest.fixture
def zoo_index():
    """A small class hierarchy with functions, constants and globals."""
    return build_index(ZOO_SNAPSHOT)


@pytest.fixture
def complete_index():
    """An empty index that reports indexing as complete."""
    index = MemorySymbolIndex()
    index.mark_indexing_complete()
    return index


@pytest.fixture
def zoo_index_file(tmp_path) -> Path:
    """The zoo snapshot written to disk as JSON."""
    path = tmp_path / "zoo-index.json"
    path.write_text(json.dumps(ZOO_SNAPSHOT, indent=2))
    return path
