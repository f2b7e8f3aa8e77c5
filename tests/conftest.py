"""Pytest configuration and shared fixtures for studio-utilities tests."""

import logging

import pytest

import studio_utilities.catalog
import studio_utilities.io.logging_setup as logging_setup
from studio_utilities.catalog import CatalogRegistry, ToolDescriptor


# ---------------------------------------------------------------------------
# Isolation: never touch the real config or log directories
# ---------------------------------------------------------------------------

def _reset_logging():
    """Detach installed handlers so the next configure() starts over."""
    logger = logging.getLogger(logging_setup.LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging.captureWarnings(False)
    logging_setup._RUNTIME = None


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point settings and logs at a temp dir and reset logging afterwards."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("STUDIO_UTILITIES_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("STUDIO_UTILITIES_LOG_FILE", raising=False)
    monkeypatch.delenv("STUDIO_UTILITIES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STUDIO_UTILITIES_URL", raising=False)
    _reset_logging()
    yield tmp_path
    _reset_logging()


# ---------------------------------------------------------------------------
# Catalog fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def registry():
    """The shipped catalog."""
    return studio_utilities.catalog.build_default_registry()


@pytest.fixture
def mixed_status_registry():
    """Small catalog with one tool per status and an empty optimization bucket."""
    return CatalogRegistry(
        [
            ToolDescriptor("alpha", "Alpha", "first", "A", "data", "available"),
            ToolDescriptor("beta", "Beta", "second", "B", "assets", "coming-soon"),
            ToolDescriptor("gamma", "Gamma", "third", "C", "content", "deprecated"),
        ]
    )


class RecordingOpener:
    """Opener test double: remembers every path it was asked to open."""

    def __init__(self):
        self.paths: list[str] = []

    def __call__(self, path: str) -> None:
        self.paths.append(path)


@pytest.fixture
def opener():
    return RecordingOpener()
