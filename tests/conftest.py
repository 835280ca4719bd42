"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from copilot_bridge.core.info import get_plugin_version
from copilot_bridge.host.memory import InMemoryEditorHost

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


class RecordingClient:
    """Language client that records notifications instead of sending them."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.notifications: list[tuple[str, dict[str, Any]]] = []

    def notify(self, method: str, params: dict[str, Any]) -> bool:
        self.notifications.append((method, params))
        return self.result


@pytest.fixture
def host(tmp_path: Path) -> InMemoryEditorHost:
    """Return an empty in-memory host whose cwd is ``tmp_path``."""
    return InMemoryEditorHost(tmp_path)


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture(autouse=True)
def _reset_plugin_version() -> Any:
    get_plugin_version.cache_clear()
    yield
    get_plugin_version.cache_clear()
