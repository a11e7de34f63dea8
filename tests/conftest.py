"""Shared fixtures and helpers for tests."""

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from drive_index.config import SiteConfig, load_site_config
from drive_index.drive.memory import InMemoryDriveProvider, InMemoryRouteVerifier

_REPO_ROOT = Path(__file__).parent.parent

MARKER_URL = "https://contoso-my.sharepoint.com/personal/demo/Documents"


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


def make_raw_item(item_id: str, relative_path: str, *, folder: bool = False) -> dict[str, Any]:
    """Build a provider search hit whose webUrl lies under the index marker."""
    raw: dict[str, Any] = {
        "id": item_id,
        "name": relative_path.rsplit("/", 1)[-1],
        "webUrl": f"{MARKER_URL}{relative_path}",
    }
    if folder:
        raw["folder"] = {"childCount": 0}
    else:
        raw["file"] = {"mimeType": "text/plain"}
    return raw


@pytest.fixture
def raw_item() -> Callable[..., dict[str, Any]]:
    return make_raw_item


@pytest.fixture(autouse=True)
def _clear_config_cache() -> Iterator[None]:
    load_site_config.cache_clear()
    yield
    load_site_config.cache_clear()


@pytest.fixture
def config() -> SiteConfig:
    return SiteConfig(protected_routes=("/secret",))


@pytest.fixture
def drive() -> InMemoryDriveProvider:
    return InMemoryDriveProvider(
        [
            make_raw_item("1", "/secret/a.txt"),
            make_raw_item("2", "/public/b.txt"),
        ]
    )


@pytest.fixture
def verifier(config: SiteConfig) -> InMemoryRouteVerifier:
    return InMemoryRouteVerifier(config, {"/secret": "hunter2"})
