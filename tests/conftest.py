"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from proto_lint.models import Method, SchemaFile
from tests.builders import make_file, make_method

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


@pytest.fixture
def user_service_file() -> SchemaFile:
    """A clean ``user_service.proto`` with one GET method."""
    return make_file()


@pytest.fixture
def file_factory() -> Callable[..., SchemaFile]:
    return make_file


@pytest.fixture
def method_factory() -> Callable[..., Method]:
    return make_method
