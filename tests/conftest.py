"""Shared test fixtures and hypothesis strategies for the grid test suite."""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from hypothesis import strategies as st

from dwrgrid.config.settings import GridSettings
from dwrgrid.handlers.crud import CrudExample
from dwrgrid.main import build_registry, create_app
from dwrgrid.models.records import Employee
from dwrgrid.remoting.registry import RemoteRegistry
from dwrgrid.services.counter import IdCounter


# ---------------------------------------------------------------------------
# Keep the environment from leaking into GridSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_grid_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any DWRGRID_* variables so settings fall back to defaults."""
    for key in list(os.environ):
        if key.startswith("DWRGRID_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> GridSettings:
    """Test settings with default limits."""
    return GridSettings()


# ---------------------------------------------------------------------------
# Component fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def counter() -> IdCounter:
    return IdCounter()


@pytest.fixture
def crud(counter: IdCounter) -> CrudExample:
    return CrudExample(counter)


@pytest.fixture
def registry(settings: GridSettings, counter: IdCounter) -> RemoteRegistry:
    return build_registry(settings, counter)


@pytest.fixture
def client(settings: GridSettings) -> TestClient:
    return TestClient(create_app(settings), raise_server_exceptions=False)


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

# Name prefixes, including None and ones longer than the 10 character cut
prefixes = st.one_of(st.none(), st.text(max_size=30))

# Row counts across and beyond the clamp range
row_counts = st.integers(min_value=-10_000, max_value=10_000)
in_range_row_counts = st.integers(min_value=1, max_value=1000)

# Client-submitted employees
names = st.text(min_size=0, max_size=20)
employees = st.builds(
    Employee,
    id=st.integers(min_value=-1_000, max_value=1_000),
    first_name=names,
    last_name=names,
)
employee_lists = st.lists(employees, min_size=0, max_size=25)
