"""
Shared pytest fixtures for GridPack tests

Supports both development mode (python -m gridpack) and installed mode (pip install -e .)
"""
import sys
from pathlib import Path

import pytest



@pytest.fixture(scope="session", autouse=True)
def setup_gridpack_path():
    """
    Add repository root to Python path for development mode

    Structure:
      gridpack-repo/                <- repo root (added to sys.path)
      └── gridpack/                 <- package
          └── tests/
              └── conftest.py       <- we are here
    """
    repo_root = Path(__file__).parent.parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


@pytest.fixture(scope="session")
def example_layout_path() -> str:
    """Bundled example layout shipped as package data"""
    from gridpack.data import EXAMPLE_LAYOUT
    return EXAMPLE_LAYOUT


@pytest.fixture
def stacked_layout():
    """Two full-width items with a gap above the second one"""
    from gridpack.layout import LayoutItem
    return [
        LayoutItem(id='a', x=0, y=0, w=2, h=1),
        LayoutItem(id='b', x=0, y=5, w=2, h=1),
    ]


@pytest.fixture
def row_layout():
    """Three side-by-side 2x2 items on row 0 of a 12-column grid"""
    from gridpack.layout import LayoutItem
    return [
        LayoutItem(id='a', x=0, y=0, w=2, h=2),
        LayoutItem(id='b', x=2, y=0, w=2, h=2),
        LayoutItem(id='c', x=4, y=0, w=2, h=2),
    ]


def positions(layout):
    """id -> (x, y, w, h) for compact assertions"""
    return {item.id: (item.x, item.y, item.w, item.h) for item in layout}


@pytest.fixture
def geometry():
    return positions


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the gridpack command line"
    )
