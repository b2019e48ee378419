"""
Shared fixtures for hiepat tests.
"""

import pytest

from hiepat.config import reset_config_cache
from hiepat.types import MockNode, NameMeta

APP = ("HsApp", "HsExpr")
VAR = ("HsVar", "HsExpr")
LIT = ("HsLit", "HsExpr")

MAP_NAME = NameMeta(name="map", module_name="GHC.Base", package="base")


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from HIEPAT_* variables and cached settings."""
    for var in ("HIEPAT_GHC_VERSION", "HIEPAT_LOG_LEVEL", "HIEPAT_STRUCTURED_LOGS"):
        monkeypatch.delenv(var, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture
def map_var():
    """``map`` variable occurrence."""
    return MockNode(VAR, identifier=MAP_NAME, variable_name="map", node_type="(a -> b) -> [a] -> [b]")


@pytest.fixture
def five():
    """Integer literal ``5``."""
    return MockNode(LIT, literal=5)


@pytest.fixture
def map_five(map_var, five):
    """``map 5``: application node with two children."""
    return MockNode(APP, children=[map_var, five])


@pytest.fixture
def three_child_app(map_var, five):
    """Application-tagged node with an extra third child."""
    return MockNode(APP, children=[map_var, five, MockNode(LIT, literal=6)])
