"""Pytest fixtures for datatable tests."""

import pytest
import tempfile
import os
from unittest.mock import MagicMock

# CRITICAL: Set test config path BEFORE any imports that use ConfigManager
# This prevents tests from modifying the user's real ~/.dynamic_datatable.json
_TEST_CONFIG_DIR = tempfile.mkdtemp(prefix="datatable_test_config_")
_TEST_CONFIG_PATH = os.path.join(_TEST_CONFIG_DIR, "test_config.json")
with open(_TEST_CONFIG_PATH, "w") as f:
    f.write('{"page_size": 10}')
os.environ["DATATABLE_CONFIG_PATH"] = _TEST_CONFIG_PATH

from rich.console import Console

from tests.fixtures.products import (
    PRODUCT_COLUMNS,
    PRODUCT_FILTER_FIELDS,
    make_products,
)
from dynamic_datatable import config as config_module
from dynamic_datatable.config import ConfigManager
from dynamic_datatable.schema import ActionDef
from dynamic_datatable.view_controller import ViewController


@pytest.fixture(autouse=True, scope="function")
def reset_config_singleton():
    """
    Function-level fixture to reset config singleton between tests.

    Each test gets a fresh ConfigManager instance for explicit paths while the
    module-level manager keeps pointing at the session test config file and
    rereads it on first use.
    """
    ConfigManager._instance = None
    ConfigManager._instances_by_path.clear()
    config_module._config_manager._config = None

    yield

    ConfigManager._instance = None
    ConfigManager._instances_by_path.clear()
    config_module._config_manager._config = None


@pytest.fixture(autouse=True)
def clean_datatable_env(monkeypatch):
    """Keep developer environment overrides out of the tests."""
    for var in (
        "DATATABLE_PAGE_SIZE",
        "DATATABLE_CURRENCY_SYMBOL",
        "DATATABLE_MISSING_PLACEHOLDER",
        "DATATABLE_VALIDATE_SCHEMA",
        "DATATABLE_MEMOIZE",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def temp_config():
    """Create a temporary config file for testing."""
    temp_dir = tempfile.TemporaryDirectory()
    config_path = os.path.join(temp_dir.name, "test_config.json")
    config_manager = ConfigManager(config_path)
    yield config_manager
    temp_dir.cleanup()


@pytest.fixture
def products():
    """The sample product catalog used throughout the tests."""
    return make_products()


@pytest.fixture
def product_actions():
    """View/Edit actions with mocked callbacks."""
    return [
        ActionDef(label=label, on_click=MagicMock(name=f"on_click_{label}"))
        for label in ("View", "Edit")
    ]


@pytest.fixture
def product_view(products, product_actions):
    """ViewController over the sample catalog with View/Edit actions."""
    return ViewController(
        records=products,
        columns=PRODUCT_COLUMNS,
        filter_fields=PRODUCT_FILTER_FIELDS,
        actions=product_actions,
        title="Product Catalog",
    )


@pytest.fixture
def mock_console():
    """Create a mock console for view testing."""
    return MagicMock(spec=Console)


@pytest.fixture
def recording_console():
    """A real console that records output for text assertions."""
    return Console(record=True, width=160, color_system=None, force_terminal=False)
