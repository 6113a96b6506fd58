"""Shared fixtures: every test runs against config and data files under tmp_path."""

# pylint: disable=redefined-outer-name

from pathlib import Path

import pytest

from habitgrid import configuration
from habitgrid.repository.catalog import CATALOG_REPO
from habitgrid.repository.configuration import CONFIGURATION_REPO
from habitgrid.repository.day_record import DAY_RECORD_REPO
from habitgrid.view import state as view_state


def _reset_repositories() -> None:
    CONFIGURATION_REPO._config = None
    CONFIGURATION_REPO.is_dirty = False
    CATALOG_REPO._catalog = None
    CATALOG_REPO.is_dirty = False
    DAY_RECORD_REPO._days = None
    DAY_RECORD_REPO.is_dirty = False


@pytest.fixture(autouse=True)
def habitgrid_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration and data paths at a fresh temporary directory."""
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"

    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_CATALOG_PATH", data_path / "catalog.yaml")
    monkeypatch.setattr(configuration, "DATA_DAYS_PATH", data_path / "days.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", data_path / "habitgrid.log")

    _reset_repositories()
    view_state.set_show_header(True)
    yield tmp_path
    _reset_repositories()


@pytest.fixture
def initialized(habitgrid_home: Path) -> Path:
    """Config and data files created as on first start, with the seed catalog."""
    from habitgrid.initialize import initialize

    initialize()
    return habitgrid_home
