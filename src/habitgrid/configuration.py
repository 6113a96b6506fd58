# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "habitgrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_CATALOG_PATH: Path = DATA_PATH / "catalog.yaml"
DATA_DAYS_PATH: Path = DATA_PATH / "days.yaml"
LOG_PATH: Path = DATA_PATH / "habitgrid.log"

WeekStart = Literal["sunday", "monday"]
OneTimePolicyName = Literal["exact", "upcoming", "overdue"]


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    week_starts_on: WeekStart
    rolling_window_days: int
    streak_threshold: float
    one_time_policy: OneTimePolicyName
    show_work_block: bool
    work_start: str
    work_end: str
    work_days: list[int]
    log_level: NotRequired[str]


DEFAULT_CONFIGURATION: Configuration = {
    "data_path": None,
    "show_header": True,
    "week_starts_on": "sunday",
    "rolling_window_days": 14,
    "streak_threshold": 0.7,
    "one_time_policy": "upcoming",
    "show_work_block": True,
    "work_start": "9:00 AM",
    "work_end": "6:15 PM",
    "work_days": [1, 2, 3, 4, 5],
    "log_level": "WARNING",
}


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_CATALOG_PATH, DATA_DAYS_PATH, LOG_PATH

    DATA_PATH = data_path
    DATA_CATALOG_PATH = DATA_PATH / "catalog.yaml"
    DATA_DAYS_PATH = DATA_PATH / "days.yaml"
    LOG_PATH = DATA_PATH / "habitgrid.log"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are instantiated.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
