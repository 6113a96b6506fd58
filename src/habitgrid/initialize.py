# SPDX-License-Identifier: MIT

import logging

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from habitgrid import configuration
from habitgrid.repository.configuration import CONFIGURATION_REPO
from habitgrid.template.catalog import get_default_catalog_template
from habitgrid.view import state as view_state

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    __configure_logging(config.get("log_level", "WARNING"))
    view_state.set_show_header(config["show_header"])


def __configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        filename=configuration.LOG_PATH,
        level=level,
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).debug("Data path: %s", configuration.DATA_PATH)


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(configuration.DEFAULT_CONFIGURATION), Dumper=Dumper)
        )


def __ensure_data_files() -> None:
    if not configuration.DATA_CATALOG_PATH.is_file():
        configuration.DATA_CATALOG_PATH.write_text(
            dump(dict(get_default_catalog_template()), Dumper=Dumper, sort_keys=False)
        )
    if not configuration.DATA_DAYS_PATH.is_file():
        configuration.DATA_DAYS_PATH.write_text(dump({"days": {}}, Dumper=Dumper))
