# SPDX-License-Identifier: MIT

import atexit

from habitgrid.repository.catalog import CATALOG_REPO
from habitgrid.repository.configuration import CONFIGURATION_REPO
from habitgrid.repository.day_record import DAY_RECORD_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    CATALOG_REPO.flush()
    DAY_RECORD_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
