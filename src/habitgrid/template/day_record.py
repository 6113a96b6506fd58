# SPDX-License-Identifier: MIT

from habitgrid.model.day_record import DayRecord


def get_day_record_template() -> DayRecord:
    return {
        "routine": {},
        "planned": {},
        "reflection": {"went_well": "", "improve": "", "gratitude": ""},
    }
