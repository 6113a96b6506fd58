# SPDX-License-Identifier: MIT

from typing import Optional, Protocol, TypedDict, Union


class Reflection(TypedDict):
    went_well: str
    improve: str
    gratitude: str


class DayRecord(TypedDict):
    # boolean for yes/no habits, numeric accumulator for numeric habits
    routine: dict[str, Union[bool, int, float]]
    planned: dict[str, bool]
    reflection: Reflection


class DayRecordLookup(Protocol):
    """Read access to day records keyed by 'YYYY-MM-DD'."""

    def get(self, date_key: str) -> Optional[DayRecord]: ...
