# SPDX-License-Identifier: MIT

from typing import Literal, Optional

from habitgrid.model.schedulable import Schedulable

TrackingType = Literal["boolean", "number"]


class Habit(Schedulable):
    # entity_type: "habit"
    tracking_type: TrackingType

    # For numeric habits
    unit: Optional[str]  # e.g., "L", "km", "pages"
    target: Optional[float]
    min: Optional[float]
    max: Optional[float]
