# SPDX-License-Identifier: MIT

from typing import Literal, Optional

from habitgrid.model.schedulable import Schedulable

Priority = Literal["high", "medium", "low"]


class Activity(Schedulable):
    # entity_type: "activity"
    # date: one-time due date (YYYY-MM-DD), inherited
    # recurring: legacy flag (true means daily when recurring_type is unset), inherited
    priority: Priority
    description: Optional[str]
