# SPDX-License-Identifier: MIT

from typing import Optional

from habitgrid.model.category_type import category_color
from habitgrid.model.schedulable import Schedulable
from habitgrid.service.recurrence import describe_recurrence


def colored(text: str, category_type: str) -> str:
    color = category_color(category_type)
    return f"[{color}]{text}[/{color}]"


def format_recurrence(item: Schedulable) -> str:
    badge = describe_recurrence(item)
    if badge is not None:
        return badge
    return item.get("date") or "once"


def format_optional(value: Optional[object]) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def progress_bar(percentage: int, width: int = 20) -> str:
    filled = min(width, max(0, percentage * width // 100))
    if percentage >= 80:
        color = "green"
    elif percentage >= 50:
        color = "yellow"
    else:
        color = "red"
    return f"[{color}]{'█' * filled}[/{color}][grey30]{'░' * (width - filled)}[/grey30]"
