# SPDX-License-Identifier: MIT

from enum import StrEnum


class CategoryType(StrEnum):
    SPIRITUAL = "spiritual"
    HEALTH = "health"
    LEARNING = "learning"
    CAREER = "career"
    FINANCE = "finance"
    FAMILY = "family"
    SOCIAL = "social"
    OTHER = "other"


# Pseudo category used for the work block on the calendar
WORK_CATEGORY_TYPE = "work"

CATEGORY_COLORS: dict[str, str] = {
    CategoryType.SPIRITUAL: "medium_purple",
    CategoryType.HEALTH: "green",
    CategoryType.LEARNING: "dodger_blue2",
    CategoryType.CAREER: "dark_orange",
    CategoryType.FINANCE: "dark_cyan",
    CategoryType.FAMILY: "red",
    CategoryType.SOCIAL: "hot_pink",
    CategoryType.OTHER: "grey62",
    WORK_CATEGORY_TYPE: "grey42",
}


def category_color(category_type: str) -> str:
    return CATEGORY_COLORS.get(category_type, CATEGORY_COLORS[CategoryType.OTHER])
