"""Tests for free-form time and duration labels on the 15 minute timeline."""

import pytest

from habitgrid.service.timespec import (
    SLOTS_PER_DAY,
    parse_clock,
    parse_duration_slots,
    parse_start_slot,
    round_half_up,
    slot_to_label,
)


class TestParseStartSlot:
    """Labels map to slots counted in quarter hours from 04:00."""

    @pytest.mark.parametrize(
        ("label", "slot"),
        [
            ("6:00 AM", 8),
            ("6:30 PM", 58),
            ("4:00 AM", 0),
            ("5:45 am", 7),
            ("12:00 PM", 32),
            ("21:15", 69),
            ("9 PM", 68),
            ("5:00 - 6:30 AM", 4),
        ],
    )
    def test_clock_times(self, label: str, slot: int) -> None:
        assert parse_start_slot(label) == slot

    @pytest.mark.parametrize(
        ("label", "slot"),
        [
            ("AM Commute", 16),
            ("PM Commute", 56),
            ("Morning", 12),
            ("afternoon walk", 40),
            ("Evening", 60),
        ],
    )
    def test_named_times(self, label: str, slot: int) -> None:
        assert parse_start_slot(label) == slot

    @pytest.mark.parametrize(
        "label",
        ["All day", "Throughout Day", "All meals", "", None, "whenever", "12:00 AM", "3:30 AM"],
    )
    def test_unanchored(self, label: str) -> None:
        assert parse_start_slot(label) is None

    def test_all_day_wins_over_clock_time(self) -> None:
        assert parse_start_slot("All day from 6:00 AM") is None

    def test_out_of_range_clock_is_unanchored(self) -> None:
        assert parse_start_slot("25:00") is None
        assert parse_start_slot("7:75") is None

    def test_last_quarter_hour_fits_on_timeline(self) -> None:
        slot = parse_start_slot("11:45 PM")
        assert slot == SLOTS_PER_DAY - 1
        assert slot_to_label(slot) == "23:45"


class TestParseDurationSlots:
    @pytest.mark.parametrize(
        ("label", "slots"),
        [
            ("45 min", 3),
            ("90 min", 6),
            ("10 min", 1),
            ("1 min", 1),
            ("20 mins", 2),
            ("1.5 hour", 6),
            ("2 hours", 8),
            ("7.5 hrs", 30),
            ("1 hr", 4),
            ("0.1 hours", 1),
        ],
    )
    def test_durations(self, label: str, slots: int) -> None:
        assert parse_duration_slots(label) == slots

    @pytest.mark.parametrize("label", [None, "", "a while", "0 min"])
    def test_defaults_to_one_slot(self, label: str) -> None:
        assert parse_duration_slots(label) == 1

    def test_minutes_checked_before_hours(self) -> None:
        assert parse_duration_slots("1 hour 30 min") == 2


class TestHelpers:
    def test_round_half_up_differs_from_bankers_rounding(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(62.5) == 63
        assert round_half_up(2.4) == 2

    def test_parse_clock_meridiem(self) -> None:
        assert parse_clock("12:30 AM") == (0, 30)
        assert parse_clock("12:30 PM") == (12, 30)
        assert parse_clock("no time here") is None

    def test_slot_to_label(self) -> None:
        assert slot_to_label(0) == "04:00"
        assert slot_to_label(58) == "18:30"
