"""Tests for timer configuration and input normalization."""

import dataclasses

import pytest

from focusrounds.settings import Settings
from focusrounds.timer.config import (
    TimerConfig, SessionConfig, coerce_positive_int,
    DEFAULT_FOCUS_MINUTES, DEFAULT_BREAK_MINUTES, DEFAULT_ROUNDS,
)


# ═══════════════════════════════════════════════════════════════════════════
#  NORMALIZATION
# ═══════════════════════════════════════════════════════════════════════════


class TestCoercePositiveInt:

    @pytest.mark.parametrize("value, expected", [
        ("25", 25),
        (" 7 ", 7),
        (3, 3),
        (3.0, 3),
        ("2.7", 2),
        ("1e1", 10),
        ("1", 1),
    ])
    def test_positive_numbers_are_kept(self, value, expected):
        assert coerce_positive_int(value, 99) == expected

    @pytest.mark.parametrize("value", [
        "", "   ", "abc", "12abc", "0", "-3", "-0.1",
        "nan", "inf", "-inf", None, 0, -1, [], {}, object(),
    ])
    def test_everything_else_falls_back_to_default(self, value):
        assert coerce_positive_int(value, 99) == 99

    @pytest.mark.parametrize("value", ["0.5", " 0.2 ", 0.999])
    def test_positive_fractions_below_one_clamp_to_one(self, value):
        assert coerce_positive_int(value, 99) == 1


# ═══════════════════════════════════════════════════════════════════════════
#  TIMER CONFIG
# ═══════════════════════════════════════════════════════════════════════════


class TestTimerConfig:

    def test_defaults(self):
        c = TimerConfig()
        assert c.focus_minutes == DEFAULT_FOCUS_MINUTES == 25
        assert c.break_minutes == DEFAULT_BREAK_MINUTES == 5
        assert c.rounds == DEFAULT_ROUNDS == 4

    def test_setters_accept_numeric_text(self):
        c = TimerConfig()
        c.set_focus_minutes("50")
        c.set_break_minutes("10")
        c.set_rounds("6")
        assert (c.focus_minutes, c.break_minutes, c.rounds) == (50, 10, 6)

    @pytest.mark.parametrize("bad", ["", "abc", "0", "-5", None])
    def test_invalid_input_resets_each_field_to_its_own_default(self, bad):
        c = TimerConfig(focus_minutes=50, break_minutes=10, rounds=6)
        c.set_focus_minutes(bad)
        c.set_break_minutes(bad)
        c.set_rounds(bad)
        assert c.focus_minutes == 25
        assert c.break_minutes == 5
        assert c.rounds == 4

    def test_constructor_normalizes_too(self):
        c = TimerConfig(focus_minutes="x", break_minutes=-1, rounds="3")
        assert (c.focus_minutes, c.break_minutes, c.rounds) == (25, 5, 3)

    def test_setters_never_raise(self):
        c = TimerConfig()
        for junk in (object(), [1, 2], {"a": 1}, b"\xff", float("nan")):
            c.set_focus_minutes(junk)
            c.set_break_minutes(junk)
            c.set_rounds(junk)
        assert c.focus_minutes >= 1
        assert c.break_minutes >= 1
        assert c.rounds >= 1


class TestSnapshot:

    def test_snapshot_copies_values(self):
        c = TimerConfig(focus_minutes=40, break_minutes=8, rounds=3)
        snap = c.snapshot()
        assert snap == SessionConfig(40, 8, 3)
        assert snap.focus_seconds == 40 * 60
        assert snap.break_seconds == 8 * 60

    def test_snapshot_is_frozen(self):
        snap = TimerConfig().snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.rounds = 10

    def test_later_edits_do_not_leak_into_snapshot(self):
        c = TimerConfig()
        snap = c.snapshot()
        c.set_focus_minutes("90")
        assert snap.focus_minutes == 25


class TestSettingsBridge:

    def test_from_settings(self):
        s = Settings(focus_minutes=45, break_minutes=15, rounds=2)
        c = TimerConfig.from_settings(s)
        assert (c.focus_minutes, c.break_minutes, c.rounds) == (45, 15, 2)

    def test_from_settings_normalizes_bad_values(self):
        s = Settings(focus_minutes=0, break_minutes="?", rounds=-2)
        c = TimerConfig.from_settings(s)
        assert (c.focus_minutes, c.break_minutes, c.rounds) == (25, 5, 4)

    def test_apply_to(self):
        s = Settings()
        TimerConfig(focus_minutes=30, break_minutes=6, rounds=5).apply_to(s)
        assert (s.focus_minutes, s.break_minutes, s.rounds) == (30, 6, 5)
