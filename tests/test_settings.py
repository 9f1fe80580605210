"""Tests for settings persistence."""

import json

from focusrounds.settings import Settings, load_settings, save_settings


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert (s.focus_minutes, s.break_minutes, s.rounds) == (25, 5, 4)
        assert s.notifications_enabled is True
        assert s.hide_window_on_start is True
        assert s.window_x is None
        assert s.window_y is None

    def test_missing_file_gives_defaults(self, settings_path):
        assert not settings_path.exists()
        assert load_settings() == Settings()

    def test_round_trip(self, settings_path):
        original = Settings(
            focus_minutes=50, break_minutes=10, rounds=3,
            notifications_enabled=False, hide_window_on_start=False,
            window_x=100, window_y=200,
        )
        save_settings(original)
        assert settings_path.exists()
        assert load_settings() == original

    def test_unknown_keys_ignored(self, settings_path):
        settings_path.write_text(
            json.dumps({"focus_minutes": 30, "theme": "neon"}), encoding="utf-8",
        )
        s = load_settings()
        assert s.focus_minutes == 30
        assert s.rounds == 4

    def test_corrupt_file_gives_defaults(self, settings_path):
        settings_path.write_text("{not json", encoding="utf-8")
        assert load_settings() == Settings()

    def test_non_object_json_gives_defaults(self, settings_path):
        settings_path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings() == Settings()

    def test_hand_edited_timer_values_are_normalized(self, settings_path):
        settings_path.write_text(
            json.dumps({"focus_minutes": "abc", "break_minutes": 0, "rounds": "6"}),
            encoding="utf-8",
        )
        s = load_settings()
        assert (s.focus_minutes, s.break_minutes, s.rounds) == (25, 5, 6)

    def test_bad_window_position_is_dropped(self, settings_path):
        settings_path.write_text(
            json.dumps({"window_x": "10", "window_y": 5}), encoding="utf-8",
        )
        s = load_settings()
        assert s.window_x is None
        assert s.window_y is None

    def test_boolean_window_position_is_dropped(self, settings_path):
        settings_path.write_text(
            json.dumps({"window_x": True, "window_y": 40}), encoding="utf-8",
        )
        s = load_settings()
        assert (s.window_x, s.window_y) == (None, None)

    def test_integer_window_position_is_kept(self, settings_path):
        settings_path.write_text(
            json.dumps({"window_x": -20, "window_y": 40}), encoding="utf-8",
        )
        s = load_settings()
        assert (s.window_x, s.window_y) == (-20, 40)

    def test_non_boolean_flags_revert_to_defaults(self, settings_path):
        settings_path.write_text(
            json.dumps({
                "notifications_enabled": "no",
                "hide_window_on_start": 0,
            }),
            encoding="utf-8",
        )
        s = load_settings()
        assert s.notifications_enabled is True
        assert s.hide_window_on_start is True

    def test_boolean_flags_are_kept(self, settings_path):
        settings_path.write_text(
            json.dumps({"notifications_enabled": False}), encoding="utf-8",
        )
        assert load_settings().notifications_enabled is False
