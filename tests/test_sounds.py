"""Tests for settings persistence and sound synthesis.

Covers:
- Settings dataclass defaults and JSON round-trip
- WAV generators
- SoundManager caching and playback API
"""

from __future__ import annotations

import io
import json
import wave

import pytest

from brewguide.settings import Settings, load_settings, save_settings
from brewguide.audio.sounds import (
    SoundManager,
    SOUND_NAMES,
    _generate_ding,
    _generate_arpeggio,
    _generate_click,
    _make_envelope,
)


# ═══════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════


class TestSettingsDefaults:
    def test_default_preset(self):
        assert Settings().default_preset == 20

    def test_keep_screen_awake(self):
        assert Settings().keep_screen_awake is True

    def test_sound(self):
        s = Settings()
        assert s.sound_enabled is True
        assert s.sound_volume == 70

    def test_window(self):
        s = Settings()
        assert s.window_x is None
        assert s.window_y is None
        assert s.always_on_top is False


class TestSettingsPersistence:
    @pytest.fixture
    def settings_path(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        monkeypatch.setattr("brewguide.settings.SETTINGS_PATH", path)
        monkeypatch.setattr("brewguide.settings.APP_SUPPORT_DIR", tmp_path)
        return path

    def test_round_trip(self, settings_path):
        save_settings(Settings(default_preset=15, sound_volume=42, window_x=10, window_y=20))
        loaded = load_settings()
        assert loaded.default_preset == 15
        assert loaded.sound_volume == 42
        assert (loaded.window_x, loaded.window_y) == (10, 20)

    def test_file_is_indented_json(self, settings_path):
        save_settings(Settings())
        text = settings_path.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert json.loads(text)["default_preset"] == 20

    def test_missing_file_returns_defaults(self, settings_path):
        assert load_settings() == Settings()

    def test_invalid_json_returns_defaults(self, settings_path, caplog):
        settings_path.write_text("NOT VALID JSON", encoding="utf-8")
        with caplog.at_level("WARNING", logger="brewguide.settings"):
            s = load_settings()
        assert s == Settings()
        assert "unreadable settings" in caplog.text

    def test_non_object_returns_defaults(self, settings_path):
        settings_path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_settings() == Settings()

    def test_extra_keys_ignored(self, settings_path):
        data = {"default_preset": 15, "unknown_future_key": True}
        settings_path.write_text(json.dumps(data), encoding="utf-8")
        s = load_settings()
        assert s.default_preset == 15
        assert not hasattr(s, "unknown_future_key")


# ═══════════════════════════════════════════════════════════════════════
#  SOUND SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════

GENERATORS = [_generate_ding, _generate_arpeggio, _generate_click]


class TestSoundGeneration:

    @pytest.mark.parametrize("gen_fn", GENERATORS)
    def test_wav_is_parseable(self, gen_fn):
        data = gen_fn()
        assert data[:4] == b"RIFF"
        with wave.open(io.BytesIO(data), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == 44100
            assert wf.getnframes() > 0

    def test_envelope_shape(self):
        env = _make_envelope(1000, attack=100, decay=100, sustain_level=0.5, release=200)
        assert len(env) == 1000
        assert env[0] == 0.0
        assert env[99] == pytest.approx(1.0)
        assert env[500] == pytest.approx(0.5)
        assert env[-1] == pytest.approx(0.0)
        assert env.max() <= 1.0

    def test_envelope_longer_than_signal(self):
        env = _make_envelope(50, attack=200, decay=400, release=800)
        assert len(env) == 50


@pytest.mark.usefixtures("qapp")
class TestSoundManager:
    def test_wav_files_generated(self, tmp_path):
        SoundManager(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            path = tmp_path / f"{name}.wav"
            assert path.exists(), f"Missing WAV: {name}"
            assert path.stat().st_size > 100

    def test_existing_files_not_regenerated(self, tmp_path):
        cached = tmp_path / "click.wav"
        cached.write_bytes(_generate_click())
        before = cached.stat().st_mtime_ns
        SoundManager(parent=None, sounds_dir=tmp_path)
        assert cached.stat().st_mtime_ns == before

    def test_all_sounds_loaded(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            assert name in mgr._effects

    @pytest.mark.parametrize("level, expected", [(30, 30), (200, 100), (-10, 0)])
    def test_set_volume_clamps(self, tmp_path, level, expected):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_volume(level)
        assert mgr.volume == expected

    def test_set_enabled(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_enabled(False)
        assert mgr.enabled is False

    def test_play_unknown_or_disabled_no_crash(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.play("nonexistent_sound")
        mgr.set_enabled(False)
        mgr.play("click")
