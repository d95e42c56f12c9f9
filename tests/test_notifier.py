import logging
from pathlib import Path

import pygame
import pytest

from pomotimer import notifier


@pytest.fixture
def no_sound(monkeypatch):
    started = []
    monkeypatch.setattr(notifier, "play_alert_sound", lambda *args, **kwargs: started.append(True))
    return started


def test_notify_uses_desktop_backend(monkeypatch, capsys, no_sound):
    shown = []
    monkeypatch.setattr(notifier.notification, "notify", lambda **kwargs: shown.append(kwargs))

    notifier.notify("Pomodoro completed!", "well done")

    assert shown[0]["title"] == "Pomodoro completed!"
    assert shown[0]["message"] == "well done"
    assert capsys.readouterr().out == ""
    assert no_sound == [True]


def test_notify_falls_back_to_stdout(monkeypatch, capsys, no_sound):
    def broken(**kwargs):
        raise NotImplementedError("no usable implementation found")

    monkeypatch.setattr(notifier.notification, "notify", broken)

    notifier.notify("Break ended!", "back to work")

    assert "Break ended!: back to work" in capsys.readouterr().out
    assert no_sound == [True]


def test_notify_can_skip_sound(monkeypatch, no_sound):
    monkeypatch.setattr(notifier.notification, "notify", lambda **kwargs: None)
    notifier.notify("t", "m", sound=False)
    assert no_sound == []


def test_sound_candidates_order():
    candidates = notifier.sound_candidates()
    assert candidates[0] == Path("src/pomotimer/assets/alert.wav")
    assert candidates[1] == Path("assets/alert.wav")
    assert candidates[2].name == "alert.wav"
    assert candidates[3] == Path("alert.wav")


def test_find_sound_asset_returns_first_existing(tmp_path):
    missing = tmp_path / "missing.wav"
    first = tmp_path / "first.wav"
    second = tmp_path / "second.wav"
    first.write_bytes(b"RIFF")
    second.write_bytes(b"RIFF")
    assert notifier.find_sound_asset([missing, first, second]) == first
    assert notifier.find_sound_asset([missing]) is None


def test_playback_tries_next_candidate_after_failure(tmp_path, monkeypatch, caplog):
    bad = tmp_path / "bad.wav"
    good = tmp_path / "good.wav"
    bad.write_bytes(b"junk")
    good.write_bytes(b"RIFF")
    played = []

    def fake_play(path):
        if path == bad:
            raise pygame.error("Unable to open file")
        played.append(path)

    monkeypatch.setattr(notifier, "play_sound", fake_play)
    with caplog.at_level(logging.WARNING, logger=notifier.__name__):
        thread = notifier.play_alert_sound([tmp_path / "missing.wav", bad, good])
        thread.join(timeout=5)

    assert played == [good]
    assert "Could not play sound" in caplog.text


def test_fresh_directory_falls_back_to_generated_beep(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(notifier, "executable_dir", lambda: tmp_path / "bin")
    played = []
    monkeypatch.setattr(notifier, "play_sound", lambda source: played.append(source))

    thread = notifier.play_alert_sound()
    thread.join(timeout=5)

    assert len(played) == 1
    assert played[0].read(4) == b"RIFF"


def test_beep_failure_is_logged_not_raised(tmp_path, monkeypatch, caplog):
    def no_device(source):
        raise pygame.error("No available audio device")

    monkeypatch.setattr(notifier, "play_sound", no_device)
    with caplog.at_level(logging.ERROR, logger=notifier.__name__):
        thread = notifier.play_alert_sound([tmp_path / "nope.wav"])
        thread.join(timeout=5)

    assert "Could not play the alert beep" in caplog.text


def test_audio_device_failure_is_swallowed(tmp_path, monkeypatch, caplog):
    sound = tmp_path / "alert.wav"
    sound.write_bytes(b"RIFF")

    def no_device(path):
        raise pygame.error("No available audio device")

    monkeypatch.setattr(notifier, "play_sound", no_device)
    with caplog.at_level(logging.WARNING, logger=notifier.__name__):
        thread = notifier.play_alert_sound([sound])
        thread.join(timeout=5)

    assert not thread.is_alive()
    assert "No available audio device" in caplog.text


def test_alert_thread_is_daemon_and_waitable(tmp_path, monkeypatch):
    monkeypatch.setattr(notifier, "play_sound", lambda path: None)
    sound = tmp_path / "alert.wav"
    sound.write_bytes(b"RIFF")

    thread = notifier.play_alert_sound([sound])
    notifier.wait_for_alerts(timeout=5)

    assert thread.daemon
    assert not thread.is_alive()


def test_generate_beep_is_a_wav():
    data = notifier.generate_beep(duration_s=0.01)
    assert data[:4] == b"RIFF"
    assert data[8:12] == b"WAVE"
