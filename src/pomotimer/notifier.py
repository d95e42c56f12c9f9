"""Desktop notifications and the background alert sound."""
from __future__ import annotations

import io
import logging
import math
import struct
import sys
import threading
import time
import wave
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Union

from plyer import notification

logger = logging.getLogger(__name__)

APP_NAME = "pomotimer"
ALERT_FILE = "alert.wav"
NOTIFICATION_TIMEOUT = 10

_mixer_lock = threading.Lock()
_alerts_lock = threading.Lock()
_alerts: List[threading.Thread] = []


def executable_dir() -> Optional[Path]:
    if not sys.argv or not sys.argv[0]:
        return None
    return Path(sys.argv[0]).resolve().parent


def sound_candidates() -> List[Path]:
    """Alert sound locations, in lookup order."""
    exe_dir = executable_dir()
    return [
        Path("src") / "pomotimer" / "assets" / ALERT_FILE,
        Path("assets") / ALERT_FILE,
        exe_dir / "assets" / ALERT_FILE if exe_dir else Path(ALERT_FILE),
        Path(ALERT_FILE),
    ]


def find_sound_asset(candidates: Optional[Iterable[Path]] = None) -> Optional[Path]:
    for path in candidates if candidates is not None else sound_candidates():
        if path.is_file():
            return path
    return None


def generate_beep(duration_s: float = 0.5, freq: float = 880.0, volume: float = 0.5, samplerate: int = 44100) -> bytes:
    """Generate a short WAV beep (mono 16-bit PCM) in memory."""
    n_samples = int(samplerate * duration_s)
    amplitude = int(32767 * volume)
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(samplerate)
        frames = bytearray()
        for i in range(n_samples):
            t = i / samplerate
            frames += struct.pack("<h", int(amplitude * math.sin(2 * math.pi * freq * t)))
        wf.writeframes(bytes(frames))
    return buf.getvalue()


def play_sound(source: Union[Path, BinaryIO]) -> None:
    """Play a WAV file or file object through the default audio device and wait until it ends."""
    # imported here so cli.main can set PYGAME_HIDE_SUPPORT_PROMPT first
    import pygame

    with _mixer_lock:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
    sound = pygame.mixer.Sound(str(source) if isinstance(source, Path) else source)
    channel = sound.play()
    while channel is not None and channel.get_busy():
        time.sleep(0.05)


def play_beep() -> None:
    play_sound(io.BytesIO(generate_beep(duration_s=0.6, volume=0.6)))


def _play_first_available(candidates: List[Path]) -> None:
    # pygame.error subclasses RuntimeError
    for path in candidates:
        if not path.is_file():
            continue
        try:
            play_sound(path)
        except (RuntimeError, OSError) as exc:
            logger.warning("Could not play sound from %s: %s", path, exc)
            continue
        return

    logger.debug("No alert sound file found (looked in: %s); playing a generated beep",
                 ", ".join(str(p) for p in candidates))
    try:
        play_beep()
    except (RuntimeError, OSError) as exc:
        logger.error("Could not play the alert beep: %s", exc)


def play_alert_sound(candidates: Optional[List[Path]] = None) -> Optional[threading.Thread]:
    """Start playing the alert in a daemon thread and return without waiting."""
    thread = threading.Thread(
        target=_play_first_available,
        args=(candidates if candidates is not None else sound_candidates(),),
        name="pomotimer-alert",
        daemon=True,
    )
    with _alerts_lock:
        _alerts[:] = [alert for alert in _alerts if alert.is_alive()]
        _alerts.append(thread)
    try:
        thread.start()
    except RuntimeError as exc:
        logger.error("Could not start alert sound thread: %s", exc)
        return None
    return thread


def wait_for_alerts(timeout: float = 5.0) -> None:
    """Give in-flight alert sounds up to ``timeout`` seconds to finish."""
    deadline = time.monotonic() + timeout
    with _alerts_lock:
        pending = list(_alerts)
    for alert in pending:
        if alert.ident is None:
            continue
        alert.join(max(0.0, deadline - time.monotonic()))


def notify(title: str, message: str, *, sound: bool = True) -> None:
    """Show a desktop notification, falling back to stdout, and ring the alert."""
    try:
        notification.notify(title=title, message=message, app_name=APP_NAME, timeout=NOTIFICATION_TIMEOUT)
    except Exception as exc:  # plyer backends raise anything from NotImplementedError to dbus errors
        logger.debug("Desktop notification failed: %s", exc)
        print(f"\n{title}: {message}")

    if sound:
        play_alert_sound()
