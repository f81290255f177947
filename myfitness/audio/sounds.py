"""Timer sounds synthesised with numpy and played via QSoundEffect.

Each sound is built from sine partials shaped by an ADSR envelope,
written as a 16-bit mono WAV into the app-support cache the first time
it is played and loaded from there on later launches.

Sound names
-----------
- ``timer_start``: two rising blips when a countdown starts or resumes
- ``timer_done``:  three bell strikes when a countdown runs out
- ``click``:       short tick when a BMR is calculated
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path
from typing import Callable

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from .. import settings as app_settings


logger = logging.getLogger(__name__)

SOUND_NAMES = (
    "timer_start",
    "timer_done",
    "click",
)

SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _envelope(
    length: int,
    attack: int,
    decay: int,
    sustain_level: float,
    release: int,
) -> np.ndarray:
    """ADSR envelope; all durations are in samples."""
    env = np.full(length, sustain_level, dtype=np.float64)
    a_end = min(attack, length)
    d_end = min(a_end + decay, length)
    r_start = max(length - release, d_end)
    if a_end > 0:
        env[:a_end] = np.linspace(0.0, 1.0, a_end)
    if d_end > a_end:
        env[a_end:d_end] = np.linspace(1.0, sustain_level, d_end - a_end)
    if r_start < length:
        env[r_start:] = np.linspace(sustain_level, 0.0, length - r_start)
    return env


def _tone(partials: list[tuple[float, float]], duration_s: float) -> np.ndarray:
    """Sum of ``(frequency_hz, amplitude)`` sine partials."""
    t = np.arange(int(SAMPLE_RATE * duration_s)) / SAMPLE_RATE
    wave_sum = np.zeros_like(t)
    for freq, amp in partials:
        wave_sum += amp * np.sin(2 * np.pi * freq * t)
    return wave_sum


def _silence(duration_s: float) -> np.ndarray:
    return np.zeros(int(SAMPLE_RATE * duration_s))


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Encode float samples in -1..1 as 16-bit PCM mono WAV."""
    pcm = (np.clip(samples, -1.0, 1.0) * 32767).astype(np.int16)
    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(pcm.tobytes())
    return buf.getvalue()


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND GENERATORS
# ═══════════════════════════════════════════════════════════════════════════


def _generate_start_blips() -> bytes:
    """Countdown start: A5 then E6, short and bright."""
    parts: list[np.ndarray] = []
    for freq in (880.0, 1318.5):
        blip = _tone([(freq, 0.5)], 0.08)
        parts.append(blip * _envelope(len(blip), 60, 400, 0.5, 1500))
        parts.append(_silence(0.04))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_done_bell() -> bytes:
    """Countdown finished: three strikes of a boxing-ring style bell."""
    strike_s = 0.45
    parts: list[np.ndarray] = []
    for _ in range(3):
        strike = _tone([(1046.5, 0.4), (2093.0, 0.12), (3140.0, 0.05)], strike_s)
        n = len(strike)
        parts.append(strike * _envelope(n, 40, n // 4, 0.3, n // 2))
        parts.append(_silence(0.08))
    return _to_wav_bytes(np.concatenate(parts))


def _generate_click() -> bytes:
    """UI click: 15 ms tick padded so playback isn't clipped."""
    tick = _tone([(1200.0, 0.2)], 0.015)
    n = len(tick)
    shaped = tick * _envelope(n, 20, 50, 0.0, n - 70)
    return _to_wav_bytes(np.concatenate([shaped, _silence(0.03)]))


_GENERATORS: dict[str, Callable[[], bytes]] = {
    "timer_start": _generate_start_blips,
    "timer_done": _generate_done_bell,
    "click": _generate_click,
}


# per-sound loudness relative to the master volume
SOUND_GAIN: dict[str, float] = {
    "timer_start": 0.6,
    "timer_done": 1.0,
    "click": 0.35,
}


class SoundManager(QObject):
    """Plays the timer sounds, following the user's sound settings.

    Nothing touches the disk until a sound is first played while sound
    is enabled: that play writes the WAV into *sounds_dir* (unless a
    cached copy is already there) and loads a ``QSoundEffect`` for it.
    With sound switched off the manager stays inert.

    Usage::

        mgr = SoundManager(parent=self)
        mgr.apply_settings(settings)
        mgr.play("timer_done")
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
        enabled: bool = True,
        volume: int = 70,
    ) -> None:
        super().__init__(parent)
        self._sounds_dir = sounds_dir or app_settings.APP_SUPPORT_DIR / "sounds"
        self._enabled = enabled
        self._volume = _clamp_volume(volume)
        self._effects: dict[str, QSoundEffect] = {}

    # ── public API ────────────────────────────────────────────────────

    def apply_settings(self, settings: app_settings.Settings) -> None:
        self.set_enabled(settings.sound_enabled)
        self.set_volume(settings.sound_volume)

    def set_volume(self, level: int) -> None:
        """Set master volume (0-100) on every loaded effect."""
        self._volume = _clamp_volume(level)
        for name, effect in self._effects.items():
            effect.setVolume(self.effective_volume(name))

    def set_enabled(self, enabled: bool) -> None:
        if enabled != self._enabled:
            logger.info("Sound effects %s", "enabled" if enabled else "disabled")
        self._enabled = enabled

    def play(self, name: str) -> None:
        """Play a sound by name.  No-op if disabled or name unknown."""
        if not self._enabled:
            return
        if name not in _GENERATORS:
            logger.debug("No sound named %r", name)
            return
        effect = self._effect(name)
        if effect is not None:
            effect.play()

    def effective_volume(self, name: str) -> float:
        """Playback volume (0.0-1.0) for *name* at the current master level."""
        return self._volume / 100.0 * SOUND_GAIN.get(name, 1.0)

    def wav_path(self, name: str) -> Path:
        return self._sounds_dir / f"{name}.wav"

    @property
    def volume(self) -> int:
        return self._volume

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def loaded_sounds(self) -> tuple[str, ...]:
        return tuple(self._effects)

    # ── internal ──────────────────────────────────────────────────────

    def _effect(self, name: str) -> QSoundEffect | None:
        effect = self._effects.get(name)
        if effect is not None:
            return effect
        try:
            path = self._ensure_wav(name)
        except OSError as exc:
            logger.warning("Cannot write sound %s: %s", name, exc)
            return None
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        effect.setVolume(self.effective_volume(name))
        self._effects[name] = effect
        return effect

    def _ensure_wav(self, name: str) -> Path:
        path = self.wav_path(name)
        if not path.exists():
            logger.info("Generating %s", path)
            self._sounds_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(_GENERATORS[name]())
        return path


def _clamp_volume(level: int) -> int:
    return max(0, min(int(level), 100))
