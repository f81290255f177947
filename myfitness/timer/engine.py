"""Countdown timer state machine for MyFitness.

States
------
IDLE        Duration fields editable, nothing on the clock.
RUNNING     Counting down once per second.
PAUSED      Clock frozen; Start resumes from the same second.

Transitions
-----------
IDLE → RUNNING          (start, only with a nonzero duration)
RUNNING → PAUSED        (stop)
PAUSED → RUNNING        (start)
RUNNING → IDLE          (countdown reaches 0)
Any → IDLE              (reset)

Duration text is permissive: anything that isn't a run of digits (with
an optional leading ``+``) counts as 0, the same as an empty field.
"""

from __future__ import annotations

import logging
import re
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimerPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


# ── constants ─────────────────────────────────────────────────────────────

TICK_INTERVAL_MS = 1000

OVERALL_TIMER_LABEL = "Overall Workout Timer"
HIGH_INTENSITY_TIMER_LABEL = "High Intensity Timer"

_DURATION_FIELD_RE = re.compile(r"\+?\d+")


# ── helpers ───────────────────────────────────────────────────────────────


def parse_duration_field(text: str) -> int:
    """Parse one hours/minutes/seconds field; 0 for anything unusable.

    Accepts digits with an optional leading ``+``.  Surrounding spaces,
    minus signs and decimals make the whole field unusable.
    """
    if not _DURATION_FIELD_RE.fullmatch(text):
        return 0
    return int(text)


def split_seconds(seconds: int) -> tuple[int, int, int]:
    """Decompose *seconds* into ``(hours, minutes, seconds)``."""
    h, rest = divmod(seconds, 3600)
    m, s = divmod(rest, 60)
    return h, m, s


def format_remaining(seconds: int) -> str:
    """``H:MM:SS`` with hours, ``M:SS`` with minutes, otherwise bare ``S``.

    >>> format_remaining(45), format_remaining(125), format_remaining(3661)
    ('45', '2:05', '1:01:01')
    """
    h, m, s = split_seconds(max(0, seconds))
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    if m > 0:
        return f"{m}:{s:02d}"
    return f"{s}"


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown timer for a single labelled timer card.

    Signals
    -------
    tick(remaining_seconds: int)
        Emitted every second while running.
    phase_changed(new_phase: TimerPhase)
        Emitted on every phase transition (and on every reset).
    finished()
        Emitted once when a countdown runs out, after the auto-reset.
    changed()
        Emitted after any mutation, including duration field edits.
    """

    tick = pyqtSignal(int)
    phase_changed = pyqtSignal(object)
    finished = pyqtSignal()
    changed = pyqtSignal()

    def __init__(self, label: str = "", parent: QObject | None = None) -> None:
        super().__init__(parent)

        self._label: str = label

        # ── duration fields (raw text) ────────────────────────────────
        self._hours_text: str = ""
        self._minutes_text: str = ""
        self._seconds_text: str = ""

        # ── countdown state ───────────────────────────────────────────
        self._phase: TimerPhase = TimerPhase.IDLE
        self._remaining: int = 0

        # ── Qt timer (the only tick schedule this engine ever owns) ───
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def label(self) -> str:
        return self._label

    @property
    def phase(self) -> TimerPhase:
        return self._phase

    @property
    def remaining(self) -> int:
        """Seconds left on the clock (0 while IDLE)."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._phase == TimerPhase.RUNNING

    @property
    def is_scheduled(self) -> bool:
        """True while the one-second tick schedule is armed."""
        return self._qt_timer.isActive()

    @property
    def hours_text(self) -> str:
        return self._hours_text

    @property
    def minutes_text(self) -> str:
        return self._minutes_text

    @property
    def seconds_text(self) -> str:
        return self._seconds_text

    @property
    def duration_seconds(self) -> int:
        """Total seconds described by the current duration fields."""
        return (
            parse_duration_field(self._hours_text) * 3600
            + parse_duration_field(self._minutes_text) * 60
            + parse_duration_field(self._seconds_text)
        )

    @property
    def fields_visible(self) -> bool:
        """Duration entry is shown only while IDLE; otherwise the clock is."""
        return self._phase == TimerPhase.IDLE

    @property
    def button_text(self) -> str:
        return "Stop" if self.is_running else "Start"

    @property
    def display_text(self) -> str:
        return format_remaining(self._remaining)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def set_duration(self, hours: str, minutes: str, seconds: str) -> None:
        """Store raw duration text.  Ignored once a countdown is showing."""
        if self._phase != TimerPhase.IDLE:
            return
        self._hours_text = hours
        self._minutes_text = minutes
        self._seconds_text = seconds
        self.changed.emit()

    def set_hours(self, text: str) -> None:
        self.set_duration(text, self._minutes_text, self._seconds_text)

    def set_minutes(self, text: str) -> None:
        self.set_duration(self._hours_text, text, self._seconds_text)

    def set_seconds(self, text: str) -> None:
        self.set_duration(self._hours_text, self._minutes_text, text)

    def start(self) -> None:
        """Start from IDLE, resume from PAUSED, or re-arm while RUNNING.

        From IDLE an all-zero duration is a silent no-op.
        """
        if self._phase == TimerPhase.IDLE:
            total = self.duration_seconds
            if total == 0:
                return
            self._remaining = total
            logger.debug("%s: starting %ds countdown", self._label, total)
        elif self._phase == TimerPhase.PAUSED:
            logger.debug("%s: resuming at %ds", self._label, self._remaining)

        # QTimer.start() on an active timer restarts it, so there is
        # never more than one pending schedule.
        self._qt_timer.start()
        self._set_phase(TimerPhase.RUNNING)

    def stop(self) -> None:
        """Pause the countdown.  No-op unless RUNNING."""
        if self._phase != TimerPhase.RUNNING:
            return
        self._qt_timer.stop()
        logger.debug("%s: paused at %ds", self._label, self._remaining)
        self._set_phase(TimerPhase.PAUSED)

    def toggle(self) -> None:
        """The Start/Stop button."""
        if self.is_running:
            self.stop()
        else:
            self.start()

    def reset(self) -> None:
        """Cancel any countdown, clear the fields and return to IDLE."""
        self._qt_timer.stop()
        self._remaining = 0
        self._hours_text = ""
        self._minutes_text = ""
        self._seconds_text = ""
        logger.debug("%s: reset", self._label)
        self._set_phase(TimerPhase.IDLE)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _on_tick(self) -> None:
        if self._phase != TimerPhase.RUNNING:
            return
        self._remaining = max(0, self._remaining - 1)
        self.tick.emit(self._remaining)

        if self._remaining == 0:
            logger.debug("%s: countdown finished", self._label)
            self.reset()
            self.finished.emit()
        else:
            self.changed.emit()

    def _set_phase(self, new_phase: TimerPhase) -> None:
        self._phase = new_phase
        self.phase_changed.emit(new_phase)
        self.changed.emit()
