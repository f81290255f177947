"""One countdown timer card.

Layout (top → bottom):
    - Timer label
    - Hours / Minutes / Seconds fields (IDLE only)
    - Remaining-time clock (RUNNING / PAUSED only)
    - Start/Stop toggle and Reset buttons
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit,
)

from ..timer.engine import TimerEngine


class TimerWidget(QWidget):
    """Renders a ``TimerEngine`` and forwards button/field input to it."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._refresh()

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)

        self._title = QLabel(self._engine.label, self)
        self._title.setObjectName("sectionTitle")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title)

        layout.addSpacing(16)

        # ── duration entry ───────────────────────────────────────────
        self._fields_row = QWidget(self)
        fields_layout = QHBoxLayout(self._fields_row)
        fields_layout.setContentsMargins(0, 0, 0, 0)
        fields_layout.setSpacing(8)

        self._hours_input = self._make_field("Hours")
        self._minutes_input = self._make_field("Minutes")
        self._seconds_input = self._make_field("Seconds")
        for field in (self._hours_input, self._minutes_input, self._seconds_input):
            fields_layout.addWidget(field, 1)
        layout.addWidget(self._fields_row)

        # ── clock ────────────────────────────────────────────────────
        self._clock = QLabel("", self)
        self._clock.setObjectName("clockLabel")
        self._clock.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._clock)

        layout.addSpacing(16)

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(8)

        self._toggle_btn = QPushButton("Start", self)
        self._toggle_btn.setObjectName("toggleButton")
        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("resetButton")

        btn_row.addWidget(self._toggle_btn, 1)
        btn_row.addWidget(self._reset_btn, 1)
        layout.addLayout(btn_row)

    def _make_field(self, placeholder: str) -> QLineEdit:
        field = QLineEdit(self._fields_row)
        field.setPlaceholderText(placeholder)
        field.setInputMethodHints(Qt.InputMethodHint.ImhDigitsOnly)
        return field

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        # textEdited fires for user input only; _refresh writes via setText.
        self._hours_input.textEdited.connect(self._engine.set_hours)
        self._minutes_input.textEdited.connect(self._engine.set_minutes)
        self._seconds_input.textEdited.connect(self._engine.set_seconds)

        self._toggle_btn.clicked.connect(self._engine.toggle)
        self._reset_btn.clicked.connect(self._engine.reset)

        self._engine.changed.connect(self._refresh)

    # ── slots ─────────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        engine = self._engine
        for field, text in (
            (self._hours_input, engine.hours_text),
            (self._minutes_input, engine.minutes_text),
            (self._seconds_input, engine.seconds_text),
        ):
            if field.text() != text:
                field.setText(text)

        self._fields_row.setVisible(engine.fields_visible)
        self._clock.setVisible(not engine.fields_visible)
        self._clock.setText(engine.display_text)
        self._toggle_btn.setText(engine.button_text)

    # ── accessors ────────────────────────────────────────────────────────

    def clock_text(self) -> str:
        return self._clock.text()

    def toggle_text(self) -> str:
        return self._toggle_btn.text()
