"""Main application window for MyFitness."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction, QColor, QKeySequence, QPainter, QPixmap
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QScrollArea,
)

from .timer.engine import (
    TimerEngine, TimerPhase,
    OVERALL_TIMER_LABEL, HIGH_INTENSITY_TIMER_LABEL,
)
from .bmr.calculator import BMRCalculator
from .ui.timer_widget import TimerWidget
from .ui.bmr_widget import BMRWidget
from .ui.styles import PALETTE, build_stylesheet
from .settings import Settings, load_settings, save_settings
from .audio.sounds import SoundManager


logger = logging.getLogger(__name__)


def make_app_icon(size: int = 256) -> QPixmap:
    """Placeholder logo: a white stopwatch face on a lilac disc."""
    pix = QPixmap(size, size)
    pix.fill(QColor(0, 0, 0, 0))
    p = QPainter(pix)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    margin = size // 16
    p.setPen(Qt.PenStyle.NoPen)
    p.setBrush(QColor(PALETTE["button"]))
    p.drawEllipse(margin, margin, size - 2 * margin, size - 2 * margin)
    inner = size // 4
    p.setBrush(QColor(PALETTE["text"]))
    p.drawEllipse(inner, inner, size - 2 * inner, size - 2 * inner)
    p.setBrush(QColor(PALETTE["bg"]))
    hand_w = max(2, size // 32)
    p.drawRect(size // 2 - hand_w // 2, inner + size // 16, hand_w, size // 4)
    p.end()
    return pix


class MyFitnessApp(QMainWindow):
    """Single-screen window: header, two timers, BMR calculator."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        sound_manager: SoundManager | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("MyFitness")
        self.setMinimumSize(400, 600)

        # ── geometry save debounce ────────────────────────────────────
        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        # ── engines ───────────────────────────────────────────────────
        self._overall_timer = TimerEngine(OVERALL_TIMER_LABEL, parent=self)
        self._interval_timer = TimerEngine(HIGH_INTENSITY_TIMER_LABEL, parent=self)
        self._bmr_calculator = BMRCalculator(parent=self)

        # ── audio ─────────────────────────────────────────────────────
        if sound_manager is None:
            sound_manager = SoundManager(parent=self)
        self._sounds = sound_manager
        self._sounds.apply_settings(self._settings)

        self._build_ui()
        self._connect_signals()
        self._setup_shortcuts()

        self.setStyleSheet(build_stylesheet())
        self._restore_geometry()
        if self._settings.always_on_top:
            self._apply_always_on_top(True)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def timers(self) -> tuple[TimerEngine, TimerEngine]:
        return (self._overall_timer, self._interval_timer)

    @property
    def bmr_calculator(self) -> BMRCalculator:
        return self._bmr_calculator

    # ══════════════════════════════════════════════════════════════════
    #  BUILD
    # ══════════════════════════════════════════════════════════════════

    def _build_ui(self) -> None:
        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.Shape.NoFrame)
        # clicks on empty space must reach mousePressEvent without focusing
        scroll.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setCentralWidget(scroll)

        content = QWidget(scroll)
        scroll.setWidget(content)
        layout = QVBoxLayout(content)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(0)

        layout.addWidget(self._build_header(content))
        layout.addSpacing(16)

        self._overall_widget = TimerWidget(self._overall_timer, content)
        layout.addWidget(self._overall_widget)
        layout.addSpacing(32)

        self._interval_widget = TimerWidget(self._interval_timer, content)
        layout.addWidget(self._interval_widget)
        layout.addSpacing(32)

        self._bmr_widget = BMRWidget(self._bmr_calculator, content)
        layout.addWidget(self._bmr_widget)
        layout.addStretch(1)

    def _build_header(self, parent: QWidget) -> QWidget:
        header = QWidget(parent)
        row = QHBoxLayout(header)
        row.setContentsMargins(0, 0, 0, 0)
        row.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)

        icon = QLabel(header)
        icon.setPixmap(make_app_icon(98))
        icon.setContentsMargins(16, 16, 16, 16)
        row.addWidget(icon)
        row.addSpacing(8)

        title = QLabel("MyFitness", header)
        title.setObjectName("appTitle")
        row.addWidget(title)
        return header

    def _connect_signals(self) -> None:
        for engine in self.timers:
            engine.phase_changed.connect(self._on_phase_changed)
            engine.finished.connect(self._on_timer_finished)
        self._bmr_calculator.result_changed.connect(self._on_bmr_result)

    def _setup_shortcuts(self) -> None:
        quit_action = QAction("Quit MyFitness", self)
        quit_action.setShortcut(QKeySequence("Ctrl+Q"))
        quit_action.triggered.connect(self.close)
        self.addAction(quit_action)

        self._aot_action = QAction("Always on Top", self)
        self._aot_action.setCheckable(True)
        self._aot_action.setChecked(self._settings.always_on_top)
        self._aot_action.setShortcut(QKeySequence("Ctrl+Shift+T"))
        self._aot_action.triggered.connect(self._toggle_always_on_top)
        self.addAction(self._aot_action)

        self._sound_action = QAction("Sound Effects", self)
        self._sound_action.setCheckable(True)
        self._sound_action.setChecked(self._settings.sound_enabled)
        self._sound_action.setShortcut(QKeySequence("Ctrl+Shift+S"))
        self._sound_action.triggered.connect(self._toggle_sound)
        self.addAction(self._sound_action)

    # ══════════════════════════════════════════════════════════════════
    #  ENGINE EVENTS
    # ══════════════════════════════════════════════════════════════════

    def _play_sound(self, name: str) -> None:
        self._sounds.play(name)

    def _on_phase_changed(self, phase: TimerPhase) -> None:
        if phase == TimerPhase.RUNNING:
            self._play_sound("timer_start")

    def _on_timer_finished(self) -> None:
        engine = self.sender()
        logger.info("%s finished", getattr(engine, "label", "timer"))
        self._play_sound("timer_done")

    def _on_bmr_result(self, result: float | None) -> None:
        self._play_sound("click")

    # ══════════════════════════════════════════════════════════════════
    #  FOCUS
    # ══════════════════════════════════════════════════════════════════

    def clear_input_focus(self) -> None:
        """Drop keyboard focus from whichever text field holds it."""
        focused = self.focusWidget()
        if focused is not None and focused is not self:
            focused.clearFocus()
        self.setFocus()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE (geometry, always-on-top, sound)
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        save_settings(self._settings)

    def _schedule_geometry_save(self) -> None:
        if hasattr(self, "_geometry_save_timer"):
            self._geometry_save_timer.start()

    def _toggle_sound(self) -> None:
        self._settings.sound_enabled = not self._settings.sound_enabled
        save_settings(self._settings)
        self._sound_action.setChecked(self._settings.sound_enabled)
        self._sounds.apply_settings(self._settings)

    def _toggle_always_on_top(self) -> None:
        new_val = not self._settings.always_on_top
        self._settings.always_on_top = new_val
        save_settings(self._settings)
        self._aot_action.setChecked(new_val)
        self._apply_always_on_top(new_val)

    def _apply_always_on_top(self, on_top: bool) -> None:
        flags = self.windowFlags()
        if on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        was_visible = self.isVisible()
        self.setWindowFlags(flags)
        if was_visible:
            self.show()  # setWindowFlags hides the window

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._save_geometry()
        for engine in self.timers:
            engine.reset()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        """A click on empty space dismisses text-field focus."""
        self.clear_input_focus()
        super().mousePressEvent(event)

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Escape:
            self.clear_input_focus()
            event.accept()
            return
        super().keyPressEvent(event)
