"""Tests for the presentation layer.

Covers:
- TimerWidget field/clock visibility and button text across phases
- BMRWidget radio selection and result line
- MyFitnessApp wiring: two labelled timers, one calculator, sounds,
  focus clearing and the always-on-top toggle
"""

from __future__ import annotations

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtTest import QTest

from myfitness.app import MyFitnessApp, make_app_icon
from myfitness.bmr.calculator import Gender
from myfitness.settings import Settings, load_settings
from myfitness.timer.engine import (
    TimerPhase,
    OVERALL_TIMER_LABEL, HIGH_INTENSITY_TIMER_LABEL,
)
from myfitness.ui.bmr_widget import BMRWidget
from myfitness.ui.timer_widget import TimerWidget

from helpers import run_ticks


class FakeSounds:
    """Records play() calls instead of touching QtMultimedia."""

    def __init__(self):
        self.played: list[str] = []
        self.volume = None
        self.enabled = None

    def play(self, name: str) -> None:
        self.played.append(name)

    def set_volume(self, level: int) -> None:
        self.volume = level

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def apply_settings(self, settings: Settings) -> None:
        self.set_enabled(settings.sound_enabled)
        self.set_volume(settings.sound_volume)


# ═══════════════════════════════════════════════════════════════════════
#  TIMER WIDGET
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestTimerWidget:

    def test_idle_shows_fields(self, engine):
        w = TimerWidget(engine)
        assert not w._fields_row.isHidden()
        assert w._clock.isHidden()
        assert w.toggle_text() == "Start"

    def test_typing_updates_engine(self, engine):
        w = TimerWidget(engine)
        w._minutes_input.textEdited.emit("2")
        w._seconds_input.textEdited.emit("5")
        assert engine.duration_seconds == 125

    def test_start_button_shows_clock(self, engine):
        w = TimerWidget(engine)
        engine.set_duration("", "2", "5")
        w._toggle_btn.click()
        assert engine.phase == TimerPhase.RUNNING
        assert w._fields_row.isHidden()
        assert not w._clock.isHidden()
        assert w.clock_text() == "2:05"
        assert w.toggle_text() == "Stop"

    def test_clock_follows_ticks(self, engine):
        w = TimerWidget(engine)
        engine.set_duration("1", "0", "2")
        engine.start()
        assert w.clock_text() == "1:00:02"
        run_ticks(engine, 2)
        assert w.clock_text() == "1:00:00"
        engine._on_tick()
        assert w.clock_text() == "59:59"

    def test_stop_button_pauses(self, engine):
        w = TimerWidget(engine)
        engine.set_duration("", "", "45")
        w._toggle_btn.click()
        w._toggle_btn.click()
        assert engine.phase == TimerPhase.PAUSED
        assert w.toggle_text() == "Start"
        assert w.clock_text() == "45"

    def test_zero_start_keeps_fields(self, engine):
        w = TimerWidget(engine)
        w._toggle_btn.click()
        assert engine.phase == TimerPhase.IDLE
        assert not w._fields_row.isHidden()

    def test_reset_clears_fields(self, engine):
        w = TimerWidget(engine)
        w._hours_input.setText("1")
        w._hours_input.textEdited.emit("1")
        engine.start()
        w._reset_btn.click()
        assert engine.phase == TimerPhase.IDLE
        assert w._hours_input.text() == ""
        assert not w._fields_row.isHidden()

    def test_completion_returns_to_fields(self, engine):
        w = TimerWidget(engine)
        engine.set_duration("", "", "1")
        engine.start()
        engine._on_tick()
        assert not w._fields_row.isHidden()
        assert w._seconds_input.text() == ""
        assert w.toggle_text() == "Start"


# ═══════════════════════════════════════════════════════════════════════
#  BMR WIDGET
# ═══════════════════════════════════════════════════════════════════════


@pytest.mark.usefixtures("qapp")
class TestBMRWidget:

    def test_result_hidden_initially(self, calculator):
        w = BMRWidget(calculator)
        assert w.result_text() is None

    def test_radio_sets_gender(self, calculator):
        w = BMRWidget(calculator)
        w._gender_buttons[Gender.FEMALE.value].setChecked(True)
        assert calculator.gender == "Female"
        w._gender_buttons[Gender.MALE.value].setChecked(True)
        assert calculator.gender == "Male"

    def test_calculate_shows_result(self, calculator):
        w = BMRWidget(calculator)
        w._weight_input.textEdited.emit("70")
        w._height_input.textEdited.emit("175")
        w._age_input.textEdited.emit("25")
        w._gender_buttons["Male"].setChecked(True)
        w._calc_btn.click()
        assert w.result_text() == "Your BMR: 1724 calories/day"

    def test_invalid_input_hides_result(self, calculator):
        w = BMRWidget(calculator)
        calculator.weight_text = "70"
        calculator.height_text = "175"
        calculator.age_text = "25"
        calculator.gender = "Male"
        w._calc_btn.click()
        assert w.result_text() is not None

        w._age_input.textEdited.emit("")
        w._calc_btn.click()
        assert w.result_text() is None

    def test_fields_follow_calculator(self, calculator):
        w = BMRWidget(calculator)
        calculator.weight_text = "82.5"
        calculator.height_text = "180"
        calculator.age_text = "41"
        calculator.gender = "Female"
        assert w._weight_input.text() == "82.5"
        assert w._height_input.text() == "180"
        assert w._age_input.text() == "41"
        assert w._gender_buttons["Female"].isChecked()
        assert not w._gender_buttons["Male"].isChecked()

    def test_clearing_gender_unchecks_radios(self, calculator):
        w = BMRWidget(calculator)
        w._gender_buttons["Male"].setChecked(True)
        calculator.gender = ""
        assert w._gender_group.checkedButton() is None
        assert calculator.gender == ""

    def test_widget_built_on_filled_calculator(self, calculator):
        calculator.age_text = "30"
        calculator.gender = "Male"
        w = BMRWidget(calculator)
        assert w._age_input.text() == "30"
        assert w._gender_buttons["Male"].isChecked()


# ═══════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ═══════════════════════════════════════════════════════════════════════


@pytest.fixture
def window(qapp, quiet_settings):
    sounds = FakeSounds()
    win = MyFitnessApp(quiet_settings, sound_manager=sounds)
    yield win, sounds
    win.close()


class TestMainWindow:

    def test_two_labelled_timers(self, window):
        win, _ = window
        labels = [engine.label for engine in win.timers]
        assert labels == [OVERALL_TIMER_LABEL, HIGH_INTENSITY_TIMER_LABEL]
        assert labels == ["Overall Workout Timer", "High Intensity Timer"]

    def test_timers_are_independent(self, window):
        win, _ = window
        overall, interval = win.timers
        overall.set_duration("", "1", "")
        overall.start()
        assert interval.phase == TimerPhase.IDLE
        assert overall.phase == TimerPhase.RUNNING

    def test_settings_applied_to_sounds(self, window):
        _, sounds = window
        assert sounds.volume == 70
        assert sounds.enabled is False

    def test_start_and_finish_play_sounds(self, window):
        win, sounds = window
        overall, _ = win.timers
        overall.set_duration("", "", "1")
        overall.start()
        overall._on_tick()
        assert sounds.played == ["timer_start", "timer_done"]

    def test_calculate_plays_click(self, window):
        win, sounds = window
        win.bmr_calculator.calculate()
        assert sounds.played == ["click"]

    def test_close_stops_timers(self, window):
        win, _ = window
        overall, _ = win.timers
        overall.set_duration("", "", "30")
        overall.start()
        win.closeEvent(QCloseEvent())
        assert overall.phase == TimerPhase.IDLE
        assert overall.is_scheduled is False

    @staticmethod
    def _focus_hours_field(win: MyFitnessApp):
        win.show()
        QTest.qWaitForWindowExposed(win)
        win.activateWindow()
        QTest.qWaitForWindowActive(win)
        field = win._overall_widget._hours_input
        field.setFocus()
        assert win.focusWidget() is field
        return field

    def test_escape_clears_field_focus(self, window):
        win, _ = window
        field = self._focus_hours_field(win)
        QTest.keyClick(win, Qt.Key.Key_Escape)
        assert win.focusWidget() is not field
        assert not field.hasFocus()

    def test_click_outside_fields_clears_focus(self, window):
        win, _ = window
        field = self._focus_hours_field(win)
        QTest.mouseClick(win._overall_widget._title, Qt.MouseButton.LeftButton)
        assert win.focusWidget() is not field
        assert not field.hasFocus()

    def test_clear_input_focus_without_focus(self, window):
        win, _ = window
        win.clear_input_focus()
        assert not win._overall_widget._hours_input.hasFocus()

    def test_always_on_top_toggle_persists(self, window):
        win, _ = window
        win._toggle_always_on_top()
        assert win.windowFlags() & Qt.WindowType.WindowStaysOnTopHint
        assert load_settings().always_on_top is True
        win._toggle_always_on_top()
        assert not (win.windowFlags() & Qt.WindowType.WindowStaysOnTopHint)

    def test_sound_toggle_applies_and_persists(self, window):
        win, sounds = window
        win._sound_action.trigger()
        assert sounds.enabled is True
        assert win._sound_action.isChecked()
        assert load_settings().sound_enabled is True
        win._sound_action.trigger()
        assert sounds.enabled is False
        assert load_settings().sound_enabled is False

    def test_disabled_sound_writes_nothing(self, qapp, isolated_settings):
        win = MyFitnessApp(Settings(sound_enabled=False))
        assert win._sounds.enabled is False
        overall, _ = win.timers
        overall.set_duration("", "", "1")
        overall.start()
        overall._on_tick()
        win.bmr_calculator.calculate()
        assert win._sounds.loaded_sounds == ()
        assert not (isolated_settings / "sounds").exists()
        win.close()


def test_app_icon_size(qapp):
    pix = make_app_icon(64)
    assert pix.width() == 64
    assert pix.height() == 64
