"""BMR calculator card: three fields, gender radios, Calculate, result line."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit, QRadioButton, QButtonGroup,
)

from ..bmr.calculator import BMRCalculator, Gender


class BMRWidget(QWidget):
    """Renders a ``BMRCalculator`` and forwards input to it."""

    def __init__(
        self, calculator: BMRCalculator, parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._calc = calculator
        self._build_ui()
        self._connect_signals()
        self._refresh()
        self._on_result_changed(calculator.result)

    @property
    def calculator(self) -> BMRCalculator:
        return self._calc

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(0)

        title = QLabel("BMR Calculator", self)
        title.setObjectName("sectionTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        layout.addSpacing(16)

        fields_row = QHBoxLayout()
        fields_row.setSpacing(8)
        self._weight_input = QLineEdit(self)
        self._weight_input.setPlaceholderText("Weight (kg)")
        self._height_input = QLineEdit(self)
        self._height_input.setPlaceholderText("Height (cm)")
        self._age_input = QLineEdit(self)
        self._age_input.setPlaceholderText("Age")
        for field in (self._weight_input, self._height_input, self._age_input):
            field.setInputMethodHints(Qt.InputMethodHint.ImhFormattedNumbersOnly)
            fields_row.addWidget(field, 1)
        layout.addLayout(fields_row)

        layout.addSpacing(6)

        gender_row = QHBoxLayout()
        gender_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._gender_group = QButtonGroup(self)
        self._gender_buttons: dict[str, QRadioButton] = {}
        for gender in Gender:
            radio = QRadioButton(gender.value, self)
            self._gender_group.addButton(radio)
            self._gender_buttons[gender.value] = radio
            gender_row.addWidget(radio)
        layout.addLayout(gender_row)

        layout.addSpacing(6)

        self._calc_btn = QPushButton("Calculate", self)
        self._calc_btn.setObjectName("calculateButton")
        layout.addWidget(self._calc_btn)

        layout.addSpacing(16)

        self._result_label = QLabel("", self)
        self._result_label.setObjectName("resultLabel")
        self._result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._result_label)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._weight_input.textEdited.connect(self._on_weight_edited)
        self._height_input.textEdited.connect(self._on_height_edited)
        self._age_input.textEdited.connect(self._on_age_edited)
        for value, radio in self._gender_buttons.items():
            radio.toggled.connect(
                lambda checked, v=value: self._on_gender_toggled(v, checked)
            )
        self._calc_btn.clicked.connect(self._calc.calculate)
        self._calc.result_changed.connect(self._on_result_changed)
        self._calc.changed.connect(self._refresh)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_weight_edited(self, text: str) -> None:
        self._calc.weight_text = text

    def _on_height_edited(self, text: str) -> None:
        self._calc.height_text = text

    def _on_age_edited(self, text: str) -> None:
        self._calc.age_text = text

    def _on_gender_toggled(self, value: str, checked: bool) -> None:
        if checked:
            self._calc.gender = value

    def _on_result_changed(self, result: float | None) -> None:
        text = self._calc.result_text
        self._result_label.setText(text or "")
        self._result_label.setVisible(text is not None)

    def _refresh(self) -> None:
        """Mirror calculator fields that changed outside this widget."""
        for field, text in (
            (self._weight_input, self._calc.weight_text),
            (self._height_input, self._calc.height_text),
            (self._age_input, self._calc.age_text),
        ):
            if field.text() != text:
                field.setText(text)

        selected = self._gender_buttons.get(self._calc.gender)
        if selected is not None:
            if not selected.isChecked():
                selected.setChecked(True)
        elif self._gender_group.checkedButton() is not None:
            # an exclusive group refuses to uncheck its last button
            self._gender_group.setExclusive(False)
            for radio in self._gender_buttons.values():
                radio.setChecked(False)
            self._gender_group.setExclusive(True)

    # ── accessors ────────────────────────────────────────────────────────

    def result_text(self) -> str | None:
        if self._result_label.isHidden():
            return None
        return self._result_label.text()
