"""Basal Metabolic Rate calculator.

Uses the revised Harris-Benedict equations (metric units)::

    Male:   88.36 + 13.4 × weight + 4.8 × height − 5.7 × age
    Female: 447.6 +  9.2 × weight + 3.1 × height − 4.3 × age

Weight is in kilograms, height in centimetres, age in whole years.
Missing or unparsable inputs give no result rather than an error, and
every Calculate press overwrites the previous result (a bad input set
clears a good earlier answer).
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal


logger = logging.getLogger(__name__)


class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"


# gender → (base, weight coeff, height coeff, age coeff)
BMR_COEFFICIENTS: dict[str, tuple[float, float, float, float]] = {
    Gender.MALE.value:   (88.36, 13.4, 4.8, 5.7),
    Gender.FEMALE.value: (447.6, 9.2, 3.1, 4.3),
}

_REAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_WHOLE_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class BMRInput:
    """One snapshot of the calculator fields, already parsed."""

    weight: float | None = None    # kg
    height: float | None = None    # cm
    age: int | None = None         # years
    gender: str | None = None      # "Male" | "Female"


def parse_real(text: str) -> float | None:
    """Parse a decimal number such as ``"72.5"``; ``None`` if it isn't one."""
    value = text.strip()
    if not _REAL_RE.fullmatch(value):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_whole(text: str) -> int | None:
    """Parse an integer such as ``"31"``; ``None`` if it isn't one.

    Unlike weight and height, spaces around the digits are not allowed.
    """
    if not _WHOLE_RE.fullmatch(text):
        return None
    return int(text)


def calculate_bmr(data: BMRInput) -> float | None:
    """Estimated kcal/day at rest, or ``None`` for an incomplete input set.

    No range checks are applied: a negative age still produces a number.
    """
    if data.weight is None or data.height is None or data.age is None:
        return None
    coeffs = BMR_COEFFICIENTS.get(data.gender) if data.gender else None
    if coeffs is None:
        return None
    base, per_kg, per_cm, per_year = coeffs
    return base + per_kg * data.weight + per_cm * data.height - per_year * data.age


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def format_bmr(value: float) -> str:
    return f"Your BMR: {round_half_up(value)} calories/day"


class BMRCalculator(QObject):
    """Holds the calculator's text fields and the last result.

    Signals
    -------
    result_changed(result: float | None)
        Emitted after every ``calculate()``, even if the result is unchanged.
    changed()
        Emitted after any mutation.
    """

    result_changed = pyqtSignal(object)
    changed = pyqtSignal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._weight_text: str = ""
        self._height_text: str = ""
        self._age_text: str = ""
        self._gender: str = ""
        self._result: float | None = None

    # ── fields ────────────────────────────────────────────────────────

    @property
    def weight_text(self) -> str:
        return self._weight_text

    @weight_text.setter
    def weight_text(self, value: str) -> None:
        self._weight_text = value
        self.changed.emit()

    @property
    def height_text(self) -> str:
        return self._height_text

    @height_text.setter
    def height_text(self, value: str) -> None:
        self._height_text = value
        self.changed.emit()

    @property
    def age_text(self) -> str:
        return self._age_text

    @age_text.setter
    def age_text(self, value: str) -> None:
        self._age_text = value
        self.changed.emit()

    @property
    def gender(self) -> str:
        return self._gender

    @gender.setter
    def gender(self, value: str) -> None:
        self._gender = value
        self.changed.emit()

    # ── result ────────────────────────────────────────────────────────

    @property
    def result(self) -> float | None:
        return self._result

    @property
    def result_text(self) -> str | None:
        if self._result is None:
            return None
        return format_bmr(self._result)

    def build_input(self) -> BMRInput:
        return BMRInput(
            weight=parse_real(self._weight_text),
            height=parse_real(self._height_text),
            age=parse_whole(self._age_text),
            gender=self._gender or None,
        )

    def calculate(self) -> float | None:
        """Recompute from the current fields, replacing any earlier result."""
        data = self.build_input()
        self._result = calculate_bmr(data)
        logger.debug("BMR for %s -> %s", data, self._result)
        self.result_changed.emit(self._result)
        self.changed.emit()
        return self._result
