"""BMR package."""

from .calculator import (
    BMRCalculator,
    BMRInput,
    Gender,
    BMR_COEFFICIENTS,
    calculate_bmr,
    format_bmr,
    parse_real,
    parse_whole,
    round_half_up,
)

__all__ = [
    "BMRCalculator",
    "BMRInput",
    "Gender",
    "BMR_COEFFICIENTS",
    "calculate_bmr",
    "format_bmr",
    "parse_real",
    "parse_whole",
    "round_half_up",
]
