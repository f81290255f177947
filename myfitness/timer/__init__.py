"""Timer package."""

from .engine import (
    TimerEngine,
    TimerPhase,
    TICK_INTERVAL_MS,
    OVERALL_TIMER_LABEL,
    HIGH_INTENSITY_TIMER_LABEL,
    format_remaining,
    parse_duration_field,
    split_seconds,
)

__all__ = [
    "TimerEngine",
    "TimerPhase",
    "TICK_INTERVAL_MS",
    "OVERALL_TIMER_LABEL",
    "HIGH_INTENSITY_TIMER_LABEL",
    "format_remaining",
    "parse_duration_field",
    "split_seconds",
]
