"""UI package."""

from .timer_widget import TimerWidget
from .bmr_widget import BMRWidget

__all__ = [
    "TimerWidget",
    "BMRWidget",
]
