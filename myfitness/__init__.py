"""MyFitness: workout countdown timers and a BMR calculator."""

__version__ = "0.1.0"
