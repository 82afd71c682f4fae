"""Pomodoro interval timer: interval scheduling and an in-memory repository."""

__version__ = "0.1.0"
__all__ = ["interval", "memory"]