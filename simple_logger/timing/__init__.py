"""Timing module - named elapsed-time measurements"""

from simple_logger.timing.timer_registry import TimerRegistry

__all__ = ["TimerRegistry"]
