"""Resilience – absolute deadlines."""
from metric_pusher.resilience.timeouts.deadline import Deadline

__all__ = ["Deadline"]
