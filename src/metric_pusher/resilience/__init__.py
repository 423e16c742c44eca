"""Resilience – deadlines for bounded network I/O."""
from metric_pusher.resilience.timeouts import Deadline

__all__ = ["Deadline"]
