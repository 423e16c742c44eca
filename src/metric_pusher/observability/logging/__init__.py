"""Observability – structured logging setup."""
from metric_pusher.observability.logging.factory import JsonLoggerFactory
from metric_pusher.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
