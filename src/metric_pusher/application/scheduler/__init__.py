"""Application scheduler – periodic job ports, APScheduler adapter and in-memory fake."""
from metric_pusher.application.scheduler.apscheduler import APSchedulerAdapter
from metric_pusher.application.scheduler.in_memory import InMemoryScheduler
from metric_pusher.application.scheduler.job import Job
from metric_pusher.application.scheduler.scheduler import (
    JobExecutedEvent,
    JobExecutionContext,
    Scheduler,
)

__all__ = [
    "APSchedulerAdapter",
    "InMemoryScheduler",
    "Job",
    "JobExecutedEvent",
    "JobExecutionContext",
    "Scheduler",
]
