"""Application scheduler – Scheduler Protocol and JobExecutionContext."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from metric_pusher.application.scheduler.job import Job

__all__ = ["JobExecutedEvent", "JobExecutionContext", "Scheduler"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobExecutedEvent:
    """Event emitted after a job completes (successfully or not)."""

    job_id: str
    job_name: str
    started_at: datetime
    duration_ms: float
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class JobExecutionContext:
    """Run a job handler and capture execution details.

    Exceptions raised by the handler are recorded on the event and logged,
    never re-raised: one failed run must not stop the schedule.
    """

    job: Job
    events: list[JobExecutedEvent] = field(default_factory=list)

    def run(self) -> JobExecutedEvent:
        started_at = datetime.now(tz=timezone.utc)
        t0 = time.monotonic()
        error: str | None = None
        try:
            self.job.handler()
        except Exception as exc:  # noqa: BLE001
            error = str(exc)
            logger.warning("scheduler.job_failed id=%s exc=%r", self.job.id, exc)
        duration_ms = (time.monotonic() - t0) * 1000
        event = JobExecutedEvent(
            job_id=self.job.id,
            job_name=self.job.name,
            started_at=started_at,
            duration_ms=duration_ms,
            error=error,
        )
        self.events.append(event)
        return event


@runtime_checkable
class Scheduler(Protocol):
    """Port: manage and run periodic jobs."""

    def add_job(self, job: Job) -> None: ...
    def remove_job(self, job_id: str) -> None: ...
    def start(self) -> None: ...
    def stop(self) -> None: ...
    def list_jobs(self) -> list[Job]: ...

    @property
    def is_running(self) -> bool: ...
