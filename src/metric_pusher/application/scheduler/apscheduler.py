"""Application scheduler – APSchedulerAdapter (background thread)."""
from __future__ import annotations

import logging

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from metric_pusher.application.scheduler.job import Job
from metric_pusher.application.scheduler.scheduler import JobExecutionContext

__all__ = ["APSchedulerAdapter"]

logger = logging.getLogger(__name__)


class APSchedulerAdapter:
    """Scheduler backed by APScheduler's ``BackgroundScheduler``.

    Each enabled job gets an :class:`IntervalTrigger`; the first run happens
    one interval after :meth:`start`.  Runs are executed on the scheduler's
    thread pool, so a run that outlives its interval may overlap the next one
    up to ``Job.max_instances``.
    """

    def __init__(self, scheduler: BackgroundScheduler | None = None) -> None:
        self._jobs: dict[str, Job] = {}
        self._scheduler = scheduler or BackgroundScheduler(daemon=True)

    def add_job(self, job: Job) -> None:
        self._jobs[job.id] = job
        if self._scheduler.running and job.enabled:
            self._register_job(job)

    def remove_job(self, job_id: str) -> None:
        self._jobs.pop(job_id, None)
        try:
            self._scheduler.remove_job(job_id)
        except JobLookupError:
            pass

    def start(self) -> None:
        if self._scheduler.running:
            return
        for job in self._jobs.values():
            if job.enabled:
                self._register_job(job)
        self._scheduler.start()
        logger.debug("scheduler.started jobs=%d", len(self._jobs))

    def _register_job(self, job: Job) -> None:
        def _handler() -> None:
            JobExecutionContext(job=job).run()

        self._scheduler.add_job(
            _handler,
            trigger=IntervalTrigger(seconds=job.interval_seconds),
            id=job.id,
            name=job.name,
            max_instances=job.max_instances,
            coalesce=False,
            replace_existing=True,
        )

    def stop(self) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)

    def list_jobs(self) -> list[Job]:
        return list(self._jobs.values())

    @property
    def is_running(self) -> bool:
        return bool(self._scheduler.running)
