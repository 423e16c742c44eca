"""Unit tests for periodic jobs, InMemoryScheduler and APSchedulerAdapter."""
from __future__ import annotations

import threading

import pytest

from metric_pusher.application.scheduler import (
    APSchedulerAdapter,
    InMemoryScheduler,
    Job,
    JobExecutedEvent,
    JobExecutionContext,
    Scheduler,
)


# ---------------------------------------------------------------------------
# Job
# ---------------------------------------------------------------------------
class TestJob:
    def test_defaults(self):
        job = Job(id="j1", name="Push", handler=lambda: None, interval_seconds=60)
        assert job.max_instances == 1
        assert job.enabled is True

    def test_requires_positive_interval(self):
        with pytest.raises(ValueError, match="interval_seconds"):
            Job(id="j", name="Bad", handler=lambda: None, interval_seconds=0)

    def test_requires_at_least_one_instance(self):
        with pytest.raises(ValueError, match="max_instances"):
            Job(id="j", name="Bad", handler=lambda: None, interval_seconds=1, max_instances=0)


# ---------------------------------------------------------------------------
# JobExecutionContext
# ---------------------------------------------------------------------------
class TestJobExecutionContext:
    def test_run_successful_handler(self):
        called = []
        job = Job(id="j1", name="Test", handler=lambda: called.append(True), interval_seconds=60)
        event = JobExecutionContext(job=job).run()
        assert called == [True]
        assert isinstance(event, JobExecutedEvent)
        assert event.job_id == "j1"
        assert event.success is True
        assert event.duration_ms >= 0

    def test_run_captures_exception(self, caplog):
        def handler():
            raise RuntimeError("boom")

        job = Job(id="j2", name="Fail", handler=handler, interval_seconds=10)
        event = JobExecutionContext(job=job).run()
        assert event.error == "boom"
        assert event.success is False
        assert "scheduler.job_failed id=j2" in caplog.text

    def test_run_accumulates_in_events_list(self):
        job = Job(id="j3", name="Loop", handler=lambda: None, interval_seconds=5)
        ctx = JobExecutionContext(job=job)
        ctx.run()
        ctx.run()
        assert len(ctx.events) == 2


# ---------------------------------------------------------------------------
# InMemoryScheduler
# ---------------------------------------------------------------------------
class TestInMemoryScheduler:
    def test_satisfies_protocol(self):
        assert isinstance(InMemoryScheduler(), Scheduler)

    def test_add_list_remove(self):
        s = InMemoryScheduler()
        s.add_job(Job(id="a", name="A", handler=lambda: None, interval_seconds=1))
        assert [j.id for j in s.list_jobs()] == ["a"]
        s.remove_job("a")
        s.remove_job("missing")
        assert s.list_jobs() == []

    def test_start_stop(self):
        s = InMemoryScheduler()
        assert not s.is_running
        s.start()
        assert s.is_running
        s.stop()
        assert not s.is_running

    def test_trigger_runs_and_logs(self):
        calls = []
        s = InMemoryScheduler()
        s.add_job(Job(id="a", name="A", handler=lambda: calls.append(1), interval_seconds=1))
        event = s.trigger("a")
        assert calls == [1]
        assert s.execution_log == [event]


# ---------------------------------------------------------------------------
# APSchedulerAdapter
# ---------------------------------------------------------------------------
class TestAPSchedulerAdapter:
    def test_satisfies_protocol(self):
        assert isinstance(APSchedulerAdapter(), Scheduler)

    def test_not_running_until_started(self):
        s = APSchedulerAdapter()
        s.add_job(Job(id="a", name="A", handler=lambda: None, interval_seconds=60))
        assert not s.is_running
        assert len(s.list_jobs()) == 1

    def test_fires_periodically_and_survives_failures(self):
        fired = threading.Event()
        runs = []

        def handler():
            runs.append(1)
            if len(runs) >= 2:
                fired.set()
            raise RuntimeError("every run fails")

        s = APSchedulerAdapter()
        s.add_job(Job(id="tick", name="Tick", handler=handler, interval_seconds=0.05))
        s.start()
        try:
            assert s.is_running
            assert fired.wait(5.0)
        finally:
            s.stop()
        assert len(runs) >= 2

    def test_remove_unknown_job_is_noop(self):
        s = APSchedulerAdapter()
        s.remove_job("missing")

    def test_disabled_job_never_fires(self):
        runs = []
        s = APSchedulerAdapter()
        s.add_job(
            Job(id="off", name="Off", handler=lambda: runs.append(1), interval_seconds=0.01, enabled=False)
        )
        s.start()
        try:
            threading.Event().wait(0.2)
        finally:
            s.stop()
        assert runs == []
