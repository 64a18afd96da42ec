"""
Tests for the SchedulerEngine.

The engine ties repository → policy → timeline together. These tests use
the three-job example from conftest (10p/prio 2, 5p/prio 1, 20p/prio 3).
"""

import pytest

from models.enums import SchedulingPolicy
from scheduler.engine import SchedulerEngine
from spool.errors import EmptyQueue


def test_fcfs_report(sample_repository):
    report = SchedulerEngine(sample_repository).run(SchedulingPolicy.FCFS)

    assert report.order == [1, 2, 3]
    assert round(report.average_wait_time, 2) == 8.33
    assert round(report.average_turnaround_time, 2) == 20.00


def test_sjf_report(sample_repository):
    report = SchedulerEngine(sample_repository).run("sjf")

    assert report.order == [2, 1, 3]
    assert [m.wait_time for m in report.jobs] == [0, 5, 15]
    assert round(report.average_wait_time, 2) == 6.67
    assert round(report.average_turnaround_time, 2) == 18.33


def test_priority_report_matches_sjf_for_example(sample_repository):
    engine = SchedulerEngine(sample_repository)
    sjf = engine.run(SchedulingPolicy.SJF)
    priority = engine.run(SchedulingPolicy.PRIORITY)

    assert priority.policy == "priority"
    assert priority.jobs == sjf.jobs
    assert priority.average_wait_time == sjf.average_wait_time


def test_simulation_never_mutates_repository(sample_repository):
    before = sample_repository.list_jobs()
    engine = SchedulerEngine(sample_repository)

    for policy in SchedulingPolicy:
        engine.run(policy)

    assert sample_repository.list_jobs() == before
    assert sample_repository.next_job_id == 4


def test_same_policy_twice_gives_identical_reports(sample_repository):
    engine = SchedulerEngine(sample_repository)
    assert engine.run("priority") == engine.run("priority")


def test_empty_repository_raises(repository):
    with pytest.raises(EmptyQueue):
        SchedulerEngine(repository).run(SchedulingPolicy.FCFS)


def test_unknown_policy_raises(sample_repository):
    with pytest.raises(ValueError):
        SchedulerEngine(sample_repository).run("lottery")


def test_compare_runs_every_policy_in_order(sample_repository):
    reports = SchedulerEngine(sample_repository).compare()

    assert [r.policy for r in reports] == ["fcfs", "sjf", "priority"]
    assert reports[0].order == [1, 2, 3]
    assert reports[1].order == [2, 1, 3]


def test_compare_subset(sample_repository):
    reports = SchedulerEngine(sample_repository).compare(["priority"])
    assert [r.policy for r in reports] == ["priority"]


def test_compare_empty_repository_raises(repository):
    with pytest.raises(EmptyQueue):
        SchedulerEngine(repository).compare()


def test_later_jobs_show_up_in_next_run(sample_repository):
    engine = SchedulerEngine(sample_repository)
    first = engine.run("sjf")

    sample_repository.add_job(1, 9)
    second = engine.run("sjf")

    assert len(first.jobs) == 3
    assert second.order == [4, 2, 1, 3]


def test_run_without_policy_uses_configured_default(sample_repository, monkeypatch):
    from config.settings import settings

    monkeypatch.setattr(settings, "DEFAULT_SCHEDULING_POLICY", "sjf")
    report = SchedulerEngine(sample_repository).run()

    assert report.policy == "sjf"
    assert report.order == [2, 1, 3]
