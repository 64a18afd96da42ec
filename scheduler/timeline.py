"""
Timeline simulator: turns an ordered run of jobs into metrics.

One printer, one clock. The clock is the moment the printer becomes free.
For each job, in the order given:

    wait        = clock               (everything before it must finish first)
    turnaround  = wait + page_count   (all jobs were submitted at time 0)
    clock      += page_count

         clock: 0          10     15                    35
    FCFS        |--job 1---|job 2-|-------job 3--------|
                wait=0     wait=10 wait=15

The simulator does not know which policy produced the order. FCFS, SJF
and Priority all feed it differently ordered copies of the same jobs.
"""

from typing import Sequence

from models.job import PrintJob
from models.report import JobMetrics, SimulationReport
from spool.errors import EmptyQueue


def simulate(ordered_jobs: Sequence[PrintJob], policy_name: str = "") -> SimulationReport:
    """
    Walk the printer clock over ordered_jobs and return the report.

    Raises:
        EmptyQueue: ordered_jobs has no jobs (there is nothing to average).
    """
    if not ordered_jobs:
        raise EmptyQueue()

    clock = 0
    total_wait = 0
    total_turnaround = 0
    metrics: list[JobMetrics] = []

    for job in ordered_jobs:
        wait_time = clock
        turnaround_time = wait_time + job.page_count

        metrics.append(JobMetrics(
            job_id=job.job_id,
            page_count=job.page_count,
            priority=job.priority,
            wait_time=wait_time,
            turnaround_time=turnaround_time,
        ))
        total_wait += wait_time
        total_turnaround += turnaround_time

        clock += job.page_count

    count = len(metrics)
    return SimulationReport(
        policy=policy_name,
        jobs=tuple(metrics),
        average_wait_time=float(total_wait) / count,
        average_turnaround_time=float(total_turnaround) / count,
    )
