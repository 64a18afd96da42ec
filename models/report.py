"""
Simulation output types.

A SimulationReport is produced fresh for every run and never stored:
- jobs: one JobMetrics per job, in the order the printer served them
- average_wait_time / average_turnaround_time: real-valued means

Formatting is the front end's job; these are plain data.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class JobMetrics:
    job_id: int
    page_count: int
    priority: int
    wait_time: int         # queueing delay before printing starts
    turnaround_time: int   # wait_time + page_count


@dataclass(frozen=True)
class SimulationReport:
    policy: str
    jobs: tuple[JobMetrics, ...]
    average_wait_time: float
    average_turnaround_time: float

    @property
    def total_pages(self) -> int:
        """Makespan: the moment the printer goes idle after the last job."""
        return sum(m.page_count for m in self.jobs)

    @property
    def order(self) -> list[int]:
        return [m.job_id for m in self.jobs]
