"""
Shortest Job First (SJF) ordering, non-preemptive.

Jobs with the fewest pages print first. With every job arriving at
time 0 this minimizes average waiting time. It's provably optimal
for that metric.

Sort key: (page_count, job_id)
- page_count: the ranking (shortest first)
- job_id: tiebreaker. Two jobs of equal length print in arrival order,
  so the result never depends on how the sort treats equal keys

Downside: starvation. A 500-page job keeps getting pushed back while
short jobs are around.
"""

from models.job import PrintJob
from scheduler.base import AbstractOrderingPolicy


class SJFPolicy(AbstractOrderingPolicy):

    def sort_key(self, job: PrintJob) -> tuple:
        return (job.page_count, job.job_id)

    @property
    def policy_name(self) -> str:
        return "sjf"
