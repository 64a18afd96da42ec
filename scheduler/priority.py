"""
Priority ordering, non-preemptive.

Jobs with the lowest priority NUMBER print first (1 = highest priority).
Same generic sort as SJF, keyed on priority instead of page count.

Equal priorities always resolve to arrival order (ascending job_id).
That tiebreak is part of the policy, not an implementation detail.

When to use: when some users matter more than others.
Example: faculty (priority=1) before students (2) before guests (3).

Downside: same starvation problem as SJF. "Aging" would fix it by
bumping the priority of jobs that have waited a long time; it is not
implemented here.
"""

from models.job import PrintJob
from scheduler.base import AbstractOrderingPolicy


class PriorityPolicy(AbstractOrderingPolicy):

    def sort_key(self, job: PrintJob) -> tuple:
        return (job.priority, job.job_id)

    @property
    def policy_name(self) -> str:
        return "priority"
