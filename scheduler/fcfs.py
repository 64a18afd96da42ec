"""
First Come First Served (FCFS) ordering.

The simplest policy: jobs print in the order they arrived.
Every job gets the same (empty) sort key, and Python's sort is stable,
so the shared order() hands back a new list in input order. That is the
identity ordering, since the repository already stores arrival order.

When to use: when fairness matters more than efficiency.
Every job gets served in arrival order, so no job gets starved.

Downside: a long print job blocks everything behind it
(the "convoy effect"). This is the baseline SJF and Priority are
measured against.
"""

from models.job import PrintJob
from scheduler.base import AbstractOrderingPolicy


class FCFSPolicy(AbstractOrderingPolicy):

    def sort_key(self, job: PrintJob) -> tuple:
        return ()

    @property
    def policy_name(self) -> str:
        return "fcfs"
