"""
Abstract base class for all ordering policies (Strategy pattern).

The Strategy pattern lets you swap algorithms at runtime without changing
the code that uses them. The SchedulerEngine only knows about
AbstractOrderingPolicy: it calls order() without caring whether it's
FCFS, SJF or Priority.

Every policy is the same generic sort with a different key:
- sort_key(job) returns the tuple the job is ranked by
- order(jobs) returns a NEW list sorted by that key

The input is never touched. The repository's own list stays in arrival
order no matter how many simulations run against it.

To add a new ordering policy:
1. Create a new class that inherits AbstractOrderingPolicy
2. Implement sort_key and policy_name
3. Register it in scheduler/registry.py
"""

from abc import ABC, abstractmethod
from typing import Iterable

from models.job import PrintJob


class AbstractOrderingPolicy(ABC):
    """
    Interface that all ordering policies implement.

    2 members, that's the entire contract:
    - sort_key: the ranking tuple for one job (smallest runs first)
    - policy_name: the SchedulingPolicy value this class implements
    """

    def order(self, jobs: Iterable[PrintJob]) -> list[PrintJob]:
        """Return a new list of the jobs in the order the printer serves them."""
        return sorted(jobs, key=self.sort_key)

    @abstractmethod
    def sort_key(self, job: PrintJob) -> tuple:
        """
        Ranking tuple for a job.

        sorted() is stable, so jobs with equal keys keep their input order.
        SJF and Priority end the key in job_id so ties never depend on that.
        """
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this policy (e.g., 'fcfs', 'sjf')."""
        ...
