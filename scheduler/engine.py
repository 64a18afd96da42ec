"""
Scheduler Engine, the core orchestrator.

Every simulation follows the same path:

    1. Check the repository: are there any jobs?
       → If not, raise EmptyQueue (no partial report)
    2. Take a snapshot of the repository (arrival order)
    3. Ask the policy for a NEW ordered list built from that snapshot
    4. Walk the timeline over the ordered list → SimulationReport

      JobRepository           Ordering Policy            Timeline
    ┌──────────────┐       ┌──────────────────┐      ┌────────────┐
    │ arrival order│──────>│ FCFS/SJF/Priority│─────>│ simulate() │──> report
    │  (untouched) │  copy │  (new list)      │ order│            │
    └──────────────┘       └──────────────────┘      └────────────┘

The engine doesn't format anything. It only computes. The CLI menu and
the HTTP API decide how to show the report.
"""

import logging
from typing import Iterable, Optional, Union

from config.settings import settings
from models.enums import SchedulingPolicy
from models.report import SimulationReport
from scheduler.registry import create_policy
from scheduler.timeline import simulate
from spool.errors import EmptyQueue
from spool.repository import JobRepository

logger = logging.getLogger(__name__)


class SchedulerEngine:
    """
    Runs ordering policies against one shared JobRepository.

    The repository is read, never written: running any number of
    simulations leaves list_jobs() exactly as it was.
    """

    def __init__(self, repository: JobRepository):
        self._repository = repository

    @property
    def repository(self) -> JobRepository:
        return self._repository

    def run(
        self, policy: Optional[Union[SchedulingPolicy, str]] = None
    ) -> SimulationReport:
        """
        Simulate one policy over the current queue.

        With no policy, settings.DEFAULT_SCHEDULING_POLICY is used.

        Raises:
            EmptyQueue: the repository holds no jobs.
            ValueError: policy is not a known SchedulingPolicy.
        """
        if policy is None:
            policy = settings.DEFAULT_SCHEDULING_POLICY
        ordering = create_policy(policy)
        snapshot = self._repository.list_jobs()
        if not snapshot:
            raise EmptyQueue()

        ordered = ordering.order(snapshot)
        report = simulate(ordered, policy_name=ordering.policy_name)
        logger.debug(
            f"Simulated {ordering.policy_name} over {len(ordered)} jobs: "
            f"avg wait {report.average_wait_time:.2f}, "
            f"avg turnaround {report.average_turnaround_time:.2f}"
        )
        return report

    def compare(
        self, policies: Optional[Iterable[Union[SchedulingPolicy, str]]] = None
    ) -> list[SimulationReport]:
        """
        Run several policies over the SAME snapshot for a side-by-side view.

        Defaults to every SchedulingPolicy, in enum order.
        """
        if policies is None:
            policies = list(SchedulingPolicy)
        orderings = [create_policy(p) for p in policies]

        snapshot = self._repository.list_jobs()
        if not snapshot:
            raise EmptyQueue()

        reports = [
            simulate(ordering.order(snapshot), policy_name=ordering.policy_name)
            for ordering in orderings
        ]
        logger.info(
            f"Compared {len(reports)} policies over {len(snapshot)} jobs"
        )
        return reports
