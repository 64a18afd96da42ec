"""
Policy factory: maps policy names to ordering policy classes.

This is the Factory pattern: instead of writing if/elif chains everywhere,
you have ONE place that knows how to create policies. The CLI menu, the
API and the engine's compare() all go through create_policy().
"""

from typing import Union

from models.enums import SchedulingPolicy
from scheduler.base import AbstractOrderingPolicy
from scheduler.fcfs import FCFSPolicy
from scheduler.sjf import SJFPolicy
from scheduler.priority import PriorityPolicy


_REGISTRY: dict[SchedulingPolicy, type[AbstractOrderingPolicy]] = {
    SchedulingPolicy.FCFS: FCFSPolicy,
    SchedulingPolicy.SJF: SJFPolicy,
    SchedulingPolicy.PRIORITY: PriorityPolicy,
}


def create_policy(policy: Union[SchedulingPolicy, str]) -> AbstractOrderingPolicy:
    """
    Create an ordering policy instance for the given policy.

    Accepts the enum or its string value:
        create_policy(SchedulingPolicy.SJF)
        create_policy("sjf")
    """
    try:
        key = SchedulingPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown scheduling policy: {policy}") from None

    return _REGISTRY[key]()
