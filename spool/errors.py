"""
Spooler error types.

All of these are recoverable: the caller catches them, tells the user,
and carries on. Nothing in the core prints or logs them. The CLI and
the HTTP API decide how to present each one.
"""


class SpoolerError(Exception):
    """Base class for every error the spooler core raises."""


class InvalidJobParameters(SpoolerError):
    """page_count or priority was not a positive integer. No job was added."""

    def __init__(self, page_count: int, priority: int):
        self.page_count = page_count
        self.priority = priority
        super().__init__("Page count and priority must be positive.")


class CapacityExceeded(SpoolerError):
    """The print queue already holds max_jobs jobs."""

    def __init__(self, max_jobs: int):
        self.max_jobs = max_jobs
        super().__init__(
            f"Print queue is full ({max_jobs} jobs). Cannot add more jobs."
        )


class EmptyQueue(SpoolerError):
    """A simulation was requested with no jobs to schedule."""

    def __init__(self):
        super().__init__("Cannot run simulation: the print queue is empty.")
