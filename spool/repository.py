"""
Job repository: the canonical, unsorted print queue.

Jobs are kept in arrival order and the list is only ever appended to.
Schedulers never reorder it: they get a snapshot from list_jobs() and
build their own ordering from that.

Id assignment follows the spooler's rules:
- the counter starts at 1 and increments once per accepted job
- an id is reserved before the job is validated; if validation fails the
  reservation is rolled back, so the next good job gets that same id
- a full queue rejects the job before any id is reserved

One repository instance is built at startup and handed to whoever needs it
(the CLI menu, or the API via app.state). There is no module-level queue.
"""

import logging
import threading
from typing import Optional

from config.settings import settings
from models.job import PrintJob
from spool.errors import CapacityExceeded, InvalidJobParameters

logger = logging.getLogger(__name__)


class JobRepository:

    def __init__(self, max_jobs: Optional[int] = None):
        if max_jobs is None:
            max_jobs = settings.MAX_JOBS
        if max_jobs < 1:
            raise ValueError(f"max_jobs must be at least 1, got {max_jobs}")
        self._max_jobs = max_jobs
        self._jobs: list[PrintJob] = []
        self._next_job_id: int = 1
        # appends and snapshots never interleave
        self._lock = threading.Lock()

    @property
    def max_jobs(self) -> int:
        return self._max_jobs

    @property
    def next_job_id(self) -> int:
        """The id the next accepted job will receive."""
        return self._next_job_id

    def add_job(self, page_count: int, priority: int) -> PrintJob:
        """
        Append a new job to the end of the queue and return it.

        Raises:
            CapacityExceeded: the queue already holds max_jobs jobs.
            InvalidJobParameters: page_count or priority is not a positive int.
        """
        with self._lock:
            if len(self._jobs) >= self._max_jobs:
                raise CapacityExceeded(self._max_jobs)

            job_id = self._next_job_id
            self._next_job_id += 1

            if not (_is_positive_int(page_count) and _is_positive_int(priority)):
                self._next_job_id -= 1  # roll back the reserved id
                raise InvalidJobParameters(page_count, priority)

            job = PrintJob(job_id=job_id, page_count=page_count, priority=priority)
            self._jobs.append(job)

        logger.info(
            f"Added job {job.job_id} ({job.page_count} pages, priority {job.priority})"
        )
        return job

    def list_jobs(self) -> tuple[PrintJob, ...]:
        """Snapshot of every job in arrival order."""
        with self._lock:
            return tuple(self._jobs)

    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)


def _is_positive_int(value) -> bool:
    # bool is an int subclass; True is not a page count
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
