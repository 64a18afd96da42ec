"""
PrintJob: the value type every other layer passes around.

Key design decisions:
- frozen dataclass: a job never changes after the repository creates it,
  so policies can hand the same objects around in different orders
  without anyone being able to edit them
- job_id: sequential positive integer assigned by the repository, never reused
- page_count: the service duration ("burst time") in printer-page units
- priority: 1 = most urgent; larger numbers wait longer under Priority scheduling

Validation lives in the repository (spool/repository.py), which is the only
place jobs are created.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PrintJob:
    job_id: int
    page_count: int   # used by SJF
    priority: int     # used by Priority (lower number = higher priority)

    def __repr__(self) -> str:
        return f"<PrintJob {self.job_id} [{self.page_count}p] prio={self.priority}>"
