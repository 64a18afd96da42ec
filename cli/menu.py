"""
Interactive print spooler menu.

Usage:
    python -m cli.menu                   # queue capacity from settings (MAX_JOBS)
    python -m cli.menu --max-jobs 10     # smaller queue for demos

    --- Print Job Spooler Simulation ---
    1. Add Print Job
    2. Display Current Queue (Unsorted)
    3. Run FCFS Simulation
    4. Run SJF Simulation
    5. Run Priority Simulation
    6. Exit

All reading and writing goes through the `read` and `write` callables
passed to SpoolerMenu (input/print by default), so tests can drive the
whole loop with a list of canned answers.
"""

import argparse
import logging
from typing import Callable

from config.settings import settings
from models.enums import SchedulingPolicy
from models.job import PrintJob
from models.report import SimulationReport
from scheduler.engine import SchedulerEngine
from spool.errors import SpoolerError
from spool.repository import JobRepository

logger = logging.getLogger(__name__)

MENU = """
--- Print Job Spooler Simulation ---
1. Add Print Job
2. Display Current Queue (Unsorted)
3. Run FCFS Simulation
4. Run SJF Simulation
5. Run Priority Simulation
6. Exit
--------------------------------------"""

_SIMULATION_CHOICES = {
    3: SchedulingPolicy.FCFS,
    4: SchedulingPolicy.SJF,
    5: SchedulingPolicy.PRIORITY,
}
_EXIT_CHOICE = 6


def format_queue(jobs: tuple[PrintJob, ...]) -> list[str]:
    lines = [
        "",
        "--- Current Print Queue (FCFS Order) ---",
        "Job ID | Page Count | Priority",
        "-" * 34,
    ]
    for job in jobs:
        lines.append(f"{job.job_id:<6} | {job.page_count:<10} | {job.priority:<8}")
    return lines


def format_report(report: SimulationReport) -> list[str]:
    lines = [
        "",
        f"--- Simulation Results: {SchedulingPolicy(report.policy).display_name} ---",
        "Job ID | Pages | Priority | Wait Time | Turnaround Time",
        "-" * 58,
    ]
    for m in report.jobs:
        lines.append(
            f"{m.job_id:<6} | {m.page_count:<5} | {m.priority:<8} | "
            f"{m.wait_time:<9} | {m.turnaround_time:<15}"
        )
    lines.append("-" * 58)
    lines.append(f"Average Waiting Time:     {report.average_wait_time:.2f}")
    lines.append(f"Average Turnaround Time:  {report.average_turnaround_time:.2f}")
    return lines


class SpoolerMenu:

    def __init__(
        self,
        repository: JobRepository,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self._repository = repository
        self._engine = SchedulerEngine(repository)
        self._read = read
        self._write = write

    def run(self) -> None:
        """Show the menu until the user picks Exit (or input runs out)."""
        while True:
            self._write(MENU)
            try:
                raw = self._read("Enter your choice: ")
            except EOFError:
                break

            try:
                choice = int(raw.strip())
            except ValueError:
                self._write("Invalid input. Please enter a number.")
                continue

            if choice == _EXIT_CHOICE:
                break
            self.handle(choice)

        self._write("Exiting simulation. Goodbye!")

    def handle(self, choice: int) -> None:
        if choice == 1:
            self.add_job()
        elif choice == 2:
            self.display_queue()
        elif choice in _SIMULATION_CHOICES:
            self.run_simulation(_SIMULATION_CHOICES[choice])
        else:
            self._write("Invalid choice. Please try again.")

    def request_job_spec(self) -> tuple[int, int]:
        """
        Prompt for page count and priority.

        Raises:
            ValueError: either answer is not an integer.
        """
        page_count = int(self._read("  Enter Page Count (e.g., 50): ").strip())
        priority = int(
            self._read("  Enter Priority (1=Faculty, 2=Student, 3=Guest): ").strip()
        )
        return page_count, priority

    def add_job(self) -> None:
        # check capacity before prompting so a full queue doesn't ask for input
        if len(self._repository) >= self._repository.max_jobs:
            self._write("Error: Print queue is full. Cannot add more jobs.")
            return

        try:
            page_count, priority = self.request_job_spec()
        except ValueError:
            self._write("Error: Page count and priority must be whole numbers.")
            return
        except EOFError:
            # input ran out mid-prompt; drop the add, run() sees EOF next
            self._write("Add cancelled.")
            return

        try:
            job = self._repository.add_job(page_count, priority)
        except SpoolerError as e:
            self._write(f"Error: {e}")
            return

        self._write(
            f"  Success: Added Job {job.job_id} "
            f"({job.page_count} pages, priority {job.priority})."
        )

    def display_queue(self) -> None:
        jobs = self._repository.list_jobs()
        if not jobs:
            self._write("The print queue is currently empty.")
            return
        for line in format_queue(jobs):
            self._write(line)

    def run_simulation(self, policy: SchedulingPolicy) -> None:
        try:
            report = self._engine.run(policy)
        except SpoolerError as e:
            self._write(str(e))
            return
        for line in format_report(report):
            self._write(line)


def main():
    parser = argparse.ArgumentParser(description="Print Job Spooler Simulation")
    parser.add_argument(
        "--max-jobs", type=int, default=settings.MAX_JOBS,
        help=f"Print queue capacity (default: {settings.MAX_JOBS})",
    )
    parser.add_argument(
        "--log-level", type=str, default=settings.LOG_LEVEL,
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    repository = JobRepository(max_jobs=args.max_jobs)
    logger.debug(f"Starting menu with capacity {repository.max_jobs}")
    SpoolerMenu(repository).run()


if __name__ == "__main__":
    main()
