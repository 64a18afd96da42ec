"""
Seed script: submits a few sample print jobs and prints a policy comparison.

Usage:
    python -m scripts.seed_jobs
    python -m scripts.seed_jobs --base-url http://localhost:9000

This submits the classic three-job example:
- Job 1: 10 pages, priority 2 (student)
- Job 2:  5 pages, priority 1 (faculty)
- Job 3: 20 pages, priority 3 (guest)

and then asks the API to simulate every policy over them.

Run this after `uvicorn api.main:app` to populate the queue with demo data.
"""

import argparse

import httpx

BASE_URL = "http://localhost:8000"

SAMPLE_JOBS = [
    {"page_count": 10, "priority": 2},
    {"page_count": 5, "priority": 1},
    {"page_count": 20, "priority": 3},
]


def seed(base_url: str = BASE_URL) -> list[dict]:
    client = httpx.Client(base_url=base_url, timeout=10.0)

    print(f"Submitting {len(SAMPLE_JOBS)} jobs to {base_url}...\n")

    for job in SAMPLE_JOBS:
        resp = client.post("/jobs/", json=job)
        resp.raise_for_status()
        data = resp.json()
        print(
            f"  Added Job {data['job_id']} "
            f"({data['page_count']} pages, priority {data['priority']})"
        )

    resp = client.get("/simulations/")
    resp.raise_for_status()
    reports = resp.json()

    print("\n{:<35} {:>10} {:>12} {:>12}".format(
        "Policy", "Order", "Avg Wait", "Avg Turn."
    ))
    print("-" * 72)
    for r in reports:
        order = ",".join(str(m["job_id"]) for m in r["jobs"])
        print("{:<35} {:>10} {:>12.2f} {:>12.2f}".format(
            r["display_name"], order, r["average_wait_time"], r["average_turnaround_time"]
        ))
    return reports


def main():
    parser = argparse.ArgumentParser(description="Seed the print spooler with sample jobs")
    parser.add_argument(
        "--base-url", type=str, default=BASE_URL,
        help=f"API base URL (default: {BASE_URL})",
    )
    args = parser.parse_args()
    seed(args.base_url)


if __name__ == "__main__":
    main()
