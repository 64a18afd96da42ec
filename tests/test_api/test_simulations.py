"""
API integration tests for /simulations endpoints.

Each test submits the classic three-job example through the API first.
"""

import pytest


async def _submit_sample_jobs(client):
    for page_count, priority in [(10, 2), (5, 1), (20, 3)]:
        response = await client.post(
            "/jobs/", json={"page_count": page_count, "priority": priority}
        )
        assert response.status_code == 201


@pytest.mark.asyncio
async def test_run_fcfs(client):
    await _submit_sample_jobs(client)

    response = await client.get("/simulations/fcfs")
    assert response.status_code == 200
    data = response.json()
    assert data["policy"] == "fcfs"
    assert data["display_name"] == "First-Come, First-Served (FCFS)"
    assert [m["job_id"] for m in data["jobs"]] == [1, 2, 3]
    assert [m["wait_time"] for m in data["jobs"]] == [0, 10, 15]
    assert [m["turnaround_time"] for m in data["jobs"]] == [10, 15, 35]
    assert data["average_wait_time"] == pytest.approx(8.333, abs=1e-3)
    assert data["average_turnaround_time"] == pytest.approx(20.0)
    assert data["total_pages"] == 35


@pytest.mark.asyncio
async def test_run_sjf(client):
    await _submit_sample_jobs(client)

    data = (await client.get("/simulations/sjf")).json()
    assert [m["job_id"] for m in data["jobs"]] == [2, 1, 3]
    assert data["average_wait_time"] == pytest.approx(6.667, abs=1e-3)
    assert data["average_turnaround_time"] == pytest.approx(18.333, abs=1e-3)


@pytest.mark.asyncio
async def test_simulation_does_not_reorder_queue(client):
    await _submit_sample_jobs(client)
    before = (await client.get("/jobs/")).json()

    await client.get("/simulations/priority")
    await client.get("/simulations/")

    assert (await client.get("/jobs/")).json() == before


@pytest.mark.asyncio
async def test_compare_all_policies(client):
    await _submit_sample_jobs(client)

    response = await client.get("/simulations/")
    assert response.status_code == 200
    data = response.json()
    assert [r["policy"] for r in data] == ["fcfs", "sjf", "priority"]


@pytest.mark.asyncio
async def test_simulation_on_empty_queue(client):
    """An empty queue is a conflict, not a crash. No partial report."""
    response = await client.get("/simulations/sjf")
    assert response.status_code == 409
    assert "empty" in response.json()["detail"]

    response = await client.get("/simulations/")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_unknown_policy(client):
    response = await client.get("/simulations/round_robin")
    assert response.status_code == 422
