"""Tests for maze endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_mazes(client: AsyncClient):
    """Test GET /v1/maze lists registered mazes without grid data."""
    response = await client.get("/v1/maze")
    assert response.status_code == 200
    data = response.json()

    assert data["total"] == 3
    assert [m["slug"] for m in data["mazes"]] == ["loops", "sealed", "simple"]
    for maze in data["mazes"]:
        assert "rows" in maze
        assert "cols" in maze
        assert "grid_data" not in maze


@pytest.mark.asyncio
async def test_get_maze(client: AsyncClient):
    """Test GET /v1/maze/{slug} returns grid and markers."""
    response = await client.get("/v1/maze/simple")
    assert response.status_code == 200
    data = response.json()

    assert data["grid_data"] == "S..\n.#.\n..E"
    assert data["rows"] == 3
    assert data["cols"] == 3
    assert data["start"] == {"row": 0, "col": 0}
    assert data["exit"] == {"row": 2, "col": 2}


@pytest.mark.asyncio
async def test_get_unknown_maze(client: AsyncClient):
    response = await client.get("/v1/maze/nowhere")
    assert response.status_code == 404
    assert "Maze not found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_shortest_path(client: AsyncClient):
    """Test the BFS endpoint on the 3x3 example."""
    response = await client.get("/v1/maze/simple/shortest-path")
    assert response.status_code == 200
    data = response.json()

    assert data["steps"] == 4
    assert data["positions"] == [
        {"row": 0, "col": 0},
        {"row": 1, "col": 0},
        {"row": 2, "col": 0},
        {"row": 2, "col": 1},
        {"row": 2, "col": 2},
    ]
    assert data["grid_data"] == "S..\nb#.\nbbE"


@pytest.mark.asyncio
async def test_shortest_path_none(client: AsyncClient):
    response = await client.get("/v1/maze/sealed/shortest-path")
    assert response.status_code == 404
    assert response.json()["detail"] == "No path exists"


@pytest.mark.asyncio
async def test_possible_paths(client: AsyncClient):
    """Test the DFS endpoint returns the requested number of paths."""
    response = await client.get("/v1/maze/loops/paths", params={"count": 6, "seed": 11})
    assert response.status_code == 200
    data = response.json()

    assert data["total"] == 6
    assert 1 <= data["distinct"] <= 6
    for path in data["paths"]:
        assert path["steps"] == len(path["positions"]) - 1
        assert path["positions"][0] == {"row": 1, "col": 1}
        assert path["positions"][-1] == {"row": 5, "col": 8}
        assert "^" in path["grid_data"]


@pytest.mark.asyncio
async def test_possible_paths_seed_is_reproducible(client: AsyncClient):
    params = {"count": 3, "seed": 5}
    first = await client.get("/v1/maze/loops/paths", params=params)
    second = await client.get("/v1/maze/loops/paths", params=params)
    assert first.json() == second.json()


@pytest.mark.asyncio
async def test_possible_paths_capped(client: AsyncClient):
    """Test that count is bounded by max_paths_to_show."""
    response = await client.get("/v1/maze/loops/paths", params={"count": 500, "seed": 1})
    assert response.status_code == 200
    assert response.json()["total"] == 20


@pytest.mark.asyncio
async def test_possible_paths_invalid_count(client: AsyncClient):
    response = await client.get("/v1/maze/loops/paths", params={"count": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_possible_paths_none(client: AsyncClient):
    response = await client.get("/v1/maze/sealed/paths")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_validate_maze(client: AsyncClient):
    """Test POST /v1/maze/validate for valid and invalid text."""
    response = await client.post("/v1/maze/validate", json={"grid_data": "S.\n.E"})
    assert response.status_code == 200
    assert response.json() == {"valid": True, "error": None}

    response = await client.post("/v1/maze/validate", json={"grid_data": "#.#\n#."})
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert "same length" in data["error"]
