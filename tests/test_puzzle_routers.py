"""
HTTP tests for the puzzle API.
"""

import random

import pytest
from fastapi.testclient import TestClient

from trace_puzzle.core.dependencies import get_puzzle_services
from trace_puzzle.main import app
from trace_puzzle.services import PuzzleServices


@pytest.fixture
def client(test_settings):
    app.dependency_overrides[get_puzzle_services] = lambda: PuzzleServices(test_settings, rng=random.Random(8))
    yield TestClient(app)
    app.dependency_overrides.clear()


def point(x, y):
    return {"x": x, "y": y}


@pytest.fixture
def u_payload(u_puzzle):
    return u_puzzle.model_dump(mode="json")


def test_index_reports_grid_range(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["grid_size"]["min"] == 4
    assert body["grid_size"]["max"] == 12


def test_generate_returns_tagged_puzzle(client):
    response = client.post("/puzzles/generate", json={"grid_size": 4, "seed": 10})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] in ("unique", "best_effort")
    puzzle = body["puzzle"]
    assert puzzle["grid_size"] == 4
    assert len(puzzle["endpoints"]) == 2
    assert len(puzzle["edges"]) == len(puzzle["visited_cells"]) - 1
    assert set(puzzle["edges"][0]) == {"start", "end"}


def test_generate_is_reproducible_with_seed(client):
    first = client.post("/puzzles/generate", json={"grid_size": 5, "seed": 3}).json()
    second = client.post("/puzzles/generate", json={"grid_size": 5, "seed": 3}).json()
    assert first == second


@pytest.mark.parametrize("grid_size", [3, 13])
def test_generate_rejects_out_of_range_size(client, grid_size):
    response = client.post("/puzzles/generate", json={"grid_size": grid_size})
    assert response.status_code == 422


def test_verify(client, u_payload):
    response = client.post("/puzzles/verify", json=u_payload)
    assert response.status_code == 200
    assert response.json() == {"unique": True, "valid": True}


def test_verify_skips_enumeration_for_invalid_puzzle(client):
    # a solid block on an oversized board with no edges; enumerating it would not finish
    cells = [point(x, y) for y in range(8) for x in range(8)]
    payload = {"grid_size": 99, "endpoints": [point(0, 0), point(7, 7)], "visited_cells": cells, "edges": []}
    response = client.post("/puzzles/verify", json=payload)
    assert response.status_code == 200
    assert response.json() == {"unique": False, "valid": False}


def test_check_solution(client, u_payload):
    solved = client.post("/puzzles/check", json={"puzzle": u_payload, "drawn_lines": u_payload["edges"]})
    assert solved.json() == {"solved": True}

    empty = client.post("/puzzles/check", json={"puzzle": u_payload, "drawn_lines": []})
    assert empty.json() == {"solved": False}

    repeated = [u_payload["edges"][0]] * len(u_payload["edges"])
    response = client.post("/puzzles/check", json={"puzzle": u_payload, "drawn_lines": repeated})
    assert response.json() == {"solved": False}


def test_edge_with_identical_cells_is_rejected(client, u_payload):
    bad_line = {"start": point(0, 0), "end": point(0, 0)}
    response = client.post("/puzzles/check", json={"puzzle": u_payload, "drawn_lines": [bad_line]})
    assert response.status_code == 422


def test_add_and_remove_lines(client, u_payload):
    drag = [point(0, 0), point(0, 1), point(1, 1)]
    added = client.post("/puzzles/lines/add", json={"puzzle": u_payload, "cells": drag, "drawn_lines": []})
    assert added.status_code == 200
    lines = added.json()["drawn_lines"]
    assert len(lines) == 2

    # (1,0) is not on the puzzle path
    refused = client.post(
        "/puzzles/lines/add",
        json={"puzzle": u_payload, "cells": [point(0, 0), point(1, 0)], "drawn_lines": lines},
    )
    assert refused.json()["drawn_lines"] == lines

    removed = client.post("/puzzles/lines/remove", json={"cell": point(0, 1), "drawn_lines": lines})
    assert removed.json() == {"drawn_lines": []}
