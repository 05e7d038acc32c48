# tests/test_app.py
import pytest

from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_list_algorithms(client):
    resp = client.get("/api/algorithms")
    assert resp.status_code == 200
    assert [a["key"] for a in resp.get_json()["algorithms"]] == \
        ["bfs", "dfs", "dijkstra", "astar", "bellmanFord"]


def test_solve_needs_a_scene(client):
    resp = client.post("/api/solve", json={"algorithm": "bfs"})
    assert resp.status_code == 400


def test_generate_then_solve_and_score(client):
    resp = client.post("/api/scene/generate", json={"algorithm": "dijkstra", "difficulty": "easy", "seed": 3})
    assert resp.status_code == 200
    scene = resp.get_json()
    assert scene["meta"]["correctAlgorithm"] == "dijkstra"
    assert scene["meta"]["difficulty"] == "easy"

    assert client.get("/api/scene").get_json() == scene

    solved = client.post("/api/solve", json={"algorithm": "Dijkstra"}).get_json()
    assert solved["algorithm"] == "dijkstra"
    assert solved["path"][0] == scene["startId"]
    assert solved["path"][-1] == scene["goalId"]

    report = client.post("/api/score", json=solved).get_json()
    assert report["score"]["valid"] is True
    assert report["attempt"]["reachedGoal"] is True
    assert set(report) == {"score", "attempt", "optimal"}


def test_unknown_algorithm_is_a_400(client):
    client.post("/api/scene/generate", json={"seed": 1})
    resp = client.post("/api/solve", json={"algorithm": "teleport"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Unknown algorithm: teleport"


def test_bad_seed_is_a_400(client):
    resp = client.post("/api/scene/generate", json={"seed": "abc"})
    assert resp.status_code == 400


def test_scene_defaults_from_config(client):
    scene = client.get("/api/scene").get_json()
    assert scene["meta"]["correctAlgorithm"] == app.config["DEFAULT_ALGORITHM"]
    assert scene["meta"]["difficulty"] == app.config["DEFAULT_DIFFICULTY"]


def test_non_finite_input_is_handled(client):
    client.post("/api/scene/generate", json={"seed": 2})

    resp = client.post("/api/score", data='{"path": ["A"], "stepsCount": NaN}',
                       content_type="application/json")
    assert resp.status_code == 200
    assert resp.get_json()["score"]["totalScore"] == 0

    resp = client.post("/api/scene/generate", data='{"seed": 1e400}', content_type="application/json")
    assert resp.status_code == 400


def test_non_object_body_is_ignored(client):
    resp = client.post("/api/scene/generate", json=[1, 2, 3])
    assert resp.status_code == 200
    assert resp.get_json()["meta"]["correctAlgorithm"] == app.config["DEFAULT_ALGORITHM"]

    resp = client.post("/api/solve", json=["bfs"])
    assert resp.status_code == 400

    resp = client.post("/api/solve", json={"algorithm": ["bfs"]})
    assert resp.status_code == 400
