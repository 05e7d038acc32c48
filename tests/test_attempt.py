# tests/test_attempt.py
from scoring import score_attempt, trace_attempt


def test_clean_run(triangle):
    attempt = trace_attempt(triangle, ["A", "B", "C"], "A", "C")
    assert attempt.anim_path == ["A", "B", "C"]
    assert attempt.reached_goal
    assert attempt.issue == ""
    assert not attempt.crashed


def test_empty_path(triangle):
    attempt = trace_attempt(triangle, [], "A", "C")
    assert attempt.anim_path == ["A"]
    assert attempt.issue == "Invalid path: return at least one node."


def test_wrong_start(triangle):
    attempt = trace_attempt(triangle, ["B", "C"], "A", "C")
    assert attempt.anim_path == ["A"]
    assert attempt.issue == "Path must start at A."


def test_unknown_node_stops_the_car(triangle):
    attempt = trace_attempt(triangle, ["A", "B", "Q", "C"], "A", "C")
    assert attempt.anim_path == ["A", "B"]
    assert attempt.issue == 'Node "Q" does not exist in this map.'


def test_missing_road_stops_the_car(chain):
    attempt = trace_attempt(chain, ["A", "C"], "A", "C")
    assert attempt.anim_path == ["A"]
    assert attempt.issue == "Invalid move: A -> C is not a road."


def test_short_of_goal(chain):
    attempt = trace_attempt(chain, ["A", "B"], "A", "C")
    assert not attempt.reached_goal
    assert attempt.issue == "Car did not reach the finish (C)."


def test_crash_into_traffic(chain):
    attempt = trace_attempt(chain, ["A", "B", "C"], "A", "C", traffic_cars=["B"])
    assert attempt.crashed
    assert attempt.crash_node_id == "B"
    assert attempt.to_dict()["crashNodeId"] == "B"


def test_crash_zeroes_the_score(chain):
    run = {"path": ["A", "B", "C"], "visitedNodes": ["A", "B", "C"]}
    clean = score_attempt(chain, run, "A", "C")
    assert clean.score.total_score == 100

    crashed = score_attempt(chain, run, "A", "C", traffic_cars=["B"])
    assert crashed.attempt.crashed
    assert crashed.score.valid
    assert crashed.score.total_score == 0
    assert crashed.to_dict()["optimal"]["path"] == ["A", "B", "C"]


def test_unhashable_hop_is_an_unknown_node(chain):
    attempt = trace_attempt(chain, ["A", ["B"], "C"], "A", "C")
    assert attempt.anim_path == ["A"]
    assert attempt.issue == "Node \"['B']\" does not exist in this map."

    report = score_attempt(chain, {"path": ["A", {"id": "B"}], "visitedNodes": [["A"]]}, "A", "C")
    assert not report.score.valid
    assert report.attempt.issue.startswith('Node "{')
