"""
main.py — City Route Trainer Flask App
======================================
JSON API that the browser renderer talks to.

Routes:
  GET  /api/algorithms         – registry cards
  POST /api/scene/generate     – generate a new city map
  GET  /api/scene              – current map (generates one if needed)
  POST /api/solve              – run one algorithm on the current map
  POST /api/score              – score a student's route on the current map

State management:
  The current Scene lives in the Flask session as its to_dict() form.
  Each request rebuilds it with Scene.from_dict; generating a new map
  replaces it wholesale.

Configuration:
  CITYMAP_DEFAULT_ALGORITHM / CITYMAP_DEFAULT_DIFFICULTY environment
  variables override the defaults below.
"""

from flask import Flask, request, jsonify, session
import logging
import secrets
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import list_algorithms, normalize_algorithm, solve_by_algorithm
from citymap import Scene, generate_city_map
from scoring import score_attempt


app = Flask(__name__)
app.secret_key = secrets.token_hex(32)
app.config.update(
    DEFAULT_ALGORITHM="bfs",
    DEFAULT_DIFFICULTY="medium",
)
app.config.from_prefixed_env("CITYMAP")


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def new_scene(algorithm=None, difficulty=None, seed=None) -> Scene:
    scene = generate_city_map(
        correct_algorithm=algorithm or app.config["DEFAULT_ALGORITHM"],
        difficulty=difficulty or app.config["DEFAULT_DIFFICULTY"],
        seed=seed,
    )
    app.logger.info(
        "new %s map (%s) for %s, distractor %s",
        scene.meta.difficulty, scene.meta.template,
        scene.meta.correct_algorithm, scene.meta.distractor_algorithm,
    )
    return scene


def get_scene(create: bool = True):
    """Deserialise the scene from session, or create a default one."""
    if "scene" not in session:
        if not create:
            return None
        save_scene(new_scene())
    return Scene.from_dict(session["scene"])


def save_scene(scene: Scene):
    session["scene"] = scene.to_dict()


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


# ---------------------------------------------------------------------------
# API: Scene
# ---------------------------------------------------------------------------
@app.route("/api/scene/generate", methods=["POST"])
def api_scene_generate():
    data = _json_body()

    seed = data.get("seed")
    if seed is not None:
        try:
            seed = int(seed)
        except (TypeError, ValueError, OverflowError):
            return jsonify({"error": f"Invalid seed: {seed!r}"}), 400

    scene = new_scene(data.get("algorithm"), data.get("difficulty"), seed)
    save_scene(scene)
    return jsonify(scene.to_dict())


@app.route("/api/scene", methods=["GET"])
def api_scene():
    return jsonify(get_scene().to_dict())


# ---------------------------------------------------------------------------
# API: Solve / Score
# ---------------------------------------------------------------------------
@app.route("/api/solve", methods=["POST"])
def api_solve():
    scene = get_scene(create=False)
    if scene is None:
        return jsonify({"error": "Generate a map first"}), 400

    data = _json_body()
    raw  = data.get("algorithm", "")
    name = normalize_algorithm(raw) or str(raw)

    try:
        result = solve_by_algorithm(name, scene.graph, scene.start_id, scene.goal_id)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"algorithm": name, **result.to_dict()})


@app.route("/api/score", methods=["POST"])
def api_score():
    scene = get_scene(create=False)
    if scene is None:
        return jsonify({"error": "Generate a map first"}), 400

    report = score_attempt(
        scene.graph,
        _json_body(),
        scene.start_id,
        scene.goal_id,
        traffic_cars=scene.traffic_cars,
    )
    return jsonify(report.to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 60)
    print("  City Route Trainer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
