"""
scene.py — Generated Scene
==========================
Everything one map generation produces.  The renderer draws it, the
scoring layer scores runs against it, and the web app keeps it in the
session between requests.

A Scene is never edited after generation: a new map means a new Scene.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from graph import Graph


@dataclass(frozen=True)
class SceneMeta:
    correct_algorithm:     str
    distractor_algorithm:  str
    difficulty:            str
    template:              str
    distractor_path_score: int
    generated:             bool     # False → sampling gave up, bare template used
    attempts:              int = 0

    def to_dict(self) -> dict:
        return {
            "correctAlgorithm":    self.correct_algorithm,
            "distractorAlgorithm": self.distractor_algorithm,
            "difficulty":          self.difficulty,
            "template":            self.template,
            "distractorPathScore": self.distractor_path_score,
            "generated":           self.generated,
            "attempts":            self.attempts,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SceneMeta":
        return cls(
            correct_algorithm=data["correctAlgorithm"],
            distractor_algorithm=data["distractorAlgorithm"],
            difficulty=data["difficulty"],
            template=data["template"],
            distractor_path_score=data.get("distractorPathScore", 0),
            generated=data.get("generated", True),
            attempts=data.get("attempts", 0),
        )


@dataclass(frozen=True)
class Scene:
    graph:        Graph
    start_id:     str
    goal_id:      str
    meta:         SceneMeta
    obstacles:    List[str]                               = field(default_factory=list)
    traffic_cars: List[str]                               = field(default_factory=list)
    houses:       List[Tuple[float, float, float, float]] = field(default_factory=list)
    trees:        List[Tuple[float, float]]               = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "graph":       self.graph.to_dict(),
            "startId":     self.start_id,
            "goalId":      self.goal_id,
            "obstacles":   list(self.obstacles),
            "trafficCars": list(self.traffic_cars),
            "houses":      [{"x": x, "y": y, "w": w, "h": h} for x, y, w, h in self.houses],
            "trees":       [{"x": x, "y": y} for x, y in self.trees],
            "meta":        self.meta.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Scene":
        return cls(
            graph=Graph.from_dict(data["graph"]),
            start_id=data["startId"],
            goal_id=data["goalId"],
            meta=SceneMeta.from_dict(data["meta"]),
            obstacles=list(data.get("obstacles", [])),
            traffic_cars=list(data.get("trafficCars", [])),
            houses=[(h["x"], h["y"], h["w"], h["h"]) for h in data.get("houses", [])],
            trees=[(t["x"], t["y"]) for t in data.get("trees", [])],
        )
