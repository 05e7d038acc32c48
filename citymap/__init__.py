"""
citymap/
--------
Procedural city maps for the trainer.

    from citymap import generate_city_map
    scene = generate_city_map("dijkstra", "hard", seed=7)
"""

from citymap.profiles  import PROFILES, DifficultyProfile, get_profile
from citymap.templates import TEMPLATES, LayoutTemplate, templates_for
from citymap.scene     import Scene, SceneMeta
from citymap.generator import (
    CityMapGenerator,
    generate_city_map,
    path_difference,
    validate_graph,
)

__all__ = [
    "PROFILES",
    "DifficultyProfile",
    "get_profile",
    "TEMPLATES",
    "LayoutTemplate",
    "templates_for",
    "Scene",
    "SceneMeta",
    "CityMapGenerator",
    "generate_city_map",
    "path_difference",
    "validate_graph",
]
