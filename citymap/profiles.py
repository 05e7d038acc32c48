"""
profiles.py — Difficulty Profiles
=================================
Tuning knobs per difficulty tier, kept in one place.

Backbone roads (the BFS route) are always the cheaper band.  From
medium upwards the bands overlap, so a weighted search can find a
cheaper detour than the fewest-roads route.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class DifficultyProfile:
    name:           str
    main_cost:      Tuple[int, int]     # backbone road cost, inclusive
    alt_cost:       Tuple[int, int]     # every other road, inclusive
    optional_edges: Tuple[int, int]     # how many optional roads to try to add
    traffic_count:  int                 # traffic cars to place


PROFILES: Dict[str, DifficultyProfile] = {
    "easy":   DifficultyProfile("easy",   main_cost=(1, 2), alt_cost=(3, 5), optional_edges=(0, 1), traffic_count=1),
    "medium": DifficultyProfile("medium", main_cost=(1, 3), alt_cost=(2, 4), optional_edges=(1, 2), traffic_count=2),
    "hard":   DifficultyProfile("hard",   main_cost=(2, 4), alt_cost=(2, 5), optional_edges=(2, 3), traffic_count=3),
}

# used by the bare-template fallback when sampling gives up
DEFAULT_COST_RANGE: Tuple[int, int] = (1, 3)


def get_profile(difficulty: str) -> DifficultyProfile:
    return PROFILES.get(difficulty, PROFILES["medium"])
