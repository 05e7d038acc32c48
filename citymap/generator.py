"""
generator.py — City Map Generator
=================================
Builds a Scene for one round of the trainer.

Each attempt runs the same pipeline:

    1. pick a layout template for the difficulty tier
    2. add a few optional roads           (degree / diagonal / crossing / scenery rules)
    3. lane jitter                         (shared-x / shared-y groups move together)
    4. road costs                          (BFS backbone cheap, everything else dearer)
    5. validate                            (connected, dead-end goal, readable geometry)
    6. run the correct algorithm           (must drive start → goal)
    7. pick the distractor                 (valid path that differs the most)
    8. reject if the distractor's path is identical to the correct one

An attempt that fails any check is thrown away and the loop samples
again.  After MAX_ATTEMPTS the generator stops trying and returns the
bare template (no optional roads, no jitter, default costs) with
whatever distractor it gets.  generate() never raises for a map that
"didn't work out".

All randomness comes from the injected `random.Random`, so a seeded
generator produces the same Scene every time.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

from graph import Graph
from algorithms import (
    list_algorithms,
    normalize_algorithm,
    normalize_difficulty,
    solve_by_algorithm,
    SearchResult,
)
from algorithms.bfs import bfs
from scoring.evaluator import check_correctness
from citymap import geometry
from citymap.profiles import DEFAULT_COST_RANGE, DifficultyProfile, get_profile
from citymap.scene import Scene, SceneMeta
from citymap.templates import CANVAS_HEIGHT, CANVAS_WIDTH, LayoutTemplate, templates_for


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Tuning constants
# ---------------------------------------------------------------------------
MAX_ATTEMPTS           = 80
LANE_JITTER            = 15          # px per jitter step
JITTER_STEPS           = 2           # lanes move by k * LANE_JITTER, k in [-2, 2]
SIDE_MARGIN            = 100         # px kept clear at the left and right canvas edges
ROAD_TOP               = 200         # roads stay below the top scenery strip
ROAD_BOTTOM_GAP        = 160         # and above the bottom one
SAFE_BOX               = (SIDE_MARGIN, ROAD_TOP, CANVAS_WIDTH - SIDE_MARGIN, CANVAS_HEIGHT - ROAD_BOTTOM_GAP)
MAX_DEGREE             = 4
MAX_DIAGONALS          = 2
MAX_DIAGONALS_PER_NODE = 1
HOUSE_MARGIN           = 10
TREE_CLEARANCE         = 28
MIN_DISTRACTOR_SCORE   = 1


# ---------------------------------------------------------------------------
# Path comparison
# ---------------------------------------------------------------------------
def path_difference(a: Sequence[str], b: Sequence[str]) -> int:
    """Length gap plus the number of positions where the two routes disagree."""
    mismatches = sum(1 for x, y in zip(a, b) if x != y)
    return abs(len(a) - len(b)) + mismatches


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def _segment(graph: Graph, a: str, b: str):
    na, nb = graph.nodes[a], graph.nodes[b]
    return (na.x, na.y), (nb.x, nb.y)


def _diagonal_counts(graph: Graph) -> Tuple[int, Dict[str, int]]:
    total = 0
    per_node: Dict[str, int] = {}
    for edge in graph.open_edges():
        p, q = _segment(graph, edge.source, edge.target)
        if geometry.is_diagonal(p, q):
            total += 1
            per_node[edge.source] = per_node.get(edge.source, 0) + 1
            per_node[edge.target] = per_node.get(edge.target, 0) + 1
    return total, per_node


def _crosses_any(graph: Graph, a: str, b: str) -> bool:
    p1, p2 = _segment(graph, a, b)
    for edge in graph.open_edges():
        if edge.touches(a) or edge.touches(b):
            continue
        q1, q2 = _segment(graph, edge.source, edge.target)
        if geometry.segments_cross(p1, p2, q1, q2):
            return True
    return False


def _road_hits_scenery(p: geometry.Point, q: geometry.Point, houses, trees) -> bool:
    for house in houses:
        if geometry.segment_hits_rect(p, q, geometry.expand_rect(house, HOUSE_MARGIN)):
            return True
    for tree in trees:
        if geometry.point_segment_distance(tree, p, q) < TREE_CLEARANCE:
            return True
    return False


def reachable_from(graph: Graph, start_id: str) -> set:
    seen = {start_id}
    frontier = [start_id]
    while frontier:
        node = frontier.pop()
        for nbr, _edge in graph.neighbours(node):
            if nbr not in seen:
                seen.add(nbr)
                frontier.append(nbr)
    return seen


def structure_violations(graph: Graph, start_id: str, goal_id: str) -> List[str]:
    problems = []
    if start_id not in graph.nodes or goal_id not in graph.nodes:
        return ["start or goal missing"]

    unreached = set(graph.nodes) - reachable_from(graph, start_id)
    if unreached:
        problems.append(f"unreachable: {sorted(unreached)}")

    if graph.degree(goal_id) != 1:
        problems.append(f"goal {goal_id} has degree {graph.degree(goal_id)}")
    if graph.degree(start_id) < 1:
        problems.append(f"start {start_id} is isolated")
    for nid in graph.nodes:
        if nid in (start_id, goal_id):
            continue
        if graph.degree(nid) < 2:
            problems.append(f"interior {nid} is a dead end")
    return problems


def geometry_violations(graph: Graph) -> List[str]:
    problems = []
    for nid in graph.nodes:
        if graph.degree(nid) > MAX_DEGREE:
            problems.append(f"{nid} has degree {graph.degree(nid)}")

    total, per_node = _diagonal_counts(graph)
    if total > MAX_DIAGONALS:
        problems.append(f"{total} diagonal roads")
    for nid, count in per_node.items():
        if count > MAX_DIAGONALS_PER_NODE:
            problems.append(f"{nid} has {count} diagonal roads")

    edges = graph.open_edges()
    for i, e1 in enumerate(edges):
        for e2 in edges[i + 1:]:
            if e2.touches(e1.source) or e2.touches(e1.target):
                continue
            p1, p2 = _segment(graph, e1.source, e1.target)
            q1, q2 = _segment(graph, e2.source, e2.target)
            if geometry.segments_cross(p1, p2, q1, q2):
                problems.append(f"{e1.source}-{e1.target} crosses {e2.source}-{e2.target}")
    return problems


def scenery_violations(graph: Graph, houses, trees) -> List[str]:
    problems = []
    for edge in graph.open_edges():
        p, q = _segment(graph, edge.source, edge.target)
        if _road_hits_scenery(p, q, houses, trees):
            problems.append(f"{edge.source}-{edge.target} runs into scenery")
    return problems


def validate_graph(graph: Graph, template: LayoutTemplate) -> List[str]:
    """Every reason this candidate is unusable; empty means it passes."""
    return (
        structure_violations(graph, template.start, template.goal)
        + geometry_violations(graph)
        + scenery_violations(graph, template.houses, template.trees)
    )


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
class CityMapGenerator:
    """
    Attributes:
        rng          : Source of every random choice.
        max_attempts : Sampling budget before the bare-template fallback.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = MAX_ATTEMPTS):
        self.rng          = rng or random.Random()
        self.max_attempts = max_attempts

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def generate(self, correct_algorithm: str = "bfs", difficulty: str = "medium") -> Scene:
        correct    = normalize_algorithm(correct_algorithm) or "bfs"
        difficulty = normalize_difficulty(difficulty) or "medium"
        profile    = get_profile(difficulty)

        for attempt in range(1, self.max_attempts + 1):
            template = self.pick_template(difficulty)
            graph    = template.build()
            self.add_optional_roads(graph, template, profile)
            self.jitter_lanes(graph)
            self.assign_costs(graph, template, profile.main_cost, profile.alt_cost)

            problems = validate_graph(graph, template)
            if problems:
                logger.debug("attempt %d (%s) rejected: %s", attempt, template.name, "; ".join(problems))
                continue

            correct_result = solve_by_algorithm(correct, graph, template.start, template.goal)
            if not check_correctness(graph, correct_result.path, template.start, template.goal):
                logger.debug("attempt %d (%s) rejected: %s found no route", attempt, template.name, correct)
                continue

            distractor, distractor_result, score = self.choose_distractor(
                graph, template, correct, correct_result.path
            )
            if score < MIN_DISTRACTOR_SCORE:
                logger.debug("attempt %d (%s) rejected: %s matches %s", attempt, template.name, distractor, correct)
                continue

            logger.debug("attempt %d accepted: template=%s distractor=%s score=%d",
                          attempt, template.name, distractor, score)
            return self._assemble(
                graph, template, profile, correct, correct_result,
                distractor, distractor_result, score, generated=True, attempts=attempt,
            )

        return self._fallback(correct, difficulty, profile)

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------
    def pick_template(self, difficulty: str) -> LayoutTemplate:
        return self.rng.choice(templates_for(difficulty))

    def can_add_road(self, graph: Graph, template: LayoutTemplate, a: str, b: str) -> bool:
        if a == b or graph.get_edge_between(a, b) is not None:
            return False
        if graph.degree(a) >= MAX_DEGREE or graph.degree(b) >= MAX_DEGREE:
            return False

        p, q = _segment(graph, a, b)
        if geometry.is_diagonal(p, q):
            total, per_node = _diagonal_counts(graph)
            if total >= MAX_DIAGONALS:
                return False
            if per_node.get(a, 0) >= MAX_DIAGONALS_PER_NODE or per_node.get(b, 0) >= MAX_DIAGONALS_PER_NODE:
                return False

        if _crosses_any(graph, a, b):
            return False
        return not _road_hits_scenery(p, q, template.houses, template.trees)

    def add_optional_roads(self, graph: Graph, template: LayoutTemplate, profile: DifficultyProfile) -> int:
        wanted = self.rng.randint(*profile.optional_edges)
        candidates = list(template.optional_roads)
        self.rng.shuffle(candidates)

        added = 0
        for a, b in candidates:
            if added >= wanted:
                break
            if self.can_add_road(graph, template, a, b):
                graph.create_edge(a, b)
                added += 1
        return added

    def jitter_lanes(self, graph: Graph) -> None:
        nodes = list(graph.nodes.values())
        x_shift = {x: self._lane_offset() for x in sorted({n.x for n in nodes})}
        y_shift = {y: self._lane_offset() for y in sorted({n.y for n in nodes})}

        min_x, min_y, max_x, max_y = SAFE_BOX
        for node in nodes:
            x = node.x + x_shift[node.x]
            y = node.y + y_shift[node.y]
            node.x = min(max_x, max(min_x, x))
            node.y = min(max_y, max(min_y, y))

    def _lane_offset(self) -> int:
        return self.rng.randint(-JITTER_STEPS, JITTER_STEPS) * LANE_JITTER

    def assign_costs(
        self,
        graph: Graph,
        template: LayoutTemplate,
        main_range: Tuple[int, int],
        alt_range: Tuple[int, int],
    ) -> None:
        canonical = bfs(graph, template.start, template.goal).path
        backbone = {frozenset(pair) for pair in zip(canonical, canonical[1:])}
        for edge in graph.edges:
            band = main_range if edge.key() in backbone else alt_range
            edge.cost = self.rng.randint(*band)

    def choose_distractor(
        self,
        graph: Graph,
        template: LayoutTemplate,
        correct: str,
        correct_path: List[str],
    ) -> Tuple[str, SearchResult, int]:
        others = [info for info in list_algorithms() if info.key != correct]

        best: Optional[Tuple[str, SearchResult, int]] = None
        for info in others:
            result = info.fn(graph, template.start, template.goal)
            if not check_correctness(graph, result.path, template.start, template.goal):
                continue
            score = path_difference(correct_path, result.path)
            if best is None or score > best[2]:
                best = (info.key, result, score)

        if best is not None:
            return best

        info = self.rng.choice(others)
        result = info.fn(graph, template.start, template.goal)
        return info.key, result, path_difference(correct_path, result.path)

    def place_traffic(
        self,
        graph: Graph,
        template: LayoutTemplate,
        correct_path: List[str],
        distractor_path: List[str],
        count: int,
    ) -> List[str]:
        off_limits = set(correct_path) | {template.start, template.goal}

        cars: List[str] = []
        for nid in distractor_path:
            if len(cars) >= count:
                break
            if nid not in off_limits and nid not in cars:
                cars.append(nid)

        pool = [nid for nid in graph.nodes if nid not in off_limits and nid not in cars]
        extra = min(count - len(cars), len(pool))
        if extra > 0:
            cars.extend(self.rng.sample(pool, extra))
        return cars

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def _fallback(self, correct: str, difficulty: str, profile: DifficultyProfile) -> Scene:
        template = templates_for(difficulty)[0]
        logger.warning(
            "no valid %s map for %s after %d attempts; using bare template %s",
            difficulty, correct, self.max_attempts, template.name,
        )
        graph = template.build()
        self.assign_costs(graph, template, DEFAULT_COST_RANGE, DEFAULT_COST_RANGE)

        correct_result = solve_by_algorithm(correct, graph, template.start, template.goal)
        distractor, distractor_result, score = self.choose_distractor(
            graph, template, correct, correct_result.path
        )
        return self._assemble(
            graph, template, profile, correct, correct_result,
            distractor, distractor_result, score, generated=False, attempts=self.max_attempts,
        )

    def _assemble(
        self,
        graph: Graph,
        template: LayoutTemplate,
        profile: DifficultyProfile,
        correct: str,
        correct_result: SearchResult,
        distractor: str,
        distractor_result: SearchResult,
        score: int,
        generated: bool,
        attempts: int,
    ) -> Scene:
        traffic = self.place_traffic(
            graph, template, correct_result.path, distractor_result.path, profile.traffic_count
        )
        meta = SceneMeta(
            correct_algorithm=correct,
            distractor_algorithm=distractor,
            difficulty=profile.name,
            template=template.name,
            distractor_path_score=score,
            generated=generated,
            attempts=attempts,
        )
        return Scene(
            graph=graph,
            start_id=template.start,
            goal_id=template.goal,
            meta=meta,
            obstacles=[],
            traffic_cars=traffic,
            houses=list(template.houses),
            trees=list(template.trees),
        )


def generate_city_map(
    correct_algorithm: str = "bfs",
    difficulty: str = "medium",
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Scene:
    """Functional entry point.  Pass `rng` or `seed` for a reproducible map."""
    if rng is None and seed is not None:
        rng = random.Random(seed)
    return CityMapGenerator(rng=rng).generate(correct_algorithm=correct_algorithm, difficulty=difficulty)
