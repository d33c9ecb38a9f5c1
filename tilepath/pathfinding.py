"""A* search on a 4-connected tile grid.

Every orthogonal step costs 1 and the heuristic is the Manhattan distance to
the end tile, which is admissible and consistent on this grid, so the first
time the end tile is finalised its path is cost-optimal.

Frontier selection picks the lowest ``cost_from_start + heuristic``; ties go
to the lowest tile index. The search never mutates the grid and keeps all of
its bookkeeping in a per-call :class:`SearchState`, so concurrent searches on
an unchanging grid do not interfere.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .errors import InvalidEndpointError, OutOfBoundsError, PathNotFoundError
from .grid import Coord, Grid

STEP_COST = 1


@dataclass(frozen=True)
class GridPath:
    """Ordered tile indices from start to end inclusive."""

    indices: Tuple[int, ...]
    cost: int
    expanded: int = 0

    def __len__(self) -> int:
        return len(self.indices)

    def __iter__(self):
        return iter(self.indices)

    @property
    def start(self) -> int:
        return self.indices[0]

    @property
    def end(self) -> int:
        return self.indices[-1]

    def coordinates(self, grid: Grid) -> List[Coord]:
        return [grid.from_index(index) for index in self.indices]


@dataclass
class SearchState:
    """Bookkeeping for a single search invocation."""

    # (f, index) entries; stale entries are skipped once their tile is closed
    frontier_heap: List[Tuple[int, int]] = field(default_factory=list)
    frontier: Set[int] = field(default_factory=set)
    cost_from_start: Dict[int, int] = field(default_factory=dict)
    came_from: Dict[int, int] = field(default_factory=dict)
    closed: List[int] = field(default_factory=list)
    closed_set: Set[int] = field(default_factory=set)

    def push(self, index: int, cost: int, estimate: int) -> None:
        self.cost_from_start[index] = cost
        self.frontier.add(index)
        heapq.heappush(self.frontier_heap, (cost + estimate, index))

    def pop_best(self) -> Optional[int]:
        while self.frontier_heap:
            _, index = heapq.heappop(self.frontier_heap)
            if index in self.closed_set:
                continue
            self.frontier.discard(index)
            self.closed.append(index)
            self.closed_set.add(index)
            return index
        return None


def manhattan_distance(grid: Grid, index_a: int, index_b: int) -> int:
    ax, ay = grid.from_index(index_a)
    bx, by = grid.from_index(index_b)
    return abs(ax - bx) + abs(ay - by)


def _check_endpoint(grid: Grid, index: int, label: str) -> None:
    try:
        blocked = grid.is_blocked(index)
    except OutOfBoundsError as exc:
        raise InvalidEndpointError(f"{label} tile {index} is out of bounds") from exc
    if blocked:
        raise InvalidEndpointError(f"{label} tile {index} is blocked")


def reconstruct_path(came_from: Dict[int, int], start_index: int, end_index: int) -> List[int]:
    """Follow predecessor links from end back to start; return start→end."""
    path = [end_index]
    current = end_index
    while current != start_index:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def expand_tile(grid: Grid, state: SearchState, current: int, end_index: int) -> None:
    """Discover or relax the open neighbours of the finalised tile ``current``.

    An unseen neighbour joins the frontier with ``current`` as predecessor. A
    frontier neighbour is relaxed only when the new cost is strictly lower.
    """
    candidate_cost = state.cost_from_start[current] + STEP_COST
    for neighbor in grid.neighbors(current):
        if neighbor in state.closed_set or grid.is_blocked(neighbor):
            continue
        if neighbor not in state.frontier:
            state.came_from[neighbor] = current
            state.push(neighbor, candidate_cost, manhattan_distance(grid, neighbor, end_index))
        elif state.cost_from_start[neighbor] > candidate_cost:
            # Equal costs keep the first predecessor
            state.came_from[neighbor] = current
            state.push(neighbor, candidate_cost, manhattan_distance(grid, neighbor, end_index))


def find_path(grid: Grid, start_index: int, end_index: int) -> Optional[GridPath]:
    """Return the cheapest path from ``start_index`` to ``end_index``.

    Returns ``None`` when the end tile is unreachable; that is an ordinary
    outcome on a partitioned grid, not an error.

    Raises:
        InvalidEndpointError: start or end is out of bounds or blocked.
        TypeError: start or end is not an int (``bool`` included), the same
            as every other grid accessor.
    """
    _check_endpoint(grid, start_index, "Start")
    _check_endpoint(grid, end_index, "End")

    state = SearchState()
    state.push(start_index, 0, manhattan_distance(grid, start_index, end_index))

    while True:
        current = state.pop_best()
        if current is None:
            return None
        if current == end_index:
            indices = reconstruct_path(state.came_from, start_index, end_index)
            return GridPath(
                indices=tuple(indices),
                cost=state.cost_from_start[end_index],
                expanded=len(state.closed),
            )

        expand_tile(grid, state, current, end_index)


def require_path(grid: Grid, start_index: int, end_index: int) -> GridPath:
    """Like :func:`find_path` but raise :class:`PathNotFoundError` when unreachable."""
    path = find_path(grid, start_index, end_index)
    if path is None:
        raise PathNotFoundError(start_index, end_index)
    return path
