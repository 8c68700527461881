"""Conway's Game of Life on a bounded, row-major board."""

from __future__ import annotations

import random
from enum import Enum


class CellState(Enum):
    """State of one board cell."""

    ALIVE = "alive"
    DEAD = "dead"


def random_board(width: int, height: int, rng: random.Random) -> list[CellState]:
    """A width x height board where each cell is alive with probability 1/5."""
    if width < 0 or height < 0:
        raise ValueError("board dimensions must not be negative")
    return [
        CellState.ALIVE if rng.randrange(0, 5) == 0 else CellState.DEAD
        for _ in range(width * height)
    ]


def _live_neighbours(cells: list[CellState], width: int, height: int, x: int, y: int) -> int:
    return sum(
        1
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
        if (dx or dy)
        and 0 <= x + dx < width
        and 0 <= y + dy < height
        and cells[(y + dy) * width + x + dx] is CellState.ALIVE
    )


def _next_state(current: CellState, neighbours: int) -> CellState:
    if current is CellState.ALIVE:
        if neighbours < 2 or neighbours > 3:
            return CellState.DEAD
        return CellState.ALIVE
    if neighbours == 3:
        return CellState.ALIVE
    return current


def next_generation(cells: list[CellState], width: int, height: int) -> list[CellState]:
    """The board one generation later; cells beyond the edges count as dead."""
    if len(cells) != width * height:
        raise ValueError(
            f"board of {len(cells)} cells does not match {width}x{height}"
        )
    return [
        _next_state(cells[y * width + x], _live_neighbours(cells, width, height, x, y))
        for y in range(height)
        for x in range(width)
    ]