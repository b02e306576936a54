"""Uniform spatial hash for neighbour lookups."""

from __future__ import annotations

import math
from collections import defaultdict

from evosim.agent import Agent

Cell = tuple[int, int]


class SpatialGrid:
    """Buckets agents into square cells so nearby agents can be found quickly."""

    def __init__(self, cell_size: float) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.cell_size = cell_size
        self._cells: defaultdict[Cell, list[Agent]] = defaultdict(list)

    def clear(self) -> None:
        self._cells.clear()

    def insert(self, agent: Agent) -> None:
        """Add an agent to the cell that holds its current position."""
        self._cells[self.cell_of(agent.x, agent.y)].append(agent)

    def query_nearby(self, x: float, y: float) -> list[Agent]:
        """Return the agents in the cell containing (x, y) and its eight neighbours."""
        cx, cy = self.cell_of(x, y)
        nearby: list[Agent] = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                bucket = self._cells.get((cx + dx, cy + dy))
                if bucket:
                    nearby.extend(bucket)
        return nearby

    def cell_of(self, x: float, y: float) -> Cell:
        return math.floor(x / self.cell_size), math.floor(y / self.cell_size)