"""Agents that live in the simulated world."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class AgentType(IntEnum):
    """Diet of an agent; the values are the codes the renderer colours by."""

    CARNIVORE = 0
    VEGETARIAN = 1


@dataclass(eq=False)
class Agent:
    """A single creature in normalised world coordinates ([-1, 1] on both axes).

    Agents compare by identity, so two agents with the same fields are distinct.
    """

    type: AgentType
    x: float
    y: float
    energy: float = 1.0

    @property
    def is_carnivore(self) -> bool:
        return self.type is AgentType.CARNIVORE