"""Draws agents as points on a pygame surface."""

from __future__ import annotations

import math
from collections.abc import Iterable

import pygame

from evosim.agent import Agent, AgentType

_COLORS = {
    AgentType.CARNIVORE: (255, 0, 0),
    AgentType.VEGETARIAN: (0, 255, 0),
}
_FALLBACK_COLOR = (0, 0, 255)


def agent_color(agent_type: int) -> tuple[int, int, int]:
    """RGB colour for an agent type code; unknown codes are drawn blue."""
    try:
        return _COLORS[AgentType(agent_type)]
    except ValueError:
        return _FALLBACK_COLOR


class Renderer:
    """Maps world coordinates in [-1, 1] onto a surface and plots agents."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Pixel for a world position; world y grows upwards, screen y downwards."""
        width, height = self.surface.get_size()
        return math.floor((x + 1) / 2 * width), math.floor((1 - y) / 2 * height)

    def render_agents(self, agents: Iterable[Agent]) -> None:
        """Plot each agent as a single pixel; agents off the surface are skipped."""
        rect = self.surface.get_rect()
        for agent in agents:
            pos = self.to_screen(agent.x, agent.y)
            if rect.collidepoint(pos):
                self.surface.set_at(pos, agent_color(agent.type))