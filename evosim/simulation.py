"""One step of the predator/prey world."""

from __future__ import annotations

import random

from evosim.agent import Agent, AgentType
from evosim.grid import SpatialGrid

INTERACTION_RADIUS = 0.05
STEP_ENERGY_COST = 0.2
MEAL_ENERGY = 0.25
BABY_ENERGY = 0.75
REPRODUCTION_THRESHOLD = 0.5
CARNIVORE_BIRTH_COST = 0.5
VEGETARIAN_BIRTH_DIVISOR = 1.5
BABY_SPREAD = 0.02


def simulate_step(dt: float, agents: list[Agent], rng: random.Random) -> float:
    """Advance the world by one step, updating ``agents`` in place.

    Agents wander with a random walk scaled by their energy, starve when their
    energy runs out, carnivores eat nearby vegetarians and agents of the same
    type that have enough energy reproduce. Returns ``dt``.
    """
    grid = SpatialGrid(INTERACTION_RADIUS)
    for agent in agents:
        grid.insert(agent)

    index_of = {id(agent): i for i, agent in enumerate(agents)}
    radius2 = INTERACTION_RADIUS * INTERACTION_RADIUS
    newborn: list[Agent] = []
    removed: set[int] = set()

    for i, agent in enumerate(agents):
        has_reproduced = False
        if agent.energy > 0.0:
            agent.x += (rng.random() * 2 - 1) * agent.energy / 10
            agent.y += (rng.random() * 2 - 1) * agent.energy / 10
            agent.energy -= STEP_ENERGY_COST

        if agent.energy <= 0.0:
            removed.add(i)
            continue

        for other in grid.query_nearby(agent.x, agent.y):
            if other is agent:
                continue
            dx = agent.x - other.x
            dy = agent.y - other.y
            if dx * dx + dy * dy > radius2:
                continue
            if agent.energy <= 0.0:
                removed.add(i)
                break

            if agent.type is AgentType.CARNIVORE and other.type is AgentType.VEGETARIAN:
                removed.add(index_of[id(other)])
                agent.energy += MEAL_ENERGY

            if agent.type is AgentType.CARNIVORE and has_reproduced:
                continue

            if agent.type is other.type and agent.energy > REPRODUCTION_THRESHOLD:
                newborn.append(
                    Agent(
                        agent.type,
                        agent.x + (rng.random() - 0.5) * BABY_SPREAD,
                        agent.y + (rng.random() - 0.5) * BABY_SPREAD,
                        BABY_ENERGY,
                    )
                )
                if agent.type is AgentType.CARNIVORE:
                    agent.energy -= CARNIVORE_BIRTH_COST
                    has_reproduced = True
                else:
                    agent.energy /= VEGETARIAN_BIRTH_DIVISOR

    agents[:] = [a for i, a in enumerate(agents) if i not in removed] + newborn
    return dt