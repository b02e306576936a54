"""Interactive window running the evolution simulation."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence

from evosim.agent import Agent, AgentType
from evosim.performance import PerformanceMonitor, get_time_seconds
from evosim.simulation import simulate_step

BACKGROUND = (25, 25, 25)
TEXT_COLOR = (230, 230, 230)


def create_agents(count: int, rng: random.Random) -> list[Agent]:
    """Create ``count`` agents, alternating carnivore and vegetarian, at random spots."""
    return [
        Agent(
            AgentType.CARNIVORE if i % 2 == 0 else AgentType.VEGETARIAN,
            rng.random() * 2 - 1,
            rng.random() * 2 - 1,
            1.0,
        )
        for i in range(count)
    ]


def count_carnivores(agents: Iterable[Agent]) -> int:
    return sum(1 for agent in agents if agent.type is AgentType.CARNIVORE)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="evosim", description="Evolution simulation")
    parser.add_argument("--agents", type=_positive_int, default=2000)
    parser.add_argument("--width", type=_positive_int, default=1920)
    parser.add_argument("--height", type=_positive_int, default=1080)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--frames", type=_positive_int, default=None, help="stop after this many frames"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    import pygame

    from evosim.renderer import Renderer

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Evolution Simulation")
        font = pygame.font.Font(None, 24)
        clock = pygame.time.Clock()
        renderer = Renderer(screen)
        monitor = PerformanceMonitor()
        rng = random.Random(args.seed)
        agents = create_agents(args.agents, rng)

        frame = 0
        last_time = get_time_seconds()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            now = get_time_seconds()
            dt = now - last_time
            last_time = now

            simulate_step(dt, agents, rng)
            carnivores = count_carnivores(agents)

            screen.fill(BACKGROUND)
            renderer.render_agents(agents)

            fps = 1.0 / dt if dt > 0 else 0.0
            lines = [
                f"FPS: {fps:.1f}",
                f"CPU: {monitor.cpu_usage_percent():.1f}%",
                f"RAM: {monitor.ram_usage_mb():.1f} MB",
                f"Carnivores: {carnivores}",
                f"Vegetarians: {len(agents) - carnivores}",
            ]
            for row, line in enumerate(lines):
                screen.blit(font.render(line, True, TEXT_COLOR), (10, 10 + row * 22))

            pygame.display.flip()
            clock.tick(60)

            frame += 1
            if args.frames is not None and frame >= args.frames:
                running = False
    finally:
        pygame.quit()
    return 0