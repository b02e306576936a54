# evosim

A small evolution simulation: carnivores and vegetarians wander around a
square world, eat, reproduce and die, and a pygame window shows them as they
do.

## What happens in the world

The world spans from -1 to 1 on both axes. Every step, each agent that still
has energy takes a random step whose size grows with its energy, and the step
costs it 0.2 energy. An agent whose energy has run out dies.

Agents within a radius of 0.05 of each other interact:

- a carnivore next to a vegetarian eats it and gains 0.25 energy;
- an agent next to another of the same kind, with more than 0.5 energy,
  produces an offspring close by that starts with 0.75 energy. A carnivore
  reproduces at most once per step and pays 0.5 energy for it; a vegetarian's
  energy is divided by 1.5 instead.

Neighbours are found through a spatial grid, so each agent only looks at the
agents in its own cell and in the eight cells around it.

## Installing

```
pip install .
```

This also installs `pygame` for the window and `psutil` for the CPU and
memory figures.

## Running

```
evosim
```

This opens a 1920×1080 window with 2000 agents. Each agent is drawn as one
pixel: carnivores in red, vegetarians in green. A panel in the corner shows
the frame rate, the process's CPU and memory use and how many agents of each
kind are alive. Close the window to stop.

Options:

- `--agents N`: how many agents to start with (default 2000, alternating
  carnivore and vegetarian);
- `--width W`, `--height H`: window size in pixels (default 1920 and 1080);
- `--seed S`: seed for the random numbers, for repeatable runs;
- `--frames N`: stop by itself after this many frames.

## Using it from Python

The simulation can be run without a window:

```python
import random

from evosim.app import count_carnivores, create_agents
from evosim.simulation import simulate_step

rng = random.Random(42)
agents = create_agents(2000, rng)

for _ in range(10):
    simulate_step(1 / 60, agents, rng)

print(len(agents), "alive,", count_carnivores(agents), "carnivores")
```

`simulate_step(dt, agents, rng)` changes the list it is given in place: dead
and eaten agents are removed and newborn agents are added at the end. It
returns `dt`.

The building blocks:

- `evosim.agent.Agent`: a dataclass with `type`, `x`, `y` and `energy`;
  agents compare by identity. `AgentType` is `CARNIVORE` (0) or
  `VEGETARIAN` (1).
- `evosim.grid.SpatialGrid(cell_size)`: insert agents with `insert`, find the
  agents in the nine cells around a point with `query_nearby(x, y)`, and get a
  point's cell with `cell_of(x, y)`.
- `evosim.renderer.Renderer(surface)`: plots agents onto a pygame surface
  with `render_agents`; `to_screen(x, y)` maps world coordinates to pixels.
  `agent_color(code)` gives the colour for a type code, blue for unknown ones.
- `evosim.performance.PerformanceMonitor`: `cpu_usage_percent()` and
  `ram_usage_mb()` for the running process; `get_time_seconds()` is a
  monotonic clock.

## Tests

```
pip install .[test]
pytest
```