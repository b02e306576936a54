import pytest

from evosim.agent import Agent, AgentType
from evosim.grid import SpatialGrid


def _agent(x, y):
    return Agent(AgentType.VEGETARIAN, x, y)


def test_cell_of_floors_negative_coordinates():
    grid = SpatialGrid(0.05)
    assert grid.cell_of(0.07, -0.01) == (1, -1)


def test_query_returns_agents_in_neighbouring_cells():
    grid = SpatialGrid(1.0)
    centre = _agent(0.5, 0.5)
    near = _agent(1.5, -0.5)
    far = _agent(2.5, 0.5)
    for agent in (centre, near, far):
        grid.insert(agent)
    result = grid.query_nearby(0.5, 0.5)
    assert centre in result
    assert near in result
    assert far not in result
    assert len(result) == 2


def test_query_orders_by_column_then_row():
    grid = SpatialGrid(1.0)
    lower_left = _agent(-0.5, -0.5)
    upper_left = _agent(-0.5, 1.5)
    lower_right = _agent(1.5, -0.5)
    for agent in (lower_right, upper_left, lower_left):
        grid.insert(agent)
    assert grid.query_nearby(0.5, 0.5) == [lower_left, upper_left, lower_right]


def test_same_cell_keeps_insertion_order():
    grid = SpatialGrid(1.0)
    first, second = _agent(0.1, 0.1), _agent(0.2, 0.2)
    grid.insert(first)
    grid.insert(second)
    assert grid.query_nearby(0.5, 0.5) == [first, second]


def test_clear_empties_grid():
    grid = SpatialGrid(1.0)
    grid.insert(_agent(0.0, 0.0))
    grid.clear()
    assert grid.query_nearby(0.0, 0.0) == []


@pytest.mark.parametrize("size", [0, -1.0])
def test_non_positive_cell_size_rejected(size):
    with pytest.raises(ValueError):
        SpatialGrid(size)