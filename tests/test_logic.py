import random

import pytest

from pocketapps.snake.logic import (
    Direction,
    SnakeState,
    init_body,
)


def make_state(width=10, height=10, length=3, x=5, y=5, **kwargs):
    return SnakeState(width, height, body=init_body(length, x, y), **kwargs)


def test_init_body_extends_left():
    body = init_body(3, 5, 7)
    assert body == [(5, 7), (4, 7), (3, 7)]


def test_init_body_zero_length_is_empty():
    assert init_body(0, 5, 5) == []


@pytest.mark.parametrize("direction", list(Direction))
def test_opposite_direction_is_rejected(direction):
    state = make_state(next_direction=direction)
    assert state.set_direction(direction.opposite) is False
    assert state.next_direction == direction
    assert state.set_direction(direction) is True
    assert state.next_direction == direction


def test_move_right_shifts_body():
    state = make_state()
    before = list(state.body)
    assert state.move() is True
    assert state.body[0] == (before[0][0] + 1, before[0][1])
    assert state.body[1:] == before[:-1]
    assert state.segment_count() == len(before)


def test_move_wraps_around_edge():
    state = make_state(width=10, x=9)
    assert state.move() is True
    assert state.head == (0, 5)
    assert state.game_over is False


def test_move_wraps_up_to_bottom():
    state = make_state(height=10, y=0)
    state.set_direction(Direction.UP)
    assert state.move() is True
    assert state.head == (5, 9)


def test_wall_collision_ends_game():
    state = make_state(width=10, x=9, wall_collision=True)
    assert state.move() is False
    assert state.game_over is True
    assert state.move() is False


def test_move_with_empty_body_fails():
    state = SnakeState(10, 10)
    assert state.move() is False


def test_reversal_is_rejected():
    state = make_state()
    assert state.set_direction(Direction.LEFT) is False
    assert state.next_direction == Direction.RIGHT


def test_reversal_checked_against_buffered_direction():
    state = make_state()
    assert state.set_direction(Direction.UP) is True
    assert state.set_direction(Direction.DOWN) is False
    assert state.set_direction(Direction.LEFT) is True
    assert state.next_direction == Direction.LEFT
    assert state.direction == Direction.RIGHT


def test_self_collision_on_move():
    body = [(2, 2), (3, 2), (3, 3), (2, 3), (1, 3)]
    state = SnakeState(10, 10, body=body, next_direction=Direction.DOWN)
    assert state.move() is False
    assert state.game_over is True
    assert state.body == body


def test_head_may_enter_tail_cell():
    body = [(2, 2), (3, 2), (3, 3), (2, 3)]
    state = SnakeState(10, 10, body=body, next_direction=Direction.DOWN)
    assert state.move() is True
    assert state.head == (2, 3)
    assert state.game_over is False


def test_grow_adds_segment_at_tail():
    state = make_state()
    tail = state.body[-1]
    assert state.grow() is True
    assert state.segment_count() == 4
    assert state.body[-1] == tail
    state.move()
    assert state.body[-1] == tail
    assert len(set(state.body)) == 4


def test_grow_empty_body_fails():
    assert SnakeState(5, 5).grow() is False


def test_check_collisions():
    state = make_state()
    assert state.check_wall_collision() is False
    assert state.check_self_collision() is False
    state.food = state.body[0]
    assert state.check_food_collision() is True
    state.body[0] = (-1, 5)
    assert state.check_wall_collision() is True
    state.body[0] = state.body[2]
    assert state.check_self_collision() is True


def test_checks_on_empty_body_are_false():
    state = SnakeState(5, 5)
    assert not state.check_wall_collision()
    assert not state.check_self_collision()
    assert not state.check_food_collision()
    assert state.segment_count() == 0


@pytest.mark.parametrize("seed", range(20))
def test_spawn_food_avoids_snake(seed):
    state = make_state(width=6, height=6)
    assert state.spawn_food(random.Random(seed)) is True
    assert state.food not in state.body
    assert 0 <= state.food[0] < 6 and 0 <= state.food[1] < 6


def test_spawn_food_dense_grid_finds_last_cell():
    body = [(x, y) for y in range(3) for x in range(3) if (x, y) != (1, 2)]
    state = SnakeState(3, 3, body=body)
    assert state.spawn_food(random.Random(1)) is True
    assert state.food == (1, 2)


def test_spawn_food_full_grid_fails():
    body = [(x, y) for y in range(3) for x in range(3)]
    state = SnakeState(3, 3, body=body)
    assert state.spawn_food(random.Random(0)) is False


def test_spawn_food_zero_grid_fails():
    state = SnakeState(0, 4, body=[(0, 0)])
    assert state.spawn_food(random.Random(0)) is False


def test_spawn_food_is_deterministic_for_seed():
    first = make_state()
    second = make_state()
    first.spawn_food(random.Random(42))
    second.spawn_food(random.Random(42))
    assert first.food == second.food