"""Rules of the snake game: body movement, direction changes, food and collisions."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

# Cell sizes in pixels (larger cells mean fewer cells, so an easier game).
CELL_LARGE = 16
CELL_MEDIUM = 12
CELL_SMALL = 8

# Game timing in milliseconds.
GAME_SPEED_MS = 300
MIN_SPEED_MS = 60
SPEED_DECREASE_MS = 5

INITIAL_LENGTH = 3
CELL_RADIUS = 2

# Colours as 0xRRGGBB.
HEAD_COLOR = 0x4CAF50
BODY_COLOR = 0x81C784
FOOD_COLOR = 0xF44336
BG_COLOR = 0x212121
GRID_COLOR = 0x424242

Position = tuple[int, int]


class Direction(IntEnum):
    """Direction the snake moves in."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def delta(self) -> Position:
        return _DELTAS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def init_body(length: int, start_x: int, start_y: int) -> list[Position]:
    """Build a body of ``length`` cells, head first, extending left from the head."""
    return [(start_x - i, start_y) for i in range(max(length, 0))]


@dataclass
class SnakeState:
    """Grid, body, direction and food of one game."""

    grid_width: int
    grid_height: int
    body: list[Position] = field(default_factory=list)
    direction: Direction = Direction.RIGHT
    next_direction: Direction = Direction.RIGHT
    food: Position = (0, 0)
    wall_collision: bool = False
    game_over: bool = False

    @property
    def head(self) -> Position | None:
        return self.body[0] if self.body else None

    def grow(self) -> bool:
        """Add a segment on top of the tail; it separates on the next move."""
        if not self.body:
            return False
        self.body.append(self.body[-1])
        return True

    def move(self) -> bool:
        """Advance one cell; return False and end the game on a collision."""
        if not self.body or self.game_over:
            return False

        self.direction = self.next_direction
        dx, dy = self.direction.delta
        head_x, head_y = self.body[0]
        new_x, new_y = head_x + dx, head_y + dy

        if self.wall_collision:
            if not (0 <= new_x < self.grid_width and 0 <= new_y < self.grid_height):
                self.game_over = True
                return False
        else:
            if new_x < 0:
                new_x = self.grid_width - 1
            elif new_x >= self.grid_width:
                new_x = 0
            if new_y < 0:
                new_y = self.grid_height - 1
            elif new_y >= self.grid_height:
                new_y = 0

        # The tail vacates its cell during this move, so the head may enter it.
        if (new_x, new_y) in self.body[1:-1]:
            self.game_over = True
            return False

        self.body.insert(0, (new_x, new_y))
        self.body.pop()
        return True

    def set_direction(self, direction: Direction) -> bool:
        """Buffer a new direction unless it reverses the buffered one."""
        direction = Direction(direction)
        if direction == self.next_direction.opposite:
            return False
        self.next_direction = direction
        return True

    def spawn_food(self, rng: random.Random) -> bool:
        """Place food on a free cell; return False when no cell is free."""
        if self.grid_width == 0 or self.grid_height == 0:
            return False

        grid_size = self.grid_width * self.grid_height
        occupied = set(self.body)

        if len(self.body) < grid_size * 3 // 4:
            attempts = 0
            while True:
                candidate = (rng.randrange(self.grid_width), rng.randrange(self.grid_height))
                attempts += 1
                if candidate not in occupied or attempts >= grid_size:
                    break
            if candidate not in occupied:
                self.food = candidate
                return True

        start_y = rng.randrange(self.grid_height)
        start_x = rng.randrange(self.grid_width)
        for i in range(self.grid_height):
            gy = (start_y + i) % self.grid_height
            for j in range(self.grid_width):
                gx = (start_x + j) % self.grid_width
                if (gx, gy) not in occupied:
                    self.food = (gx, gy)
                    return True
        return False

    def check_wall_collision(self) -> bool:
        """Whether the head lies outside the grid."""
        if not self.body:
            return False
        x, y = self.body[0]
        return not (0 <= x < self.grid_width and 0 <= y < self.grid_height)

    def check_self_collision(self) -> bool:
        """Whether the head shares a cell with any other segment."""
        if not self.body:
            return False
        return self.body[0] in self.body[1:]

    def check_food_collision(self) -> bool:
        """Whether the head is on the food."""
        if not self.body:
            return False
        return self.body[0] == self.food

    def segment_count(self) -> int:
        return len(self.body)