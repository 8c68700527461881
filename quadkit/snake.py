"""Grid snake game logic: steering, growth and collisions."""

from __future__ import annotations

import random
from collections import deque

Point = tuple[int, int]

SQUARES = 16
INITIAL_SPEED = 0.3

UP: Point = (0, -1)
DOWN: Point = (0, 1)
RIGHT: Point = (1, 0)
LEFT: Point = (-1, 0)


class SnakeGame:
    """State of one snake game on a SQUARES x SQUARES board.

    `speed` is the number of seconds between ticks; the caller drives `tick`.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.restart()

    def _random_point(self) -> Point:
        return (self._rng.randrange(0, SQUARES), self._rng.randrange(0, SQUARES))

    def restart(self) -> None:
        """Reset to a fresh game."""
        self.head: Point = (0, 0)
        self.direction: Point = RIGHT
        self.body: deque[Point] = deque()
        self.fruit: Point = self._random_point()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.game_over = False

    def turn(self, direction: Point) -> None:
        """Steer the snake; turning straight back is ignored."""
        if self.game_over:
            return
        if direction == (-self.direction[0], -self.direction[1]):
            return
        self.direction = direction

    def tick(self) -> None:
        """Advance the snake one square."""
        if self.game_over:
            return
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction[0], self.head[1] + self.direction[1])
        if self.head == self.fruit:
            self.fruit = self._random_point()
            self.score += 100
            self.speed *= 0.9
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < SQUARES and 0 <= y < SQUARES):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True