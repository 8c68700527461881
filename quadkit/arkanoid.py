"""Breakout-style game logic in a 20 x 20 world with a 10 x 10 block wall."""

from __future__ import annotations

BLOCKS_W = 10
BLOCKS_H = 10
SCR_W = 20.0
SCR_H = 20.0
PLATFORM_WIDTH = 5.0
PLATFORM_HEIGHT = 0.2
BLOCK_W = SCR_W / BLOCKS_W
BLOCK_H = 7.0 / BLOCKS_H


class Arkanoid:
    """Ball, paddle and blocks; `update` advances one frame."""

    def __init__(self) -> None:
        self.blocks = [[True] * BLOCKS_W for _ in range(BLOCKS_H)]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True

    @staticmethod
    def block_rect(row: int, column: int) -> tuple[float, float, float, float]:
        """The (x, y, w, h) area of the block at a row and column."""
        return (column * BLOCK_W + 0.05, row * BLOCK_H + 0.05, BLOCK_W, BLOCK_H)

    def blocks_left(self) -> int:
        return sum(sum(row) for row in self.blocks)

    def update(self, dt: float, left: bool, right: bool, space: bool) -> None:
        """Advance by dt seconds with the given keys held."""
        if right and self.platform_x < SCR_W - PLATFORM_WIDTH / 2.0:
            self.platform_x += 3.0 * dt
        if left and self.platform_x > PLATFORM_WIDTH / 2.0:
            self.platform_x -= 3.0 * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = SCR_H - 0.5
            self.stick = not space

        if self.ball_x <= 0.0 or self.ball_x > SCR_W:
            self.dx = -self.dx
        on_platform = (
            self.ball_y > SCR_H - PLATFORM_HEIGHT - 0.15 / 2.0
            and self.platform_x - PLATFORM_WIDTH / 2.0
            <= self.ball_x
            <= self.platform_x + PLATFORM_WIDTH / 2.0
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy
        if self.ball_y >= SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for row, line in enumerate(self.blocks):
            for column, present in enumerate(line):
                if not present:
                    continue
                x, y, w, h = self.block_rect(row, column)
                if x <= self.ball_x < x + w and y <= self.ball_y < y + h:
                    self.dy = -self.dy
                    line[column] = False