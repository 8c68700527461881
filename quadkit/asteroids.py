"""Asteroids game logic: ship physics, shooting and splitting rocks."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from quadkit.geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
ASTEROID_COUNT = 10
MAX_SPEED = 5.0
BULLET_SPEED = 7.0
BULLET_LIFETIME = 1.5
SHOT_COOLDOWN = 0.1


def wrap_around(pos: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the screen to the opposite edge."""
    x, y = pos.x, pos.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = field(default_factory=Vec2)


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


def _heading(rotation: float) -> Vec2:
    return Vec2(math.sin(rotation), -math.cos(rotation))


class AsteroidsGame:
    """One game of asteroids on a width x height screen."""

    def __init__(
        self,
        width: float,
        height: float,
        rng: random.Random | None = None,
        time: float = 0.0,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.last_shot = time
        self.restart()

    @property
    def won(self) -> bool:
        return self.game_over and not self.asteroids

    def _center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    def _random_direction(self) -> Vec2:
        rng = self._rng
        while True:
            candidate = Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
            if candidate.length() > 0.0:
                return candidate.normalize()

    def restart(self) -> None:
        """Reset the ship and scatter a fresh ring of asteroids."""
        rng = self._rng
        center = self._center()
        short_side = min(self.width, self.height)
        self.ship = Ship(pos=center)
        self.bullets: list[Bullet] = []
        self.game_over = False
        self.asteroids: list[Asteroid] = []
        for _ in range(ASTEROID_COUNT):
            pos = center + self._random_direction() * short_side / 2.0
            self.asteroids.append(
                Asteroid(
                    pos=pos,
                    vel=Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)),
                    rot=0.0,
                    rot_speed=rng.uniform(-2.0, 2.0),
                    size=short_side / 10.0,
                    sides=6,
                )
            )

    def _fragment(self, asteroid: Asteroid, direction: Vec2) -> Asteroid:
        rng = self._rng
        return Asteroid(
            pos=asteroid.pos,
            vel=direction.normalize() * rng.uniform(1.0, 3.0),
            rot=rng.uniform(0.0, 360.0),
            rot_speed=rng.uniform(-2.0, 2.0),
            size=asteroid.size * 0.8,
            sides=asteroid.sides - 1,
        )

    def update(self, time: float, up: bool, left: bool, right: bool, shoot: bool) -> None:
        """Advance one frame at the given time with the given keys held."""
        if self.game_over:
            return
        ship = self.ship
        rotation = math.radians(ship.rot)

        acc = -ship.vel / 10.0
        if up:
            acc = _heading(rotation) / 3.0

        if shoot and time - self.last_shot > SHOT_COOLDOWN:
            heading = _heading(rotation)
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=time,
                )
            )
            self.last_shot = time
        if right:
            ship.rot += 5.0
        elif left:
            ship.rot -= 5.0

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > time]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.game_over = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 4:
                        fragments.append(
                            self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x))
                        )
                        fragments.append(
                            self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x))
                        )
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > time and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided]
        self.asteroids.extend(fragments)

        if not self.asteroids:
            self.game_over = True