import random

import pytest

from quadkit.asteroids import Asteroid, AsteroidsGame, wrap_around
from quadkit.geometry import Vec2

W, H = 800.0, 600.0


def make_game(asteroids=None):
    game = AsteroidsGame(W, H, random.Random(7), time=0.0)
    if asteroids is not None:
        game.asteroids = asteroids
    return game


def rock(pos, size=5.0, sides=6):
    return Asteroid(pos=pos, vel=Vec2(0.0, 0.0), rot=0.0, rot_speed=0.0, size=size, sides=sides)


def test_wrap_around_edges():
    assert wrap_around(Vec2(W + 1.0, 10.0), W, H) == Vec2(0.0, 10.0)
    assert wrap_around(Vec2(-1.0, 10.0), W, H) == Vec2(W, 10.0)
    assert wrap_around(Vec2(10.0, H + 1.0), W, H) == Vec2(10.0, 0.0)
    assert wrap_around(Vec2(10.0, -1.0), W, H) == Vec2(10.0, H)
    assert wrap_around(Vec2(10.0, 20.0), W, H) == Vec2(10.0, 20.0)


def test_restart_places_ring_of_asteroids():
    game = make_game()
    center = Vec2(W / 2.0, H / 2.0)
    assert len(game.asteroids) == 10
    for asteroid in game.asteroids:
        assert asteroid.sides == 6
        assert asteroid.size == pytest.approx(min(W, H) / 10.0)
        assert (asteroid.pos - center).length() == pytest.approx(min(W, H) / 2.0)
    assert game.ship.pos == center
    assert not game.game_over


def test_rotation_keys():
    game = make_game(asteroids=[rock(Vec2(10.0, 10.0))])
    game.update(0.0, False, False, True, False)
    assert game.ship.rot == 5.0
    game.update(0.0, False, True, False, False)
    assert game.ship.rot == 0.0


def test_speed_is_clamped():
    game = make_game(asteroids=[rock(Vec2(10.0, 10.0))])
    for _ in range(40):
        game.update(0.0, True, False, False, False)
    assert game.ship.vel.length() <= 5.0 + 1e-9


def test_bullet_splits_asteroid():
    center = Vec2(W / 2.0, H / 2.0)
    game = make_game(asteroids=[rock(center + Vec2(0.0, -19.5), size=5.0, sides=6)])
    game.update(1.0, False, False, False, True)
    assert game.bullets == []
    assert len(game.asteroids) == 2
    for fragment in game.asteroids:
        assert fragment.sides == 5
        assert fragment.size == pytest.approx(5.0 * 0.8)
    assert not game.game_over


def test_destroying_last_asteroid_wins():
    center = Vec2(W / 2.0, H / 2.0)
    game = make_game(asteroids=[rock(center + Vec2(0.0, -19.5), size=5.0, sides=4)])
    game.update(1.0, False, False, False, True)
    assert game.asteroids == []
    assert game.game_over
    assert game.won


def test_ship_collision_loses():
    center = Vec2(W / 2.0, H / 2.0)
    game = make_game(asteroids=[rock(center)])
    game.update(0.0, False, False, False, False)
    assert game.game_over
    assert not game.won


def test_update_after_game_over_is_frozen_until_restart():
    center = Vec2(W / 2.0, H / 2.0)
    game = make_game(asteroids=[rock(center)])
    game.update(0.0, False, False, False, False)
    game.update(0.1, True, False, True, False)
    assert game.ship.rot == 0.0
    game.restart()
    assert not game.game_over
    assert len(game.asteroids) == 10