import pytest

from quadkit.geometry import Vec2
from quadkit.platformer import Actor, Solid, Tile, World

E, S, J = Tile.EMPTY, Tile.SOLID, Tile.JUMP_THROUGH


def rows(*lines):
    return [tile for line in lines for tile in line]


def floor_world():
    world = World()
    world.add_static_tiled_layer(rows([E] * 4, [E] * 4, [S] * 4), 8.0, 8.0, 4, 1)
    return world


def platform_world():
    world = World()
    world.add_static_tiled_layer(
        rows([E] * 4, [E] * 4, [J] * 4, [E] * 4, [S] * 4), 8.0, 8.0, 4, 1
    )
    return world


def test_handles_are_sequential():
    world = World()
    assert world.add_actor(Vec2(0.0, 0.0), 8, 8) == Actor(0)
    assert world.add_actor(Vec2(20.0, 0.0), 8, 8) == Actor(1)
    assert world.add_solid(Vec2(40.0, 0.0), 8, 8) == Solid(0)


def test_actor_moves_freely_in_empty_world():
    world = World()
    start = Vec2(5.0, 5.0)
    actor = world.add_actor(start, 8, 8)
    assert world.move_h(actor, 3.0)
    assert world.move_v(actor, -2.0)
    assert world.actor_pos(actor) == Vec2(start.x + 3.0, start.y - 2.0)


def test_half_pixel_rounds_away_from_zero():
    world = World()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    world.move_h(actor, 0.5)
    assert world.actor_pos(actor).x == 1.0
    world.move_h(actor, -1.5)
    assert world.actor_pos(actor).x == -1.0


def test_small_moves_accumulate_in_remainder():
    world = World()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    world.move_h(actor, 0.3)
    assert world.actor_pos(actor).x == 0.0
    world.move_h(actor, 0.3)
    assert world.actor_pos(actor).x == 1.0


def test_set_actor_position_clears_remainder():
    world = World()
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    world.move_h(actor, 0.4)
    world.set_actor_position(actor, Vec2(10.0, 10.0))
    world.move_h(actor, 0.4)
    assert world.actor_pos(actor) == Vec2(10.0, 10.0)


def test_floor_blocks_falling():
    world = floor_world()
    actor = world.add_actor(Vec2(0.0, 8.0), 8, 8)
    assert world.move_v(actor, 1.0) is False
    assert world.actor_pos(actor) == Vec2(0.0, 8.0)
    assert world.collide_check(actor, Vec2(0.0, 9.0))
    assert not world.collide_check(actor, Vec2(0.0, 0.0))


def test_solid_at_and_tag_at():
    world = floor_world()
    assert world.solid_at(Vec2(4.0, 20.0))
    assert not world.solid_at(Vec2(4.0, 4.0))
    assert not world.tag_at(Vec2(4.0, 20.0), 2)


def test_tag_on_other_layer_is_not_solid():
    world = World()
    world.add_static_tiled_layer([S] * 4, 8.0, 8.0, 2, 2)
    assert world.tag_at(Vec2(1.0, 1.0), 2)
    assert not world.solid_at(Vec2(1.0, 1.0))
    assert world.collide_tag(2, Vec2(0.0, 0.0), 8, 8) is Tile.SOLID
    assert world.collide_tag(1, Vec2(0.0, 0.0), 8, 8) is Tile.EMPTY


def test_wide_box_detects_tile_between_corners():
    world = World()
    world.add_static_tiled_layer(rows([E, S, E, E]), 8.0, 8.0, 4, 1)
    assert world.collide_tag(1, Vec2(0.0, 0.0), 24, 8) is Tile.SOLID
    assert world.collide_tag(1, Vec2(16.0, 0.0), 8, 8) is Tile.EMPTY


def test_jump_through_blocks_until_descent():
    world = platform_world()
    actor = world.add_actor(Vec2(0.0, 8.0), 8, 8)
    assert world.move_v(actor, 1.0) is False
    assert world.collide_check(actor, Vec2(0.0, 9.0))
    world.descent(actor)
    assert not world.collide_check(actor, Vec2(0.0, 9.0))
    assert world.move_v(actor, 1.0)
    assert world.actor_pos(actor) == Vec2(0.0, 9.0)


def test_jump_up_through_platform_then_stand_on_it():
    world = platform_world()
    actor = world.add_actor(Vec2(0.0, 24.0), 8, 8)
    assert world.move_v(actor, -16.0)
    assert world.actor_pos(actor) == Vec2(0.0, 8.0)
    assert world.move_v(actor, 1.0) is False
    assert world.collide_check(actor, Vec2(0.0, 9.0))


def test_actor_created_inside_platform_can_descend():
    world = platform_world()
    actor = world.add_actor(Vec2(0.0, 16.0), 8, 8)
    assert not world.collide_check(actor, Vec2(0.0, 17.0))


def test_moving_solid_reports_collider_and_blocks():
    world = World()
    solid = world.add_solid(Vec2(20.0, 0.0), 8, 8)
    assert world.collide_solids(Vec2(18.0, 0.0), 8, 8) is Tile.COLLIDER
    assert world.collide_solids(Vec2(0.0, 0.0), 8, 8) is Tile.EMPTY
    actor = world.add_actor(Vec2(0.0, 0.0), 8, 8)
    assert world.move_h(actor, 20.0) is False
    assert world.actor_pos(actor).x + 8 <= world.solid_pos(solid).x
    assert world.solid_at(Vec2(21.0, 1.0))


def test_solid_carries_rider():
    world = World()
    solid = world.add_solid(Vec2(0.0, 10.0), 16, 4)
    actor = world.add_actor(Vec2(0.0, 2.0), 8, 8)
    world.solid_move(solid, 3.0, 0.0)
    assert world.solid_pos(solid) == Vec2(3.0, 10.0)
    assert world.actor_pos(actor) == Vec2(3.0, 2.0)


def test_solid_pushes_actor():
    world = World()
    solid = world.add_solid(Vec2(0.0, 0.0), 8, 8)
    actor = world.add_actor(Vec2(10.0, 0.0), 8, 8)
    world.solid_move(solid, 4.0, 0.0)
    assert world.actor_pos(actor) == Vec2(14.0, 0.0)
    assert not world.squished(actor)


def test_actor_squished_against_wall_then_released():
    world = World()
    world.add_static_tiled_layer([E, E, E, S], 8.0, 8.0, 4, 1)
    solid = world.add_solid(Vec2(0.0, 0.0), 8, 8)
    actor = world.add_actor(Vec2(14.0, 0.0), 8, 8)
    world.solid_move(solid, 10.0, 0.0)
    assert world.squished(actor)
    assert world.actor_pos(actor) == Vec2(16.0, 0.0)
    world.solid_move(solid, -10.0, 0.0)
    assert not world.squished(actor)


def test_unknown_actor_raises():
    world = World()
    with pytest.raises(IndexError):
        world.actor_pos(Actor(3))