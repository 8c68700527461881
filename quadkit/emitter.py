"""Particle emitters: spawning, animating and retiring particles over time."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace

from quadkit.geometry import Vec2
from quadkit.particle_config import (
    AtlasConfig,
    BatchedCurve,
    BlendMode,
    Color,
    EmitterConfig,
)

_U16_MAX = 0xFFFF


@dataclass
class Particle:
    """One live particle: what is drawn and the state that drives it."""

    pos: Vec2
    size: float
    color: Color
    velocity: Vec2
    lifetime: float
    initial_size: float
    spawn_index: int
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)
    life_fraction: float = 0.0
    lived: float = 0.0
    frame: int = 0


def _random_initial_vector(
    direction: Vec2, spread: float, velocity: float, rng: random.Random
) -> Vec2:
    angle = rng.uniform(-spread / 2.0, spread / 2.0)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    rotated = Vec2(
        direction.x * cos_a - direction.y * sin_a,
        direction.x * sin_a + direction.y * cos_a,
    )
    return rotated * velocity


class Emitter:
    """Spawns particles according to an EmitterConfig and simulates them."""

    MAX_PARTICLES = 10000

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self._rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position = Vec2(0.0, 0.0)
        self.particles_spawned = 0
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.blend_mode: BlendMode = config.blend_mode
        self.mesh = config.shape.mesh()
        self._mesh_dirty = False
        self._batched_size_curve: BatchedCurve | None = None
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop all particles and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after the config's curve changed."""
        curve = self.config.size_curve
        self._batched_size_curve = curve.batch() if curve is not None else None

    def update_particle_mesh(self) -> None:
        """Rebuild the particle mesh from the config on the next update."""
        self._mesh_dirty = True

    def _emit_particle(self, offset: Vec2) -> None:
        config = self.config
        rng = self._rng
        offset = offset + config.emission_shape.random_point(rng)
        size = config.size - config.size * rng.uniform(0.0, config.size_randomness)
        pos = offset if config.local_coords else self.position + offset

        particle = Particle(
            pos=pos,
            size=size,
            color=config.colors_curve.start,
            velocity=_random_initial_vector(
                config.initial_direction,
                config.initial_direction_spread,
                config.initial_velocity
                - config.initial_velocity
                * rng.uniform(0.0, config.initial_velocity_randomness),
                rng,
            ),
            lifetime=config.lifetime
            - config.lifetime * rng.uniform(0.0, config.lifetime_randomness),
            initial_size=size,
            spawn_index=self.particles_spawned,
        )
        self.particles_spawned += 1
        self.particles.append(particle)

    def emit(self, pos: Vec2, n: int) -> None:
        """Emit n particles at once, ignoring the `emitting` and `amount` settings."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn_due(self) -> None:
        config = self.config
        self.time_passed += self._dt
        if config.amount <= 0:
            return
        gap = (config.lifetime / config.amount) * (1.0 - config.explosiveness)
        if gap < 0.001:
            spawn_amount = config.amount
        else:
            spawn_amount = int((self.time_passed - self.last_emit_time) / gap)
        for _ in range(spawn_amount):
            self.last_emit_time = self.time_passed
            if self.particles_spawned < config.amount:
                self._emit_particle(Vec2(0.0, 0.0))
            if len(self.particles) >= config.amount:
                break

    def _animate(self, particle: Particle, dt: float) -> None:
        config = self.config
        particle.velocity = particle.velocity + particle.velocity * (config.linear_accel * dt)

        fraction = particle.lived / particle.lifetime if particle.lifetime != 0.0 else 0.0
        particle.color = config.colors_curve.at(fraction)
        particle.pos = particle.pos + particle.velocity * dt

        scale = self._batched_size_curve.get(fraction) if self._batched_size_curve else 1.0
        particle.size = particle.initial_size * scale
        if particle.lifetime != 0.0:
            particle.life_fraction = fraction

        particle.lived += dt
        particle.velocity = particle.velocity + config.gravity * dt
        particle.uv = self._atlas_uv(particle, config.atlas)

    @staticmethod
    def _atlas_uv(
        particle: Particle, atlas: AtlasConfig | None
    ) -> tuple[float, float, float, float]:
        if atlas is None:
            return (0.0, 0.0, 1.0, 1.0)
        if particle.lifetime != 0.0:
            span = atlas.end_index - atlas.start_index
            raw = int(particle.lived / particle.lifetime * span)
            particle.frame = min(max(raw, 0), _U16_MAX) + atlas.start_index
        x = particle.frame % atlas.n
        y = particle.frame // atlas.m
        return (x / atlas.n, y / atlas.m, 1.0 / atlas.n, 1.0 / atlas.m)

    def update(self, dt: float) -> None:
        """Advance the emitter by dt seconds."""
        if self._mesh_dirty:
            self.mesh = self.config.shape.mesh()
            self._mesh_dirty = False

        self._dt = dt
        if self.config.emitting:
            self._spawn_due()

        if self.config.one_shot and self.time_passed > self.config.lifetime:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            self.config.emitting = False

        for particle in self.particles:
            self._animate(particle, dt)

        survivors = []
        for particle in self.particles:
            if particle.lived > particle.lifetime or particle.lived > self.config.lifetime:
                self.particles_spawned -= 1
            else:
                survivors.append(particle)
        self.particles = survivors

    def draw(self, pos: Vec2, dt: float) -> list[Particle]:
        """Place the emitter at pos, advance it by dt and return what to render."""
        self.position = pos
        self.update(dt)
        if self.config.blend_mode is not self.blend_mode:
            self.blend_mode = self.config.blend_mode
        return self.particles


class EmittersCache:
    """Many short-lived emitters sharing one config, recycled once they finish."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: random.Random | None = None) -> None:
        self.config = config
        self._rng = rng if rng is not None else random.Random()
        self.cache: list[Emitter] = [
            Emitter(replace(config, emitting=False), self._rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self.active: list[tuple[Emitter, Vec2]] = []

    def spawn(self, pos: Vec2) -> None:
        """Start a fresh emission cycle at pos."""
        emitter = self.cache.pop() if self.cache else Emitter(replace(self.config), self._rng)
        emitter.update_particle_mesh()
        emitter.config.emitting = True
        emitter.reset()
        self.active.append((emitter, pos))

    def update(self, dt: float) -> None:
        """Advance every active emitter; finished ones go back to the cache."""
        still_active = []
        for emitter, pos in self.active:
            emitter.position = pos
            emitter.update(dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self.cache.append(emitter)
        self.active = still_active


def explosion() -> EmitterConfig:
    """A one-shot additive burst that falls under strong gravity."""
    return EmitterConfig(
        one_shot=True,
        emitting=False,
        lifetime=0.3,
        lifetime_randomness=0.7,
        explosiveness=0.95,
        amount=30,
        initial_direction_spread=2.0 * math.pi,
        initial_velocity=200.0,
        size=30.0,
        gravity=Vec2(0.0, -1000.0),
        atlas=AtlasConfig(4, 4, 8),
        blend_mode=BlendMode.ADDITIVE,
    )


def smoke() -> EmitterConfig:
    """A narrow, slow column of smoke."""
    return EmitterConfig(
        lifetime=0.8,
        amount=20,
        initial_direction_spread=0.2,
        atlas=AtlasConfig(4, 4, 0, 8),
    )


def fire() -> EmitterConfig:
    """A fast additive flame."""
    return EmitterConfig(
        lifetime=0.4,
        lifetime_randomness=0.1,
        amount=10,
        initial_direction_spread=0.5,
        initial_velocity=300.0,
        atlas=AtlasConfig(4, 4, 8),
        size=20.0,
        blend_mode=BlendMode.ADDITIVE,
    )