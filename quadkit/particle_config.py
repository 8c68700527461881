"""Configuration types for particle emitters: colours, curves, shapes and blending."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum

from quadkit.geometry import Vec2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float components in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def lerp(self, other: Color, t: float) -> Color:
        """Linear blend from this colour (t=0) to `other` (t=1)."""
        keep = 1.0 - t
        return Color(
            self.r * keep + other.r * t,
            self.g * keep + other.g * t,
            self.b * keep + other.b * t,
            self.a * keep + other.a * t,
        )


WHITE = Color(1.0, 1.0, 1.0, 1.0)


class Interpolation(Enum):
    """How a curve is built between its key points."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass
class BatchedCurve:
    """A curve sampled at evenly spaced steps, ready for fast lookup."""

    points: list[float]

    def get(self, t: float) -> float:
        """Value of the curve at t in 0..1, interpolated between samples."""
        count = len(self.points)
        if count == 0:
            raise ValueError("cannot sample an empty curve")
        t_scaled = t * count
        previous_ix = min(max(int(t_scaled), 0), count - 1)
        next_ix = min(previous_ix + 1, count - 1)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A curve through key points (x, y), sampled by `batch`."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve with a step of 1 / resolution along x."""
        if self.interpolation is not Interpolation.LINEAR:
            raise ValueError("only linear interpolation is supported")
        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in zip(self.points, self.points[1:]):
            while x <= end_x:
                t = (x - start_x) / (end_x - start_x)
                samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(samples)


_EMISSION_KINDS = frozenset({"point", "rect", "sphere"})


@dataclass(frozen=True)
class EmissionShape:
    """Region particles are spawned in: a point, a rectangle or a disc."""

    kind: str = "point"
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0

    def __post_init__(self) -> None:
        if self.kind not in _EMISSION_KINDS:
            raise ValueError(f"unknown emission shape {self.kind!r}")

    def random_point(self, rng: random.Random) -> Vec2:
        """A random offset from the emitter inside the shape."""
        if self.kind == "rect":
            return Vec2(
                rng.uniform(-self.width / 2.0, self.width / 2.0),
                rng.uniform(-self.height / 2.0, self.height / 2.0),
            )
        if self.kind == "sphere":
            ro = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
            phi = rng.uniform(0.0, math.pi * 2.0)
            return Vec2(ro * math.cos(phi), ro * math.sin(phi))
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class ColorCurve:
    """Colour of a particle at the start, middle and end of its life."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def at(self, t: float) -> Color:
        """Colour at life fraction t in 0..1."""
        if t < 0.5:
            return self.start.lerp(self.mid, t * 2.0)
        return self.mid.lerp(self.end, (t - 0.5) * 2.0)


class BlendMode(Enum):
    """How overlapping particles combine."""

    ALPHA = "alpha"
    ADDITIVE = "additive"

    def blend_factors(self) -> tuple[str, str, str]:
        """The (equation, source factor, destination factor) for this mode."""
        if self is BlendMode.ADDITIVE:
            return ("add", "source_alpha", "one")
        return ("add", "source_alpha", "one_minus_source_alpha")


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout of n x m frames, animated over start..end (end excluded)."""

    n: int
    m: int
    start_index: int = 0
    end_index: int | None = None

    def __post_init__(self) -> None:
        if self.n < 1 or self.m < 1:
            raise ValueError("atlas dimensions must be positive")
        if self.end_index is None:
            object.__setattr__(self, "end_index", self.n * self.m)


_RECT_VERTICES = (
    # positions        uv          colors
    -1.0, -1.0, 0.0,   0.0, 0.0,   1.0, 1.0, 1.0, 1.0,
    1.0, -1.0, 0.0,    1.0, 0.0,   1.0, 1.0, 1.0, 1.0,
    1.0, 1.0, 0.0,     1.0, 1.0,   1.0, 1.0, 1.0, 1.0,
    -1.0, 1.0, 0.0,    0.0, 1.0,   1.0, 1.0, 1.0, 1.0,
)
_RECT_INDICES = (0, 1, 2, 0, 2, 3)

_PARTICLE_KINDS = frozenset({"rectangle", "circle", "custom"})


@dataclass(frozen=True)
class ParticleShape:
    """Mesh of one particle: a rectangle, a circle or a custom mesh.

    Vertices hold nine floats each: position (3), uv (2) and colour (4).
    """

    kind: str = "rectangle"
    subdivisions: int = 0
    vertices: tuple[float, ...] = ()
    indices: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in _PARTICLE_KINDS:
            raise ValueError(f"unknown particle shape {self.kind!r}")
        if self.kind == "circle" and self.subdivisions < 1:
            raise ValueError("a circle needs at least one subdivision")
        object.__setattr__(self, "vertices", tuple(self.vertices))
        object.__setattr__(self, "indices", tuple(self.indices))

    def mesh(self) -> tuple[list[float], list[int]]:
        """Vertex data and triangle indices of the shape."""
        if self.kind == "rectangle":
            return list(_RECT_VERTICES), list(_RECT_INDICES)
        if self.kind == "custom":
            return list(self.vertices), list(self.indices)

        vertices = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend((rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0))
            if i != self.subdivisions:
                indices.extend((0, i + 1, i + 2))
        return vertices, indices


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader sources for particles."""

    vertex: str
    fragment: str


@dataclass
class EmitterConfig:
    """Everything that describes how an emitter spawns and animates particles."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=EmissionShape)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=ParticleShape)
    emitting: bool = True
    initial_direction: Vec2 = Vec2(0.0, -1.0)
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Curve | None = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = Vec2(0.0, 0.0)
    texture: object | None = None
    atlas: AtlasConfig | None = None
    material: ParticleMaterial | None = None
    post_processing: bool = False