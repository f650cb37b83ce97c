"""Two-dimensional vectors and the steerable particle that boids build on."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.magnitude()
        if length == 0:
            return Vec2()
        return Vec2(self.x / length, self.y / length)

    def rotated(self, degrees: float) -> Vec2:
        """This vector rotated by ``degrees``."""
        radians = math.radians(degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        return Vec2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def squared_distance(self, other: Vec2) -> float:
        return (self - other).squared_magnitude()


class Particle:
    """A point mass steered by forces, with capped acceleration and speed."""

    def __init__(self, size: float = 4.0) -> None:
        self.size = size
        self.has_constant_speed = False
        self.speed = 120.0
        self.max_acceleration = 10.0
        self.acceleration = Vec2()
        self.previous_acceleration = Vec2()
        self.position = Vec2()
        self.rotation = Vec2()
        self._velocity = Vec2()
        self.draw_acceleration = False
        self.color = tuple(random.randint(31, 255) for _ in range(3))

    @property
    def velocity(self) -> Vec2:
        return self._velocity

    @velocity.setter
    def velocity(self, value: Vec2) -> None:
        self._velocity = value
        self.rotation = value.normalized()

    def apply_force(self, force: Vec2) -> None:
        """Accumulate ``force`` into this frame's acceleration."""
        self.acceleration = self.acceleration + force

    def update(self, delta_time: float) -> None:
        """Integrate acceleration into velocity and velocity into position."""
        if self.acceleration.magnitude() > self.max_acceleration:
            self.acceleration = self.acceleration.normalized() * self.max_acceleration

        self.velocity = self._velocity + self.acceleration
        self.previous_acceleration = self.acceleration
        self.acceleration = Vec2()

        if self.has_constant_speed or self._velocity.magnitude() > self.speed:
            self.velocity = self._velocity.normalized() * self.speed

        self.position = self.position + self._velocity * delta_time