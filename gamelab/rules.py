"""Steering rules that combine into flocking behaviour."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod

from gamelab.particle import Vec2


class FlockingRule(ABC):
    """A weighted steering force computed from a boid and its neighbours."""

    name = ""
    explanation = ""
    base_weight_multiplier = 1.0

    def __init__(self, world=None, weight: float = 1.0, enabled: bool = True) -> None:
        self.world = world
        self.weight = weight
        self.enabled = enabled
        self.force = Vec2()

    @abstractmethod
    def compute_force(self, neighborhood, boid) -> Vec2:
        """Unweighted steering force for ``boid``."""

    def compute_weighted_force(self, neighborhood, boid) -> Vec2:
        """Weighted force, cached in ``force``; zero when the rule is disabled."""
        if self.enabled:
            self.force = (self.compute_force(neighborhood, boid)
                          * (self.base_weight_multiplier * self.weight))
        else:
            self.force = Vec2()
        return self.force

    def clone(self) -> FlockingRule:
        """An independent copy of this rule and its settings."""
        return copy.copy(self)


class AlignmentRule(FlockingRule):
    name = "Alignment Rule"
    explanation = "Steer to move in the same direction that nearby boids."
    base_weight_multiplier = 1.0

    def compute_force(self, neighborhood, boid) -> Vec2:
        """Unit vector along the neighbours' average velocity."""
        if not neighborhood:
            return Vec2()
        total = Vec2()
        for other in neighborhood:
            total = total + other.velocity
        return (total / len(neighborhood)).normalized()


class CohesionRule(FlockingRule):
    name = "Cohesion Rule"
    explanation = "Steer to move toward center of mass of nearby boids."
    base_weight_multiplier = 1.0

    def compute_force(self, neighborhood, boid) -> Vec2:
        """Unit vector towards the neighbours' centre of mass."""
        if not neighborhood:
            return Vec2()
        total = Vec2()
        for other in neighborhood:
            total = total + other.position
        center = total / len(neighborhood)
        return (center - boid.position).normalized()


class SeparationRule(FlockingRule):
    name = "Separation Rule"
    explanation = "Steer to avoid collision with nearby boids."
    base_weight_multiplier = 1.0

    def __init__(self, world=None, desired_separation: float = 20.0,
                 weight: float = 1.0, enabled: bool = True) -> None:
        super().__init__(world, weight, enabled)
        self.desired_separation = desired_separation

    def compute_force(self, neighborhood, boid) -> Vec2:
        """Unit vector away from neighbours closer than the desired separation."""
        force = Vec2()
        for other in neighborhood:
            offset = boid.position - other.position
            distance = offset.magnitude()
            if 0 < distance < self.desired_separation:
                force = force + offset.normalized() / distance
        return force.normalized()


class MouseInfluenceRule(FlockingRule):
    name = "Mouse Click Influence"
    explanation = "Steer toward or away the mouse when clicked."
    base_weight_multiplier = 0.1

    def __init__(self, world=None, weight: float = 1.0, repulsive: bool = False,
                 enabled: bool = True) -> None:
        super().__init__(world, weight, enabled)
        self.repulsive = repulsive
        self.mouse_position: Vec2 | None = None

    def compute_force(self, neighborhood, boid) -> Vec2:
        """Pull towards (or push from) the pressed mouse, fading with distance."""
        if self.mouse_position is None:
            return Vec2()
        displacement = self.mouse_position - boid.position
        distance = displacement.magnitude()
        if distance == 0:
            return Vec2()
        force = displacement.normalized() / distance
        return -force if self.repulsive else force


class BoundedAreaRule(FlockingRule):
    name = "Bounded Windows"
    explanation = "Steer to avoid the window's borders."
    base_weight_multiplier = 1.0

    def __init__(self, world=None, distance_from_border: int = 20,
                 weight: float = 1.0, enabled: bool = True) -> None:
        super().__init__(world, weight, enabled)
        self.desired_distance = distance_from_border

    def compute_force(self, neighborhood, boid) -> Vec2:
        """Push inward, stronger the deeper the boid is in the border margin."""
        distance = self.desired_distance
        if distance <= 0:
            return Vec2()
        width, height = self.world.width, self.world.height
        position = boid.position
        fx = fy = 0.0
        if position.x < distance:
            fx += (distance - position.x) / distance
        elif position.x > width - distance:
            fx -= (position.x - (width - distance)) / distance
        if position.y < distance:
            fy += (distance - position.y) / distance
        elif position.y > height - distance:
            fy -= (position.y - (height - distance)) / distance
        return Vec2(fx, fy)


class WindRule(FlockingRule):
    name = "Wind Force"
    explanation = "Apply a constant force to all boids."
    base_weight_multiplier = 0.5

    def __init__(self, world=None, weight: float = 1.0, angle: float = 0.0,
                 enabled: bool = True) -> None:
        super().__init__(world, weight, enabled)
        self.wind_angle = angle

    def compute_force(self, neighborhood, boid) -> Vec2:
        """Unit vector in the wind direction, ``wind_angle`` in radians."""
        return Vec2(math.cos(self.wind_angle), math.sin(self.wind_angle))