"""Boids and the flock that owns them, steered by weighted flocking rules."""

from __future__ import annotations

import argparse
import random

from gamelab.particle import Particle, Vec2
from gamelab.rules import (
    AlignmentRule,
    BoundedAreaRule,
    CohesionRule,
    FlockingRule,
    MouseInfluenceRule,
    SeparationRule,
    WindRule,
)

_UP = Vec2(0.0, -1.0)
_UNCAPPED_ACCELERATION = 10000.0


class Boid(Particle):
    """A particle that steers by the flock's rules applied to its neighbours."""

    def __init__(self, flock: Flock) -> None:
        super().__init__()
        self.flock = flock
        self.detection_radius = 100.0
        self.rules: list[FlockingRule] = []
        self.draw_debug_radius = True
        self.draw_debug_rules = True
        self.circle_color = "purple"

    def set_rules(self, rules) -> None:
        """Replace this boid's rules with independent copies of ``rules``."""
        self.rules = [rule.clone() for rule in rules]

    def neighborhood(self) -> list[Boid]:
        """Other boids of the flock within the detection radius."""
        radius_squared = self.detection_radius * self.detection_radius
        position = self.position
        return [
            boid for boid in self.flock.boids
            if boid is not self
            and position.squared_distance(boid.position) <= radius_squared
        ]

    def update(self, delta_time: float) -> None:
        """Move, then accumulate the rules' forces for the next frame."""
        super().update(delta_time)
        neighborhood = self.neighborhood()
        for rule in self.rules:
            self.apply_force(rule.compute_weighted_force(neighborhood, self))


class Flock:
    """The simulation world: its boids, their shared rules and settings."""

    def __init__(self, width: float = 800.0, height: float = 600.0,
                 rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self.rng = random.Random() if rng is None else rng

        self.number_of_boids = 300
        self.has_constant_speed = False
        self.desired_speed = 120.0
        self.has_max_acceleration = False
        self.max_acceleration = 10.0
        self.detection_radius = 35.0

        self.show_radius = False
        self.show_rules = False
        self.show_acceleration = False

        self.rules: list[FlockingRule] = []
        self.default_weights: list[float] = []
        self.boids: list[Boid] = []

    def start(self) -> None:
        """Create the rules and the initial boids."""
        self.initialize_rules()
        self.set_number_of_boids(self.number_of_boids)
        self.apply_rules_to_all_boids()

    def initialize_rules(self) -> None:
        """Install the starting rules and remember their weights as defaults."""
        self.rules = [
            SeparationRule(self, 25.0, 4.75),
            CohesionRule(self, 4.25),
            AlignmentRule(self, 2.9),
            MouseInfluenceRule(self, 2.0),
            BoundedAreaRule(self, 20, 8.0, False),
            WindRule(self, 1.0, 6.0, False),
        ]
        self.default_weights = [rule.weight for rule in self.rules]

    def apply_rules_to_all_boids(self) -> None:
        for boid in self.boids:
            boid.set_rules(self.rules)

    def set_number_of_boids(self, number: int) -> None:
        """Add or remove boids at the end until there are ``number`` of them."""
        number = max(0, number)
        self.number_of_boids = number
        while len(self.boids) < number:
            self.boids.append(self.create_boid())
        del self.boids[number:]

    def randomize_boid(self, boid: Boid) -> None:
        """Place ``boid`` anywhere in the area heading in a random direction."""
        boid.position = Vec2(self.rng.uniform(0.0, self.width),
                             self.rng.uniform(0.0, self.height))
        boid.velocity = _UP.rotated(self.rng.uniform(0.0, 360.0)) * self.desired_speed

    def warp_if_out_of_bounds(self, particle: Particle) -> None:
        """Wrap a particle that left the area back in from the opposite side."""
        x, y = particle.position.x, particle.position.y
        if x < 0:
            x += self.width
        elif x > self.width:
            x -= self.width
        if y < 0:
            y += self.height
        elif y > self.height:
            y -= self.height
        position = Vec2(x, y)
        if position != particle.position:
            particle.position = position

    def create_boid(self) -> Boid:
        """A new boid configured with the flock's current settings."""
        boid = Boid(self)
        self.randomize_boid(boid)
        boid.set_rules(self.rules)
        boid.detection_radius = self.detection_radius
        boid.speed = self.desired_speed
        boid.has_constant_speed = self.has_constant_speed
        boid.draw_acceleration = self.show_acceleration
        boid.draw_debug_radius = self.show_radius
        boid.draw_debug_rules = self.show_rules
        return boid

    def restore_default_weights(self) -> None:
        for rule, weight in zip(self.rules, self.default_weights):
            rule.weight = weight
        self.apply_rules_to_all_boids()

    def set_detection_radius(self, radius: float) -> None:
        self.detection_radius = radius
        for boid in self.boids:
            boid.detection_radius = radius

    def set_speed(self, speed: float) -> None:
        self.desired_speed = speed
        for boid in self.boids:
            boid.speed = speed

    def set_constant_speed(self, enabled: bool) -> None:
        self.has_constant_speed = enabled
        for boid in self.boids:
            boid.has_constant_speed = enabled

    def set_max_acceleration(self, enabled: bool, value: float | None = None) -> None:
        """Cap every boid's acceleration, or lift the cap when disabled."""
        self.has_max_acceleration = enabled
        if value is not None:
            self.max_acceleration = value
        limit = self.max_acceleration if enabled else _UNCAPPED_ACCELERATION
        for boid in self.boids:
            boid.max_acceleration = limit

    def update(self, delta_time: float, input_arrow: Vec2 = Vec2()) -> None:
        """Steer the first boid by ``input_arrow``, wrap positions, move boids."""
        if input_arrow != Vec2() and self.number_of_boids > 0 and self.boids:
            first = self.boids[0]
            first.apply_force(input_arrow * 20.0)
            first.draw_debug_radius = True
            first.circle_color = "red"

        for boid in self.boids:
            self.warp_if_out_of_bounds(boid)
        for boid in self.boids:
            boid.update(delta_time)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="flocking",
                                     description="Run a headless flocking simulation.")
    parser.add_argument("--boids", type=int, default=300, help="number of boids")
    parser.add_argument("--steps", type=int, default=100, help="frames to simulate")
    parser.add_argument("--dt", type=float, default=1 / 60, help="seconds per frame")
    parser.add_argument("--width", type=float, default=800.0, help="area width")
    parser.add_argument("--height", type=float, default=600.0, help="area height")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    flock = Flock(args.width, args.height, random.Random(args.seed))
    flock.number_of_boids = max(0, args.boids)
    flock.start()
    for _ in range(args.steps):
        flock.update(args.dt)

    print(f"{len(flock.boids)} boids after {args.steps} steps")
    if flock.boids:
        count = len(flock.boids)
        cx = sum(b.position.x for b in flock.boids) / count
        cy = sum(b.position.y for b in flock.boids) / count
        speed = sum(b.velocity.magnitude() for b in flock.boids) / count
        print(f"centre ({cx:.1f}, {cy:.1f}), mean speed {speed:.1f}")
    return 0