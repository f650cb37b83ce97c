"""Catch-the-cat on an offset hexagonal grid.

Coordinates are centred: the middle cell is (0, 0) and the top-left cell is
(-side // 2, -side // 2).  Rows with an odd ``y`` are shifted half a cell.
"""

from __future__ import annotations

import math
import random
import time
from abc import ABC, abstractmethod
from typing import NamedTuple


class Point(NamedTuple):
    """A cell position on the grid."""

    x: int
    y: int


def east(point: Point) -> Point:
    return Point(point.x + 1, point.y)


def west(point: Point) -> Point:
    return Point(point.x - 1, point.y)


def north_east(point: Point) -> Point:
    if point.y % 2:
        return Point(point.x + 1, point.y - 1)
    return Point(point.x, point.y - 1)


def north_west(point: Point) -> Point:
    if point.y % 2:
        return Point(point.x, point.y - 1)
    return Point(point.x - 1, point.y - 1)


def south_east(point: Point) -> Point:
    if point.y % 2:
        return Point(point.x, point.y + 1)
    return Point(point.x - 1, point.y + 1)


def south_west(point: Point) -> Point:
    if point.y % 2:
        return Point(point.x + 1, point.y + 1)
    return Point(point.x, point.y + 1)


def neighbors(point: Point) -> list[Point]:
    """The six cells around ``point``: NE, NW, E, W, SW, SE."""
    return [
        north_east(point),
        north_west(point),
        east(point),
        west(point),
        south_west(point),
        south_east(point),
    ]


def is_neighbor(first: Point, second: Point) -> bool:
    """True when ``second`` is one of the six cells around ``first``."""
    return Point(*second) in neighbors(Point(*first))


class Agent(ABC):
    """A player that picks a move for the current world."""

    @abstractmethod
    def move(self, world: CatchTheCatWorld) -> Point:
        """Return the cell this agent wants to act on."""


class Cat(Agent):
    """Moves the cat to a random neighbouring cell."""

    _DIRECTIONS = (north_east, north_west, east, west, south_west, south_east)

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = random.Random() if rng is None else rng

    def move(self, world: CatchTheCatWorld) -> Point:
        choice = self.rng.randint(0, 5)
        return self._DIRECTIONS[choice](world.cat_position)


class Catcher(Agent):
    """Blocks a random free cell that shares neither row nor column with the cat."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = random.Random() if rng is None else rng

    def move(self, world: CatchTheCatWorld) -> Point:
        side = world.side_size // 2
        while True:
            point = Point(self.rng.randint(-side, side), self.rng.randint(-side, side))
            cat = world.cat_position
            if cat.x != point.x and cat.y != point.y and not world.get_content(point):
                return point


class CatchTheCatWorld:
    """Board state and turn logic for one game of catch-the-cat."""

    def __init__(self, side_size: int = 11, rng: random.Random | None = None) -> None:
        if side_size % 2 == 0:
            raise ValueError(f"side size must be odd, got {side_size}")
        self._setup(side_size, rng)
        self.clear()

    def _setup(self, side_size: int, rng: random.Random | None) -> None:
        self.rng = random.Random() if rng is None else rng
        self.side_size = side_size
        self.time_between_ticks = 1.0
        self.time_for_next_tick = 1.0
        self.cat_turn = True
        self.is_simulating = False
        self.cat_position = Point(0, 0)
        self.move_duration = 0
        self.cat_won = False
        self.catcher_won = False
        self.blocked: list[bool] = []
        self.cat: Agent = Cat(self.rng)
        self.catcher: Agent = Catcher(self.rng)

    @classmethod
    def from_state(cls, side_size: int, cat_turn: bool, cat_position: Point,
                   blocked, rng: random.Random | None = None) -> CatchTheCatWorld:
        """Build a world from an explicit board, row by row from the top left."""
        cells = [bool(cell) for cell in blocked]
        if len(cells) != side_size * side_size:
            raise ValueError(
                f"expected {side_size * side_size} cells, got {len(cells)}")
        world = cls.__new__(cls)
        world._setup(side_size, rng)
        world.cat_turn = cat_turn
        world.cat_position = Point(*cat_position)
        world.blocked = cells
        return world

    @property
    def game_over(self) -> bool:
        return self.cat_won or self.catcher_won

    def clear(self) -> None:
        """Reset to a fresh board with about 5% of the cells blocked."""
        size = self.side_size * self.side_size
        self.blocked = [False] * size
        for _ in range(math.ceil(size * 0.05)):
            self.blocked[self.rng.randint(0, size - 1)] = True
        self.cat_position = Point(0, 0)
        self.blocked[size // 2] = False
        self.is_simulating = False
        self.cat_turn = True
        self.time_for_next_tick = self.time_between_ticks
        self.cat_won = False
        self.catcher_won = False

    def _index(self, point: Point) -> int:
        half = self.side_size // 2
        return (point.y + half) * self.side_size + point.x + half

    def get_content(self, point: Point) -> bool:
        """True when the cell is blocked."""
        point = Point(*point)
        if not self.is_valid_position(point):
            raise IndexError(f"{point} is outside the board")
        return self.blocked[self._index(point)]

    def is_valid_position(self, point: Point) -> bool:
        half = self.side_size // 2
        return -half <= point.x <= half and -half <= point.y <= half

    def render(self) -> str:
        """Text picture of the board: C for the cat, # blocked, . free."""
        side = self.side_size
        cat_index = self._index(self.cat_position)
        parts = []
        for i, cell in enumerate(self.blocked):
            parts.append("C" if i == cat_index else ("#" if cell else "."))
            n = i + 1
            if (n + side) % (2 * side) == 0:
                parts.append("\n ")
            elif n % side == 0:
                parts.append("\n")
            else:
                parts.append(" ")
        return "".join(parts)

    def step(self) -> None:
        """Play one turn; after a win the next step starts a new board."""
        if self.game_over:
            self.clear()
            return

        start = time.perf_counter_ns()
        if self.cat_turn:
            move = Point(*self.cat.move(self))
            if self.cat_can_move_to(move):
                self.cat_position = move
                self.cat_won = self.cat_wins_on_space(self.cat_position)
            else:
                self.is_simulating = False
                self.catcher_won = True
        else:
            move = Point(*self.catcher.move(self))
            if self.catcher_can_move_to(move):
                self.blocked[self._index(move)] = True
                self.catcher_won = self._cat_is_surrounded()
            else:
                self.is_simulating = False
                self.cat_won = True
        self.move_duration = (time.perf_counter_ns() - start) // 1000
        self.cat_turn = not self.cat_turn

    def update(self, delta_time: float) -> None:
        """Advance the turn timer and step when it runs out."""
        if not self.is_simulating:
            return
        self.time_for_next_tick -= delta_time
        if self.time_for_next_tick < 0:
            self.step()
            self.time_for_next_tick = self.time_between_ticks

    def start(self) -> None:
        self.is_simulating = True

    def pause(self) -> None:
        self.is_simulating = False

    def _cat_is_surrounded(self) -> bool:
        return all(self.get_content(cell) for cell in neighbors(self.cat_position))

    def cat_can_move_to(self, point: Point) -> bool:
        point = Point(*point)
        return (is_neighbor(self.cat_position, point)
                and self.is_valid_position(point)
                and not self.get_content(point))

    def catcher_can_move_to(self, point: Point) -> bool:
        half = self.side_size // 2
        return (Point(*point) != self.cat_position
                and abs(point.x) <= half
                and abs(point.y) <= half)

    def cat_wins_on_space(self, point: Point) -> bool:
        half = self.side_size // 2
        return abs(point.x) == half or abs(point.y) == half