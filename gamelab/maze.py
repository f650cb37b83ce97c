"""Maze cells and the interface maze generators implement."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _wall(bit: int) -> property:
    mask = 1 << bit

    def getter(self: Node) -> bool:
        return bool(self._data & mask)

    def setter(self: Node, value: bool) -> None:
        self._data = (self._data & ~mask) | (mask if value else 0)

    return property(getter, setter)


class Node:
    """A maze cell holding its four walls in the low four bits."""

    __slots__ = ("_data",)

    def __init__(self, north: bool = False, east: bool = False,
                 south: bool = False, west: bool = False) -> None:
        self._data = (int(bool(north))
                      | int(bool(east)) << 1
                      | int(bool(south)) << 2
                      | int(bool(west)) << 3)

    @classmethod
    def from_bits(cls, data: int) -> Node:
        """Build a node from its packed value, north in bit 0 to west in bit 3."""
        if not 0 <= data <= 0xF:
            raise ValueError(f"node bits must be in 0..15, got {data}")
        node = cls()
        node._data = data
        return node

    north = _wall(0)
    east = _wall(1)
    south = _wall(2)
    west = _wall(3)

    @property
    def bits(self) -> int:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (f"Node(north={self.north}, east={self.east}, "
                f"south={self.south}, west={self.west})")


class MazeGeneratorBase(ABC):
    """A generator that builds a maze one step at a time."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the generator."""

    @abstractmethod
    def step(self, world) -> bool:
        """Advance generation; return True if the world changed."""

    @abstractmethod
    def clear(self, world) -> None:
        """Reset all generation state."""


class MazeGenerator(MazeGeneratorBase):
    """Deprecated generator that counts its steps but never changes the world."""

    def __init__(self) -> None:
        self.steps_taken = 0

    @property
    def name(self) -> str:
        return "deprecated"

    def step(self, world) -> bool:
        """Record the step; the world is left untouched, so report no change."""
        self.steps_taken += 1
        return False

    def clear(self, world) -> None:
        """Reset the exploration state."""
        self.steps_taken = 0