"""Command-line runner that plays catch-the-cat between the two AI agents."""

from __future__ import annotations

import argparse
import random

from gamelab.hexgrid import CatchTheCatWorld


def play(side_size: int = 21, max_turns: int = 1000,
         rng: random.Random | None = None) -> CatchTheCatWorld:
    """Play turns until someone wins or ``max_turns`` have been taken."""
    world = CatchTheCatWorld(side_size, rng)
    turns = 0
    while not world.game_over and turns < max_turns:
        world.step()
        turns += 1
    return world


def _outcome(world: CatchTheCatWorld) -> str:
    if world.cat_won:
        return "Cat won"
    if world.catcher_won:
        return "Catcher won"
    return "No winner"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="catchthecat",
                                     description="Play catch the cat on a hex grid.")
    parser.add_argument("--size", type=int, default=21, help="odd side length of the board")
    parser.add_argument("--turns", type=int, default=1000, help="maximum number of turns")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        world = play(args.size, args.turns, random.Random(args.seed))
    except ValueError as error:
        parser.error(str(error))
    print(world.render())
    print(_outcome(world))
    return 0