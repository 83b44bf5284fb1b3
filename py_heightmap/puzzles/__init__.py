"""
Puzzle registry.

Puzzles are kept in registration order so "last" always means the most
recently added one.
"""

from collections import OrderedDict
from typing import List, Optional

from ..config import settings
from . import smoke_basin
from .base import PartFn, PartResult, Puzzle


def _define(name: str, module) -> Puzzle:
    return Puzzle(
        name=name,
        part1=module.solve_part1,
        part2=module.solve_part2,
        default_input=settings.inputs_dir / f"{name}.txt",
    )


PUZZLES = OrderedDict(
    (puzzle.name, puzzle)
    for puzzle in [
        _define("day09", smoke_basin),
    ]
)


def get_puzzle(name: str) -> Optional[Puzzle]:
    """Look up a puzzle by name, None if unknown."""
    return PUZZLES.get(name)


def list_puzzles() -> List[str]:
    """Names of all registered puzzles."""
    return list(PUZZLES.keys())


def last_puzzle() -> Puzzle:
    """Most recently registered puzzle."""
    return next(reversed(PUZZLES.values()))


__all__ = ['PUZZLES', 'PartFn', 'PartResult', 'Puzzle',
           'get_puzzle', 'list_puzzles', 'last_puzzle']
