"""Shared puzzle types."""

from pathlib import Path
from typing import Callable, NamedTuple, Optional


class PartResult(NamedTuple):
    """Answer of one puzzle part, with the known answer if there is one."""
    value: int
    expected: Optional[int] = None

    @property
    def matches(self) -> Optional[bool]:
        if self.expected is None:
            return None
        return self.value == self.expected


PartFn = Callable[..., PartResult]


class Puzzle(NamedTuple):
    """A runnable puzzle: two parts and where its input lives by default."""
    name: str
    part1: PartFn
    part2: PartFn
    default_input: Path
