from __future__ import annotations

from enum import Enum
from typing import Dict

from .cell import Coord


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    @staticmethod
    def parse(text: str) -> 'Direction':
        """Accepts a direction name or a movement key (wasd, hjkl)."""
        key = text.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f'Unknown direction: {text!r}')


_ALIASES: Dict[str, Direction] = {
    'up': Direction.UP, 'w': Direction.UP, 'k': Direction.UP,
    'down': Direction.DOWN, 's': Direction.DOWN, 'j': Direction.DOWN,
    'left': Direction.LEFT, 'a': Direction.LEFT, 'h': Direction.LEFT,
    'right': Direction.RIGHT, 'd': Direction.RIGHT, 'l': Direction.RIGHT,
}


def step(coord: Coord, direction: Direction, n: int = 1) -> Coord:
    """Returns the coordinate n cells away in the given direction."""
    r, c = coord
    return r + direction.dr * n, c + direction.dc * n
