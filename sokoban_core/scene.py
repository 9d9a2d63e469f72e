from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .cell import Cell, Coord, Triple, shift
from .direction import Direction, step


class LayoutError(ValueError):
    """Raised when a textual layout cannot be turned into a grid."""


@dataclass(frozen=True)
class MoveRecord:
    """The three coordinates a move touched and their cells before the move."""
    origin: Coord
    middle: Coord
    far: Coord
    cells: Triple


@dataclass
class Scene:
    """Mutable puzzle grid with the player position and an undo history."""
    grid: List[List[Cell]] = field(default_factory=list)
    player: Coord = (0, 0)
    history: List[MoveRecord] = field(default_factory=list)

    def load(self, layout: Iterable[str]) -> None:
        """Replaces the grid with a parsed layout and starts a fresh history."""
        grid: List[List[Cell]] = []
        players: List[Coord] = []
        for r, row in enumerate(layout):
            cells: List[Cell] = []
            for c, ch in enumerate(row):
                try:
                    cell = Cell(ch)
                except ValueError:
                    raise LayoutError(f'Illegal character {ch!r} at row {r}, column {c}') from None
                if cell.has_player():
                    players.append((r, c))
                cells.append(cell)
            grid.append(cells)
        if len(players) != 1:
            raise LayoutError(f'Layout must hold exactly one player, found {len(players)}')
        self.grid = grid
        self.player = players[0]
        self.history = []

    def size(self) -> Tuple[int, int]:
        """Returns (rows, columns of the first row)."""
        if not self.grid:
            return (0, 0)
        return (len(self.grid), len(self.grid[0]))

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < len(self.grid) and 0 <= c < len(self.grid[r])

    def at(self, coord: Coord) -> Cell:
        r, c = coord
        return self.grid[r][c]

    def _put(self, coord: Coord, cell: Cell) -> None:
        r, c = coord
        self.grid[r][c] = cell

    def move(self, direction: Direction) -> bool:
        """
        Tries to walk the player one cell in the given direction, pushing a case
        if one stands in the way. Returns whether the move happened.

        A move that would look past the edge of the grid is rejected like any
        other illegal move; nothing changes and no history is recorded.
        """
        origin = self.player
        middle = step(origin, direction)
        far = step(origin, direction, 2)
        if not (self.in_bounds(middle) and self.in_bounds(far)):
            return False
        before: Triple = (self.at(origin), self.at(middle), self.at(far))
        after, moved = shift(before)
        if not moved:
            return False
        for coord, cell in zip((origin, middle, far), after):
            self._put(coord, cell)
        self.player = middle
        self.history.append(MoveRecord(origin, middle, far, before))
        return True

    def move_up(self) -> bool:
        return self.move(Direction.UP)

    def move_down(self) -> bool:
        return self.move(Direction.DOWN)

    def move_left(self) -> bool:
        return self.move(Direction.LEFT)

    def move_right(self) -> bool:
        return self.move(Direction.RIGHT)

    def undo(self) -> bool:
        """Reverts the latest move. Returns False if there was nothing to undo."""
        if not self.history:
            return False
        record = self.history.pop()
        for coord, cell in zip((record.origin, record.middle, record.far), record.cells):
            self._put(coord, cell)
        self.player = record.origin
        return True

    @property
    def move_count(self) -> int:
        return len(self.history)

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    def is_solved(self) -> bool:
        """True when no case is left standing off a target."""
        return not any(cell == Cell.CASE for row in self.grid for cell in row)

    def cases(self) -> List[Coord]:
        """Coordinates of every case, on a target or not."""
        return [
            (r, c)
            for r, row in enumerate(self.grid)
            for c, cell in enumerate(row)
            if cell.has_case()
        ]

    def rows(self) -> List[str]:
        """Renders the grid back into layout rows."""
        return [''.join(cell.value for cell in row) for row in self.grid]

    def pretty(self) -> str:
        """Human-readable board, one layout row per line."""
        return '\n'.join(self.rows())
