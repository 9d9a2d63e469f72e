from __future__ import annotations

from enum import Enum
from typing import Tuple

Coord = Tuple[int, int]


class Cell(str, Enum):
    """What occupies a grid position. The value is the layout character."""
    GROUND = ' '
    WALL = '#'
    TARGET = 'x'
    CASE = 'o'
    CASE_ON_TARGET = 'O'
    PLAYER = 'i'
    PLAYER_ON_TARGET = 'I'

    def has_case(self) -> bool:
        return self in (Cell.CASE, Cell.CASE_ON_TARGET)

    def has_player(self) -> bool:
        return self in (Cell.PLAYER, Cell.PLAYER_ON_TARGET)

    def on_target(self) -> bool:
        return self in (Cell.TARGET, Cell.CASE_ON_TARGET, Cell.PLAYER_ON_TARGET)


Triple = Tuple[Cell, Cell, Cell]

# floor -> occupant -> composed cell
_COMPOSE = {
    Cell.GROUND: {Cell.CASE: Cell.CASE, Cell.PLAYER: Cell.PLAYER},
    Cell.TARGET: {Cell.CASE: Cell.CASE_ON_TARGET, Cell.PLAYER: Cell.PLAYER_ON_TARGET},
}

_SPLIT = {
    Cell.CASE: (Cell.GROUND, Cell.CASE),
    Cell.CASE_ON_TARGET: (Cell.TARGET, Cell.CASE),
    Cell.PLAYER: (Cell.GROUND, Cell.PLAYER),
    Cell.PLAYER_ON_TARGET: (Cell.TARGET, Cell.PLAYER),
}


def is_floor(cell: Cell) -> bool:
    """True for bare ground or target, the only cells an occupant can enter."""
    return cell in (Cell.GROUND, Cell.TARGET)


def volume(cell: Cell) -> int:
    """0 for bare floor, 1 for anything solid (walls included)."""
    return 0 if is_floor(cell) else 1


def decompose(cell: Cell) -> Tuple[Cell, Cell]:
    """Splits a cell into (floor, occupant). GROUND stands for "no occupant"."""
    return _SPLIT.get(cell, (cell, Cell.GROUND))


def overlay(floor: Cell, occupant: Cell) -> Cell:
    """Places an occupant on a floor. Non-floor cells are returned unchanged."""
    if not is_floor(floor):
        return floor
    return _COMPOSE[floor].get(occupant, floor)


def shift(triple: Triple) -> Tuple[Triple, bool]:
    """
    Moves the occupant of the first cell one step forward along the triple.

    Whatever stood on the middle cell is pushed onto the far cell. The move is
    legal only if the total volume of the three cells is unchanged: an
    occupant overlaid on a wall, a case or the player is swallowed, which
    shows up as lost volume. On failure the original triple is returned.
    """
    left, middle, right = triple
    l_floor, l_occupant = decompose(left)
    m_floor, m_occupant = decompose(middle)
    m_new = overlay(m_floor, l_occupant)
    r_new = overlay(right, m_occupant)
    before = volume(left) + volume(middle) + volume(right)
    after = volume(l_floor) + volume(m_new) + volume(r_new)
    if before != after:
        return triple, False
    return (l_floor, m_new, r_new), True
