"""
Legal move index for Reversi.

For every empty cell and each color, records which opponent stones a
stone of that color placed there would capture. The index is rebuilt
from the board after every move and never updated in place.
"""
from typing import Dict, FrozenSet, List, Tuple

from .board import Board, Color, Coord

# up-left, up, up-right, left, right, down-left, down, down-right
DIRECTIONS: Tuple[Coord, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def _scan_direction(board: Board, row: int, col: int, dr: int, dc: int,
                    color: Color) -> List[Coord]:
    """
    Walk from (row, col) along (dr, dc) collecting opponent stones.

    The run only counts if it is closed by a stone of `color`; running off
    the board or into an empty cell first discards it.
    """
    opponent = color.opposite()
    run: List[Coord] = []
    r, c = row + dr, col + dc
    while board.in_bounds(r, c):
        stone = board.get(r, c)
        if stone is opponent:
            run.append((r, c))
        elif stone is color:
            return run
        else:
            return []
        r += dr
        c += dc
    return []


def captures_from(board: Board, row: int, col: int, color: Color) -> Tuple[Coord, ...]:
    """
    Stones captured if `color` plays at (row, col).

    Returns:
        Coordinates of every captured stone, direction by direction in
        DIRECTIONS order. Empty if the cell is off the board, occupied, or the
        move is illegal.
    """
    if not board.in_bounds(row, col):
        return ()
    if not board.is_empty(row, col):
        return ()
    captured: List[Coord] = []
    for dr, dc in DIRECTIONS:
        captured.extend(_scan_direction(board, row, col, dr, dc, color))
    return tuple(captured)


class LegalityIndex:
    """Capture lists for every cell of a board, for both colors."""

    def __init__(self, captures: Dict[Color, Dict[Coord, Tuple[Coord, ...]]]):
        # Only cells with a nonempty capture list are stored
        self._captures = captures

    @classmethod
    def from_board(cls, board: Board) -> 'LegalityIndex':
        """Compute the index for every cell of `board`."""
        captures: Dict[Color, Dict[Coord, Tuple[Coord, ...]]] = {color: {} for color in Color}
        for row, col in board.cells():
            if not board.is_empty(row, col):
                continue
            for color in Color:
                found = captures_from(board, row, col, color)
                if found:
                    captures[color][(row, col)] = found
        return cls(captures)

    def captures(self, row: int, col: int, color: Color) -> Tuple[Coord, ...]:
        """Capture list for `color` at (row, col); empty when not a legal target."""
        return self._captures[color].get((row, col), ())

    def is_legal(self, row: int, col: int, color: Color) -> bool:
        return (row, col) in self._captures[color]

    def targets(self, color: Color) -> FrozenSet[Coord]:
        """All cells where `color` may play."""
        return frozenset(self._captures[color])

    def can_move(self, color: Color) -> bool:
        return bool(self._captures[color])

    def __repr__(self) -> str:
        counts = ', '.join(f"{color.name}={len(self._captures[color])}" for color in Color)
        return f"LegalityIndex({counts})"
