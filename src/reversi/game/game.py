"""
Reversi game module.
Handles move application and turn flow.

Game states are immutable values: `new_game` builds the starting state and
`attempt_move` returns the state after a move. `ReversiGame` keeps the
current state for a presentation layer.
"""
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from .board import Board, CellState, Color, Coord
from .legality import LegalityIndex

logger = logging.getLogger(__name__)

GAME_OVER = "Game Over"


@dataclass(frozen=True)
class GameState:
    """
    A position together with whose turn it is.

    status is "Game Over" when neither color can move, otherwise the name
    of the color to move. passed is True when the last move left the
    opponent without a legal target, so the same color moves again.

    The board is frozen once it belongs to a state; legality is derived from
    it and so takes no part in comparisons.
    """
    board: Board
    legality: LegalityIndex = field(compare=False)
    turn: Color
    status: str
    passed: bool = False

    def __post_init__(self):
        self.board.freeze()

    @property
    def is_over(self) -> bool:
        return self.status == GAME_OVER

    def legal_targets(self, color: Color) -> FrozenSet[Coord]:
        return self.legality.targets(color)


def new_game() -> GameState:
    """Return the starting position with Black to move."""
    board = Board()
    return GameState(
        board=board,
        legality=LegalityIndex.from_board(board),
        turn=Color.BLACK,
        status=Color.BLACK.name,
    )


def transition_turn(board: Board, legality: LegalityIndex, mover: Color) -> GameState:
    """
    Decide who moves after `mover` has played.

    The opponent moves if it has any legal target; otherwise `mover` moves
    again. If neither color can move the game is over and the turn is left
    with `mover`.
    """
    can_move = {color: legality.can_move(color) for color in Color}
    opponent = mover.opposite()
    turn = opponent if can_move[opponent] else mover

    if not any(can_move.values()):
        logger.debug("No legal moves for either color, game over")
        return GameState(board, legality, turn, GAME_OVER)

    passed = turn is mover
    if passed:
        logger.debug("%s has no legal move, %s plays again", opponent.name, mover.name)
    return GameState(board, legality, turn, turn.name, passed)


def attempt_move(state: GameState, row: int, col: int) -> GameState:
    """
    Play the current color at (row, col).

    Args:
        state: Position to play in
        row: Row of the move (0-7)
        col: Column of the move (0-7)

    Returns:
        The new state, or `state` itself if the move is off the board or
        not legal for the color to move. Non-integer coordinates
        count as off the board.
    """
    if not Board.in_bounds(row, col):
        logger.debug("Ignoring off-board move (%s, %s)", row, col)
        return state

    color = state.turn
    captured = state.legality.captures(row, col, color)
    if not captured:
        logger.debug("Ignoring illegal move (%s, %s) for %s", row, col, color.name)
        return state

    board = state.board.copy()
    board.place(row, col, color)
    for r, c in captured:
        board.place(r, c, color)
    logger.debug("%s plays (%d, %d), flipping %d", color.name, row, col, len(captured))

    # Captures can change legality anywhere, so rebuild the whole index
    legality = LegalityIndex.from_board(board)
    return transition_turn(board, legality, color)


class ReversiGame:
    """
    Main game class for Reversi that holds the current state for a
    presentation layer.
    """

    def __init__(self):
        """Initialize a new Reversi game."""
        self._state = new_game()

    @property
    def state(self) -> GameState:
        """The current immutable game state."""
        return self._state

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self._state = new_game()
        logger.debug("Game reset")

    def attempt_move(self, row: int, col: int) -> bool:
        """
        Make a move for the color whose turn it is.

        Returns:
            bool: True if the move was legal and applied, False otherwise
        """
        before = self._state
        self._state = attempt_move(before, row, col)
        return self._state is not before

    def board_snapshot(self) -> Tuple[Tuple[CellState, ...], ...]:
        return self._state.board.snapshot()

    def legal_targets(self, color: Color) -> FrozenSet[Coord]:
        """Cells where `color` could play in the current position."""
        return self._state.legal_targets(color)

    def current_turn(self) -> Color:
        return self._state.turn

    def status_message(self) -> str:
        """Status text: "BLACK", "WHITE" or "Game Over"."""
        return self._state.status

    def is_game_over(self) -> bool:
        return self._state.is_over

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current stone counts.

        Returns:
            Tuple of (black_count, white_count)
        """
        board = self._state.board
        return board.count(Color.BLACK), board.count(Color.WHITE)

    def winner(self) -> Optional[Color]:
        """
        Color with more stones once the game is over.

        Returns:
            The winning Color, or None if the game is ongoing or drawn
        """
        if not self.is_game_over():
            return None
        black, white = self.get_score()
        if black == white:
            return None
        return Color.BLACK if black > white else Color.WHITE

    def render(self, show_hints: bool = True) -> str:
        """
        Text view of the board and status.

        With show_hints, legal targets for the color to move are marked '*'.
        """
        state = self._state
        targets = set() if state.is_over or not show_hints else state.legal_targets(state.turn)
        symbols = {None: '.', Color.BLACK: 'B', Color.WHITE: 'W'}
        grid = self.board_snapshot()
        rows = ['  ' + ' '.join(str(j) for j in range(Board.SIZE))]
        for i, line in enumerate(grid):
            cells = ['*' if (i, j) in targets else symbols[cell] for j, cell in enumerate(line)]
            rows.append(f"{i} " + ' '.join(cells))

        black, white = self.get_score()
        rows.append(f"Score - Black: {black}, White: {white}")
        rows.append(state.status)
        return "\n".join(rows)

    def __str__(self) -> str:
        """String representation of the game state."""
        return self.render()
