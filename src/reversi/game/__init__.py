"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import Board, Color, CellState, Coord, EMPTY
from .legality import LegalityIndex, captures_from, DIRECTIONS
from .game import GameState, ReversiGame, new_game, attempt_move, transition_turn, GAME_OVER

__all__ = [
    'Board', 'Color', 'CellState', 'Coord', 'EMPTY',
    'LegalityIndex', 'captures_from', 'DIRECTIONS',
    'GameState', 'ReversiGame', 'new_game', 'attempt_move', 'transition_turn', 'GAME_OVER',
]
