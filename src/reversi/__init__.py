"""
Reversi rules engine.
"""

from .game import Color, GameState, ReversiGame

__all__ = ['Color', 'GameState', 'ReversiGame']
