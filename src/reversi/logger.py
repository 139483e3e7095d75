"""
Logging utilities for Reversi.
"""
import os
import json
import logging
from datetime import datetime
from typing import Optional

from .config import Config
from .game import Color, Coord


class Logger:
    """Logger for game events, writing to the console and optionally a file."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.handlers = []

        # Set up console logging
        if config.logging.verbose:
            self.console = logging.StreamHandler()
            self.console.setLevel(level)
            self.console.setFormatter(formatter)
            self.handlers.append(self.console)

        # Set up file logging
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            log_file = os.path.join(self.run_dir, 'game.log')
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)
            self.save_config()

        # Configure the package logger
        self.logger = logging.getLogger('reversi')
        self._previous_level = self.logger.level
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def save_config(self):
        """Save the configuration to a JSON file."""
        os.makedirs(self.run_dir, exist_ok=True)
        config_path = os.path.join(self.run_dir, 'config.json')
        with open(config_path, 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_move(self, move_number: int, color: Color, move: Coord, score):
        """
        Log an applied move.

        Args:
            move_number: 1-based count of applied moves
            color: Color that played
            move: (row, col) of the placed stone
            score: (black, white) stone counts after the move
        """
        black, white = score
        self.logger.info(f"Move {move_number}: {color.name} at {move} - Black {black}, White {white}")

    def log_pass(self, color: Color):
        """Log that `color` had no legal move and lost its turn."""
        self.logger.info(f"{color.name} has no legal move and passes")

    def log_result(self, score, winner: Optional[Color]):
        """Log the final score and winner of a finished game."""
        black, white = score
        outcome = "draw" if winner is None else f"{winner.name} wins"
        self.logger.info(f"Game over - Black {black}, White {white} ({outcome})")

    def close(self):
        """Detach and close this logger's handlers and restore the level."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.logger.setLevel(self._previous_level)


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
