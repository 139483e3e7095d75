"""
Play Reversi in the terminal, two players at one keyboard.
"""
import os
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.config import Config, get_default_config
from reversi.game import ReversiGame
from reversi.logger import setup_logger

HELP = "Enter 'row col' to move, 'new' to restart, 'quit' to exit."


def parse_move(text):
    """Parse 'row col' (or 'row,col') into a tuple of ints, or None."""
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def play(game, config, logger, read=input, write=print):
    """
    Run the input loop until the player quits or input ends.

    Args:
        game: ReversiGame to drive
        config: Configuration object
        logger: Logger for moves and results
        read: Function returning one line of input
        write: Function printing one block of output
    """
    move_number = 0
    write(HELP)
    while True:
        write(game.render(show_hints=config.game.show_hints))
        try:
            line = read("> ").strip().lower()
        except EOFError:
            return

        if line in ('quit', 'exit', 'q'):
            return
        if line == 'new':
            game.reset()
            move_number = 0
            continue

        move = parse_move(line)
        if move is None:
            write(HELP)
            continue

        color = game.current_turn()
        if not game.attempt_move(*move):
            write(f"{move} is not a legal move for {color.name}")
            continue

        move_number += 1
        logger.log_move(move_number, color, move, game.get_score())
        if game.is_game_over():
            logger.log_result(game.get_score(), game.winner())
        elif game.state.passed:
            logger.log_pass(color.opposite())
            if config.game.announce_pass:
                write(f"{color.opposite().name} has no legal move and passes")


def main():
    """Run a terminal game with the specified configuration."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--no-hints', action='store_true',
                        help='Do not mark legal moves on the board')
    parser.add_argument('--log-file', action='store_true',
                        help='Also write the game log to a file')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.no_hints:
        config.game.show_hints = False
    if args.log_file:
        config.logging.log_to_file = True

    logger = setup_logger(config)
    try:
        play(ReversiGame(), config, logger)
    except KeyboardInterrupt:
        print()
    finally:
        logger.close()


if __name__ == "__main__":
    main()
