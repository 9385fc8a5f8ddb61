"""
Starting point of the two player Pong game
"""

import argparse
import logging
from src.pong.pong_game import PongGame
from src.pong import constants
from src.logger.logger import logger
from src.utils.utils import log_controls


def main():
    """
    Starting point of Pong game
    """

    parser = argparse.ArgumentParser(description="Play two player Pong")

    # Add arguments
    parser.add_argument(
        f"--{constants.ARG_MUTE}",
        action="store_true",
        help="Play without sound",
    )
    parser.add_argument(
        "--log-level",
        dest=constants.ARG_LOG_LEVEL,
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args()
    logger.setLevel(getattr(logging, args.log_level))
    log_controls()
    game = PongGame(muted=args.mute)
    game.run()


if __name__ == "__main__":
    main()
