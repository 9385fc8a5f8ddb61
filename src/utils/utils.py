"""
Common utility functions used by various packages
"""

from src.logger.logger import logger


def print_horizontal_line():
    """
    Print a horizontal line to the console
    """
    logger.info("=" * 40)


def log_controls():
    """
    Print the keyboard controls to the console
    """
    print_horizontal_line()
    logger.info("Left player:  W / S")
    logger.info("Right player: Up / Down")
    logger.info("SPACE starts the match, Esc quits")
    print_horizontal_line()
