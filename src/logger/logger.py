"""
Logging module for the project
"""

import logging

# Set up logging
# Use --log-level DEBUG to see every paddle hit
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger("pong")
