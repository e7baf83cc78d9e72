import sys
import os
import logging

# Ensure the 'core' and 'entities' packages can be found
# This adds the project root directory to the Python path.
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config

# Import the Game class from the core module
from core.game import Game

def main():
    """Initializes and starts the game."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    # Initialize the game object
    game_instance = Game()
    # Start the menu loop
    game_instance.start()

if __name__ == "__main__":
    main()
