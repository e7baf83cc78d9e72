"""Configuration settings for The Forest Mystery."""

import logging

# --- Game Configuration ---
GAME_TITLE = "The Forest Mystery"

# The single collectible item; also the literal the "use key" command refers to.
KEY_ITEM_NAME = "Ornate Key"

# Where every new session places the player (x, y)
START_POSITION = (0, 0)

# Minimum thefuzz score (0-100) for a "Did you mean ...?" hint on unknown commands
SUGGESTION_SCORE_CUTOFF = 75

# Shown on the credits screen
CREDITS_AUTHOR = "SaeedAbuSaleh"

# --- Logging Configuration (used by main.py and web_app.py) ---
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"

# --- Web App Settings ---
WEB_PORT = 5001
