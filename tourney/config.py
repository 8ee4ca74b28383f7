"""
Central configuration for the tournament statistics engine.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DATA_FOLDER = PROJECT_ROOT / "data"
INPUT_FOLDER = DATA_FOLDER / "raw"
OUTPUT_FOLDER = DATA_FOLDER / "processed"

# Input file pattern for batch processing
TOURNAMENT_PATTERN = "tournament_*.json"

# --- Tournament Types ---
ALLOWED_TOURNAMENT_TYPES = frozenset({"GROUP", "ELIMINATORY"})
DEFAULT_TOURNAMENT_TYPE = "GROUP"

# --- Scoring ---
POINTS_WIN = 3
POINTS_DRAW = 1
POINTS_LOSS = 0

# Any real margin (>= 0) beats this, so the first match always registers
HIGHEST_MARGIN_SENTINEL = -1

# Skip matches with no recorded score at all (opt-in, off by default)
STRICT_MODE = False

# --- Output ---
STANDINGS_COLUMNS = [
    'position', 'player_id', 'points', 'goal_difference', 'wins', 'draws', 'losses'
]

# --- Input Validation ---
MAX_INPUT_SIZE = 1_000_000  # Maximum JSON document size in bytes (~1MB)
