"""
Constants for tournament standings.
"""

# Input format
# One match per line: "<team A>;<team B>;<outcome>", outcome relative to team A
FIELD_DELIMITER = ";"
FIELDS_PER_RECORD = 3

# Match outcomes
WIN = "win"
LOSS = "loss"
DRAW = "draw"
OUTCOME_NAMES = [WIN, LOSS, DRAW]

# Scoring
POINTS_PER_WIN = 3
POINTS_PER_DRAW = 1

# Table layout
HEADER_COLUMNS = ["Team", "MP", "W", "D", "L", "P"]
NAME_COLUMN_WIDTH = 30
STAT_COLUMN_WIDTH = 2
COLUMN_SEPARATOR = " | "
ROW_SEPARATOR = "\n"
