"""
Utilities module for tournament standings.
"""
from src.utils.constants import (
    FIELD_DELIMITER, FIELDS_PER_RECORD,
    WIN, LOSS, DRAW, OUTCOME_NAMES,
    POINTS_PER_WIN, POINTS_PER_DRAW,
    HEADER_COLUMNS, NAME_COLUMN_WIDTH, STAT_COLUMN_WIDTH,
    COLUMN_SEPARATOR, ROW_SEPARATOR
)

__all__ = [
    'FIELD_DELIMITER', 'FIELDS_PER_RECORD',
    'WIN', 'LOSS', 'DRAW', 'OUTCOME_NAMES',
    'POINTS_PER_WIN', 'POINTS_PER_DRAW',
    'HEADER_COLUMNS', 'NAME_COLUMN_WIDTH', 'STAT_COLUMN_WIDTH',
    'COLUMN_SEPARATOR', 'ROW_SEPARATOR'
]
