"""
Display formatting for tournament standings.

Renders the standings table as fixed-width text. The layout is matched
exactly by consumers, so column widths and separators must not change.
"""

from typing import Iterable

from src.tournament.team import TeamRecord
from src.utils.constants import (
    HEADER_COLUMNS,
    NAME_COLUMN_WIDTH,
    STAT_COLUMN_WIDTH,
    COLUMN_SEPARATOR,
    ROW_SEPARATOR
)


def format_row(columns: list) -> str:
    """
    Format one table row.

    The first column is left-justified to the name width, the rest are
    right-justified to the stat width. Values wider than their column are
    kept whole.
    """
    name, *stats = columns
    cells = [f"{name:<{NAME_COLUMN_WIDTH}}"]
    cells.extend(f"{stat:>{STAT_COLUMN_WIDTH}}" for stat in stats)
    return COLUMN_SEPARATOR.join(cells)


def format_header() -> str:
    """Format the header row."""
    return format_row(HEADER_COLUMNS)


def team_columns(team: TeamRecord) -> list:
    """Column values for a team, in table order."""
    return [
        team.name,
        team.matches_played,
        team.wins,
        team.draws,
        team.losses,
        team.score,
    ]


def format_standings(teams: Iterable[TeamRecord]) -> str:
    """
    Format ranked team records as the standings table.

    Args:
        teams: Team records, already in standings order

    Returns:
        Header row followed by one row per team, joined by newlines
    """
    lines = [format_header()]
    for team in teams:
        lines.append(format_row(team_columns(team)))
    return ROW_SEPARATOR.join(lines)


class StandingsFormatter:
    """Renders an ordered sequence of team records as a table."""

    def render(self, teams: Iterable[TeamRecord]) -> str:
        return format_standings(teams)
