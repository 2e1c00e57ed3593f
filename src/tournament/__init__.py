"""
Tournament module for tallying round-robin match results.

Provides:
- MatchRecordParser: Turns raw match lines into ranked team records
- rank_teams: Standings order (points desc, name asc)
- format_standings: Fixed-width standings table
- tally: Raw match text in, rendered table out
"""

from src.tournament.team import TeamRecord
from src.tournament.errors import TallyError, MalformedRecord, MalformedOutcome
from src.tournament.ranking import rank_teams, ranking_key
from src.tournament.parser import (
    MatchRecordParser, MatchResult, parse_line, split_lines, parse_results, parse_matches
)
from src.tournament.display import StandingsFormatter, format_standings, format_row, format_header


def tally(raw_match_text: str) -> str:
    """
    Compute the standings table for a list of match results.

    Args:
        raw_match_text: One "<team A>;<team B>;<outcome>" match per line

    Returns:
        Rendered standings table

    Raises:
        MalformedRecord: If a line does not have exactly three fields
        MalformedOutcome: If an outcome is not win, loss or draw
    """
    return format_standings(parse_matches(raw_match_text))


__all__ = [
    'TeamRecord',
    'TallyError',
    'MalformedRecord',
    'MalformedOutcome',
    'rank_teams',
    'ranking_key',
    'MatchRecordParser',
    'MatchResult',
    'parse_line',
    'split_lines',
    'parse_results',
    'parse_matches',
    'StandingsFormatter',
    'format_standings',
    'format_row',
    'format_header',
    'tally',
]
