"""
Ranking rule for tournament standings.

Teams are ordered by score (descending), then by name (ascending).
Names are unique, so this is a total order.
"""

from typing import Iterable, List, Mapping, Union

from src.tournament.team import TeamRecord


def ranking_key(team: TeamRecord) -> tuple:
    """Sort key: higher score first, then alphabetical by name."""
    return (-team.score, team.name)


def rank_teams(teams: Union[Mapping[str, TeamRecord], Iterable[TeamRecord]]) -> List[TeamRecord]:
    """
    Sort team records into standings order.

    Args:
        teams: Mapping of team name -> TeamRecord, or any iterable of records

    Returns:
        New list of records, best team first
    """
    if isinstance(teams, Mapping):
        teams = teams.values()
    return sorted(teams, key=ranking_key)
