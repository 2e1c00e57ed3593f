"""
Parser for raw match results.

Input is one match per line in the form "<team A>;<team B>;<outcome>",
where the outcome ("win", "loss" or "draw") is relative to team A.
"""

from dataclasses import dataclass
from typing import Dict, List

from src.utils.constants import (
    FIELD_DELIMITER, FIELDS_PER_RECORD, ROW_SEPARATOR,
    WIN, LOSS, DRAW, OUTCOME_NAMES
)
from src.tournament.errors import MalformedRecord, MalformedOutcome
from src.tournament.ranking import rank_teams
from src.tournament.team import TeamRecord


@dataclass(frozen=True)
class MatchResult:
    """A single parsed match line."""
    home: str
    away: str
    outcome: str
    line_number: int


def parse_line(line: str, line_number: int) -> MatchResult:
    """
    Parse one match line.

    Args:
        line: Raw line text without line terminator
        line_number: 1-based position of the line in the input

    Returns:
        MatchResult for the line

    Raises:
        MalformedRecord: If the line does not have exactly three fields
        MalformedOutcome: If the outcome is not win, loss or draw
    """
    fields = line.split(FIELD_DELIMITER)
    if len(fields) != FIELDS_PER_RECORD:
        raise MalformedRecord(line_number, line, len(fields))

    home, away, outcome = fields
    if outcome not in OUTCOME_NAMES:
        raise MalformedOutcome(line_number, line, outcome)

    return MatchResult(home=home, away=away, outcome=outcome, line_number=line_number)


def split_lines(raw_text: str) -> List[str]:
    """
    Split input into match lines on "\\n".

    A single trailing terminator is allowed and "\\r\\n" endings are
    accepted. Any other empty line is kept and fails as a malformed record.
    """
    lines = raw_text.split(ROW_SEPARATOR)
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_results(raw_text: str) -> List[MatchResult]:
    """
    Parse every line of the input.

    Every line is validated before anything is returned, so a single
    bad line fails the whole input.
    """
    return [
        parse_line(line, line_number)
        for line_number, line in enumerate(split_lines(raw_text), 1)
    ]


class MatchRecordParser:
    """
    Turns raw match text into ranked team records.

    Usage:
        parser = MatchRecordParser()
        standings = parser.parse("Alpha;Beta;win")

    Each call builds its own team mapping; nothing is shared between calls.
    """

    def parse(self, raw_text: str) -> List[TeamRecord]:
        """
        Tally all matches and return team records in standings order.

        Args:
            raw_text: Match lines, possibly empty

        Returns:
            List of TeamRecord sorted by score desc, then name asc
        """
        teams: Dict[str, TeamRecord] = {}
        for result in parse_results(raw_text):
            home = self._get_or_create(teams, result.home)
            away = self._get_or_create(teams, result.away)
            self._apply(home, away, result)

        return rank_teams(teams)

    @staticmethod
    def _get_or_create(teams: Dict[str, TeamRecord], name: str) -> TeamRecord:
        team = teams.get(name)
        if team is None:
            team = TeamRecord(name)
            teams[name] = team
        return team

    @staticmethod
    def _apply(home: TeamRecord, away: TeamRecord, result: MatchResult):
        if result.outcome == WIN:
            home.beat(away)
        elif result.outcome == LOSS:
            away.beat(home)
        elif result.outcome == DRAW:
            home.tied(away)
        else:
            line = FIELD_DELIMITER.join([result.home, result.away, result.outcome])
            raise MalformedOutcome(result.line_number, line, result.outcome)


def parse_matches(raw_text: str) -> List[TeamRecord]:
    """Convenience wrapper around MatchRecordParser.parse."""
    return MatchRecordParser().parse(raw_text)
