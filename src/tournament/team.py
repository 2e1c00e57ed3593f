"""
Per-team record accumulated while tallying match results.
"""

from dataclasses import dataclass
from typing import Dict, Any

from src.utils.constants import POINTS_PER_WIN, POINTS_PER_DRAW


@dataclass
class TeamRecord:
    """Win/draw/loss counters for a single team."""
    name: str
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def matches_played(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def score(self) -> int:
        return self.wins * POINTS_PER_WIN + self.draws * POINTS_PER_DRAW

    def beat(self, other: 'TeamRecord'):
        """Record a win for this team and a loss for the opponent."""
        self.wins += 1
        other.losses += 1

    def tied(self, other: 'TeamRecord'):
        """Record a draw for both teams."""
        self.draws += 1
        other.draws += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict including derived values."""
        return {
            'name': self.name,
            'matches_played': self.matches_played,
            'wins': self.wins,
            'draws': self.draws,
            'losses': self.losses,
            'points': self.score,
        }
