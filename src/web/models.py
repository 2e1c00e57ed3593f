"""
Pydantic models for the standings web API.

Defines request/response schemas for REST endpoints.
"""
from pydantic import BaseModel, Field
from typing import List


class TallyRequest(BaseModel):
    """Raw match results to tally."""
    matches: str = Field(
        default="",
        description="One match per line: '<team A>;<team B>;<win|loss|draw>'"
    )


class TeamStanding(BaseModel):
    """A single row of the standings."""
    rank: int = Field(ge=1)
    name: str
    matches_played: int = Field(ge=0)
    wins: int = Field(ge=0)
    draws: int = Field(ge=0)
    losses: int = Field(ge=0)
    points: int = Field(ge=0)


class TallyResponse(BaseModel):
    """Standings as both the rendered table and structured rows."""
    table: str
    standings: List[TeamStanding]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
