"""
FastAPI application for the standings web interface.
"""
from fastapi import FastAPI, HTTPException

from src.web.models import TallyRequest, TallyResponse, TeamStanding, HealthResponse
from src.tournament import parse_matches, format_standings, TallyError

# Create FastAPI app
app = FastAPI(
    title="Tournament Standings",
    description="Tally round-robin match results into a standings table",
    version="1.0.0"
)


# =============================================================================
# REST API Endpoints
# =============================================================================

@app.post("/api/tally", response_model=TallyResponse)
async def tally_matches(request: TallyRequest):
    """Tally match results and return the standings."""
    try:
        teams = parse_matches(request.matches)
    except TallyError as e:
        raise HTTPException(status_code=400, detail=str(e))

    standings = [
        TeamStanding(rank=rank, **team.to_dict())
        for rank, team in enumerate(teams, 1)
    ]
    return TallyResponse(table=format_standings(teams), standings=standings)


@app.get("/api/health", response_model=HealthResponse)
async def health():
    """Health check."""
    return HealthResponse()
