from typing import List, Optional

from pydantic import BaseModel, Field

from league_app.models.league import MatchStatus


class MatchCreateRequest(BaseModel):
    team_a: str = Field(..., min_length=1)
    team_b: str = Field(..., min_length=1)
    date: Optional[str] = None
    full_date: Optional[str] = None  # ISO 8601
    status: MatchStatus = MatchStatus.SCHEDULED
    score_a: Optional[int] = None
    score_b: Optional[int] = None
    matchday: Optional[int] = None
    venue: Optional[str] = None


class ScoreUpdateRequest(BaseModel):
    score_a: Optional[int] = Field(None, ge=0)
    score_b: Optional[int] = Field(None, ge=0)
    status: MatchStatus = MatchStatus.FINISHED


class MatchEventRequest(BaseModel):
    type: str
    player_name: str
    team_name: str
    player_id: Optional[int] = None
    minute: Optional[int] = None
    description: Optional[str] = None


class LineupRequest(BaseModel):
    starters: List[int] = Field(default_factory=list)
    subs: List[int] = Field(default_factory=list)


class LineupsRequest(BaseModel):
    team_a: Optional[LineupRequest] = None
    team_b: Optional[LineupRequest] = None


class PlayerOfTheMatchRequest(BaseModel):
    name: str
    team_name: str
    player_id: Optional[int] = None
