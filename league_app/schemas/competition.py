from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from league_app.models.league import Position


class CompetitionCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    # raw documents as exported by the content site; loaded tolerantly
    teams: List[Dict[str, Any]] = Field(default_factory=list)
    fixtures: List[Dict[str, Any]] = Field(default_factory=list)
    results: List[Dict[str, Any]] = Field(default_factory=list)


class CompetitionStatusRequest(BaseModel):
    status: str


class TeamCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    id: Optional[int] = None


class TeamRenameRequest(BaseModel):
    old_name: str
    new_name: str = Field(..., min_length=1)


class PlayerCreateRequest(BaseModel):
    name: str = Field(..., min_length=1)
    position: Position = Position.MIDFIELDER
    number: int = 0
    id: Optional[int] = None


class PlayerMergeRequest(BaseModel):
    source_id: int  # synthesized entry to fold away
    target_id: int
