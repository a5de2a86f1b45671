import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from league_app.database import get_db
from league_app.errors import MatchNotFound
from league_app.models.league import Lineup, Match, MatchEvent, PlayerOfTheMatch
from league_app.schemas.match import (
    LineupsRequest,
    MatchCreateRequest,
    MatchEventRequest,
    PlayerOfTheMatchRequest,
    ScoreUpdateRequest,
)
from league_app.services import competition_service
from league_app.services.match_service import find_match

router = APIRouter(prefix="/competitions/{competition_id}/matches")


def _edit_match(db: Session, competition_id: str, match_id: str, edit):
    """Apply ``edit`` to one match and recompute the competition."""
    def change(aggregate):
        match = find_match(aggregate.matches(), match_id)
        if match is None:
            raise MatchNotFound(match_id)
        edit(match)
        return aggregate

    c = competition_service.update(db, competition_id, change)
    match = find_match(competition_service.read_aggregate(c).matches(), match_id)
    return {"version": c.version, "match": match.to_document()}


@router.get("/")
def list_matches(competition_id: str, db: Session = Depends(get_db)):
    c = competition_service.get_or_raise(db, competition_id)
    return {"fixtures": c.fixtures, "results": c.results}


@router.get("/{match_id}")
def get_match(competition_id: str, match_id: str, db: Session = Depends(get_db)):
    c = competition_service.get_or_raise(db, competition_id)
    match = find_match(competition_service.read_aggregate(c).matches(), match_id)
    if not match:
        raise HTTPException(404, "Match not found")
    return match.to_document()


@router.post("/", status_code=201)
def create_match(competition_id: str, body: MatchCreateRequest, db: Session = Depends(get_db)):
    match = Match(
        id=str(uuid.uuid4()),
        team_a=body.team_a.strip(),
        team_b=body.team_b.strip(),
        score_a=body.score_a,
        score_b=body.score_b,
        status=body.status,
        date=body.date,
        full_date=body.full_date,
        matchday=body.matchday,
        venue=body.venue,
    )

    def change(aggregate):
        aggregate.fixtures.append(match)
        return aggregate

    c = competition_service.update(db, competition_id, change)
    return {"version": c.version, "id": match.id}


@router.put("/{match_id}/score")
def update_score(competition_id: str, match_id: str, body: ScoreUpdateRequest, db: Session = Depends(get_db)):
    def edit(match):
        match.score_a = body.score_a
        match.score_b = body.score_b
        match.status = body.status

    return _edit_match(db, competition_id, match_id, edit)


@router.post("/{match_id}/events", status_code=201)
def add_event(competition_id: str, match_id: str, body: MatchEventRequest, db: Session = Depends(get_db)):
    def edit(match):
        match.events.append(MatchEvent(
            type=body.type,
            player_name=body.player_name,
            team_name=body.team_name,
            player_id=body.player_id,
            minute=body.minute,
            description=body.description,
        ))

    return _edit_match(db, competition_id, match_id, edit)


@router.put("/{match_id}/lineups")
def update_lineups(competition_id: str, match_id: str, body: LineupsRequest, db: Session = Depends(get_db)):
    def edit(match):
        if body.team_a is not None:
            match.lineup_a = Lineup(starters=body.team_a.starters, subs=body.team_a.subs)
        if body.team_b is not None:
            match.lineup_b = Lineup(starters=body.team_b.starters, subs=body.team_b.subs)

    return _edit_match(db, competition_id, match_id, edit)


@router.put("/{match_id}/player-of-the-match")
def update_player_of_the_match(competition_id: str, match_id: str, body: PlayerOfTheMatchRequest,
                               db: Session = Depends(get_db)):
    def edit(match):
        match.player_of_the_match = PlayerOfTheMatch(
            name=body.name, team_name=body.team_name, player_id=body.player_id
        )

    return _edit_match(db, competition_id, match_id, edit)
