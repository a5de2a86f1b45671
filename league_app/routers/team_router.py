from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from league_app.database import get_db
from league_app.models.league import Team
from league_app.schemas.competition import PlayerCreateRequest, PlayerMergeRequest, TeamCreateRequest, TeamRenameRequest
from league_app.services import competition_service, player_service
from league_app.services.match_service import reassign_player_events, rename_team_in_matches

router = APIRouter(prefix="/competitions/{competition_id}/teams")


@router.get("/")
def list_teams(competition_id: str, db: Session = Depends(get_db)):
    c = competition_service.get_or_raise(db, competition_id)
    return c.standings


@router.post("/", status_code=201)
def create_team(competition_id: str, body: TeamCreateRequest, db: Session = Depends(get_db)):
    def change(aggregate):
        team_id = body.id
        if team_id is None:
            ids = [t.id for t in aggregate.teams if isinstance(t.id, int)]
            team_id = max(ids, default=0) + 1
        aggregate.teams.append(Team(id=team_id, name=body.name.strip()))
        return aggregate

    c = competition_service.update(db, competition_id, change)
    return {"version": c.version, "teams": c.teams}


@router.post("/rename")
def rename_team(competition_id: str, body: TeamRenameRequest, db: Session = Depends(get_db)):
    def change(aggregate):
        aggregate.teams = player_service.rename_team(aggregate.teams, body.old_name, body.new_name)
        aggregate.fixtures = rename_team_in_matches(aggregate.fixtures, body.old_name, body.new_name)
        aggregate.results = rename_team_in_matches(aggregate.results, body.old_name, body.new_name)
        return aggregate

    c = competition_service.update(db, competition_id, change)
    return {"version": c.version, "teams": [t["name"] for t in c.teams]}


@router.post("/{team_id}/players", status_code=201)
def create_player(competition_id: str, team_id: int, body: PlayerCreateRequest, db: Session = Depends(get_db)):
    def change(aggregate):
        aggregate.teams = player_service.add_player(
            aggregate.teams, team_id, body.name, body.position, body.number, body.id
        )
        return aggregate

    c = competition_service.update(db, competition_id, change)
    team = player_service.get_team(competition_service.read_aggregate(c).teams, team_id)
    return team.to_document()


@router.post("/{team_id}/players/merge")
def merge_players(competition_id: str, team_id: int, body: PlayerMergeRequest, db: Session = Depends(get_db)):
    c = competition_service.get_or_raise(db, competition_id)
    derived = player_service.get_team(competition_service.read_standings(c), team_id)
    # validates the merge; synthesized stats come from events, so the events move
    merged = player_service.merge_synthesized_player(derived, body.source_id, body.target_id)
    source = next(p for p in derived.players if p.id == body.source_id)
    target = next(p for p in merged.players if p.id == body.target_id)

    def change(aggregate):
        aggregate.fixtures = reassign_player_events(
            aggregate.fixtures, derived.name, source.name, source.id, target.name, target.id
        )
        aggregate.results = reassign_player_events(
            aggregate.results, derived.name, source.name, source.id, target.name, target.id
        )
        return aggregate

    c = competition_service.update(db, competition_id, change)
    team = player_service.get_team(competition_service.read_standings(c), team_id)
    return {"version": c.version, "team": team.to_document()}
