import copy
import logging
from typing import Optional

from league_app.errors import MergeError, TeamNotFound
from league_app.models.league import Player, PlayerOrigin, Position, Team
from league_app.services.identity_service import same_name

logger = logging.getLogger(__name__)


def next_player_id(teams: list[Team]) -> int:
    ids = [p.id for t in teams for p in t.players
           if p.origin == PlayerOrigin.REGISTERED and p.id is not None]
    return max(ids, default=0) + 1


def get_team(teams, team_id):
    for team in teams:
        if str(team.id) == str(team_id):
            return team
    raise TeamNotFound(team_id)


def add_player(teams: list[Team], team_id, name: str, position: Position = Position.MIDFIELDER,
               number: int = 0, player_id: Optional[int] = None) -> list[Team]:
    teams = copy.deepcopy(teams)
    team = get_team(teams, team_id)
    if player_id is None:
        player_id = next_player_id(teams)
    team.players.append(Player(id=player_id, name=name.strip(), position=position, number=number))
    return teams


def merge_synthesized_player(team: Team, source_id: int, target_id: int) -> Team:
    """Fold a synthesized roster entry into another player of the same team.

    Only synthesized entries may be folded away; registered players are
    never merged.
    """
    if source_id == target_id:
        raise MergeError("cannot merge a player into itself")
    team = copy.deepcopy(team)
    source = next((p for p in team.players if p.id == source_id), None)
    target = next((p for p in team.players if p.id == target_id), None)
    if source is None or target is None:
        raise MergeError(f"player {source_id if source is None else target_id} not on {team.name}")
    if source.origin != PlayerOrigin.SYNTHESIZED:
        raise MergeError(f"{source.name} is a registered player")

    target.stats = target.stats + source.stats
    team.players = [p for p in team.players if p is not source]
    logger.info("merged %r into %r on %s", source.name, target.name, team.name)
    return team


def rename_team(teams, old_name, new_name):
    teams = copy.deepcopy(teams)
    for team in teams:
        if same_name(team.name, old_name):
            team.name = new_name
    return teams
