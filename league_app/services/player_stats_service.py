import copy
import logging
from typing import Iterable, Optional

from league_app.models.league import (
    Lineup,
    Match,
    MatchEvent,
    MatchStatus,
    Player,
    PlayerOrigin,
    PlayerStats,
    Position,
    Team,
)
from league_app.services.identity_service import normalize, synthetic_player_id

logger = logging.getLogger(__name__)

CLEAN_SHEET_POSITIONS = (Position.GOALKEEPER, Position.DEFENDER)

# event type -> PlayerStats attribute
EVENT_STAT_FIELDS = {
    "goal": "goals",
    "assist": "assists",
    "yellow-card": "yellow_cards",
    "yellow_card": "yellow_cards",
    "red-card": "red_cards",
    "red_card": "red_cards",
}


class TeamIndex:
    """Working copies of a competition's teams, addressable by normalized name.

    Teams whose names normalize to the same key are one team: the later entry
    replaces the earlier one but keeps its place in the ordering.
    """

    def __init__(self, teams: Iterable[Team]):
        self._slots: list[Team] = []
        self._by_key: dict[str, int] = {}
        for team in teams:
            key = normalize(team.name)
            if key and key in self._by_key:
                self._slots[self._by_key[key]] = team
                continue
            if key:
                self._by_key[key] = len(self._slots)
            self._slots.append(team)

    def resolve(self, name: Optional[str]) -> Optional[Team]:
        key = normalize(name)
        if not key:
            return None
        slot = self._by_key.get(key)
        return None if slot is None else self._slots[slot]

    def teams(self) -> list[Team]:
        return list(self._slots)


def find_player(team: Team, player_id: Optional[int] = None, name: Optional[str] = None) -> Optional[Player]:
    if player_id is not None:
        for player in team.players:
            if player.id == player_id:
                return player
    key = normalize(name)
    if not key:
        return None
    for player in team.players:
        if key.matches(normalize(player.name)):
            return player
    return None


def synthesize_player(event: MatchEvent) -> Player:
    player_id = event.player_id
    if player_id is None:
        player_id = synthetic_player_id(event.player_name)
    return Player(
        id=player_id,
        name=event.player_name,
        position=Position.MIDFIELDER,
        number=0,
        stats=PlayerStats(),
        origin=PlayerOrigin.SYNTHESIZED,
    )


def _working_copy(team: Team) -> Team:
    # baseline stats are kept as stored; replay adds to them
    return copy.deepcopy(team)


def _apply_player_of_the_match(index: TeamIndex, match: Match):
    potm = match.player_of_the_match
    if potm is None or not potm.team_name:
        return
    team = index.resolve(potm.team_name)
    if team is None:
        logger.debug("match %s: potm team %r not found", match.id, potm.team_name)
        return
    player = find_player(team, potm.player_id, potm.name)
    if player is None:
        logger.debug("match %s: potm %r not on %s", match.id, potm.name, team.name)
        return
    player.stats.potm_wins += 1


def _apply_event(index: TeamIndex, match: Match, event: MatchEvent):
    if not event.player_name or not event.team_name:
        return
    team = index.resolve(event.team_name)
    if team is None:
        logger.debug("match %s: event team %r not found", match.id, event.team_name)
        return
    player = find_player(team, event.player_id, event.player_name)
    if player is None:
        player = synthesize_player(event)
        team.players.append(player)
        logger.debug("synthesized player %r (%s) on %s", player.name, player.id, team.name)

    stat = EVENT_STAT_FIELDS.get(event.type.strip().lower())
    if stat:
        setattr(player.stats, stat, getattr(player.stats, stat) + 1)


def _apply_lineup(team: Optional[Team], lineup: Optional[Lineup], match: Match, score_against: Optional[int]):
    if team is None or lineup is None:
        return
    shutout = match.status == MatchStatus.FINISHED and score_against == 0
    for pid in lineup.player_ids():
        player = find_player(team, player_id=pid)
        if player is None:
            continue
        player.stats.appearances += 1
        if shutout and player.position in CLEAN_SHEET_POSITIONS:
            player.stats.clean_sheets += 1


def apply_events(index, match):
    for event in match.events:
        _apply_event(index, match, event)


def apply_awards(index, match):
    _apply_player_of_the_match(index, match)
    _apply_lineup(index.resolve(match.team_a), match.lineup_a, match, match.score_b)
    _apply_lineup(index.resolve(match.team_b), match.lineup_b, match, match.score_a)


def reconcile(teams: list[Team], matches: list[Match]) -> list[Team]:
    """Fold every match into the rosters of ``teams``.

    Player stats start from their stored values and each goal, assist, card,
    appearance, clean sheet and player-of-the-match award found in
    ``matches`` is added on top. Players named in events but missing from the
    roster are synthesized and appended. References that resolve to no team
    are skipped. Neither argument is modified.
    """
    index = TeamIndex(_working_copy(t) for t in teams)
    # events first: awards and lineups may name players synthesized by any match
    for match in matches:
        apply_events(index, match)
    for match in matches:
        apply_awards(index, match)
    return index.teams()
