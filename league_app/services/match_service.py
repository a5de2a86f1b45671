import copy
from typing import Optional

from league_app.models.league import Match, MatchStatus
from league_app.services.identity_service import normalize


def merge_matches(*groups: Optional[list[Match]]) -> list[Match]:
    """Union of match lists; a match id seen twice is kept once (first wins)."""
    seen = set()
    merged = []
    for group in groups:
        for match in group or []:
            if match.id is not None:
                if match.id in seen:
                    continue
                seen.add(match.id)
            merged.append(match)
    return merged


def is_result(match: Match) -> bool:
    return (
        match.status == MatchStatus.FINISHED
        and match.score_a is not None
        and match.score_b is not None
    )


def split_matches(matches: list[Match]) -> tuple[list[Match], list[Match]]:
    """Sort matches into (results, fixtures).

    A match belongs to the results list once it is finished with both scores
    recorded; everything else stays a fixture.
    """
    results, fixtures = [], []
    for match in matches:
        (results if is_result(match) else fixtures).append(match)
    return results, fixtures


def rename_team_in_matches(matches, old_name, new_name):
    old_key = normalize(old_name)
    renamed = []
    for match in matches:
        match = copy.deepcopy(match)
        if old_key.matches(normalize(match.team_a)):
            match.team_a = new_name
        if old_key.matches(normalize(match.team_b)):
            match.team_b = new_name
        for event in match.events:
            if old_key.matches(normalize(event.team_name)):
                event.team_name = new_name
        if match.player_of_the_match and old_key.matches(normalize(match.player_of_the_match.team_name)):
            match.player_of_the_match.team_name = new_name
        renamed.append(match)
    return renamed


def find_match(matches, match_id):
    for match in matches:
        if str(match.id) == str(match_id):
            return match
    return None


def reassign_player_events(matches, team_name, source_name, source_id, target_name, target_id):
    """Point a team's events and POTM awards for one player at another player."""
    team_key = normalize(team_name)
    source_key = normalize(source_name)

    def is_source(name, player_id):
        if source_id is not None and player_id == source_id:
            return True
        return source_key.matches(normalize(name))

    reassigned = []
    for match in matches:
        match = copy.deepcopy(match)
        for event in match.events:
            if team_key.matches(normalize(event.team_name)) and is_source(event.player_name, event.player_id):
                event.player_name = target_name
                event.player_id = target_id
        potm = match.player_of_the_match
        if potm and team_key.matches(normalize(potm.team_name)) and is_source(potm.name, potm.player_id):
            potm.name = target_name
            potm.player_id = target_id
        reassigned.append(match)
    return reassigned
