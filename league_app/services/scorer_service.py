from typing import Optional

from league_app.models.league import Match, ScorerRecord, Team
from league_app.services.match_service import merge_matches
from league_app.services.player_stats_service import reconcile

GOAL_WEIGHT = 10
POTM_WEIGHT = 25


def composite_score(goals: int, potm_wins: int) -> int:
    return goals * GOAL_WEIGHT + potm_wins * POTM_WEIGHT


def top_scorers(teams: list[Team], fixtures: Optional[list[Match]] = None, results: Optional[list[Match]] = None) -> list[ScorerRecord]:
    """Leaderboard of players with at least one goal or POTM award."""
    matches = merge_matches(fixtures, results)
    records = []
    for team in reconcile(teams, matches):
        for player in team.players:
            goals, potm = player.stats.goals, player.stats.potm_wins
            if goals <= 0 and potm <= 0:
                continue
            records.append(ScorerRecord(
                name=player.name,
                team=team.name,
                goals=goals,
                potm_wins=potm,
                composite_score=composite_score(goals, potm),
                player_id=player.id,
            ))
    return sorted(records, key=lambda r: r.composite_score, reverse=True)
