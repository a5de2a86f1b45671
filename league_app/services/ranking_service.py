import copy
import logging
from datetime import datetime, timezone
from typing import Optional

from league_app.models.league import Match, TableRow, Team
from league_app.services.match_service import merge_matches
from league_app.services.player_stats_service import TeamIndex, reconcile

logger = logging.getLogger(__name__)

WIN_POINTS = 3
DRAW_POINTS = 1
FORM_LENGTH = 5


def match_time(match: Match) -> datetime:
    """Ordering timestamp; missing or unreadable dates sort first."""
    stamp = match.full_date or match.date
    if not stamp:
        return datetime.min
    try:
        value = datetime.fromisoformat(str(stamp).replace("Z", "+00:00"))
    except ValueError:
        logger.debug("match %s: unreadable date %r", match.id, stamp)
        return datetime.min
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def decided_in_order(matches: list[Match]) -> list[Match]:
    return sorted((m for m in matches if m.is_decided), key=match_time)


def reset_table(teams: list[Team]) -> list[Team]:
    reset = []
    for team in teams:
        team = copy.deepcopy(team)
        team.stats = TableRow()
        reset.append(team)
    return reset


def push_form(form: str, result: str) -> str:
    return " ".join(([result] + form.split())[:FORM_LENGTH])


def _record(row: TableRow, scored: int, conceded: int, result: str, away: bool):
    row.played += 1
    row.goals_scored += scored
    row.goals_conceded += conceded
    row.goal_difference = row.goals_scored - row.goals_conceded
    if result == "W":
        row.won += 1
        row.points += WIN_POINTS
        if away:
            row.away_wins += 1
    elif result == "D":
        row.drawn += 1
        row.points += DRAW_POINTS
    else:
        row.lost += 1
    row.form = push_form(row.form, result)


def replay(teams: list[Team], decided: list[Match]) -> list[Team]:
    index = TeamIndex(copy.deepcopy(t) for t in teams)
    for match in decided:
        home = index.resolve(match.team_a)
        away = index.resolve(match.team_b)
        if home is None or away is None:
            logger.debug("match %s: %r v %r not in table", match.id, match.team_a, match.team_b)
            continue

        a, b = match.score_a, match.score_b
        if a > b:
            res_a, res_b = "W", "L"
        elif a < b:
            res_a, res_b = "L", "W"
        else:
            res_a = res_b = "D"

        _record(home.stats, a, b, res_a, away=False)
        _record(away.stats, b, a, res_b, away=True)
    return index.teams()


def rank(teams: list[Team]) -> list[Team]:
    # Ties after awayWins keep their input order
    return sorted(
        teams,
        key=lambda t: (
            t.stats.points,
            t.stats.goal_difference,
            t.stats.goals_scored,
            t.stats.away_wins,
        ),
        reverse=True,
    )


def compute_standings(teams: list[Team], results: list[Match], fixtures: Optional[list[Match]] = None) -> list[Team]:
    matches = merge_matches(results, fixtures)
    reconciled = reconcile(teams, matches)
    table = replay(reset_table(reconciled), decided_in_order(matches))
    return rank(table)


def compute_group_standings(group_teams: list[Team], matches: list[Match]) -> list[Team]:
    """Standings for a group: only the group's teams appear in the table."""
    return compute_standings(group_teams, matches, [])
