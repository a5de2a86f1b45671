from collections import defaultdict
from dataclasses import dataclass, field

from league_app.models.league import Match, PlayerOrigin, Team
from league_app.services.identity_service import normalize
from league_app.services.player_stats_service import TeamIndex, reconcile


@dataclass
class AuditReport:
    ghost_teams: list[str] = field(default_factory=list)
    synthesized_players: dict[str, list[str]] = field(default_factory=dict)
    duplicate_players: dict[str, list[str]] = field(default_factory=dict)
    duplicate_teams: list[list[str]] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not (self.ghost_teams or self.synthesized_players
                    or self.duplicate_players or self.duplicate_teams)

    def to_document(self) -> dict:
        return {
            "ghostTeams": self.ghost_teams,
            "synthesizedPlayers": self.synthesized_players,
            "duplicatePlayers": self.duplicate_players,
            "duplicateTeams": self.duplicate_teams,
            "clean": self.clean,
        }


def _ghost_teams(index: TeamIndex, matches: list[Match]) -> list[str]:
    ghosts = {}
    for match in matches:
        names = [match.team_a, match.team_b] + [e.team_name for e in match.events]
        for name in names:
            if name and index.resolve(name) is None:
                ghosts.setdefault(normalize(name), name.strip())
    return sorted(ghosts.values())


def _duplicate_team_names(teams: list[Team]) -> list[list[str]]:
    groups = defaultdict(list)
    for team in teams:
        key = normalize(team.name)
        if key:
            groups[key].append(team.name)
    return [names for names in groups.values() if len(names) > 1]


def audit(teams: list[Team], matches: list[Match]) -> AuditReport:
    """Data-quality findings the engine itself tolerates silently."""
    report = AuditReport(
        ghost_teams=_ghost_teams(TeamIndex(teams), matches),
        duplicate_teams=_duplicate_team_names(teams),
    )
    for team in reconcile(teams, matches):
        synthesized = [p.name for p in team.players if p.origin == PlayerOrigin.SYNTHESIZED]
        if synthesized:
            report.synthesized_players[team.name] = synthesized

        names = defaultdict(list)
        for player in team.players:
            key = normalize(player.name)
            if key:
                names[key].append(player.name)
        dupes = [n for group in names.values() if len(group) > 1 for n in group]
        if dupes:
            report.duplicate_players[team.name] = dupes
    return report
