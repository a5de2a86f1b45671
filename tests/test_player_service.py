import pytest

from league_app.errors import MergeError, TeamNotFound
from league_app.models.league import Player, PlayerOrigin, PlayerStats, Position, Team
from league_app.services.player_service import add_player, merge_synthesized_player, rename_team


def make_team():
    return Team(id=1, name="Malanti Chiefs", players=[
        Player(id=1, name="Jabulani Dlamini", position=Position.FORWARD, stats=PlayerStats(goals=4, appearances=6)),
        Player(id=2, name="Sipho Maseko", stats=PlayerStats(goals=1)),
        Player(id=9001, name="J. Dlamini", stats=PlayerStats(goals=2, potm_wins=1), origin=PlayerOrigin.SYNTHESIZED),
    ])


def test_merge_folds_synthesized_player_into_target():
    team = make_team()

    merged = merge_synthesized_player(team, 9001, 1)

    assert [p.id for p in merged.players] == [1, 2]
    assert merged.players[0].stats == PlayerStats(goals=6, appearances=6, potm_wins=1)
    assert len(team.players) == 3


def test_registered_players_are_never_merged():
    with pytest.raises(MergeError):
        merge_synthesized_player(make_team(), 2, 1)


def test_merge_rejects_missing_or_same_player():
    with pytest.raises(MergeError):
        merge_synthesized_player(make_team(), 9001, 404)
    with pytest.raises(MergeError):
        merge_synthesized_player(make_team(), 9001, 9001)


def test_add_player_assigns_next_registered_id():
    teams = [make_team(), Team(id=2, name="Other")]

    updated = add_player(teams, 2, "  New Keeper ", Position.GOALKEEPER, 1)

    new = updated[1].players[0]
    assert (new.id, new.name, new.position, new.origin) == (3, "New Keeper", Position.GOALKEEPER, PlayerOrigin.REGISTERED)
    assert teams[1].players == []


def test_add_player_to_unknown_team():
    with pytest.raises(TeamNotFound):
        add_player([make_team()], 5, "Nobody")


def test_rename_team_matches_normalized_name():
    renamed = rename_team([make_team()], "malanti-chiefs", "Malanti Chiefs FC")
    assert renamed[0].name == "Malanti Chiefs FC"
