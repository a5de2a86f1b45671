from league_app.models.league import (
    Match,
    MatchStatus,
    PlayerOrigin,
    Position,
    Team,
    dump,
    load_matches,
    load_teams,
    strip_undefined,
)


def test_match_loader_tolerates_messy_documents():
    match = Match.from_document({
        "id": 7,
        "teamA": "A",
        "teamB": "B",
        "scoreA": "2",
        "scoreB": "n/a",
        "status": "finished",
        "fullDate": "2024-05-01T15:00:00",
        "events": [{"type": "goal", "playerName": "X", "teamName": "A", "playerID": "12"}],
        "lineups": {"teamA": {"starters": [1, "2", None]}},
        "playerOfTheMatch": {"name": "X", "teamName": "A"},
    })

    assert match.score_a == 2
    assert match.score_b is None
    assert not match.is_decided
    assert match.date is None
    assert match.full_date == "2024-05-01T15:00:00"
    assert match.events[0].player_id == 12
    assert match.lineup_a.starters == [1, 2]
    assert match.lineup_a.subs == []
    assert match.lineup_b is None
    assert match.player_of_the_match.player_id is None


def test_unknown_status_and_position_fall_back_to_defaults():
    match = Match.from_document({"teamA": "A", "teamB": "B", "status": "???"})
    team = Team.from_document({"id": 1, "name": "A", "players": [{"id": 1, "name": "P", "position": "Sweeper"}]})

    assert match.status == MatchStatus.SCHEDULED
    assert team.players[0].position == Position.MIDFIELDER
    assert team.players[0].origin == PlayerOrigin.REGISTERED


def test_missing_collections_load_as_empty():
    team = Team.from_document({"id": 1, "name": "A", "players": None})

    assert team.players == []
    assert team.stats.points == 0
    assert load_teams(None) == []
    assert load_matches(None) == []


def test_strip_undefined_drops_none_recursively():
    assert strip_undefined({"a": None, "b": [1, None, {"c": None, "d": 0}], "e": {"f": None}}) == {
        "b": [1, {"d": 0}],
        "e": {},
    }


def test_dumped_documents_have_no_none_values():
    match = Match(id="m1", team_a="A", team_b="B")

    doc = dump([match])[0]

    assert "scoreA" not in doc
    assert "playerOfTheMatch" not in doc
    assert load_matches([doc]) == [match]


def test_display_date_and_full_date_both_survive_a_save():
    doc = {"id": "m1", "teamA": "A", "teamB": "B", "date": "Sat 5 Oct", "fullDate": "2024-10-05T15:00:00"}

    saved = dump([Match.from_document(doc)])[0]

    assert saved["date"] == "Sat 5 Oct"
    assert saved["fullDate"] == "2024-10-05T15:00:00"


def test_players_without_an_id_load_with_none():
    team = Team.from_document({"id": 1, "name": "A", "players": [{"name": "P"}, {"id": "x", "name": "Q"}]})

    assert [p.id for p in team.players] == [None, None]
    assert "id" not in dump([team])[0]["players"][0]
