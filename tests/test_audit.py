from league_app.models.league import Match, MatchEvent, Player, Team
from league_app.services.audit_service import audit


def test_audit_reports_ghosts_synthesized_and_duplicates():
    teams = [
        Team(id=1, name="Mbabane Highlanders", players=[
            Player(id=1, name="Sandile Gamedze"),
            Player(id=2, name="sandile gamedze"),
        ]),
        Team(id=2, name="Tinkhundla Stars"),
        Team(id=3, name="tinkhundla-stars"),
    ]
    matches = [
        Match(id="m1", team_a="Mbabane Highlanders", team_b="Highlanders Reserve", events=[
            MatchEvent(type="goal", player_name="New Kid", team_name="Mbabane Highlanders"),
            MatchEvent(type="goal", player_name="Someone", team_name="Ghost FC"),
        ]),
        Match(id="m2", team_a="highlanders reserve", team_b="Tinkhundla Stars"),
    ]

    report = audit(teams, matches)

    assert report.ghost_teams == ["Ghost FC", "Highlanders Reserve"]
    assert report.synthesized_players == {"Mbabane Highlanders": ["New Kid"]}
    assert report.duplicate_players == {"Mbabane Highlanders": ["Sandile Gamedze", "sandile gamedze"]}
    assert report.duplicate_teams == [["Tinkhundla Stars", "tinkhundla-stars"]]
    assert not report.clean
    assert report.to_document()["clean"] is False


def test_clean_competition():
    teams = [Team(id=1, name="A", players=[Player(id=1, name="One")]), Team(id=2, name="B")]
    matches = [Match(id="m1", team_a="A", team_b="B", events=[
        MatchEvent(type="goal", player_name="One", team_name="A"),
    ])]

    assert audit(teams, matches).clean
