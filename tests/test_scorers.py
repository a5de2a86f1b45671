from league_app.models.league import Match, MatchEvent, MatchStatus, Player, PlayerOfTheMatch, PlayerStats, Team
from league_app.services.scorer_service import composite_score, top_scorers


def goal(player, team):
    return MatchEvent(type="goal", player_name=player, team_name=team)


def make_teams():
    return [
        Team(id=1, name="Manzini Wanderers", players=[
            Player(id=1, name="Felix Badenhorst", stats=PlayerStats(goals=2)),
            Player(id=2, name="Quiet Defender"),
        ]),
        Team(id=2, name="Young Buffaloes", players=[Player(id=3, name="Sabelo Ndzinisa")]),
    ]


def test_composite_score_weights():
    assert composite_score(3, 0) == 30
    assert composite_score(1, 2) == 60


def test_leaderboard_ranks_by_composite_score():
    fixtures = [
        Match(id="f1", team_a="Manzini Wanderers", team_b="Young Buffaloes", status=MatchStatus.LIVE,
              events=[goal("Sabelo Ndzinisa", "Young Buffaloes")]),
    ]
    results = [
        Match(id="r1", team_a="Manzini Wanderers", team_b="Young Buffaloes", score_a=1, score_b=0,
              status=MatchStatus.FINISHED, events=[goal("Felix Badenhorst", "Manzini Wanderers")],
              player_of_the_match=PlayerOfTheMatch(name="Sabelo Ndzinisa", team_name="Young Buffaloes")),
        Match(id="r2", team_a="Young Buffaloes", team_b="Manzini Wanderers", score_a=1, score_b=0,
              status=MatchStatus.FINISHED,
              player_of_the_match=PlayerOfTheMatch(name="Sabelo Ndzinisa", team_name="Young Buffaloes")),
    ]

    scorers = top_scorers(make_teams(), fixtures, results)

    assert [(s.name, s.team, s.goals, s.potm_wins, s.composite_score) for s in scorers] == [
        ("Sabelo Ndzinisa", "Young Buffaloes", 1, 2, 60),
        ("Felix Badenhorst", "Manzini Wanderers", 3, 0, 30),
    ]
    assert scorers[1].player_id == 1


def test_players_without_goals_or_awards_are_excluded():
    scorers = top_scorers(make_teams())

    assert [s.name for s in scorers] == ["Felix Badenhorst"]
    assert scorers[0].composite_score == 20


def test_synthesized_scorers_appear():
    fixtures = [Match(id="f1", team_a="Manzini Wanderers", team_b="Young Buffaloes",
                      events=[goal("Trialist", "Young Buffaloes")])]

    names = [s.name for s in top_scorers(make_teams(), fixtures, [])]

    assert "Trialist" in names
