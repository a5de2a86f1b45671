from league_app.services.identity_service import NormalizedKey, normalize, same_name, synthetic_player_id


def test_normalize_strips_case_spaces_and_punctuation():
    assert normalize("Mbabane Swallows FC") == "mbabaneswallowsfc"
    assert normalize("  J. Dlamini ") == "jdlamini"
    assert normalize("Royal-Leopards 2") == "royalleopards2"


def test_differently_typed_team_names_share_a_key():
    assert normalize("Mbabane Swallows FC") == normalize("mbabane-swallows fc")
    assert same_name("Mbabane Swallows FC", "mbabane-swallows fc")


def test_empty_input_never_matches():
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize("!!!") == ""
    assert not same_name("", "")
    assert not same_name(None, "...")
    assert isinstance(normalize("x"), NormalizedKey)


def test_synthetic_id_is_stable_and_non_negative():
    first = synthetic_player_id("J. Dlamini")
    assert first == synthetic_player_id("J. Dlamini")
    assert first >= 0
    assert first != synthetic_player_id("S. Dlamini")


def test_synthetic_id_matches_31_multiplier_hash():
    # "ab" -> 97 * 31 + 98
    assert synthetic_player_id("ab") == 3105
    assert synthetic_player_id("") == 0
