import pytest

from courtpairing.exceptions import (
    DuplicatePlayerException,
    InvalidConfigurationException,
    InvalidResultException,
    MalformedCourtException,
    MissingScoreException,
    TiedScoreException,
)
from courtpairing.models import (
    AmericanoPairingOptions,
    CourtMatch,
    EngineOptions,
    EventConfig,
    PartnerHistory,
    RoundState,
    WildcardSettings,
    players_in,
)
from courtpairing.utils.validation import (
    find_duplicates,
    validate_court,
    validate_round,
    validate_round_strict,
    validate_score,
    validate_score_strict,
)


def _round():
    return RoundState(
        round_num=3,
        courts=(
            CourtMatch(court_num=2, team_a=("E", "F"), team_b=("G", "H")),
            CourtMatch(court_num=1, team_a=("A", "B"), team_b=("C", "D"), score_a=21, score_b=9),
        ),
    )


def test_courts_are_ordered_by_number():
    round_state = _round()
    assert [court.court_num for court in round_state.courts] == [1, 2]
    assert players_in(round_state) == list("ABCDEFGH")
    assert not round_state.is_complete


def test_teams_are_stored_as_tuples():
    court = CourtMatch(court_num=1, team_a=["A", "B"], team_b=["C", "D"])
    assert court.team_a == ("A", "B")
    assert court.players == ("A", "B", "C", "D")


def test_winners_and_losers():
    court = CourtMatch(court_num=1, team_a=("A", "B"), team_b=("C", "D"), score_a=12, score_b=21)
    assert court.winners_and_losers() == (("C", "D"), ("A", "B"))
    with pytest.raises(TiedScoreException):
        court.with_scores(21, 21).winners_and_losers()
    with pytest.raises(MissingScoreException):
        court.without_scores().winners_and_losers()


def test_round_round_trips_through_dict():
    round_state = _round()
    assert RoundState.from_dict(round_state.to_dict()) == round_state
    assert round_state.to_dict()["courts"][0]["team_a"] == ["A", "B"]


def test_with_court_replaces_by_number():
    round_state = _round()
    updated = round_state.with_court(round_state.court(2).with_scores(21, 19))
    assert updated.is_complete
    assert round_state.court(2).score_a is None
    assert updated.court(5) is None


def test_partner_history_helpers():
    history = PartnerHistory()
    history.add("A", "B")
    history.add("B", "A")
    history.add("A", "C")
    assert history.count("B", "A") == 2
    assert history.max_count() == 2
    assert history.pairs() == {frozenset(("A", "B")): 2, frozenset(("A", "C")): 1}
    assert "C" in history and "Z" not in history
    assert PartnerHistory.from_dict(history.to_dict()) == history


def test_find_duplicates_keeps_first_seen_order():
    assert find_duplicates(["B", "A", "B", "C", "A"]) == ["B", "A"]
    assert find_duplicates([]) == []


def test_validate_court_messages():
    assert validate_court(CourtMatch(court_num=1, team_a=("A", "B"), team_b=("C", "D")))
    result = validate_court(CourtMatch(court_num=1, team_a=("A",), team_b=("C", "D")))
    assert not result
    assert "exactly 2 players" in result.error_message
    result = validate_court(CourtMatch(court_num=0, team_a=("A", "B"), team_b=("C", "D")))
    assert not result


def test_validate_round_strict_duplicate_within_court():
    round_state = RoundState(
        round_num=1, courts=(CourtMatch(court_num=1, team_a=("A", "B"), team_b=("A", "D")),)
    )
    with pytest.raises(DuplicatePlayerException) as excinfo:
        validate_round_strict(round_state)
    assert excinfo.value.court_num == 1
    assert excinfo.value.players == ("A",)


def test_validate_round_rejects_empty_and_repeated_courts():
    assert not validate_round(RoundState(round_num=1))
    with pytest.raises(MalformedCourtException):
        validate_round_strict(RoundState(round_num=1))
    repeated = RoundState(
        round_num=1,
        courts=(
            CourtMatch(court_num=1, team_a=("A", "B"), team_b=("C", "D")),
            CourtMatch(court_num=1, team_a=("E", "F"), team_b=("G", "H")),
        ),
    )
    with pytest.raises(MalformedCourtException):
        validate_round_strict(repeated)


@pytest.mark.parametrize(
    "score_a, score_b",
    [(None, 21), (21, 21), (-1, 21), (21.5, 3), (True, 3)],
)
def test_invalid_scores(score_a, score_b):
    assert not validate_score(score_a, score_b)
    with pytest.raises(InvalidResultException):
        validate_score_strict(score_a, score_b)


def test_valid_score():
    assert validate_score(21, 0)


def test_default_event_config_is_valid():
    config = EventConfig(name="Friday Ladder", num_courts=3)
    config.validate()
    assert EventConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize("num_courts", [0, 11])
def test_court_count_limits(num_courts):
    with pytest.raises(InvalidConfigurationException):
        EventConfig(name="Ladder", num_courts=num_courts).validate()


def test_wildcards_only_for_winners_court():
    config = EventConfig(
        name="Americano",
        format="americano",
        num_courts=2,
        wildcard=WildcardSettings(enabled=True, start_round=2, frequency=2),
    )
    with pytest.raises(InvalidConfigurationException):
        config.validate()


@pytest.mark.parametrize(
    "settings",
    [
        WildcardSettings(enabled=True, start_round=None, frequency=2),
        WildcardSettings(enabled=True, start_round=1, frequency=2),
        WildcardSettings(enabled=True, start_round=3, frequency=0),
        WildcardSettings(enabled=True, start_round=3, frequency=11),
        WildcardSettings(enabled=True, start_round=3, frequency=2, intensity="wild"),
    ],
)
def test_invalid_wildcard_settings(settings):
    with pytest.raises(InvalidConfigurationException):
        settings.validate()


def test_disabled_wildcards_need_no_schedule():
    WildcardSettings(enabled=False).validate()
    assert not WildcardSettings(enabled=False, start_round=2, frequency=1).is_configured


def test_americano_options_validation():
    AmericanoPairingOptions(variant="team").validate()
    with pytest.raises(InvalidConfigurationException):
        AmericanoPairingOptions(variant="mixed").validate()
    with pytest.raises(InvalidConfigurationException):
        EngineOptions(anti_repeat_window=-1).validate()
