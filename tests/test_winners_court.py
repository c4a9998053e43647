import pytest

from courtpairing.exceptions import (
    DuplicatePlayerException,
    MalformedCourtException,
    MissingScoreException,
    TiedScoreException,
)
from courtpairing.models import CourtMatch, EngineOptions, RoundState, players_in
from courtpairing.pairing.history import build_partner_history
from courtpairing.pairing.winners_court import choose_split, next_round, promotion_groups


def _court(court_num, team_a, team_b, score_a=None, score_b=None):
    return CourtMatch(
        court_num=court_num, team_a=team_a, team_b=team_b, score_a=score_a, score_b=score_b
    )


def _three_court_round():
    return RoundState(
        round_num=1,
        courts=(
            _court(1, ("P1", "P2"), ("P3", "P4"), 21, 15),
            _court(2, ("P5", "P6"), ("P7", "P8"), 18, 21),
            _court(3, ("P9", "P10"), ("P11", "P12"), 21, 12),
        ),
    )


def test_promotion_and_relegation_between_adjacent_courts():
    current = _three_court_round()
    new_round = next_round(current, EngineOptions(anti_repeat_window=3), [current])

    assert new_round.round_num == 2
    court1, court2, court3 = new_round.courts
    assert set(court1.players) == {"P1", "P2", "P7", "P8"}
    assert set(court2.players) == {"P3", "P4", "P9", "P10"}
    assert set(court3.players) == {"P5", "P6", "P11", "P12"}


def test_new_teams_avoid_the_partnerships_just_played():
    current = _three_court_round()
    new_round = next_round(current, EngineOptions(), [current])

    court1 = new_round.court(1)
    assert court1.team_a == ("P1", "P7")
    assert court1.team_b == ("P2", "P8")
    history = build_partner_history([current])
    for court in new_round.courts:
        assert history.count(*court.team_a) == 0
        assert history.count(*court.team_b) == 0


def test_scores_are_cleared():
    new_round = next_round(_three_court_round())
    assert all(c.score_a is None and c.score_b is None for c in new_round.courts)


def test_roster_is_conserved():
    current = _three_court_round()
    new_round = next_round(current, EngineOptions(), [])
    assert sorted(players_in(new_round)) == sorted(players_in(current))
    assert len(set(new_round.players)) == 12


def test_two_courts_swap_winners_and_losers():
    current = RoundState(
        round_num=4,
        courts=(
            _court(1, ("A", "B"), ("C", "D"), 15, 21),
            _court(2, ("E", "F"), ("G", "H"), 21, 19),
        ),
    )
    new_round = next_round(current)
    assert new_round.round_num == 5
    assert set(new_round.court(1).players) == {"C", "D", "E", "F"}
    assert set(new_round.court(2).players) == {"A", "B", "G", "H"}


def test_single_court_resplits_the_same_players():
    current = RoundState(round_num=1, courts=(_court(1, ("A", "B"), ("C", "D"), 21, 10),))
    new_round = next_round(current)
    court = new_round.court(1)
    assert set(court.players) == {"A", "B", "C", "D"}
    assert court.team_a == ("A", "C")
    assert court.team_b == ("B", "D")


def test_promotion_groups_for_four_courts():
    results = [
        (("W1a", "W1b"), ("L1a", "L1b")),
        (("W2a", "W2b"), ("L2a", "L2b")),
        (("W3a", "W3b"), ("L3a", "L3b")),
        (("W4a", "W4b"), ("L4a", "L4b")),
    ]
    groups = promotion_groups(results)
    assert groups == [
        ("W1a", "W1b", "W2a", "W2b"),
        ("L1a", "L1b", "W3a", "W3b"),
        ("L2a", "L2b", "W4a", "W4b"),
        ("L3a", "L3b", "L4a", "L4b"),
    ]


def test_window_zero_ignores_history():
    current = _three_court_round()
    new_round = next_round(current, EngineOptions(anti_repeat_window=0), [current])
    # Without history the first split of the arrival order is kept
    assert new_round.court(1).team_a == ("P1", "P2")
    assert new_round.court(1).team_b == ("P7", "P8")


def test_opponent_history_breaks_partner_ties():
    partners = build_partner_history([])
    opponents = build_partner_history([])
    opponents.add("A", "C")
    opponents.add("A", "D")
    team_a, team_b = choose_split(("A", "B", "C", "D"), partners, opponents)
    assert (team_a, team_b) == (("A", "C"), ("B", "D"))


def test_generation_is_repeatable():
    current = _three_court_round()
    assert next_round(current, EngineOptions(), [current]) == next_round(
        current, EngineOptions(), [current]
    )


def test_team_with_one_player_is_rejected():
    current = RoundState(
        round_num=1,
        courts=(
            _court(1, ("P1",), ("P3", "P4"), 21, 15),
            _court(2, ("P5", "P6"), ("P7", "P8"), 18, 21),
        ),
    )
    with pytest.raises(MalformedCourtException) as excinfo:
        next_round(current)
    assert excinfo.value.court_num == 1


def test_tied_score_is_rejected():
    current = RoundState(
        round_num=1,
        courts=(
            _court(1, ("P1", "P2"), ("P3", "P4"), 21, 21),
            _court(2, ("P5", "P6"), ("P7", "P8"), 18, 21),
        ),
    )
    with pytest.raises(TiedScoreException) as excinfo:
        next_round(current)
    assert excinfo.value.court_num == 1


def test_missing_score_is_rejected():
    current = RoundState(
        round_num=1,
        courts=(
            _court(1, ("P1", "P2"), ("P3", "P4"), 21, 10),
            _court(2, ("P5", "P6"), ("P7", "P8")),
        ),
    )
    with pytest.raises(MissingScoreException):
        next_round(current)


def test_player_on_two_courts_is_rejected():
    current = RoundState(
        round_num=1,
        courts=(
            _court(1, ("P1", "P2"), ("P3", "P4"), 21, 10),
            _court(2, ("P1", "P6"), ("P7", "P8"), 21, 10),
        ),
    )
    with pytest.raises(DuplicatePlayerException) as excinfo:
        next_round(current)
    assert excinfo.value.players == ("P1",)
