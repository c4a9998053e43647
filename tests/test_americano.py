from itertools import combinations

import pytest

from courtpairing.exceptions import (
    InsufficientPlayersException,
    InvalidConfigurationException,
    InvalidPairingException,
)
from courtpairing.models import AmericanoPairingOptions, PartnerHistory, RoundState
from courtpairing.pairing.americano import (
    best_split,
    calculate_americano_rounds,
    generate_americano_individual_pairings,
    generate_americano_team_pairings,
    is_americano_complete,
    next_americano_round,
)
from courtpairing.pairing.history import build_partner_history
from courtpairing.pairing.rest import calculate_rest_counts


def _players(count):
    return [f"P{i}" for i in range(1, count + 1)]


def _run(players, num_courts, num_rounds, options=None):
    rounds = []
    for index in range(num_rounds):
        rounds.append(next_americano_round(index, num_courts, players, rounds, options))
    return rounds


def _assert_valid_round(round_state, num_courts):
    assert len(round_state.courts) == num_courts
    assert [court.court_num for court in round_state.courts] == list(
        range(1, num_courts + 1)
    )
    players = round_state.players
    assert len(players) == len(set(players)) == num_courts * 4
    for court in round_state.courts:
        assert len(court.team_a) == 2 and len(court.team_b) == 2
        assert court.score_a is None and court.score_b is None


def test_first_round_uses_roster_order():
    round_state = next_americano_round(0, 2, _players(8), [])
    assert round_state.round_num == 1
    _assert_valid_round(round_state, 2)
    court1, court2 = round_state.courts
    assert court1.team_a == ("P1", "P2")
    assert court1.team_b == ("P3", "P4")
    assert court2.team_a == ("P5", "P6")
    assert court2.team_b == ("P7", "P8")


def test_eight_players_partner_everyone_exactly_once():
    players = _players(8)
    rounds = _run(players, 2, 7)

    for round_state in rounds:
        _assert_valid_round(round_state, 2)

    pairs = build_partner_history(rounds).pairs()
    assert len(pairs) == 28
    assert set(pairs.values()) == {1}
    assert is_americano_complete(rounds, players)
    assert not is_americano_complete(rounds[:6], players)


def test_nine_players_each_rest_exactly_once():
    players = _players(9)
    rounds = _run(players, 2, 9)

    for round_state in rounds:
        _assert_valid_round(round_state, 2)
    assert calculate_rest_counts(players, rounds) == {p: 1 for p in players}


def test_rested_players_are_grouped_first():
    rounds = _run(_players(9), 2, 2)
    court1 = rounds[1].court(1)
    assert court1.team_a == ("P9", "P1")
    assert court1.team_b == ("P2", "P3")
    assert "P8" not in rounds[1].player_set


def test_resting_player_never_rests_twice_in_a_row():
    players = _players(10)
    rounds = _run(players, 2, 10)
    for previous, current in zip(rounds, rounds[1:]):
        rested_before = set(players) - previous.player_set
        rested_now = set(players) - current.player_set
        assert not rested_before & rested_now


def test_generation_is_repeatable():
    players = _players(12)
    assert _run(players, 2, 5) == _run(players, 2, 5)


def test_best_split_prefers_unplayed_partners():
    history = PartnerHistory()
    history.add("A", "B")
    history.add("C", "D")
    team_a, team_b, score = best_split(("A", "B", "C", "D"), history)
    assert (team_a, team_b, score) == (("A", "C"), ("B", "D"), 0)


def test_best_split_ties_keep_first_split():
    team_a, team_b, score = best_split(("A", "B", "C", "D"), PartnerHistory())
    assert (team_a, team_b, score) == (("A", "B"), ("C", "D"), 0)


def test_insufficient_players_names_the_court():
    with pytest.raises(InsufficientPlayersException) as excinfo:
        next_americano_round(0, 2, _players(7), [])
    assert excinfo.value.court_num == 2


def test_duplicate_roster_is_rejected():
    players = _players(7) + ["P1"]
    with pytest.raises(InvalidPairingException):
        generate_americano_individual_pairings(players, 2, PartnerHistory(), {})


def test_zero_courts_is_rejected():
    with pytest.raises(InvalidPairingException):
        generate_americano_individual_pairings(_players(8), 0, PartnerHistory(), {})


def test_options_must_be_americano():
    options = AmericanoPairingOptions(format="winners-court")
    with pytest.raises(InvalidConfigurationException):
        next_americano_round(0, 2, _players(8), [], options)


def test_team_variant_rotates_opponents():
    teams = [("P1", "P2"), ("P3", "P4"), ("P5", "P6"), ("P7", "P8")]
    options = AmericanoPairingOptions(variant="team")
    rounds = []
    for index in range(3):
        rounds.append(
            next_americano_round(index, 2, _players(8), rounds, options, teams=teams)
        )

    meetings = set()
    for round_state in rounds:
        _assert_valid_round(round_state, 2)
        for court in round_state.courts:
            assert court.team_a in teams and court.team_b in teams
            meetings.add(frozenset((court.team_a, court.team_b)))

    assert meetings == {frozenset(pair) for pair in combinations(teams, 2)}
    assert is_americano_complete(rounds, _players(8), variant="team", teams=teams)


def test_team_variant_rotates_resting_teams():
    teams = [(f"P{i}", f"P{i + 1}") for i in range(1, 13, 2)]
    first = generate_americano_team_pairings(teams, 2)
    playing = {court.team_a for court in first} | {court.team_b for court in first}
    assert playing == set(teams[:4])

    history = [RoundState(round_num=1, courts=tuple(first))]
    second = generate_americano_team_pairings(teams, 2, history, 3)
    playing = {court.team_a for court in second} | {court.team_b for court in second}
    assert set(teams[4:]) <= playing


def test_team_variant_requires_teams():
    options = AmericanoPairingOptions(variant="team")
    with pytest.raises(InvalidPairingException):
        next_americano_round(0, 1, _players(4), [], options)


def test_team_variant_insufficient_teams():
    teams = [("P1", "P2"), ("P3", "P4"), ("P5", "P6")]
    with pytest.raises(InsufficientPlayersException):
        generate_americano_team_pairings(teams, 2)


@pytest.mark.parametrize(
    "players, courts, variant, expected",
    [
        (8, 2, "individual", 7),
        (4, 1, "individual", 6),
        (9, 2, "individual", 7),
        (12, 2, "individual", 9),
        (8, 2, "team", 3),
        (16, 2, "team", 5),
    ],
)
def test_calculate_americano_rounds(players, courts, variant, expected):
    assert calculate_americano_rounds(players, courts, variant) == expected
