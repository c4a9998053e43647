import json

import pytest

from courtpairing.testing.metrics import (
    compute_rotation_metrics,
    rounds_for_full_rotation,
    simulate_americano,
    sweep,
)
from courtpairing.testing.simulator import (
    ScorePattern,
    SimulationConfig,
    TournamentSimulator,
    create_americano_simulation,
    create_winners_court_simulation,
)


def test_same_seed_gives_same_event():
    first = create_winners_court_simulation(num_courts=3, num_rounds=5, seed=11)
    second = create_winners_court_simulation(num_courts=3, num_rounds=5, seed=11)
    assert first.export_json_format(first.run()) == second.export_json_format(second.run())


def test_winners_court_simulation_scores_every_round():
    simulator = create_winners_court_simulation(num_courts=3, num_rounds=4, seed=2)
    data = simulator.run()
    assert len(data["rounds"]) == 4
    for round_state in data["rounds"]:
        assert round_state.is_complete
        assert sorted(round_state.players) == sorted(data["players"])
        for court in round_state.courts:
            assert court.score_a != court.score_b
            assert max(court.score_a, court.score_b) == 21


def test_wildcard_rounds_follow_the_schedule():
    config = SimulationConfig(
        num_players=12,
        num_courts=3,
        num_rounds=6,
        wildcard_start_round=2,
        wildcard_frequency=2,
        wildcard_intensity="mayhem",
        seed=4,
    )
    data = TournamentSimulator(config).run()
    assert data["wildcard_rounds"] == [2, 4, 6]


def test_americano_simulation_rotates_every_partner():
    data = create_americano_simulation(num_players=8, num_courts=2, seed=9).run()
    assert len(data["rounds"]) == 7
    assert data["metrics"].is_perfect_rotation


def test_team_americano_simulation():
    config = SimulationConfig(
        num_players=8,
        num_courts=2,
        num_rounds=3,
        format="americano",
        variant="team",
        score_pattern=ScorePattern.RANDOM,
        seed=3,
    )
    data = TournamentSimulator(config).run()
    assert data["teams"][0] == ("P01", "P02")
    for round_state in data["rounds"]:
        for court in round_state.courts:
            assert court.team_a in data["teams"] and court.team_b in data["teams"]


def test_export_is_valid_json():
    simulator = create_winners_court_simulation(num_courts=2, num_rounds=2, seed=1)
    exported = json.loads(simulator.export_json_format(simulator.run()))
    assert exported["simulation_config"]["seed"] == 1
    assert exported["event"]["format"] == "winners-court"
    assert len(exported["rounds"]) == 2
    assert len(exported["standings"]) == 8


def test_rotation_metrics_for_nine_players():
    rounds = simulate_americano(9, 2, 9)
    players = [f"P{number:02d}" for number in range(1, 10)]
    metrics = compute_rotation_metrics(rounds, players)
    assert metrics.rest_spread == 0
    assert set(metrics.rest_counts.values()) == {1}
    assert metrics.possible_partnerships == 36


@pytest.mark.parametrize(
    "players, courts, expected", [(8, 2, 7), (4, 1, 3), (9, 2, 9), (16, 4, 15)]
)
def test_rounds_for_full_rotation(players, courts, expected):
    assert rounds_for_full_rotation(players, courts) == expected


def test_sweep():
    (perfect,) = sweep([8], [2])
    assert perfect.is_perfect_rotation
    assert perfect.to_dict()["coverage"] == 1.0

    (resting,) = sweep([9], [2])
    assert resting.rest_spread == 0

    assert sweep([5], [2]) == []
