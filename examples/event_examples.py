"""Example script walking through a Winner's Court and an Americano event.

This script shows how to drive the round manager programmatically and how
to use the simulation command-line interface.
"""

# Court Pairing
# Copyright (C) 2026  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from courtpairing.controllers import RoundManager
from courtpairing.models import EventConfig, WildcardSettings
from courtpairing.pairing.wildcard import diff_rounds, moved_players, wildcard_preview


def print_round(round_state):
    print(f"Round {round_state.round_num}")
    for court in round_state.courts:
        score = f"{court.score_a}-{court.score_b}" if court.is_scored else ""
        print(
            f"  Court {court.court_num}: {' & '.join(court.team_a)} vs "
            f"{' & '.join(court.team_b)}  {score}"
        )


def example_winners_court():
    """Example: A three court ladder with a wildcard every third round."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Winner's Court")
    print("=" * 70 + "\n")

    wildcard = WildcardSettings(enabled=True, start_round=3, frequency=3, intensity="mild")
    config = EventConfig(
        name="Club Night Ladder", num_courts=3, wildcard=wildcard, max_rounds=5
    )
    players = ["Ana", "Ben", "Cleo", "Dev", "Eli", "Fay", "Gus", "Hana", "Ivo", "Jo", "Kai", "Lu"]
    manager = RoundManager(config, players, rng=random.Random(42))

    print(wildcard_preview(wildcard) + "\n")
    scores = random.Random(7)

    manager.start_event()
    while True:
        for court in manager.current_round.courts:
            loser = scores.randint(5, 19)
            if scores.random() < 0.5:
                manager.record_score(court.court_num, 21, loser)
            else:
                manager.record_score(court.court_num, loser, 21)
        print_round(manager.current_round)
        if manager.is_finished:
            break

        previous = manager.current_round
        result = manager.advance()
        if result.wildcard_applied:
            moved = moved_players(diff_rounds(previous.courts, result.next.courts))
            print(f"  Wildcard! Players changing court: {', '.join(sorted(moved))}")
        print(f"  New partnerships next round: {result.partner_swaps}\n")

    print("\nStandings:")
    for player, points in manager.standings():
        print(f"  {player:6} {points}")


def example_americano():
    """Example: Nine players on two courts, so one player rests each round."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Americano with a resting player")
    print("=" * 70 + "\n")

    config = EventConfig(
        name="Sunday Americano", format="americano", num_courts=2, max_rounds=4
    )
    players = [f"Player {n}" for n in range(1, 10)]
    manager = RoundManager(config, players)

    manager.start_event()
    while True:
        resting = [p for p in players if p not in manager.current_round.player_set]
        print_round(manager.current_round)
        print(f"  Resting: {', '.join(resting)}\n")
        for court in manager.current_round.courts:
            manager.record_score(court.court_num, 21, 15)
        if manager.is_finished:
            break
        manager.advance()


def example_cli_usage():
    """Example: Show CLI usage examples."""

    print("\n" + "=" * 70)
    print("EXAMPLE 3: Command-Line Interface Usage")
    print("=" * 70 + "\n")

    print("After installing the package with pip install -e ., you can use:")
    print("\n1. Simulate a ladder with wildcards:")
    print("   $ courtpairing-sim simulate --courts 3 --rounds 8 --wildcard-start 3 --wildcard-frequency 2")

    print("\n2. Simulate an Americano and save it:")
    print("   $ courtpairing-sim simulate --format americano --players 9 --courts 2 --output event.json")

    print("\n3. Measure partner rotation over many sizes:")
    print("   $ courtpairing-sim sweep --players 8-16 --courts 1-3")

    print("\n4. Interactive mode:")
    print("   $ courtpairing-sim")

    print("\n" + "=" * 70 + "\n")


def main():
    """Run all examples."""

    print("\n" + "╔" + "=" * 68 + "╗")
    print("║" + "  COURT PAIRING - EXAMPLES".center(68) + "║")
    print("╚" + "=" * 68 + "╝")

    example_winners_court()
    example_americano()
    example_cli_usage()


if __name__ == "__main__":
    main()
