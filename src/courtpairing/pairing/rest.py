"""Rest accounting and selection of who plays when courts are short."""

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

from typing import List, Mapping, Sequence, Tuple

from courtpairing.constants import PLAYERS_PER_COURT
from courtpairing.exceptions import InsufficientPlayersException
from courtpairing.models import RoundState
from courtpairing.type_hints import RestCounts
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def calculate_rest_counts(
    all_players: Sequence[str], previous_rounds: Sequence[RoundState]
) -> RestCounts:
    """Count the rounds each roster player sat out.

    Players missing from ``all_players`` are ignored even if they appear in
    history. A roster player who never appeared accrues rest for every round,
    which moves late additions to the front of the queue.
    """
    rest_counts = {player: 0 for player in all_players}
    for round_state in previous_rounds:
        playing = round_state.player_set
        for player in rest_counts:
            if player not in playing:
                rest_counts[player] += 1
    return rest_counts


def calculate_games_played(
    all_players: Sequence[str], previous_rounds: Sequence[RoundState]
) -> RestCounts:
    """Count the rounds each roster player took part in."""
    games = {player: 0 for player in all_players}
    for round_state in previous_rounds:
        for player in round_state.player_set:
            if player in games:
                games[player] += 1
    return games


def select_players_for_round(
    all_players: Sequence[str],
    num_courts: int,
    rest_counts: Mapping[str, int],
    rest_balancing: bool = True,
) -> Tuple[List[str], List[str]]:
    """Split the roster into this round's players and resting players.

    Players who have rested most play first; equal rest counts keep roster
    order. Without rest balancing the roster order alone decides.

    Returns:
        Tuple of (playing, resting), each in selection order

    Raises:
        InsufficientPlayersException: If the roster cannot fill every court
    """
    total_playing = num_courts * PLAYERS_PER_COURT
    if len(all_players) < total_playing:
        court_num = len(all_players) // PLAYERS_PER_COURT + 1
        raise InsufficientPlayersException(
            f"Not enough players for court {court_num}: {num_courts} courts need "
            f"{total_playing} players, roster has {len(all_players)}",
            court_num=court_num,
        )

    if len(all_players) == total_playing:
        return list(all_players), []

    ordered = list(all_players)
    if rest_balancing:
        # sorted() is stable, so ties keep roster order
        ordered = sorted(ordered, key=lambda player: -rest_counts.get(player, 0))

    playing = ordered[:total_playing]
    resting = ordered[total_playing:]
    logger.debug("Resting this round: %s", resting)
    return playing, resting
