"""Winner's Court ladder round generation.

Court 1 is the top of the ladder. After a round is scored, the winners of
court ``k + 1`` climb to join the winners of court ``k`` and the losers of
court ``k`` drop to join the losers of court ``k + 1``:

    new court 1       = winners(1) + winners(2)
    new court k       = losers(k - 1) + winners(k + 1)
    new bottom court  = losers(n - 1) + losers(n)

Each new group of four is then split into two teams so that partnerships
repeated within the anti-repeat window are avoided, with repeated
oppositions as the secondary key.
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

from collections import Counter
from typing import List, Optional, Sequence, Tuple

from courtpairing.exceptions import InvalidPairingException
from courtpairing.models import CourtMatch, EngineOptions, PartnerHistory, RoundState
from courtpairing.pairing.americano import SPLITS
from courtpairing.pairing.history import (
    build_opponent_history,
    build_partner_history,
    recent_rounds,
)
from courtpairing.type_hints import Team
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import validate_round_strict

logger = setup_logger(__name__)


def winner_loser(court: CourtMatch) -> Tuple[Team, Team]:
    """Return ``(winners, losers)`` of a scored court.

    Raises:
        MissingScoreException: If the court has not been scored
        TiedScoreException: If the scores are equal
    """
    return court.winners_and_losers()


def promotion_groups(results: Sequence[Tuple[Team, Team]]) -> List[Tuple[str, ...]]:
    """Form the new four-player group for each ladder position.

    ``results`` holds ``(winners, losers)`` per court, top court first. The
    returned groups list the arriving team from above (or staying winners)
    first.
    """
    num_courts = len(results)
    if num_courts == 1:
        winners, losers = results[0]
        return [winners + losers]

    groups = []
    for index in range(num_courts):
        if index == 0:
            group = results[0][0] + results[1][0]
        elif index == num_courts - 1:
            group = results[index - 1][1] + results[index][1]
        else:
            group = results[index - 1][1] + results[index + 1][0]
        groups.append(group)
    return groups


def _history_window(
    current_round: RoundState,
    previous_rounds: Sequence[RoundState],
    window: int,
) -> List[RoundState]:
    # The round just played counts as the most recent history entry
    history = [r for r in previous_rounds if r.round_num != current_round.round_num]
    history.append(current_round)
    return recent_rounds(history, window)


def choose_split(
    group: Sequence[str],
    partner_history: PartnerHistory,
    opponent_history: Optional[PartnerHistory] = None,
) -> Tuple[Team, Team]:
    """Split four players into the teams with the fewest repeats.

    Splits are ranked by repeated partnerships, then by repeated oppositions.
    Equal splits keep the first one tried.
    """
    opponent_history = opponent_history or PartnerHistory()
    best = None
    best_key = None
    for i, j, k, l in SPLITS:
        team_a = (group[i], group[j])
        team_b = (group[k], group[l])
        partner_score = partner_history.count(*team_a) + partner_history.count(*team_b)
        opponent_score = sum(
            opponent_history.count(home, away) for home in team_a for away in team_b
        )
        key = (partner_score, opponent_score)
        if best_key is None or key < best_key:
            best = (team_a, team_b)
            best_key = key
    return best


def next_round(
    current_round: RoundState,
    config: Optional[EngineOptions] = None,
    previous_rounds: Sequence[RoundState] = (),
) -> RoundState:
    """Generate the next Winner's Court round from a fully scored round.

    Parameters
    ----------
    current_round : RoundState
        The round just completed; every court must be scored without ties.
    config : EngineOptions, optional
        Engine options; only ``anti_repeat_window`` is used.
    previous_rounds : sequence of RoundState
        Completed rounds, oldest first. ``current_round`` may be included.

    Returns
    -------
    RoundState
        Round ``current_round.round_num + 1`` on the same court numbers with
        scores cleared.

    Raises
    ------
    MalformedCourtException
        If a court does not have exactly two players per team.
    DuplicatePlayerException
        If a player appears more than once in ``current_round``.
    MissingScoreException, TiedScoreException
        If a court has no winner.
    """
    config = config or EngineOptions()
    config.validate()
    validate_round_strict(current_round)

    results = [winner_loser(court) for court in current_round.courts]
    groups = promotion_groups(results)

    window_rounds = _history_window(current_round, previous_rounds, config.anti_repeat_window)
    partner_history = build_partner_history(window_rounds)
    opponent_history = build_opponent_history(window_rounds)

    courts = []
    for source, group in zip(current_round.courts, groups):
        team_a, team_b = choose_split(group, partner_history, opponent_history)
        logger.debug("Court %s: %s vs %s", source.court_num, team_a, team_b)
        courts.append(CourtMatch(court_num=source.court_num, team_a=team_a, team_b=team_b))

    new_round = RoundState(round_num=current_round.round_num + 1, courts=tuple(courts))
    validate_round_strict(new_round)
    if Counter(new_round.players) != Counter(current_round.players):
        message = (
            f"Round {new_round.round_num} does not hold the same players as "
            f"round {current_round.round_num}"
        )
        logger.error(message)
        raise InvalidPairingException(message)

    logger.info(
        "Generated Winner's Court round %s on %s courts",
        new_round.round_num,
        len(courts),
    )
    return new_round
