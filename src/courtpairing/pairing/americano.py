"""Americano Pairing System Implementation.

Individual Americano rotates partners every round: for each court in turn the
generator picks the four available players, and the split into two teams, that
repeats the fewest earlier partnerships. Team Americano keeps fixed partnerships
and rotates opponents instead.
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

import math
from itertools import combinations
from typing import FrozenSet, List, Mapping, Optional, Sequence, Set, Tuple

from courtpairing.constants import (
    PLAYERS_PER_COURT,
    VARIANT_INDIVIDUAL,
    VARIANT_TEAM,
)
from courtpairing.exceptions import (
    InsufficientPlayersException,
    InvalidPairingException,
    MalformedCourtException,
)
from courtpairing.models import (
    AmericanoPairingOptions,
    CourtMatch,
    PartnerHistory,
    RoundState,
)
from courtpairing.pairing.history import build_partner_history, recent_rounds
from courtpairing.pairing.rest import calculate_rest_counts, select_players_for_round
from courtpairing.type_hints import Team
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import find_duplicates, validate_round_strict

logger = setup_logger(__name__)

# The three ways to split four players into two unordered teams of two
SPLITS: Tuple[Tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3),
    (0, 2, 1, 3),
    (0, 3, 1, 2),
)


def split_score(history: PartnerHistory, team_a: Team, team_b: Team) -> int:
    """Sum of earlier partnerships repeated by the two teams."""
    return history.count(*team_a) + history.count(*team_b)


def best_split(
    four: Sequence[str], history: PartnerHistory
) -> Tuple[Team, Team, int]:
    """Return the split of ``four`` players that repeats fewest partnerships.

    Ties keep the first split in ``SPLITS`` order.
    """
    best: Optional[Tuple[Team, Team, int]] = None
    for i, j, k, l in SPLITS:
        team_a = (four[i], four[j])
        team_b = (four[k], four[l])
        score = split_score(history, team_a, team_b)
        if best is None or score < best[2]:
            best = (team_a, team_b, score)
    return best


def _best_court(
    available: Sequence[str], history: PartnerHistory
) -> Optional[Tuple[Team, Team, int]]:
    """Search every group of four available players for the cheapest split.

    Enumeration follows the index order of ``available``; the first minimum
    wins, so a zero-cost split ends the search.
    """
    best: Optional[Tuple[Team, Team, int]] = None
    for four in combinations(available, PLAYERS_PER_COURT):
        team_a, team_b, score = best_split(four, history)
        if best is None or score < best[2]:
            best = (team_a, team_b, score)
            if score == 0:
                break
    return best


def _check_roster(all_players: Sequence[str], num_courts: int) -> None:
    if num_courts < 1:
        raise InvalidPairingException(f"At least one court is required, got {num_courts}")
    duplicates = find_duplicates(all_players)
    if duplicates:
        raise InvalidPairingException(
            f"Roster lists players more than once: {', '.join(duplicates)}"
        )


def generate_americano_individual_pairings(
    all_players: Sequence[str],
    num_courts: int,
    partner_history: PartnerHistory,
    rest_counts: Mapping[str, int],
    rest_balancing: bool = True,
) -> List[CourtMatch]:
    """Build one round of individual Americano courts.

    Parameters
    ----------
    all_players : sequence of str
        Full roster in a stable order.
    num_courts : int
        Courts to fill; ``num_courts * 4`` players play.
    partner_history : PartnerHistory
        Prior partnership counts.
    rest_counts : mapping of str to int
        Rounds each player has sat out.
    rest_balancing : bool
        Whether rest counts decide who plays when the roster is larger than
        the courts.

    Returns
    -------
    list of CourtMatch
        Courts numbered ``1..num_courts`` with no scores.

    Raises
    ------
    InsufficientPlayersException
        If the roster cannot fill every court.
    InvalidPairingException
        If ``num_courts`` is not positive or the roster repeats a player.
    """
    _check_roster(all_players, num_courts)
    playing, _resting = select_players_for_round(
        all_players, num_courts, rest_counts, rest_balancing
    )
    remaining = list(playing)

    courts: List[CourtMatch] = []
    for court_num in range(1, num_courts + 1):
        if len(remaining) < PLAYERS_PER_COURT:
            raise InsufficientPlayersException(
                f"Only {len(remaining)} players left for court {court_num}",
                court_num=court_num,
            )

        best = _best_court(remaining, partner_history)
        if best is None:
            # Unreachable once the guard above holds; keeps the round whole
            logger.warning("No split evaluated for court %s, using first four", court_num)
            team_a = (remaining[0], remaining[1])
            team_b = (remaining[2], remaining[3])
            score = split_score(partner_history, team_a, team_b)
        else:
            team_a, team_b, score = best

        logger.debug(
            "Court %s: %s vs %s (repeat score %s)", court_num, team_a, team_b, score
        )
        courts.append(CourtMatch(court_num=court_num, team_a=team_a, team_b=team_b))
        used = set(team_a + team_b)
        remaining = [player for player in remaining if player not in used]

    return courts


def _team_key(team: Sequence[str]) -> FrozenSet[str]:
    return frozenset(team)


def _recent_meetings(
    previous_rounds: Sequence[RoundState], window: Optional[int]
) -> Set[FrozenSet[FrozenSet[str]]]:
    meetings = set()
    for round_state in recent_rounds(previous_rounds, window):
        for court in round_state.courts:
            meetings.add(frozenset((_team_key(court.team_a), _team_key(court.team_b))))
    return meetings


def generate_americano_team_pairings(
    teams: Sequence[Team],
    num_courts: int,
    previous_rounds: Sequence[RoundState] = (),
    anti_repeat_window: Optional[int] = None,
    rest_balancing: bool = True,
) -> List[CourtMatch]:
    """Build one round of team Americano courts from fixed partnerships.

    Teams that rested most play first. For each court the first pair of
    available teams that has not met within ``anti_repeat_window`` rounds is
    chosen; when every pairing is a rematch the first two available teams play.

    Raises:
        InvalidPairingException: If fewer than two teams are given or a team is malformed
        InsufficientPlayersException: If there are fewer than two teams per court
    """
    if len(teams) < 2:
        raise InvalidPairingException("Team Americano requires at least 2 teams")
    if num_courts < 1:
        raise InvalidPairingException(f"At least one court is required, got {num_courts}")
    for team in teams:
        if len(team) != 2 or team[0] == team[1]:
            raise MalformedCourtException(f"Team {list(team)} must have two distinct players")
    roster = [player for team in teams for player in team]
    duplicates = find_duplicates(roster)
    if duplicates:
        raise InvalidPairingException(
            f"Players belong to more than one team: {', '.join(duplicates)}"
        )
    if len(teams) < 2 * num_courts:
        court_num = len(teams) // 2 + 1
        raise InsufficientPlayersException(
            f"Not enough teams for court {court_num}: {num_courts} courts need "
            f"{2 * num_courts} teams, got {len(teams)}",
            court_num=court_num,
        )

    # A team rests together, so its first player's count stands for the team
    rest_counts = calculate_rest_counts(roster, previous_rounds)
    ordered = [tuple(team) for team in teams]
    if rest_balancing:
        ordered = sorted(ordered, key=lambda team: -rest_counts[team[0]])
    selected = set(ordered[: 2 * num_courts])
    available = [tuple(team) for team in teams if tuple(team) in selected]

    meetings = _recent_meetings(previous_rounds, anti_repeat_window)
    courts: List[CourtMatch] = []
    for court_num in range(1, num_courts + 1):
        chosen = None
        for index, first in enumerate(available):
            for second in available[index + 1 :]:
                meeting = frozenset((_team_key(first), _team_key(second)))
                if meeting not in meetings:
                    chosen = (first, second)
                    break
            if chosen:
                break
        if chosen is None:
            logger.debug("Court %s: every pairing is a rematch, using first two", court_num)
            chosen = (available[0], available[1])

        courts.append(CourtMatch(court_num=court_num, team_a=chosen[0], team_b=chosen[1]))
        available = [team for team in available if team not in chosen]

    return courts


def next_americano_round(
    round_index: int,
    num_courts: int,
    all_players: Sequence[str],
    previous_rounds: Sequence[RoundState],
    options: Optional[AmericanoPairingOptions] = None,
    teams: Optional[Sequence[Team]] = None,
) -> RoundState:
    """Generate the Americano round following ``round_index`` completed rounds.

    Partner history and rest counts are recomputed from ``previous_rounds`` on
    every call. The returned round is numbered ``round_index + 1``.

    Raises:
        InvalidConfigurationException: If the options are not Americano options
        InvalidPairingException: If the team variant is used without teams
    """
    options = options or AmericanoPairingOptions()
    options.validate()

    if options.variant == VARIANT_TEAM:
        if not teams or len(teams) < 2:
            raise InvalidPairingException("Team Americano requires at least 2 teams")
        courts = generate_americano_team_pairings(
            teams,
            num_courts,
            previous_rounds,
            options.anti_repeat_window,
            options.rest_balancing,
        )
    else:
        partner_history = build_partner_history(previous_rounds)
        rest_counts = calculate_rest_counts(all_players, previous_rounds)
        courts = generate_americano_individual_pairings(
            all_players,
            num_courts,
            partner_history,
            rest_counts,
            options.rest_balancing,
        )

    round_state = RoundState(round_num=round_index + 1, courts=tuple(courts))
    validate_round_strict(round_state)
    logger.info(
        "Generated Americano round %s (%s) on %s courts",
        round_state.round_num,
        options.variant,
        num_courts,
    )
    return round_state


def is_americano_complete(
    previous_rounds: Sequence[RoundState],
    players: Sequence[str],
    variant: str = VARIANT_INDIVIDUAL,
    teams: Optional[Sequence[Team]] = None,
) -> bool:
    """Check whether the rotation has been completed.

    Individual: every player has partnered every other player at least once.
    Team: every pair of teams has met at least once.
    """
    if variant == VARIANT_TEAM:
        if not teams:
            return False
        meetings = _recent_meetings(previous_rounds, None)
        return all(
            frozenset((_team_key(first), _team_key(second))) in meetings
            for first, second in combinations(teams, 2)
        )

    history = build_partner_history(previous_rounds)
    return all(
        history.count(first, second) > 0 for first, second in combinations(players, 2)
    )


def calculate_americano_rounds(
    player_count: int, courts: int, variant: str = VARIANT_INDIVIDUAL
) -> int:
    """Estimate how many rounds an Americano event should run."""
    if variant == VARIANT_TEAM:
        team_count = player_count // 2
        if team_count <= courts * 2:
            return math.ceil(team_count * (team_count - 1) / (2 * courts))
        return math.ceil(math.log2(team_count)) + 2

    max_players_per_round = courts * PLAYERS_PER_COURT
    if player_count <= max_players_per_round:
        return max(6, player_count - 1)
    target_games_per_player = min(6, player_count - 1)
    return math.ceil(player_count * target_games_per_player / max_players_per_round)
