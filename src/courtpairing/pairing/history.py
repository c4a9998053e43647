"""Partner and opponent history derived from completed rounds."""

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

from typing import Iterator, List, Optional, Sequence

from courtpairing.constants import TEAM_SIZE
from courtpairing.models import CourtMatch, PartnerHistory, RoundState
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def recent_rounds(
    previous_rounds: Sequence[RoundState], window: Optional[int] = None
) -> List[RoundState]:
    """Return the last ``window`` rounds (all rounds when ``window`` is None)."""
    rounds = list(previous_rounds)
    if window is None:
        return rounds
    if window <= 0:
        return []
    return rounds[-window:]


def _well_formed_courts(previous_rounds: Sequence[RoundState]) -> Iterator[CourtMatch]:
    for round_state in previous_rounds:
        for court in round_state.courts:
            if len(court.team_a) != TEAM_SIZE or len(court.team_b) != TEAM_SIZE:
                logger.debug(
                    "Skipping malformed court %s of round %s in history",
                    court.court_num,
                    round_state.round_num,
                )
                continue
            yield court


def build_partner_history(
    previous_rounds: Sequence[RoundState], window: Optional[int] = None
) -> PartnerHistory:
    """Count how often each pair of players has been partnered.

    Parameters
    ----------
    previous_rounds : sequence of RoundState
        Completed rounds, oldest first. May be empty.
    window : int, optional
        Only the most recent ``window`` rounds contribute when given.

    Returns
    -------
    PartnerHistory
        Symmetric counts; ``history.count(a, b) == history.count(b, a)``.
    """
    history = PartnerHistory()
    for court in _well_formed_courts(recent_rounds(previous_rounds, window)):
        history.add(*court.team_a)
        history.add(*court.team_b)
    return history


def build_opponent_history(
    previous_rounds: Sequence[RoundState], window: Optional[int] = None
) -> PartnerHistory:
    """Count how often each pair of players has faced each other."""
    history = PartnerHistory()
    for court in _well_formed_courts(recent_rounds(previous_rounds, window)):
        for home in court.team_a:
            for away in court.team_b:
                history.add(home, away)
    return history
