"""Result recording for court matches.

This module validates scores entered for a court and writes them onto the
round. Rounds are immutable, so every operation returns a new round.
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

from typing import Dict, Iterable, List, Tuple

from courtpairing.exceptions import RoundNotFoundException
from courtpairing.models import RoundState
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import validate_score_strict

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating court results.

    This class is responsible for:
    - Rejecting negative, non-integer and tied scores
    - Rejecting scores for courts that are not in the round
    - Clearing results that were entered by mistake
    """

    def record_court_score(
        self, round_state: RoundState, court_num: int, score_a: int, score_b: int
    ) -> RoundState:
        """Record the result of one court.

        Args:
            round_state: The round the court belongs to
            court_num: Court number within the round
            score_a: Score of team A
            score_b: Score of team B

        Returns:
            Copy of ``round_state`` with the court's scores set

        Raises:
            InvalidResultException: If the score is missing, negative or tied
            RoundNotFoundException: If the round has no such court
        """
        validate_score_strict(score_a, score_b)
        court = round_state.court(court_num)
        if court is None:
            logger.error(
                f"Court {court_num} not found in round {round_state.round_num}"
            )
            raise RoundNotFoundException(
                f"Round {round_state.round_num} has no court {court_num}"
            )

        if court.is_scored:
            logger.warning(
                f"Court {court_num} of round {round_state.round_num} already has a "
                f"result ({court.score_a}-{court.score_b}), overwriting"
            )

        logger.debug(
            f"Recorded court {court_num}: {list(court.team_a)} {score_a} - "
            f"{score_b} {list(court.team_b)}"
        )
        return round_state.with_court(court.with_scores(score_a, score_b))

    def record_round_scores(
        self, round_state: RoundState, scores: Iterable[Tuple[int, int, int]]
    ) -> RoundState:
        """Record ``(court_num, score_a, score_b)`` results in one go.

        Either every score is recorded or an exception propagates and the
        original round is left as it was.
        """
        updated = round_state
        for court_num, score_a, score_b in scores:
            updated = self.record_court_score(updated, court_num, score_a, score_b)
        return updated

    def clear_court_score(self, round_state: RoundState, court_num: int) -> RoundState:
        """Remove the result of one court."""
        court = round_state.court(court_num)
        if court is None:
            raise RoundNotFoundException(
                f"Round {round_state.round_num} has no court {court_num}"
            )
        logger.info(f"Cleared result of court {court_num} in round {round_state.round_num}")
        return round_state.with_court(court.without_scores())

    def unscored_courts(self, round_state: RoundState) -> List[int]:
        """Court numbers still waiting for a result."""
        return [court.court_num for court in round_state.courts if not court.is_scored]

    def player_points(self, rounds: Iterable[RoundState]) -> Dict[str, int]:
        """Total points each player's teams scored across ``rounds``.

        Unscored courts contribute nothing.
        """
        points: Dict[str, int] = {}
        for round_state in rounds:
            for court in round_state.courts:
                if not court.is_scored:
                    continue
                for team, score in ((court.team_a, court.score_a), (court.team_b, court.score_b)):
                    for player in team:
                        points[player] = points.get(player, 0) + score
        return points
