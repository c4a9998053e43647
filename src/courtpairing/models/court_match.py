"""CourtMatch data class."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from courtpairing.exceptions import MissingScoreException, TiedScoreException
from courtpairing.type_hints import Team


@dataclass(frozen=True)
class CourtMatch:
    """One court's assignment for one round.

    Attributes
    ----------
    court_num : int
        Positive court number; court 1 is the top of the ladder.
    team_a : tuple of str
        The two players of team A.
    team_b : tuple of str
        The two players of team B.
    score_a : int or None
        Score of team A, None until the court has been played.
    score_b : int or None
        Score of team B, None until the court has been played.
    """

    court_num: int
    team_a: Team
    team_b: Team
    score_a: Optional[int] = None
    score_b: Optional[int] = None

    def __post_init__(self):
        # Teams may arrive as lists from storage; keep them immutable
        object.__setattr__(self, "team_a", tuple(self.team_a))
        object.__setattr__(self, "team_b", tuple(self.team_b))

    @property
    def players(self) -> Tuple[str, ...]:
        """All players on the court, team A first."""
        return self.team_a + self.team_b

    @property
    def is_scored(self) -> bool:
        """True when both scores have been entered."""
        return self.score_a is not None and self.score_b is not None

    def winners_and_losers(self) -> Tuple[Team, Team]:
        """Return ``(winning_team, losing_team)`` for a completed court.

        Raises:
            MissingScoreException: If either score is missing
            TiedScoreException: If both teams have the same score
        """
        if not self.is_scored:
            raise MissingScoreException(
                f"Court {self.court_num} has no result yet", court_num=self.court_num
            )
        if self.score_a == self.score_b:
            raise TiedScoreException(
                f"Court {self.court_num} is tied {self.score_a}-{self.score_b}; "
                "a winner cannot be determined",
                court_num=self.court_num,
            )
        if self.score_a > self.score_b:
            return self.team_a, self.team_b
        return self.team_b, self.team_a

    def with_scores(self, score_a: Optional[int], score_b: Optional[int]) -> "CourtMatch":
        """Return a copy with the given scores."""
        return replace(self, score_a=score_a, score_b=score_b)

    def without_scores(self) -> "CourtMatch":
        """Return a copy with both scores cleared."""
        return replace(self, score_a=None, score_b=None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize court match to dictionary."""
        return {
            "court_num": self.court_num,
            "team_a": list(self.team_a),
            "team_b": list(self.team_b),
            "score_a": self.score_a,
            "score_b": self.score_b,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CourtMatch":
        """Deserialize court match from dictionary."""
        return cls(
            court_num=int(data["court_num"]),
            team_a=tuple(data["team_a"]),
            team_b=tuple(data["team_b"]),
            score_a=data.get("score_a"),
            score_b=data.get("score_b"),
        )
