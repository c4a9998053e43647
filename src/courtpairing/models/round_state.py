"""Data model for a tournament round."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Set, Tuple

from courtpairing.models.court_match import CourtMatch


@dataclass(frozen=True)
class RoundState:
    """One round of an event.

    Attributes
    ----------
    round_num : int
        Round number (1-indexed), increasing by one per round.
    courts : tuple of CourtMatch
        Court assignments, ordered by court number.
    """

    round_num: int
    courts: Tuple[CourtMatch, ...] = field(default_factory=tuple)

    def __post_init__(self):
        ordered = tuple(sorted(self.courts, key=lambda court: court.court_num))
        object.__setattr__(self, "courts", ordered)

    @property
    def players(self) -> List[str]:
        """Every player identifier in court order (duplicates kept)."""
        return [player for court in self.courts for player in court.players]

    @property
    def player_set(self) -> Set[str]:
        """Distinct players appearing on any court."""
        return set(self.players)

    @property
    def is_complete(self) -> bool:
        """True when every court has both scores entered."""
        return bool(self.courts) and all(court.is_scored for court in self.courts)

    def court(self, court_num: int) -> Optional[CourtMatch]:
        """Return the court with the given number, or None."""
        for court in self.courts:
            if court.court_num == court_num:
                return court
        return None

    def with_court(self, updated: CourtMatch) -> "RoundState":
        """Return a copy with the court of the same number replaced."""
        courts = [
            updated if court.court_num == updated.court_num else court
            for court in self.courts
        ]
        return replace(self, courts=tuple(courts))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round state to dictionary."""
        return {
            "round_num": self.round_num,
            "courts": [court.to_dict() for court in self.courts],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundState":
        """Deserialize round state from dictionary."""
        return cls(
            round_num=int(data["round_num"]),
            courts=tuple(CourtMatch.from_dict(c) for c in data.get("courts", [])),
        )


def players_in(round_state: RoundState) -> List[str]:
    """Return the ordered list of players in ``round_state``."""
    return round_state.players
