"""Data model for partnership and opposition counts."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet

from courtpairing.type_hints import PairCounts


@dataclass
class PartnerHistory:
    """
    Symmetric count of how often two players shared a court role.

    The same structure tracks partnerships and, separately, oppositions.

    Attributes
    ----------
    counts : dict of str to dict of str to int
        ``counts[a][b]`` is the number of times ``a`` and ``b`` were paired;
        always equal to ``counts[b][a]``.
    """

    counts: PairCounts = field(default_factory=dict)

    def add(self, player1_id: str, player2_id: str, times: int = 1) -> None:
        """Record that two players have been paired ``times`` more times."""
        row1 = self.counts.setdefault(player1_id, {})
        row2 = self.counts.setdefault(player2_id, {})
        row1[player2_id] = row1.get(player2_id, 0) + times
        row2[player1_id] = row2.get(player1_id, 0) + times

    def count(self, player1_id: str, player2_id: str) -> int:
        """Number of times two players have been paired (0 if never)."""
        return self.counts.get(player1_id, {}).get(player2_id, 0)

    def __getitem__(self, player_id: str) -> Dict[str, int]:
        return self.counts.get(player_id, {})

    def __contains__(self, player_id: object) -> bool:
        return player_id in self.counts

    def pairs(self) -> Dict[FrozenSet[str], int]:
        """Return each unordered pair once with its count."""
        result: Dict[FrozenSet[str], int] = {}
        for player, row in self.counts.items():
            for other, times in row.items():
                result[frozenset((player, other))] = times
        return result

    def max_count(self) -> int:
        """Highest count of any pair, 0 when empty."""
        return max((times for row in self.counts.values() for times in row.values()), default=0)

    def as_dict(self) -> PairCounts:
        """Deep copy of the nested counts."""
        return {player: dict(row) for player, row in self.counts.items()}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize history to dictionary."""
        return {"counts": self.as_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PartnerHistory":
        """Deserialize history from dictionary."""
        return cls(
            counts={
                str(player): {str(other): int(times) for other, times in row.items()}
                for player, row in data.get("counts", {}).items()
            }
        )
