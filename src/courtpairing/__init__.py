"""Round pairing engine for Winner's Court and Americano court events."""

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

from courtpairing.models import (
    AmericanoPairingOptions,
    CourtMatch,
    EngineOptions,
    EventConfig,
    PartnerHistory,
    RoundState,
    WildcardSettings,
    players_in,
)
from courtpairing.pairing import (
    advance_round,
    apply_wildcard_shuffle,
    build_opponent_history,
    build_partner_history,
    calculate_rest_counts,
    generate_americano_individual_pairings,
    get_next_round,
    next_americano_round,
    next_round,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CourtMatch",
    "RoundState",
    "players_in",
    "PartnerHistory",
    "EngineOptions",
    "AmericanoPairingOptions",
    "WildcardSettings",
    "EventConfig",
    "build_partner_history",
    "build_opponent_history",
    "calculate_rest_counts",
    "generate_americano_individual_pairings",
    "next_americano_round",
    "next_round",
    "apply_wildcard_shuffle",
    "get_next_round",
    "advance_round",
]
