"""Wildcard shuffles and wildcard round scheduling.

A wildcard round perturbs a freshly generated Winner's Court round for
variety. The shuffle is deliberately blind to partner history.
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
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from courtpairing.constants import (
    INTENSITY_MAYHEM,
    INTENSITY_MEDIUM,
    INTENSITY_MILD,
    MEDIUM_SHUFFLE_FRACTION,
    MILD_SWAP_FRACTION,
    PLAYERS_PER_COURT,
    TEAM_SIZE,
    WILDCARD_INTENSITIES,
    WILDCARD_INTENSITY_INFO,
)
from courtpairing.exceptions import DuplicatePlayerException, InvalidConfigurationException
from courtpairing.models import CourtMatch, WildcardSettings
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import find_duplicates, validate_court_strict

logger = setup_logger(__name__)


def _mild_shuffle(players: List[str], num_courts: int, rng: random.Random) -> None:
    """Swap single players between random adjacent courts."""
    if num_courts < 2:
        return
    swaps = math.floor(MILD_SWAP_FRACTION * len(players))
    for _ in range(swaps):
        court_index = rng.randint(0, num_courts - 2)
        upper = court_index * PLAYERS_PER_COURT + rng.randrange(PLAYERS_PER_COURT)
        lower = (court_index + 1) * PLAYERS_PER_COURT + rng.randrange(PLAYERS_PER_COURT)
        players[upper], players[lower] = players[lower], players[upper]


def _medium_shuffle(players: List[str], rng: random.Random) -> None:
    """Shuffle the occupants of half the positions among themselves."""
    count = math.floor(MEDIUM_SHUFFLE_FRACTION * len(players))
    positions = rng.sample(range(len(players)), count)
    occupants = [players[position] for position in positions]
    rng.shuffle(occupants)
    for position, player in zip(positions, occupants):
        players[position] = player


def _mayhem_shuffle(players: List[str], rng: random.Random) -> None:
    rng.shuffle(players)


def _raise_duplicates(message: str, court_num: Optional[int], duplicates: List[str]):
    logger.error(message)
    raise DuplicatePlayerException(message, court_num=court_num, players=duplicates)


def apply_wildcard_shuffle(
    courts: Sequence[CourtMatch],
    intensity: str,
    rng: Optional[random.Random] = None,
) -> List[CourtMatch]:
    """Randomly reassign players across courts.

    Players are flattened in court order, permuted according to
    ``intensity`` and re-sliced four per court (first two form team A).

    Args:
        courts: Courts of one round, each with two teams of two
        intensity: One of ``mild``, ``medium`` or ``mayhem``
        rng: Random source; pass a seeded ``random.Random`` for reproducible shuffles

    Returns:
        New courts with the same court numbers and no scores

    Raises:
        InvalidConfigurationException: If the intensity is unknown
        MalformedCourtException: If an input court is not two teams of two
        DuplicatePlayerException: If a player repeats in the input or the output
    """
    if intensity not in WILDCARD_INTENSITIES:
        raise InvalidConfigurationException(
            f"Unknown wildcard intensity {intensity!r}; "
            f"expected one of {', '.join(WILDCARD_INTENSITIES)}"
        )
    rng = rng or random.Random()

    ordered = sorted(courts, key=lambda court: court.court_num)
    for court in ordered:
        validate_court_strict(court)

    players = [player for court in ordered for player in court.players]
    duplicates = find_duplicates(players)
    if duplicates:
        _raise_duplicates(
            f"Duplicate players in courts before wildcard shuffle: {', '.join(duplicates)}",
            None,
            duplicates,
        )

    if intensity == INTENSITY_MILD:
        _mild_shuffle(players, len(ordered), rng)
    elif intensity == INTENSITY_MEDIUM:
        _medium_shuffle(players, rng)
    elif intensity == INTENSITY_MAYHEM:
        _mayhem_shuffle(players, rng)

    shuffled = []
    for index, court in enumerate(ordered):
        start = index * PLAYERS_PER_COURT
        slots = players[start : start + PLAYERS_PER_COURT]
        court_duplicates = find_duplicates(slots)
        if court_duplicates:
            _raise_duplicates(
                f"Wildcard shuffle produced duplicate players in court "
                f"{court.court_num}: {', '.join(court_duplicates)} (players {slots})",
                court.court_num,
                court_duplicates,
            )
        shuffled.append(
            CourtMatch(
                court_num=court.court_num,
                team_a=tuple(slots[:TEAM_SIZE]),
                team_b=tuple(slots[TEAM_SIZE:]),
            )
        )

    output_players = [player for court in shuffled for player in court.players]
    duplicates = find_duplicates(output_players)
    if duplicates:
        _raise_duplicates(
            f"Wildcard shuffle produced duplicate players across courts: "
            f"{', '.join(duplicates)}",
            None,
            duplicates,
        )

    logger.info("Applied %s wildcard shuffle to %s courts", intensity, len(shuffled))
    return shuffled


# ========== Scheduling ==========


def is_wildcard_round(round_num: int, settings: WildcardSettings) -> bool:
    """Return True when ``round_num`` is a scheduled wildcard round.

    Wildcards fall on ``start_round`` and every ``frequency`` rounds after it.
    """
    if not settings.is_configured:
        return False
    if round_num < settings.start_round:
        return False
    return (round_num - settings.start_round) % settings.frequency == 0


def get_next_wildcard_round(round_num: int, settings: WildcardSettings) -> Optional[int]:
    """Return the first wildcard round after ``round_num``, or None if disabled."""
    if not settings.is_configured:
        return None
    if round_num < settings.start_round:
        return settings.start_round
    cycles = (round_num - settings.start_round) // settings.frequency + 1
    return settings.start_round + cycles * settings.frequency


def get_wildcard_intensity_info(intensity: str) -> Dict[str, str]:
    """Display name and description for an intensity (medium when unknown)."""
    return WILDCARD_INTENSITY_INFO.get(intensity, WILDCARD_INTENSITY_INFO[INTENSITY_MEDIUM])


def wildcard_preview(settings: WildcardSettings, count: int = 3) -> str:
    """One-line human readable summary of the wildcard schedule."""
    if not settings.is_configured:
        return "No wildcards configured"
    info = get_wildcard_intensity_info(settings.intensity)
    rounds = [settings.start_round + i * settings.frequency for i in range(count)]
    listed = ", ".join(str(r) for r in rounds)
    return (
        f"{info['name']}: wildcards start Round {settings.start_round}, "
        f"then every {settings.frequency} rounds ({listed}, ...)"
    )


# ========== Round diff ==========


@dataclass(frozen=True)
class PlayerMovement:
    """Court movement of one player between two rounds.

    ``from_court`` is None when the player was not in the earlier round.
    """

    player_id: str
    from_court: Optional[int]
    to_court: int
    changed: bool


def diff_rounds(
    previous: Optional[Sequence[CourtMatch]], following: Sequence[CourtMatch]
) -> List[PlayerMovement]:
    """Report where each player of ``following`` played in ``previous``."""
    previous_court = {}
    for court in previous or ():
        for player in court.players:
            previous_court[player] = court.court_num

    movements = []
    for court in following:
        for player in court.players:
            from_court = previous_court.get(player)
            changed = from_court is not None and from_court != court.court_num
            movements.append(PlayerMovement(player, from_court, court.court_num, changed))
    return movements


def moved_players(movements: Sequence[PlayerMovement]) -> set:
    """Players whose court changed."""
    return {movement.player_id for movement in movements if movement.changed}
