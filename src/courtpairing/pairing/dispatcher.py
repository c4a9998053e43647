"""Route round advancement to the generator for the event format.

Winner's Court rounds are computed from the scores of the round just played,
Americano rounds from the roster and partner history alone.
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

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from courtpairing.constants import (
    DEFAULT_ANTI_REPEAT_WINDOW,
    DEFAULT_WILDCARD_INTENSITY,
    FORMAT_AMERICANO,
    FORMAT_DESCRIPTIONS,
    FORMAT_WINNERS_COURT,
)
from courtpairing.exceptions import InvalidConfigurationException
from courtpairing.models import (
    AmericanoPairingOptions,
    EngineOptions,
    RoundState,
)
from courtpairing.pairing.americano import next_americano_round
from courtpairing.pairing.history import build_partner_history
from courtpairing.pairing.wildcard import apply_wildcard_shuffle
from courtpairing.pairing.winners_court import next_round
from courtpairing.type_hints import Team
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import validate_round_strict

logger = setup_logger(__name__)


def _unsupported(event_format: str) -> InvalidConfigurationException:
    return InvalidConfigurationException(f"Unsupported event format: {event_format!r}")


def _with_round(
    previous_rounds: Sequence[RoundState], round_state: RoundState
) -> List[RoundState]:
    history = [r for r in previous_rounds if r.round_num != round_state.round_num]
    history.append(round_state)
    return history


def _roster_from(rounds: Sequence[RoundState]) -> List[str]:
    roster = []
    seen = set()
    for round_state in rounds:
        for player in round_state.players:
            if player not in seen:
                seen.add(player)
                roster.append(player)
    return roster


def get_next_round(
    event_format: str,
    current_round: RoundState,
    previous_rounds: Sequence[RoundState] = (),
    engine_options: Optional[EngineOptions] = None,
    americano_options: Optional[AmericanoPairingOptions] = None,
    all_players: Optional[Sequence[str]] = None,
    num_courts: Optional[int] = None,
    teams: Optional[Sequence[Team]] = None,
) -> RoundState:
    """Generate the round that follows ``current_round``.

    For Americano the roster defaults to every player seen so far (first
    appearance order) and the court count to that of ``current_round``.

    Raises:
        InvalidConfigurationException: If the format is not supported
    """
    if event_format == FORMAT_WINNERS_COURT:
        return next_round(current_round, engine_options, previous_rounds)

    if event_format == FORMAT_AMERICANO:
        history = _with_round(previous_rounds, current_round)
        roster = list(all_players) if all_players is not None else _roster_from(history)
        return next_americano_round(
            current_round.round_num,
            num_courts or len(current_round.courts),
            roster,
            history,
            americano_options,
            teams,
        )

    raise _unsupported(event_format)


def validate_round_state(event_format: str, round_state: RoundState) -> bool:
    """Check that ``round_state`` is a valid round for ``event_format``.

    Returns:
        True when valid

    Raises:
        InvalidConfigurationException: If the format is not supported
        MalformedCourtException: If a court is malformed
        DuplicatePlayerException: If a player appears twice
    """
    if event_format not in (FORMAT_WINNERS_COURT, FORMAT_AMERICANO):
        raise _unsupported(event_format)
    validate_round_strict(round_state)
    return True


def supports_wildcards(event_format: str) -> bool:
    """Only Winner's Court events have wildcard rounds."""
    return event_format == FORMAT_WINNERS_COURT


def get_format_description(event_format: str) -> str:
    return FORMAT_DESCRIPTIONS.get(event_format, "Unknown format")


def count_new_partnerships(
    round_state: RoundState, previous_rounds: Sequence[RoundState]
) -> int:
    """Count teams in ``round_state`` whose players never partnered before."""
    history = build_partner_history(previous_rounds)
    return sum(
        1
        for court in round_state.courts
        for team in (court.team_a, court.team_b)
        if history.count(*team) == 0
    )


@dataclass
class AdvancePolicy:
    """How a Winner's Court round should be advanced.

    Attributes
    ----------
    anti_repeat_window : int
        Passed to the ladder generator.
    wildcard_active : bool
        Whether to shuffle the generated round.
    wildcard_intensity : str
        Shuffle intensity when ``wildcard_active`` is set.
    """

    anti_repeat_window: int = DEFAULT_ANTI_REPEAT_WINDOW
    wildcard_active: bool = False
    wildcard_intensity: str = DEFAULT_WILDCARD_INTENSITY


@dataclass(frozen=True)
class AdvanceResult:
    """The generated round plus what happened while producing it."""

    next: RoundState
    wildcard_applied: bool
    partner_swaps: int


def advance_round(
    current_round: RoundState,
    previous_rounds: Sequence[RoundState],
    policy: Optional[AdvancePolicy] = None,
    rng: Optional[random.Random] = None,
) -> AdvanceResult:
    """Advance a Winner's Court event by one round.

    The ladder generator runs first; on wildcard rounds its output is then
    shuffled at the policy's intensity.
    """
    policy = policy or AdvancePolicy()
    engine_options = EngineOptions(anti_repeat_window=policy.anti_repeat_window)
    generated = next_round(current_round, engine_options, previous_rounds)

    wildcard_applied = False
    if policy.wildcard_active:
        courts = apply_wildcard_shuffle(generated.courts, policy.wildcard_intensity, rng)
        generated = RoundState(round_num=generated.round_num, courts=tuple(courts))
        validate_round_strict(generated)
        wildcard_applied = True

    partner_swaps = count_new_partnerships(
        generated, _with_round(previous_rounds, current_round)
    )
    logger.info(
        "Advanced to round %s (wildcard=%s, new partnerships=%s)",
        generated.round_num,
        wildcard_applied,
        partner_swaps,
    )
    return AdvanceResult(
        next=generated, wildcard_applied=wildcard_applied, partner_swaps=partner_swaps
    )
