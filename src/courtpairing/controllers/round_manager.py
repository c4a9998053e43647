"""Round management for events.

This module handles round-related operations for a single event: seeding the
first round, recording results, advancing to the next round and undoing the
last one. Rounds are kept in memory; persisting them is up to the caller.
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
from typing import Any, Dict, List, Optional, Sequence, Tuple

from courtpairing.constants import (
    FORMAT_AMERICANO,
    PLAYERS_PER_COURT,
    TEAM_SIZE,
    VARIANT_TEAM,
)
from courtpairing.controllers.result_recorder import ResultRecorder
from courtpairing.exceptions import (
    EventStateException,
    InsufficientPlayersException,
    InvalidConfigurationException,
)
from courtpairing.models import CourtMatch, EventConfig, RoundState
from courtpairing.pairing.americano import next_americano_round
from courtpairing.pairing.dispatcher import (
    AdvancePolicy,
    AdvanceResult,
    advance_round,
    count_new_partnerships,
)
from courtpairing.pairing.wildcard import is_wildcard_round
from courtpairing.type_hints import Team
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import find_duplicates, validate_round_strict

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression for one event.

    This class is responsible for:
    - Creating round 1 from the roster
    - Recording court results on the active round
    - Generating the next round with the event's format and wildcard schedule
    - Keeping the round history and undoing the last round
    """

    def __init__(
        self,
        config: EventConfig,
        players: Sequence[str],
        teams: Optional[Sequence[Team]] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the round manager.

        Args:
            config: Event configuration, validated here
            players: Roster in seeding order (ignored for team Americano)
            teams: Fixed partnerships for team Americano
            rng: Random source for seeding shuffles and wildcard rounds

        Raises:
            InvalidConfigurationException: If the configuration or roster is invalid
            InsufficientPlayersException: If the roster cannot fill every court
        """
        config.validate()
        self.config = config
        self.teams: Optional[List[Team]] = [tuple(t) for t in teams] if teams else None
        if self.is_team_event:
            if not self.teams:
                raise InvalidConfigurationException("Team Americano requires teams")
            players = [player for team in self.teams for player in team]
        self.players: List[str] = list(players)
        self.rng = rng or random.Random()
        self.result_recorder = ResultRecorder()
        self._rounds: List[RoundState] = []
        self._check_roster()

    def _check_roster(self) -> None:
        duplicates = find_duplicates(self.players)
        if duplicates:
            raise InvalidConfigurationException(
                f"Roster lists players more than once: {', '.join(duplicates)}"
            )
        needed = self.config.num_courts * PLAYERS_PER_COURT
        if len(self.players) < needed:
            court_num = len(self.players) // PLAYERS_PER_COURT + 1
            raise InsufficientPlayersException(
                f"Not enough players for court {court_num}: "
                f"{self.config.num_courts} courts need {needed} players, "
                f"roster has {len(self.players)}",
                court_num=court_num,
            )
        if not self.is_americano and len(self.players) != needed:
            raise InvalidConfigurationException(
                f"Winner's Court needs exactly {needed} players for "
                f"{self.config.num_courts} courts, roster has {len(self.players)}"
            )

    @property
    def is_americano(self) -> bool:
        return self.config.format == FORMAT_AMERICANO

    @property
    def is_team_event(self) -> bool:
        return self.is_americano and self.config.americano.variant == VARIANT_TEAM

    @property
    def rounds(self) -> Tuple[RoundState, ...]:
        """Every round so far, oldest first, including the active one."""
        return tuple(self._rounds)

    @property
    def completed_rounds(self) -> Tuple[RoundState, ...]:
        """Rounds before the active one."""
        return tuple(self._rounds[:-1])

    @property
    def current_round(self) -> Optional[RoundState]:
        """The active round, or None before the event starts."""
        return self._rounds[-1] if self._rounds else None

    @property
    def current_round_number(self) -> int:
        return len(self._rounds)

    @property
    def is_finished(self) -> bool:
        """True once ``max_rounds`` rounds exist and the last is scored."""
        if self.config.max_rounds is None or not self._rounds:
            return False
        return (
            len(self._rounds) >= self.config.max_rounds
            and self._rounds[-1].is_complete
        )

    def _require_current(self) -> RoundState:
        if not self._rounds:
            raise EventStateException("The event has not started yet")
        return self._rounds[-1]

    def start_event(self, shuffle: bool = False) -> RoundState:
        """Create round 1.

        Winner's Court seeds courts from the roster in order (court 1 gets the
        first four players), shuffled first when ``shuffle`` is set. Americano
        generates its first round like any other.

        Raises:
            EventStateException: If the event has already started
        """
        if self._rounds:
            raise EventStateException("The event has already started")

        if self.is_americano:
            first = next_americano_round(
                0,
                self.config.num_courts,
                self.players,
                [],
                self.config.americano,
                self.teams,
            )
        else:
            seeding = list(self.players)
            if shuffle:
                self.rng.shuffle(seeding)
            courts = []
            for index in range(self.config.num_courts):
                group = seeding[index * PLAYERS_PER_COURT : (index + 1) * PLAYERS_PER_COURT]
                courts.append(
                    CourtMatch(
                        court_num=index + 1,
                        team_a=tuple(group[:TEAM_SIZE]),
                        team_b=tuple(group[TEAM_SIZE:]),
                    )
                )
            first = RoundState(round_num=1, courts=tuple(courts))
            validate_round_strict(first)

        self._rounds.append(first)
        logger.info(
            f"Started {self.config.format} event '{self.config.name}' "
            f"on {self.config.num_courts} courts with {len(self.players)} players"
        )
        return first

    def record_score(self, court_num: int, score_a: int, score_b: int) -> RoundState:
        """Record a court result on the active round.

        Raises:
            EventStateException: If the event has not started
            InvalidResultException: If the score is invalid
            RoundNotFoundException: If the court does not exist
        """
        current = self._require_current()
        updated = self.result_recorder.record_court_score(
            current, court_num, score_a, score_b
        )
        self._rounds[-1] = updated
        return updated

    def advance(self) -> AdvanceResult:
        """Generate and activate the next round.

        Raises:
            EventStateException: If the active round is not fully scored or
                the event has reached ``max_rounds``
        """
        current = self._require_current()
        unscored = self.result_recorder.unscored_courts(current)
        if unscored:
            raise EventStateException(
                f"Round {current.round_num} still needs results for courts {unscored}"
            )
        if self.config.max_rounds is not None and len(self._rounds) >= self.config.max_rounds:
            raise EventStateException(
                f"Event '{self.config.name}' is limited to {self.config.max_rounds} rounds"
            )

        next_num = current.round_num + 1
        if self.is_americano:
            generated = next_americano_round(
                current.round_num,
                self.config.num_courts,
                self.players,
                self._rounds,
                self.config.americano,
                self.teams,
            )
            result = AdvanceResult(
                next=generated,
                wildcard_applied=False,
                partner_swaps=count_new_partnerships(generated, self._rounds),
            )
        else:
            wildcard = self.config.wildcard
            policy = AdvancePolicy(
                anti_repeat_window=self.config.engine.anti_repeat_window,
                wildcard_active=is_wildcard_round(next_num, wildcard),
                wildcard_intensity=wildcard.intensity,
            )
            result = advance_round(current, self._rounds[:-1], policy, self.rng)

        self._rounds.append(result.next)
        if result.wildcard_applied:
            logger.info(f"Round {next_num} is a {self.config.wildcard.intensity} wildcard round")
        return result

    def undo_last_round(self) -> RoundState:
        """Discard the active round and reactivate the one before it.

        Returns:
            The round that is active again

        Raises:
            EventStateException: If only round 1 (or nothing) exists
        """
        if len(self._rounds) < 2:
            raise EventStateException("Cannot undo: there is no earlier round to return to")
        removed = self._rounds.pop()
        logger.info(f"Undid round {removed.round_num}")
        return self._rounds[-1]

    def standings(self) -> List[Tuple[str, int]]:
        """Players ordered by total points scored, best first."""
        points = self.result_recorder.player_points(self._rounds)
        for player in self.players:
            points.setdefault(player, 0)
        return sorted(points.items(), key=lambda item: (-item[1], item[0]))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the event and its rounds."""
        return {
            "config": self.config.to_dict(),
            "players": list(self.players),
            "teams": [list(team) for team in self.teams] if self.teams else None,
            "rounds": [round_state.to_dict() for round_state in self._rounds],
        }
