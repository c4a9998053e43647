"""Validation utilities for Court Pairing.

This module provides reusable validation functions with consistent error handling.
Each check comes in two flavours: one returning a ``ValidationResult`` for callers
that want to report problems, and a ``*_strict`` one raising the matching exception.
"""

from collections import Counter
from typing import Iterable, List, Optional

from courtpairing.constants import PLAYERS_PER_COURT, TEAM_SIZE
from courtpairing.exceptions import (
    DuplicatePlayerException,
    InvalidResultException,
    MalformedCourtException,
)
from courtpairing.models.court_match import CourtMatch
from courtpairing.models.round_state import RoundState
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
    """

    def __init__(self, is_valid: bool, error_message: Optional[str] = None):
        self.is_valid = is_valid
        self.error_message = error_message

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


VALID = ValidationResult(is_valid=True)


def find_duplicates(players: Iterable[str]) -> List[str]:
    """Return players occurring more than once, in first-seen order."""
    counts = Counter(players)
    return [player for player, times in counts.items() if times > 1]


# ========== Court Validation ==========


def validate_court(court: CourtMatch) -> ValidationResult:
    """Check that a court holds two teams of two distinct players.

    Args:
        court: Court to validate

    Returns:
        ValidationResult with validation status
    """
    if not isinstance(court.court_num, int) or court.court_num < 1:
        return ValidationResult(
            False, f"Court number must be a positive integer, got {court.court_num!r}"
        )
    for label, team in (("A", court.team_a), ("B", court.team_b)):
        if len(team) != TEAM_SIZE:
            return ValidationResult(
                False,
                f"Court {court.court_num} team {label} must have exactly "
                f"{TEAM_SIZE} players, got {len(team)}: {list(team)}",
            )
    duplicates = find_duplicates(court.players)
    if duplicates:
        return ValidationResult(
            False,
            f"Duplicate player detected in court {court.court_num}: "
            f"{', '.join(duplicates)} (players {list(court.players)})",
        )
    return VALID


def validate_court_strict(court: CourtMatch) -> None:
    """Validate a court and raise if it is malformed.

    Raises:
        MalformedCourtException: If a team does not hold exactly two players
        DuplicatePlayerException: If a player appears twice on the court
    """
    result = validate_court(court)
    if result:
        return
    duplicates = find_duplicates(court.players)
    logger.error(result.error_message)
    if duplicates and len(court.players) == PLAYERS_PER_COURT:
        raise DuplicatePlayerException(
            result.error_message, court_num=court.court_num, players=duplicates
        )
    raise MalformedCourtException(result.error_message, court_num=court.court_num)


# ========== Round Validation ==========


def validate_round(round_state: RoundState) -> ValidationResult:
    """Check every court and the no-duplicate invariant across courts."""
    if not round_state.courts:
        return ValidationResult(False, f"Round {round_state.round_num} has no courts")

    for court in round_state.courts:
        result = validate_court(court)
        if not result:
            return result

    court_nums = [court.court_num for court in round_state.courts]
    repeated_courts = find_duplicates(court_nums)
    if repeated_courts:
        return ValidationResult(
            False, f"Round {round_state.round_num} repeats court numbers {repeated_courts}"
        )

    duplicates = find_duplicates(round_state.players)
    if duplicates:
        return ValidationResult(
            False,
            f"Duplicate player detected across courts in round "
            f"{round_state.round_num}: {', '.join(duplicates)}",
        )
    return VALID


def validate_round_strict(round_state: RoundState) -> None:
    """Validate a round, raising on the first problem found.

    Raises:
        MalformedCourtException: If a court is malformed or court numbers repeat
        DuplicatePlayerException: If a player is repeated within or across courts
    """
    if not round_state.courts:
        raise MalformedCourtException(f"Round {round_state.round_num} has no courts")

    for court in round_state.courts:
        validate_court_strict(court)

    repeated_courts = find_duplicates(court.court_num for court in round_state.courts)
    if repeated_courts:
        raise MalformedCourtException(
            f"Round {round_state.round_num} repeats court numbers {repeated_courts}",
            court_num=repeated_courts[0],
        )

    duplicates = find_duplicates(round_state.players)
    if duplicates:
        locations = {
            player: [c.court_num for c in round_state.courts if player in c.players]
            for player in duplicates
        }
        message = (
            f"Duplicate player detected across courts in round "
            f"{round_state.round_num}: {locations}"
        )
        logger.error(message)
        raise DuplicatePlayerException(message, court_num=None, players=duplicates)


# ========== Score Validation ==========


def validate_score(score_a: Optional[int], score_b: Optional[int]) -> ValidationResult:
    """Validate a court result entered by the operator.

    Both scores are required, must be non-negative integers and must differ.
    """
    if score_a is None or score_b is None:
        return ValidationResult(False, "Both scores are required")
    for value in (score_a, score_b):
        if isinstance(value, bool) or not isinstance(value, int):
            return ValidationResult(False, f"Score must be an integer, got {value!r}")
        if value < 0:
            return ValidationResult(False, f"Score cannot be negative, got {value}")
    if score_a == score_b:
        return ValidationResult(False, f"Tied score {score_a}-{score_b} is not allowed")
    return VALID


def validate_score_strict(score_a: Optional[int], score_b: Optional[int]) -> None:
    """Validate a result and raise if invalid.

    Raises:
        InvalidResultException: If the score is missing, negative or tied
    """
    result = validate_score(score_a, score_b)
    if not result.is_valid:
        raise InvalidResultException(result.error_message)
