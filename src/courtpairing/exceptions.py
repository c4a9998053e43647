"""Exceptions for use in Court Pairing"""

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

from typing import Optional, Sequence


# ========== Base Application Exception ==========


class CourtPairingException(Exception):
    """Base exception for all Court Pairing errors.

    All custom exceptions in the library inherit from this class.
    This enables catching all library-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(CourtPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pairing request is invalid (e.g., bad court count)."""

    pass


class InsufficientPlayersException(PairingException):
    """Raised when fewer than four players remain for a court being filled."""

    def __init__(self, message: str, court_num: Optional[int] = None):
        super().__init__(message)
        self.court_num = court_num


# ========== Round Exceptions ==========


class RoundException(CourtPairingException):
    """Base exception for round-related errors."""

    pass


class MalformedCourtException(RoundException):
    """Raised when a court does not hold exactly two players per team."""

    def __init__(self, message: str, court_num: Optional[int] = None):
        super().__init__(message)
        self.court_num = court_num


class TiedScoreException(RoundException):
    """Raised when a completed court has equal scores for both teams."""

    def __init__(self, message: str, court_num: Optional[int] = None):
        super().__init__(message)
        self.court_num = court_num


class MissingScoreException(RoundException):
    """Raised when a court needs a result but has none."""

    def __init__(self, message: str, court_num: Optional[int] = None):
        super().__init__(message)
        self.court_num = court_num


class DuplicatePlayerException(RoundException):
    """Raised when a player appears more than once within or across courts.

    Attributes
    ----------
    court_num : int or None
        Court on which the repeat was found, or None for a cross-court repeat.
    players : tuple of str
        The repeated player identifiers.
    """

    def __init__(
        self,
        message: str,
        court_num: Optional[int] = None,
        players: Sequence[str] = (),
    ):
        super().__init__(message)
        self.court_num = court_num
        self.players = tuple(players)


class RoundNotFoundException(RoundException):
    """Raised when a requested round or court does not exist."""

    pass


# ========== Result Exceptions ==========


class ResultException(CourtPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g., negative or tied score)."""

    pass


# ========== Event Exceptions ==========


class EventException(CourtPairingException):
    """Base exception for event-related errors."""

    pass


class EventStateException(EventException):
    """Raised when the event is in an invalid state for the requested operation."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
