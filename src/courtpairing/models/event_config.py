"""Configuration data classes for events and round generation."""

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
from typing import Any, Dict, Optional

from courtpairing.constants import (
    AMERICANO_VARIANTS,
    DEFAULT_ANTI_REPEAT_WINDOW,
    DEFAULT_WILDCARD_INTENSITY,
    EVENT_FORMATS,
    FORMAT_AMERICANO,
    FORMAT_WINNERS_COURT,
    MAX_COURTS,
    MAX_WILDCARD_FREQUENCY,
    MIN_WILDCARD_START_ROUND,
    VARIANT_INDIVIDUAL,
    WILDCARD_INTENSITIES,
)
from courtpairing.exceptions import InvalidConfigurationException


def _check_window(window: int) -> None:
    if not isinstance(window, int) or window < 0:
        raise InvalidConfigurationException(
            f"anti_repeat_window must be a non-negative integer, got {window!r}"
        )


@dataclass
class EngineOptions:
    """Options for the Winner's Court generator.

    Attributes
    ----------
    anti_repeat_window : int
        Number of most recent rounds whose partnerships are penalized.
    """

    anti_repeat_window: int = DEFAULT_ANTI_REPEAT_WINDOW

    def validate(self) -> None:
        _check_window(self.anti_repeat_window)

    def to_dict(self) -> Dict[str, Any]:
        return {"anti_repeat_window": self.anti_repeat_window}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineOptions":
        return cls(
            anti_repeat_window=data.get("anti_repeat_window", DEFAULT_ANTI_REPEAT_WINDOW)
        )


@dataclass
class AmericanoPairingOptions:
    """Options for the Americano generator.

    Attributes
    ----------
    format : str
        Always "americano".
    variant : str
        "individual" (rotating partners) or "team" (fixed partners).
    anti_repeat_window : int
        For the team variant, how many recent rounds count as a rematch.
    rest_balancing : bool
        Whether rest counts decide who plays when the roster exceeds the courts.
    """

    format: str = FORMAT_AMERICANO
    variant: str = VARIANT_INDIVIDUAL
    anti_repeat_window: int = DEFAULT_ANTI_REPEAT_WINDOW
    rest_balancing: bool = True

    def validate(self) -> None:
        if self.format != FORMAT_AMERICANO:
            raise InvalidConfigurationException(
                f"Americano options require format 'americano', got {self.format!r}"
            )
        if self.variant not in AMERICANO_VARIANTS:
            raise InvalidConfigurationException(
                f"Unknown Americano variant {self.variant!r}; "
                f"expected one of {', '.join(AMERICANO_VARIANTS)}"
            )
        _check_window(self.anti_repeat_window)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "format": self.format,
            "variant": self.variant,
            "anti_repeat_window": self.anti_repeat_window,
            "rest_balancing": self.rest_balancing,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AmericanoPairingOptions":
        return cls(
            format=data.get("format", FORMAT_AMERICANO),
            variant=data.get("variant", VARIANT_INDIVIDUAL),
            anti_repeat_window=data.get("anti_repeat_window", DEFAULT_ANTI_REPEAT_WINDOW),
            rest_balancing=data.get("rest_balancing", True),
        )


@dataclass
class WildcardSettings:
    """When and how strongly wildcard rounds reshuffle the courts.

    Attributes
    ----------
    enabled : bool
        Whether wildcard rounds happen at all.
    start_round : int or None
        First round that is a wildcard round.
    frequency : int or None
        A wildcard round happens every ``frequency`` rounds from ``start_round``.
    intensity : str
        "mild", "medium" or "mayhem".
    """

    enabled: bool = False
    start_round: Optional[int] = None
    frequency: Optional[int] = None
    intensity: str = DEFAULT_WILDCARD_INTENSITY

    @property
    def is_configured(self) -> bool:
        return bool(self.enabled and self.start_round and self.frequency)

    def validate(self) -> None:
        if self.intensity not in WILDCARD_INTENSITIES:
            raise InvalidConfigurationException(
                f"Unknown wildcard intensity {self.intensity!r}"
            )
        if not self.enabled:
            return
        if self.start_round is None:
            raise InvalidConfigurationException(
                "Wildcard start round required when wildcards are enabled"
            )
        if self.start_round < MIN_WILDCARD_START_ROUND:
            raise InvalidConfigurationException(
                f"Wildcard start round must be at least {MIN_WILDCARD_START_ROUND}"
            )
        if self.frequency is None or not 1 <= self.frequency <= MAX_WILDCARD_FREQUENCY:
            raise InvalidConfigurationException(
                f"Wildcard frequency must be between 1 and {MAX_WILDCARD_FREQUENCY}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "start_round": self.start_round,
            "frequency": self.frequency,
            "intensity": self.intensity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WildcardSettings":
        return cls(
            enabled=data.get("enabled", False),
            start_round=data.get("start_round"),
            frequency=data.get("frequency"),
            intensity=data.get("intensity", DEFAULT_WILDCARD_INTENSITY),
        )


@dataclass
class EventConfig:
    """Event configuration settings.

    Attributes
    ----------
    name : str
        Event name.
    format : str
        "winners-court" or "americano".
    num_courts : int
        Number of courts in use each round.
    engine : EngineOptions
        Winner's Court options.
    americano : AmericanoPairingOptions
        Americano options.
    wildcard : WildcardSettings
        Wildcard round schedule (Winner's Court only).
    max_rounds : int or None
        Optional cap on the number of rounds.
    """

    name: str
    format: str = FORMAT_WINNERS_COURT
    num_courts: int = 1
    engine: EngineOptions = field(default_factory=EngineOptions)
    americano: AmericanoPairingOptions = field(default_factory=AmericanoPairingOptions)
    wildcard: WildcardSettings = field(default_factory=WildcardSettings)
    max_rounds: Optional[int] = None

    def validate(self) -> None:
        """Check the whole configuration.

        Raises:
            InvalidConfigurationException: On the first invalid setting found
        """
        if not self.name or not self.name.strip():
            raise InvalidConfigurationException("Event name is required")
        if self.format not in EVENT_FORMATS:
            raise InvalidConfigurationException(
                f"Unsupported event format: {self.format!r}"
            )
        if not isinstance(self.num_courts, int) or not 1 <= self.num_courts <= MAX_COURTS:
            raise InvalidConfigurationException(
                f"Number of courts must be between 1 and {MAX_COURTS}"
            )
        if self.max_rounds is not None and self.max_rounds < 1:
            raise InvalidConfigurationException("max_rounds must be at least 1")
        self.engine.validate()
        if self.format == FORMAT_AMERICANO:
            self.americano.validate()
        self.wildcard.validate()
        if self.wildcard.enabled and self.format != FORMAT_WINNERS_COURT:
            raise InvalidConfigurationException(
                "Wildcard rounds are only supported for Winner's Court events"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "format": self.format,
            "num_courts": self.num_courts,
            "engine": self.engine.to_dict(),
            "americano": self.americano.to_dict(),
            "wildcard": self.wildcard.to_dict(),
            "max_rounds": self.max_rounds,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Event"),
            format=data.get("format", FORMAT_WINNERS_COURT),
            num_courts=data["num_courts"],
            engine=EngineOptions.from_dict(data.get("engine", {})),
            americano=AmericanoPairingOptions.from_dict(data.get("americano", {})),
            wildcard=WildcardSettings.from_dict(data.get("wildcard", {})),
            max_rounds=data.get("max_rounds"),
        )
