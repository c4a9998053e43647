from courtpairing.models.court_match import CourtMatch
from courtpairing.models.event_config import (
    AmericanoPairingOptions,
    EngineOptions,
    EventConfig,
    WildcardSettings,
)
from courtpairing.models.partner_history import PartnerHistory
from courtpairing.models.round_state import RoundState, players_in

__all__ = [
    "CourtMatch",
    "RoundState",
    "players_in",
    "PartnerHistory",
    "EngineOptions",
    "AmericanoPairingOptions",
    "WildcardSettings",
    "EventConfig",
]
