"""Round pairing algorithms for Winner's Court and Americano events."""

from courtpairing.pairing.americano import (
    calculate_americano_rounds,
    generate_americano_individual_pairings,
    generate_americano_team_pairings,
    is_americano_complete,
    next_americano_round,
)
from courtpairing.pairing.dispatcher import (
    AdvancePolicy,
    AdvanceResult,
    advance_round,
    get_format_description,
    get_next_round,
    supports_wildcards,
    validate_round_state,
)
from courtpairing.pairing.history import (
    build_opponent_history,
    build_partner_history,
    recent_rounds,
)
from courtpairing.pairing.rest import (
    calculate_games_played,
    calculate_rest_counts,
    select_players_for_round,
)
from courtpairing.pairing.wildcard import (
    PlayerMovement,
    apply_wildcard_shuffle,
    diff_rounds,
    get_next_wildcard_round,
    is_wildcard_round,
    wildcard_preview,
)
from courtpairing.pairing.winners_court import next_round

__all__ = [
    "build_partner_history",
    "build_opponent_history",
    "recent_rounds",
    "calculate_rest_counts",
    "calculate_games_played",
    "select_players_for_round",
    "generate_americano_individual_pairings",
    "generate_americano_team_pairings",
    "next_americano_round",
    "is_americano_complete",
    "calculate_americano_rounds",
    "next_round",
    "apply_wildcard_shuffle",
    "is_wildcard_round",
    "get_next_wildcard_round",
    "wildcard_preview",
    "diff_rounds",
    "PlayerMovement",
    "get_next_round",
    "validate_round_state",
    "supports_wildcards",
    "get_format_description",
    "advance_round",
    "AdvancePolicy",
    "AdvanceResult",
]
