"""Type hints used in Court Pairing."""

from typing import Dict, Tuple

# Exactly two players
Team = Tuple[str, str]

# Nested symmetric pair counts: player -> co-player -> count
PairCounts = Dict[str, Dict[str, int]]
# player -> rounds sat out
RestCounts = Dict[str, int]
