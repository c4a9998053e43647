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

# --- Constants ---

# Court structure
TEAM_SIZE = 2
PLAYERS_PER_COURT = 2 * TEAM_SIZE
MAX_COURTS = 10

# Event formats
FORMAT_WINNERS_COURT = "winners-court"
FORMAT_AMERICANO = "americano"
EVENT_FORMATS = (FORMAT_WINNERS_COURT, FORMAT_AMERICANO)

# Americano variants
VARIANT_INDIVIDUAL = "individual"
VARIANT_TEAM = "team"
AMERICANO_VARIANTS = (VARIANT_INDIVIDUAL, VARIANT_TEAM)

# Anti-repeat
DEFAULT_ANTI_REPEAT_WINDOW = 3

# Wildcard intensities
INTENSITY_MILD = "mild"
INTENSITY_MEDIUM = "medium"
INTENSITY_MAYHEM = "mayhem"
WILDCARD_INTENSITIES = (INTENSITY_MILD, INTENSITY_MEDIUM, INTENSITY_MAYHEM)
DEFAULT_WILDCARD_INTENSITY = INTENSITY_MEDIUM

# Share of the field touched by each intensity
MILD_SWAP_FRACTION = 0.25
MEDIUM_SHUFFLE_FRACTION = 0.5

# Wildcard scheduling limits
MIN_WILDCARD_START_ROUND = 2
MAX_WILDCARD_FREQUENCY = 10

# Display metadata for wildcard intensities
WILDCARD_INTENSITY_INFO = {
    INTENSITY_MILD: {
        "name": "Mild Shuffle",
        "description": "Gentle mixing between adjacent courts",
    },
    INTENSITY_MEDIUM: {
        "name": "Medium Chaos",
        "description": "Balanced redistribution across all courts",
    },
    INTENSITY_MAYHEM: {
        "name": "Total Mayhem",
        "description": "Complete randomization - anyone anywhere!",
    },
}

FORMAT_DESCRIPTIONS = {
    FORMAT_WINNERS_COURT: (
        "Winner's Court: Players move up and down courts based on performance. "
        "Court 1 is the prestigious Winners Court."
    ),
    FORMAT_AMERICANO: (
        "Americano: Players rotate partners each round. Each player earns "
        "individual points based on their team's score."
    ),
}

# Simulated match target score
DEFAULT_POINTS_PER_GAME = 21

# Environment variable controlling the package log level
LOG_LEVEL_ENV_VAR = "COURTPAIRING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
