"""Constants and mappings for the disc golf fantasy league."""

from .models import Division

# Ranking pages (one table per division)
MPO_RANKINGS_URL = 'https://statmando.com/rankings/dgpt/mpo'
FPO_RANKINGS_URL = 'https://statmando.com/rankings/dgpt/fpo'

# Number of players counted toward a team's total, per division
TOP_PLAYERS = {
    Division.MPO: 4,
    Division.FPO: 2,
}

# Ranking table layout
TABLE_ROW_SELECTOR = '#official > tbody > tr'
NAME_CELL_SELECTOR = 'td.whitespace-nowrap'
POINTS_CELL_SELECTOR = 'td:nth-child(4)'

# Appended by the ranking source to tour-championship qualified players
QUALIFIER_MARKER = '*'

DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) '
    'AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)
