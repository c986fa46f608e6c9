from .models import Division, Player, Team, ScrapedRow
from .exceptions import (
    DGFLError,
    ConfigError,
    FetchError,
    ParseError,
    AmbiguousMatchError,
    InsufficientRosterError,
)
from .roster import RosterStore, load_rosters, build_teams
from .data_fetcher import RankingsFetcher, fetch_all_divisions, parse_points, parse_rankings_html
from .name_matcher import NameMatcher, match_name, normalize_name, strip_qualifier
from .attribution import attribute_points, attribute_division
from .scoring import score_team, score_teams, top_players
from .standings import rank_teams, format_standings, save_standings
from .scorer import StandingsScorer, compute_standings

__all__ = [
    # Models
    'Division',
    'Player',
    'Team',
    'ScrapedRow',
    # Errors
    'DGFLError',
    'ConfigError',
    'FetchError',
    'ParseError',
    'AmbiguousMatchError',
    'InsufficientRosterError',
    # Rosters
    'RosterStore',
    'load_rosters',
    'build_teams',
    # Data fetching
    'RankingsFetcher',
    'fetch_all_divisions',
    'parse_points',
    'parse_rankings_html',
    # Name matching
    'NameMatcher',
    'match_name',
    'normalize_name',
    'strip_qualifier',
    # Attribution and scoring
    'attribute_points',
    'attribute_division',
    'score_team',
    'score_teams',
    'top_players',
    # Standings
    'rank_teams',
    'format_standings',
    'save_standings',
    'StandingsScorer',
    'compute_standings',
]
