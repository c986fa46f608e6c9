"""Standings engine that ties fetching, attribution and scoring together."""

import logging
from pathlib import Path
from typing import Optional

from .attribution import attribute_points
from .config import get_config, get_rankings_urls
from .constants import TOP_PLAYERS
from .data_fetcher import RankingsFetcher, fetch_all_divisions
from .models import Team
from .roster import RosterStore
from .schemas import LeagueConfig
from .scoring import score_teams
from .standings import format_points, rank_teams

logger = logging.getLogger('dgfl.scorer')


class StandingsScorer:
    """
    Computes league standings from live division rankings.

    Both division pages are fetched in parallel; attribution and scoring
    start only once both fetches have completed.
    """

    def __init__(self, config: Optional[LeagueConfig] = None, fetcher: Optional[RankingsFetcher] = None):
        """
        Initialize scorer.

        Args:
            config: League configuration (default: get_config())
            fetcher: Ranking page fetcher (default: built from config)
        """
        self.config = config or get_config()
        self.fetcher = fetcher or RankingsFetcher(
            timeout=self.config.request_timeout,
            user_agent=self.config.user_agent,
        )

    def run(self, store: RosterStore, verbose: bool = False) -> list[Team]:
        """
        Fetch rankings, attribute points, score and rank every team.

        Args:
            store: League rosters (mutated in place)
            verbose: Whether to log each team's breakdown

        Returns:
            Teams ordered by total points, highest first
        """
        division_rows = fetch_all_divisions(get_rankings_urls(self.config), self.fetcher)
        attribute_points(store, division_rows)
        score_teams(store.teams)

        if verbose:
            for team in store.teams:
                self.log_breakdown(team)

        return rank_teams(store.teams)

    def log_breakdown(self, team: Team) -> None:
        """Log a scored team's counted and bench players."""
        logger.info('=' * 60)
        logger.info(f'{team.owner}: {format_points(team.total_points)} points')
        for division, count in TOP_PLAYERS.items():
            for index, player in enumerate(team.roster(division)):
                status = '✓' if player.matched else '✗'
                bench = '' if index < count else ' [BENCH]'
                logger.info(
                    f'  {division.value.upper()} {player.name}: '
                    f'{format_points(player.points)} pts {status}{bench}'
                )
                for note in player.data_notes:
                    logger.info(f'      ⚠️  {note}')


def compute_standings(
    rosters_path: str | Path,
    config: Optional[LeagueConfig] = None,
    verbose: bool = False,
) -> list[Team]:
    """Load rosters from teams.json and compute ranked standings."""
    store = RosterStore.load(rosters_path)
    return StandingsScorer(config).run(store, verbose=verbose)
