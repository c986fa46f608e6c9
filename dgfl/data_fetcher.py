"""Ranking page retrieval and parsing using requests and BeautifulSoup."""

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Mapping, Optional

import requests
from bs4 import BeautifulSoup

from .constants import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_USER_AGENT,
    NAME_CELL_SELECTOR,
    POINTS_CELL_SELECTOR,
    TABLE_ROW_SELECTOR,
)
from .exceptions import FetchError, ParseError
from .models import Division, ScrapedRow

logger = logging.getLogger('dgfl.data_fetcher')

# Plain decimal, or digits grouped with thousands separators
_POINTS_RE = re.compile(r'^(\d+|\d{1,3}(,\d{3})+)(\.\d+)?$')


def parse_points(text: str) -> float:
    """
    Parse a ranking points cell.

    Args:
        text: Raw cell text (e.g., " 1,234.56 ")

    Returns:
        Points as a non-negative float

    Raises:
        ParseError: If the text is empty, negative, or not a decimal number
    """
    cleaned = text.strip()
    if not cleaned:
        raise ParseError('Empty points value')
    if not _POINTS_RE.match(cleaned):
        raise ParseError(f'Invalid points value: {cleaned!r}')
    return float(cleaned.replace(',', ''))


def parse_rankings_html(html: str, url: str = '') -> list[ScrapedRow]:
    """
    Extract (name, points) rows from a ranking page.

    Rows without a name cell (spacers, ads) are skipped. Every named row
    must carry a valid points cell.

    Raises:
        ParseError: If the ranking table is absent or empty, or a row's
            points cell is missing or malformed
    """
    soup = BeautifulSoup(html, 'lxml')
    table_rows = soup.select(TABLE_ROW_SELECTOR)
    if not table_rows:
        raise ParseError(f'No ranking table rows found at {url or "<document>"}')

    rows = []
    for tr in table_rows:
        name_cell = tr.select_one(NAME_CELL_SELECTOR)
        if name_cell is None:
            continue
        display_name = name_cell.get_text().strip()
        if not display_name:
            continue

        points_cell = tr.select_one(POINTS_CELL_SELECTOR)
        if points_cell is None:
            raise ParseError(f'No points cell for {display_name!r} at {url or "<document>"}')
        points_text = points_cell.get_text()
        try:
            parse_points(points_text)
        except ParseError as e:
            raise ParseError(f'{e} for {display_name!r} at {url or "<document>"}') from e

        rows.append(ScrapedRow(display_name=display_name, points_text=points_text.strip()))

    if not rows:
        raise ParseError(f'Ranking table at {url or "<document>"} has no player rows')
    return rows


class RankingsFetcher:
    """Fetches one division ranking page per call; holds no per-page state."""

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.headers = {'User-Agent': user_agent}

    def get_html(self, url: str) -> str:
        """Download a ranking page.

        Raises:
            FetchError: On connection failure or any status other than 200
        """
        logger.info(f'Fetching rankings from {url}')
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f'Error fetching {url}: {e}', url=url) from e

        if response.status_code != 200:
            raise FetchError(
                f'Status code error fetching {url}: {response.status_code} {response.reason}',
                url=url,
                status_code=response.status_code,
            )
        return response.text

    def fetch(self, url: str) -> list[ScrapedRow]:
        """Download and parse a ranking page into scraped rows."""
        rows = parse_rankings_html(self.get_html(url), url)
        logger.debug(f'Parsed {len(rows)} ranking rows from {url}')
        return rows


def fetch_all_divisions(
    urls: Mapping[Division, str],
    fetcher: Optional[RankingsFetcher] = None,
) -> dict[Division, list[ScrapedRow]]:
    """
    Fetch every division's rankings in parallel.

    Returns only once all fetches have finished. The first failure (in
    division order) is re-raised and no partial results are returned.

    Args:
        urls: Ranking page URL per division
        fetcher: Fetcher to use (default: RankingsFetcher())

    Returns:
        Dict mapping division to its scraped rows
    """
    fetcher = fetcher or RankingsFetcher()

    with ThreadPoolExecutor(max_workers=max(len(urls), 1)) as executor:
        futures = {division: executor.submit(fetcher.fetch, url) for division, url in urls.items()}

    return {division: future.result() for division, future in futures.items()}
