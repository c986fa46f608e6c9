"""Attribution of scraped ranking points to rostered players."""

import logging
from typing import Mapping, Sequence

from .exceptions import AmbiguousMatchError
from .models import Division, ScrapedRow
from .name_matcher import NameMatcher
from .roster import RosterStore

logger = logging.getLogger('dgfl.attribution')


def attribute_division(
    store: RosterStore,
    division: Division,
    rows: Sequence[ScrapedRow],
) -> dict[str, float]:
    """
    Set points on every rostered player of one division.

    Args:
        store: League rosters (mutated in place)
        division: Division the rows were scraped for
        rows: Scraped ranking rows for that division

    Returns:
        Dict mapping canonical player name to attributed points

    Raises:
        AmbiguousMatchError: If a matched name is rostered more than once
        ParseError: If a matched row's points text is malformed
    """
    matcher = NameMatcher(store.names(division))
    points_table: dict[str, float] = {}

    for player in store.players(division):
        player.points = 0.0
        player.matched = False
        player.data_notes.clear()

    for row in rows:
        name = matcher.match(row.display_name)
        if name is None:
            logger.debug(f'Ignoring unrostered {division.value.upper()} player: {row.display_name}')
            continue

        players = store.players_named(division, name)
        if len(players) > 1:
            raise AmbiguousMatchError(name, store.owners_of(division, name))
        player = players[0]
        points = row.points

        if name in points_table:
            note = (
                f'Duplicate ranking rows for {name}: '
                f'{points_table[name]:g} replaced by {points:g}'
            )
            logger.warning(note)
            player.data_notes.append(note)

        player.points = points
        player.matched = True
        points_table[name] = points

    return points_table


def attribute_points(
    store: RosterStore,
    division_rows: Mapping[Division, Sequence[ScrapedRow]],
) -> dict[Division, dict[str, float]]:
    """
    Merge every division's scraped rows into the rosters.

    Must only run after all division fetches have completed.

    Returns:
        Division-indexed points table (division -> name -> points)
    """
    table = {
        division: attribute_division(store, division, rows)
        for division, rows in division_rows.items()
    }

    for division in table:
        for player in store.players(division):
            if not player.matched:
                logger.info(
                    f'{player.name} ({division.value.upper()}, {player.owner}) '
                    f'not found in rankings, scored as 0'
                )
    return table
