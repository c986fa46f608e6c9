"""Ranking teams and presenting standings."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Sequence

from .constants import TOP_PLAYERS
from .models import Division, Team
from .utils import save_json


def rank_teams(teams: Sequence[Team]) -> list[Team]:
    """Order teams by total points, highest first; ties keep input order."""
    return sorted(teams, key=lambda t: t.total_points, reverse=True)


def format_points(points: float) -> str:
    """Format points with at most two decimals and no trailing zeros."""
    text = f'{points:.2f}'.rstrip('0').rstrip('.')
    return '0' if text in ('', '-0') else text


def format_standings(ranked: Sequence[Team]) -> list[str]:
    """Render ranked teams as '<rank>. <owner>: <points>' lines."""
    return [
        f'{rank}. {team.owner}: {format_points(team.total_points)}'
        for rank, team in enumerate(ranked, 1)
    ]


def standings_to_dict(
    ranked: Sequence[Team],
    top_k: Mapping[Division, int] = TOP_PLAYERS,
) -> dict[str, Any]:
    """Build the JSON export of ranked standings.

    Division rosters are expected to be in scored order, so the first
    `top_k[division]` players are the ones counted.
    """
    teams_data = []
    for rank, team in enumerate(ranked, 1):
        rosters = {}
        for division in Division:
            counted = top_k.get(division, 0)
            rosters[division.value] = [
                {
                    'name': player.name,
                    'points': player.points,
                    'counted': index < counted,
                    'found': player.matched,
                }
                for index, player in enumerate(team.roster(division))
            ]
        teams_data.append(
            {
                'rank': rank,
                'owner': team.owner,
                'total_points': round(team.total_points, 2),
                'rosters': rosters,
            }
        )

    return {
        'scored_at': datetime.now(timezone.utc).isoformat(),
        'standings': teams_data,
    }


def save_standings(output_path: str | Path, ranked: Sequence[Team]) -> None:
    """Save ranked standings to a JSON file."""
    save_json(output_path, standings_to_dict(ranked))
