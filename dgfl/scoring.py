"""Top-performer scoring for fantasy teams."""

from typing import Mapping, Sequence

from .constants import TOP_PLAYERS
from .exceptions import InsufficientRosterError
from .models import Division, Player, Team


def sort_by_points(roster: Sequence[Player]) -> list[Player]:
    """Order players by points descending; ties keep roster order."""
    return sorted(roster, key=lambda p: p.points, reverse=True)


def top_players(roster: Sequence[Player], count: int, owner: str = '', division: str = '') -> list[Player]:
    """
    Select the highest-scoring players of a division roster.

    Args:
        roster: Division roster in configured order
        count: Number of players counted for the division
        owner: Team owner (for error reporting)
        division: Division key (for error reporting)

    Returns:
        The top `count` players, highest first

    Raises:
        InsufficientRosterError: If the roster has fewer than `count` players
    """
    if len(roster) < count:
        raise InsufficientRosterError(owner, division, count, len(roster))
    return sort_by_points(roster)[:count]


def score_team(team: Team, top_k: Mapping[Division, int] = TOP_PLAYERS) -> Team:
    """
    Calculate a team's total from its best players in each division.

    Each division roster is re-ordered by points (stable) and the top
    `top_k[division]` players are summed into `team.total_points`.

    Args:
        team: Team with attributed player points
        top_k: Players counted per division (default: 4 MPO, 2 FPO)

    Returns:
        The same team, with total_points set

    Raises:
        InsufficientRosterError: If any division roster is too short
    """
    # Check every division before touching the total
    for division, count in top_k.items():
        roster = team.roster(division)
        if len(roster) < count:
            raise InsufficientRosterError(team.owner, division.value, count, len(roster))

    total = 0.0
    for division, count in top_k.items():
        team.rosters[division] = sort_by_points(team.roster(division))
        counted = top_players(team.rosters[division], count, team.owner, division.value)
        total += sum(player.points for player in counted)

    team.total_points = total
    return team


def score_teams(teams: Sequence[Team], top_k: Mapping[Division, int] = TOP_PLAYERS) -> list[Team]:
    """Score every team; fails on the first short roster."""
    return [score_team(team, top_k) for team in teams]
