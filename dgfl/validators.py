"""Validation functions for league rosters."""

from collections import defaultdict
from typing import Mapping, Sequence

from .constants import TOP_PLAYERS
from .models import Division, Team


def validate_roster(team: Team, top_k: Mapping[Division, int] = TOP_PLAYERS) -> list[str]:
    """
    Validate that a team's rosters can be scored.

    Checks:
    - Each division has at least as many players as are counted
    - No player listed twice in the same division

    Args:
        team: Team object to validate
        top_k: Players counted per division

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    for division, required in top_k.items():
        count = len(team.roster(division))
        if count < required:
            errors.append(
                f'{team.owner} has {count} {division.value.upper()} players (needs at least {required})'
            )

    for division, players in team.rosters.items():
        seen = set()
        duplicates = set()
        for player in players:
            if player.name in seen:
                duplicates.add(player.name)
            seen.add(player.name)
        if duplicates:
            errors.append(
                f'{team.owner} lists {division.value.upper()} players more than once: '
                f'{", ".join(sorted(duplicates))}'
            )

    return errors


def validate_league(teams: Sequence[Team]) -> list[str]:
    """
    Check that no player is rostered by more than one team.

    Args:
        teams: All league teams

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    for division in Division:
        owners_by_name: dict[str, list[str]] = defaultdict(list)
        for team in teams:
            for player in team.roster(division):
                if team.owner not in owners_by_name[player.name]:
                    owners_by_name[player.name].append(team.owner)

        for name, owners in owners_by_name.items():
            if len(owners) > 1:
                errors.append(
                    f'{name} ({division.value.upper()}) is rostered by {", ".join(owners)}'
                )

    return errors


def validate_all(teams: Sequence[Team], top_k: Mapping[Division, int] = TOP_PLAYERS) -> list[str]:
    """Run every roster and league check."""
    errors = []
    for team in teams:
        errors.extend(validate_roster(team, top_k))
    errors.extend(validate_league(teams))
    return errors
