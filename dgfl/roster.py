"""Roster loading: teams.json -> Team/Player objects."""

import logging
from pathlib import Path
from typing import Iterator

from .models import Division, Player, Team
from .schemas import RostersFile
from .utils import load_json

logger = logging.getLogger('dgfl.roster')


def load_rosters(rosters_path: str | Path) -> RostersFile:
    """Load and validate team rosters from teams.json.

    The file maps each owner to an object with an ``mpo`` and an ``fpo``
    list of player names.

    Raises:
        ConfigError: If the file is missing or malformed
    """
    return load_json(rosters_path, schema=RostersFile)


def build_teams(rosters: RostersFile) -> list[Team]:
    """Build Team objects in configuration order.

    Player order within each division follows the configured list.
    """
    teams = []
    for owner, entry in rosters.root.items():
        team = Team(owner=owner)
        for division in Division:
            names = getattr(entry, division.value)
            team.rosters[division] = [
                Player(name=name.strip(), division=division, team=team) for name in names
            ]
        teams.append(team)
    return teams


class RosterStore:
    """All league teams, with lookups by division and player name."""

    def __init__(self, teams: list[Team]):
        self.teams = teams

    @classmethod
    def load(cls, rosters_path: str | Path) -> 'RosterStore':
        store = cls(build_teams(load_rosters(rosters_path)))
        logger.info(f'Loaded {len(store.teams)} teams from {rosters_path}')
        return store

    def __iter__(self) -> Iterator[Team]:
        return iter(self.teams)

    def __len__(self) -> int:
        return len(self.teams)

    def players(self, division: Division) -> list[Player]:
        """Every rostered player in a division, in team then roster order."""
        return [player for team in self.teams for player in team.roster(division)]

    def names(self, division: Division) -> list[str]:
        """Distinct rostered names in a division, first occurrence first."""
        return list(dict.fromkeys(player.name for player in self.players(division)))

    def players_named(self, division: Division, name: str) -> list[Player]:
        """All players in a division carrying exactly this canonical name."""
        return [player for player in self.players(division) if player.name == name]

    def owners_of(self, division: Division, name: str) -> list[str]:
        """Distinct owners rostering this name in a division, in team order."""
        return list(dict.fromkeys(player.owner for player in self.players_named(division, name)))
