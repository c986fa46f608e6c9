"""Data models for the disc golf fantasy league."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Division(str, Enum):
    """Professional divisions, valued by their roster configuration key."""
    MPO = 'mpo'
    FPO = 'fpo'


@dataclass
class Player:
    """A rostered professional player and the points attributed to them."""
    name: str
    division: Division
    points: float = 0.0
    team: Optional['Team'] = field(default=None, repr=False, compare=False)
    matched: bool = False  # Seen in the division rankings this run
    data_notes: List[str] = field(default_factory=list)  # Flags for data anomalies

    @property
    def owner(self) -> str:
        return self.team.owner if self.team else ''


@dataclass
class Team:
    """Container for a fantasy team's rosters."""
    owner: str
    rosters: Dict[Division, List[Player]] = field(default_factory=dict)
    total_points: float = 0.0

    def roster(self, division: Division) -> List[Player]:
        return self.rosters.get(division, [])

    def all_players(self) -> List[Player]:
        return [player for players in self.rosters.values() for player in players]


@dataclass(frozen=True)
class ScrapedRow:
    """One ranking table row as scraped, before name matching."""
    display_name: str
    points_text: str

    @property
    def points(self) -> float:
        """Points parsed with the ranking page rule (see parse_points)."""
        from .data_fetcher import parse_points

        return parse_points(self.points_text)
