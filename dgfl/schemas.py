"""Pydantic schemas for JSON configuration validation."""

from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictStr, field_validator

from .constants import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_USER_AGENT,
    FPO_RANKINGS_URL,
    MPO_RANKINGS_URL,
)


class TeamRosterEntry(BaseModel):
    """One owner's rosters, keyed by division."""

    model_config = ConfigDict(extra='forbid')

    mpo: list[StrictStr]
    fpo: list[StrictStr]

    @field_validator('mpo', 'fpo')
    @classmethod
    def validate_names(cls, v):
        """Ensure every player name has visible characters."""
        for name in v:
            if not name.strip():
                raise ValueError('Player names must not be blank')
        return v


class RostersFile(RootModel[dict[str, TeamRosterEntry]]):
    """Complete teams.json file structure (owner -> rosters)."""

    @field_validator('root')
    @classmethod
    def validate_owners(cls, v):
        """Ensure there is at least one team and owners are named."""
        if not v:
            raise ValueError('No teams configured')
        for owner in v:
            if not owner.strip():
                raise ValueError('Team owner must not be blank')
        return v


class LeagueConfig(BaseModel):
    """League configuration settings."""

    model_config = ConfigDict(extra='forbid')

    mpo_url: str = Field(default=MPO_RANKINGS_URL, pattern=r'^https?://')
    fpo_url: str = Field(default=FPO_RANKINGS_URL, pattern=r'^https?://')
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
