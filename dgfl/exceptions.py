"""Exception types raised while computing league standings."""

from typing import Optional


class DGFLError(Exception):
    """Base class for all fatal standings errors."""


class ConfigError(DGFLError):
    """Roster or league configuration is missing or malformed."""


class FetchError(DGFLError):
    """A ranking page could not be retrieved."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(DGFLError):
    """A ranking page did not have the expected table or points values."""


class AmbiguousMatchError(DGFLError):
    """A scraped name resolves to more than one rostered player."""

    def __init__(self, name: str, owners: list[str]):
        if len(owners) == 1:
            message = f'Player {name!r} is listed more than once by {owners[0]}'
        else:
            message = f'Player {name!r} is rostered more than once (owners: {", ".join(owners)})'
        super().__init__(message)
        self.name = name
        self.owners = owners


class InsufficientRosterError(DGFLError):
    """A division roster has fewer players than the scoring rule counts."""

    def __init__(self, owner: str, division: str, required: int, actual: int):
        super().__init__(
            f'{owner} has {actual} {division.upper()} players (needs at least {required})'
        )
        self.owner = owner
        self.division = division
        self.required = required
        self.actual = actual
