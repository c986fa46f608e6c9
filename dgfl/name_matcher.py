"""Player name matching and normalization."""

import re
from typing import Iterable, Optional

from .constants import QUALIFIER_MARKER
from .exceptions import AmbiguousMatchError


def strip_qualifier(name: str) -> str:
    """
    Remove the ranking source's qualifier marker from a display name.

    Only a single trailing marker is removed ("Paul McBeth*" -> "Paul McBeth").
    """
    stripped = name.strip()
    if stripped.endswith(QUALIFIER_MARKER):
        stripped = stripped[: -len(QUALIFIER_MARKER)].rstrip()
    return stripped


def normalize_name(name: str) -> str:
    """
    Normalize a name for matching.

    Strips the qualifier marker, collapses runs of whitespace and casefolds.

    Args:
        name: Scraped display name or rostered name

    Returns:
        Normalized name for matching
    """
    return re.sub(r'\s+', ' ', strip_qualifier(name)).casefold()


class NameMatcher:
    """Resolves scraped display names to rostered (canonical) names.

    Matching is exact on the normalized form. Substring or last-name
    matching is deliberately not attempted: "Will Smith" must never score
    for "Will Smithson".
    """

    def __init__(self, roster_names: Iterable[str]):
        self._canonical: dict[str, list[str]] = {}
        for name in roster_names:
            spellings = self._canonical.setdefault(normalize_name(name), [])
            if name not in spellings:
                spellings.append(name)

    def __contains__(self, display_name: str) -> bool:
        return normalize_name(display_name) in self._canonical

    def match(self, display_name: str) -> Optional[str]:
        """
        Match a display name to its canonical rostered name.

        Returns:
            Canonical name if rostered, None otherwise

        Raises:
            AmbiguousMatchError: If differently spelled rostered names
                normalize to the same key
        """
        spellings = self._canonical.get(normalize_name(display_name))
        if not spellings:
            return None
        if len(spellings) > 1:
            raise AmbiguousMatchError(strip_qualifier(display_name), spellings)
        return spellings[0]


def match_name(display_name: str, roster_names: Iterable[str]) -> Optional[str]:
    """Match a single display name against a list of rostered names."""
    return NameMatcher(roster_names).match(display_name)
