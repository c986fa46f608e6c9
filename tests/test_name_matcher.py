"""Unit tests for player name matching."""

import pytest

from dgfl.exceptions import AmbiguousMatchError
from dgfl.name_matcher import NameMatcher, match_name, normalize_name, strip_qualifier


class TestQualifierStripping:
    """Tests for removing the tour-qualified marker."""

    def test_marker_removed(self):
        """Test trailing asterisk is stripped."""
        assert strip_qualifier('John Doe*') == 'John Doe'

    def test_surrounding_whitespace_trimmed(self):
        """Test whitespace around the name and marker is trimmed."""
        assert strip_qualifier('  John Doe* \n') == 'John Doe'

    def test_only_one_marker_removed(self):
        """Test exactly one trailing marker is removed."""
        assert strip_qualifier('John Doe**') == 'John Doe*'

    def test_name_without_marker_unchanged(self):
        """Test plain names pass through."""
        assert strip_qualifier('John Doe') == 'John Doe'

    def test_reappending_marker_round_trips(self):
        """Test stripping, re-appending and normalizing yields the canonical key."""
        canonical = 'Paul McBeth'
        display = strip_qualifier(canonical + '*') + '*'
        assert match_name(display, [canonical]) == canonical
        assert normalize_name(display) == normalize_name(canonical)


class TestNormalization:
    """Tests for the normalized matching key."""

    def test_case_insensitive(self):
        """Test names differing only in case normalize equally."""
        assert normalize_name('PAUL MCBETH') == normalize_name('Paul McBeth')

    def test_internal_whitespace_collapsed(self):
        """Test runs of whitespace collapse to one space."""
        assert normalize_name('Paul   McBeth') == 'paul mcbeth'


class TestNameMatcher:
    """Tests for matching scraped display names to rostered names."""

    def test_exact_match(self):
        """Test an exact name returns the rostered spelling."""
        matcher = NameMatcher(['Kristin Tattar', 'Ohn Scoggins'])
        assert matcher.match('Kristin Tattar') == 'Kristin Tattar'

    def test_qualified_name_matches(self):
        """Test a display name with the marker matches the rostered name."""
        matcher = NameMatcher(['John Doe'])
        assert matcher.match('John Doe*') == 'John Doe'

    def test_unrostered_name_ignored(self):
        """Test a display name with no rostered counterpart returns None."""
        matcher = NameMatcher(['John Doe'])
        assert matcher.match('Jane Roe') is None
        assert 'Jane Roe' not in matcher

    def test_no_substring_matching(self):
        """Test a longer display name does not match a shorter rostered name."""
        matcher = NameMatcher(['Will Smith'])
        assert matcher.match('Will Smithson') is None

    def test_no_reverse_substring_matching(self):
        """Test a shorter display name does not match a longer rostered name."""
        matcher = NameMatcher(['Will Smithson'])
        assert matcher.match('Will Smith') is None

    def test_returns_canonical_spelling(self):
        """Test the configured spelling is returned, not the scraped one."""
        matcher = NameMatcher(['Paul McBeth'])
        assert matcher.match('paul mcbeth*') == 'Paul McBeth'

    def test_conflicting_spellings_are_ambiguous(self):
        """Test two rostered spellings with the same key raise."""
        matcher = NameMatcher(['John Doe', 'john  doe'])
        with pytest.raises(AmbiguousMatchError):
            matcher.match('John Doe')

    def test_repeated_identical_name_is_one_candidate(self):
        """Test the same spelling listed twice resolves to one canonical name."""
        matcher = NameMatcher(['John Doe', 'John Doe'])
        assert matcher.match('John Doe*') == 'John Doe'
