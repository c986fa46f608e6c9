"""Unit tests for roster validation."""

from dgfl.models import Division, Player, Team
from dgfl.validators import validate_all, validate_league, validate_roster


def make_team(owner, mpo, fpo):
    team = Team(owner=owner)
    team.rosters[Division.MPO] = [Player(name, Division.MPO, team=team) for name in mpo]
    team.rosters[Division.FPO] = [Player(name, Division.FPO, team=team) for name in fpo]
    return team


class TestRosterValidation:
    """Tests for single-team checks."""

    def test_valid_roster(self):
        """Test a roster with enough players passes."""
        team = make_team('Ann', ['M1', 'M2', 'M3', 'M4'], ['F1', 'F2'])
        assert validate_roster(team) == []

    def test_too_few_mpo(self):
        """Test an MPO roster shorter than 4 is reported."""
        team = make_team('Ann', ['M1', 'M2', 'M3'], ['F1', 'F2'])
        errors = validate_roster(team)
        assert errors == ['Ann has 3 MPO players (needs at least 4)']

    def test_too_few_fpo(self):
        """Test an FPO roster shorter than 2 is reported."""
        team = make_team('Ann', ['M1', 'M2', 'M3', 'M4'], [])
        assert validate_roster(team) == ['Ann has 0 FPO players (needs at least 2)']

    def test_duplicate_within_team(self):
        """Test a player listed twice by one team is reported."""
        team = make_team('Ann', ['M1', 'M2', 'M3', 'M1'], ['F1', 'F2'])
        errors = validate_roster(team)
        assert len(errors) == 1
        assert 'M1' in errors[0]


class TestLeagueValidation:
    """Tests for cross-team checks."""

    def test_disjoint_rosters(self):
        """Test distinct rosters pass."""
        teams = [
            make_team('Ann', ['M1', 'M2', 'M3', 'M4'], ['F1', 'F2']),
            make_team('Ben', ['M5', 'M6', 'M7', 'M8'], ['F3', 'F4']),
        ]
        assert validate_league(teams) == []

    def test_shared_player(self):
        """Test a player rostered by two owners is reported."""
        teams = [
            make_team('Ann', ['M1', 'M2', 'M3', 'M4'], ['F1', 'F2']),
            make_team('Ben', ['M1', 'M6', 'M7', 'M8'], ['F3', 'F4']),
        ]
        assert validate_league(teams) == ['M1 (MPO) is rostered by Ann, Ben']

    def test_same_name_in_different_divisions(self):
        """Test names are only compared within a division."""
        teams = [
            make_team('Ann', ['Sam'], []),
            make_team('Ben', [], ['Sam']),
        ]
        assert validate_league(teams) == []

    def test_validate_all_combines(self):
        """Test all checks are collected together."""
        teams = [
            make_team('Ann', ['M1', 'M2', 'M3'], ['F1', 'F2']),
            make_team('Ben', ['M1', 'M6', 'M7', 'M8'], ['F3', 'F4']),
        ]
        assert len(validate_all(teams)) == 2
