import pytest

from leagueboard.logic.roster.diff import diff_rosters, roster_is_savable
from leagueboard.models.roster import (
    LeagueRename,
    RosterTeam,
    TeamAddition,
    TeamDeletion,
    TeamRename,
)
from leagueboard.utils.id_types import TeamId


def _team(team_id: int, name: str) -> RosterTeam:
    return RosterTeam(id=TeamId(team_id), name=name)


ORIGINAL = (_team(1, "A"), _team(2, "B"), _team(3, "C"))


def test_identical_rosters_produce_empty_change_set() -> None:
    change_set = diff_rosters(ORIGINAL, ORIGINAL, original_name="League", edited_name="League")
    assert change_set.is_empty


def test_renamed_team_is_reported_with_old_and_new_name() -> None:
    edited = (_team(1, "A"), _team(2, "B2"), _team(3, "C"))

    change_set = diff_rosters(ORIGINAL, edited)

    assert change_set.renamed == (TeamRename(team_id=TeamId(2), old_name="B", new_name="B2"),)
    assert change_set.added == ()
    assert change_set.deleted == ()


def test_placeholder_team_is_an_addition_regardless_of_position() -> None:
    placeholder = RosterTeam(placeholder_id="t0", name="D")
    edited = (placeholder, *ORIGINAL)

    change_set = diff_rosters(ORIGINAL, edited)

    assert change_set.added == (TeamAddition(placeholder_id="t0", name="D"),)
    assert change_set.renamed == ()
    assert change_set.deleted == ()


def test_missing_team_is_a_deletion() -> None:
    edited = (_team(1, "A"), _team(3, "C"))

    change_set = diff_rosters(ORIGINAL, edited)

    assert change_set.deleted == (TeamDeletion(team_id=TeamId(2)),)
    assert change_set.renamed == ()
    assert change_set.added == ()


def test_reordering_does_not_produce_renames() -> None:
    edited = tuple(reversed(ORIGINAL))
    assert diff_rosters(ORIGINAL, edited).is_empty


def test_league_rename_is_part_of_the_change_set() -> None:
    change_set = diff_rosters(ORIGINAL, ORIGINAL, original_name="Old", edited_name="New")

    assert change_set.league_rename == LeagueRename(old_name="Old", new_name="New")
    assert not change_set.is_empty


def test_combined_rename_delete_and_add() -> None:
    original = (_team(1, "A"), _team(2, "B"))
    edited = (_team(1, "A2"), RosterTeam(placeholder_id="t2", name="C"))

    change_set = diff_rosters(original, edited)

    assert change_set.renamed == (TeamRename(team_id=TeamId(1), old_name="A", new_name="A2"),)
    assert change_set.added == (TeamAddition(placeholder_id="t2", name="C"),)
    assert change_set.deleted == (TeamDeletion(team_id=TeamId(2)),)


def test_unknown_persisted_team_is_rejected() -> None:
    with pytest.raises(ValueError, match="Team 9 is not part of the original roster"):
        diff_rosters(ORIGINAL, (*ORIGINAL, _team(9, "Z")))


def test_roster_team_requires_an_identity() -> None:
    with pytest.raises(ValueError):
        RosterTeam(name="Nameless")


def test_roster_is_savable() -> None:
    assert roster_is_savable(ORIGINAL, "League")
    assert not roster_is_savable(ORIGINAL[:1], "League")
    assert not roster_is_savable((), "League")
    assert not roster_is_savable((_team(1, "A"), _team(2, "")), "League")
    assert not roster_is_savable((_team(1, "A"), _team(2, "   ")), "League")
    assert not roster_is_savable(ORIGINAL, "")
    assert roster_is_savable(ORIGINAL)
