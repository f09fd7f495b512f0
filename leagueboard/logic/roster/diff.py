from collections.abc import Sequence

from leagueboard.models.roster import (
    LeagueRename,
    RosterChangeSet,
    RosterTeam,
    TeamAddition,
    TeamDeletion,
    TeamRename,
)
from leagueboard.utils.types import assert_some

MIN_ROSTER_SIZE = 2


def roster_is_savable(teams: Sequence[RosterTeam], league_name: str | None = None) -> bool:
    if len(teams) < MIN_ROSTER_SIZE:
        return False

    if league_name is not None and league_name.strip() == "":
        return False

    return all(team.name.strip() != "" for team in teams)


def diff_rosters(
    original: Sequence[RosterTeam],
    edited: Sequence[RosterTeam],
    *,
    original_name: str | None = None,
    edited_name: str | None = None,
) -> RosterChangeSet:
    """
    Compute the changes needed to turn the ``original`` roster into the ``edited`` one.

    Teams are matched on their persisted id rather than on their position, so a reordered
    roster does not produce spurious renames. Teams without a persisted id are additions,
    persisted ids that disappeared from the edited roster are deletions.

    The league's own name is treated as an extra rename candidate.
    """
    original_by_key = {team.key: team for team in original}
    edited_keys = {team.key for team in edited}

    renamed: list[TeamRename] = []
    added: list[TeamAddition] = []

    for team in edited:
        original_team = original_by_key.get(team.key)
        if original_team is None:
            if team.id is not None:
                raise ValueError(f"Team {team.id} is not part of the original roster")
            added.append(
                TeamAddition(placeholder_id=assert_some(team.placeholder_id), name=team.name)
            )
        elif team.id is not None and original_team.name != team.name:
            renamed.append(
                TeamRename(team_id=team.id, old_name=original_team.name, new_name=team.name)
            )

    # Teams whose creation was never confirmed by an id cannot be targeted remotely
    deleted = [
        TeamDeletion(team_id=team.id)
        for team in original
        if team.id is not None and team.key not in edited_keys
    ]

    league_rename = None
    if original_name is not None and edited_name is not None and original_name != edited_name:
        league_rename = LeagueRename(old_name=original_name, new_name=edited_name)

    return RosterChangeSet(
        league_rename=league_rename,
        renamed=tuple(renamed),
        added=tuple(added),
        deleted=tuple(deleted),
    )
