from leagueboard.models.roster import OperationDescriptor, OperationVerb, RosterChangeSet
from leagueboard.utils.id_types import LeagueId, TeamId


def league_path(league_id: LeagueId) -> str:
    return f"/leagues/{league_id}"


def teams_path(league_id: LeagueId) -> str:
    return f"{league_path(league_id)}/teams"


def team_path(league_id: LeagueId, team_id: TeamId) -> str:
    return f"{teams_path(league_id)}/{team_id}"


def plan_operations(
    league_id: LeagueId, change_set: RosterChangeSet
) -> list[OperationDescriptor]:
    """
    Translate a change set into remote operations.

    Every descriptor can be applied on its own, none of them depends on the result of
    another one, so callers are free to dispatch them in any order.
    """
    operations: list[OperationDescriptor] = []

    if change_set.league_rename is not None:
        operations.append(
            OperationDescriptor(
                verb=OperationVerb.UPDATE,
                path=league_path(league_id),
                payload={"name": change_set.league_rename.new_name},
            )
        )

    operations.extend(
        OperationDescriptor(
            verb=OperationVerb.UPDATE,
            path=team_path(league_id, rename.team_id),
            payload={"name": rename.new_name},
        )
        for rename in change_set.renamed
    )
    operations.extend(
        OperationDescriptor(
            verb=OperationVerb.CREATE,
            path=teams_path(league_id),
            payload={"name": addition.name},
            placeholder_id=addition.placeholder_id,
        )
        for addition in change_set.added
    )
    operations.extend(
        OperationDescriptor(verb=OperationVerb.DELETE, path=team_path(league_id, deletion.team_id))
        for deletion in change_set.deleted
    )
    return operations
