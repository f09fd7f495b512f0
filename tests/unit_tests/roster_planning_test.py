from leagueboard.logic.roster.planning import plan_operations
from leagueboard.models.roster import (
    LeagueRename,
    OperationDescriptor,
    OperationVerb,
    RosterChangeSet,
    TeamAddition,
    TeamDeletion,
    TeamRename,
)
from leagueboard.utils.id_types import LeagueId, TeamId


def test_empty_change_set_plans_nothing() -> None:
    assert plan_operations(LeagueId(7), RosterChangeSet()) == []


def test_plan_contains_one_operation_per_change() -> None:
    change_set = RosterChangeSet(
        league_rename=LeagueRename(old_name="Old", new_name="New"),
        renamed=(TeamRename(team_id=TeamId(1), old_name="A", new_name="A2"),),
        added=(TeamAddition(placeholder_id="t2", name="C"),),
        deleted=(TeamDeletion(team_id=TeamId(2)),),
    )

    operations = plan_operations(LeagueId(7), change_set)

    assert sorted(operations, key=lambda op: (op.verb.value, op.path)) == [
        OperationDescriptor(
            verb=OperationVerb.CREATE,
            path="/leagues/7/teams",
            payload={"name": "C"},
            placeholder_id="t2",
        ),
        OperationDescriptor(verb=OperationVerb.DELETE, path="/leagues/7/teams/2"),
        OperationDescriptor(verb=OperationVerb.UPDATE, path="/leagues/7", payload={"name": "New"}),
        OperationDescriptor(
            verb=OperationVerb.UPDATE, path="/leagues/7/teams/1", payload={"name": "A2"}
        ),
    ]


def test_placeholder_id_is_never_part_of_the_payload() -> None:
    change_set = RosterChangeSet(added=(TeamAddition(placeholder_id="t5", name="New team"),))

    [operation] = plan_operations(LeagueId(1), change_set)

    assert operation.payload == {"name": "New team"}
    assert "placeholder_id" not in operation.model_dump()
    assert operation.placeholder_id == "t5"
