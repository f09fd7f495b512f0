from collections.abc import Iterator
from contextlib import contextmanager
from enum import auto

from asyncpg.exceptions import ForeignKeyViolationError, UniqueViolationError
from fastapi import HTTPException
from starlette import status

from leagueboard.utils.types import EnumAutoStr


class UniqueIndex(EnumAutoStr):
    ix_users_email = auto()
    ix_teams_league_id_lower_name = auto()


class ForeignKey(EnumAutoStr):
    fixtures_home_team_id_fkey = auto()
    fixtures_away_team_id_fkey = auto()
    leagues_creator_id_fkey = auto()


unique_index_violation_error_lookup = {
    UniqueIndex.ix_users_email: "This email is already taken",
    UniqueIndex.ix_teams_league_id_lower_name: "A team with this name already exists in the league",
}


foreign_key_violation_error_lookup = {
    ForeignKey.fixtures_home_team_id_fkey: "This team still has fixtures, delete those first",
    ForeignKey.fixtures_away_team_id_fkey: "This team still has fixtures, delete those first",
    ForeignKey.leagues_creator_id_fkey: "This user still owns leagues",
}


@contextmanager
def check_unique_constraint_violation(expected_violations: set[UniqueIndex]) -> Iterator[None]:
    try:
        yield
    except UniqueViolationError as exc:
        constraint = next(
            (index for index in expected_violations if index.value == exc.constraint_name), None
        )
        if constraint is None:
            raise

        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, unique_index_violation_error_lookup[constraint]
        ) from exc


@contextmanager
def check_foreign_key_violation(expected_violations: set[ForeignKey]) -> Iterator[None]:
    try:
        yield
    except ForeignKeyViolationError as exc:
        constraint = next(
            (key for key in expected_violations if key.value == exc.constraint_name), None
        )
        if constraint is None:
            raise

        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, foreign_key_violation_error_lookup[constraint]
        ) from exc
