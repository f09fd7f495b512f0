from typing import Any

from leagueboard.database import database
from leagueboard.models.db.fixture import Fixture, FixtureInsertable
from leagueboard.schema import fixtures
from leagueboard.utils.id_types import FixtureId, LeagueId


async def get_fixtures_for_league(league_id: LeagueId, *, played: bool | None = None) -> list[Fixture]:
    played_filter = {
        None: "",
        True: "AND home_score IS NOT NULL AND away_score IS NOT NULL",
        False: "AND (home_score IS NULL OR away_score IS NULL)",
    }[played]
    query = f"""
        SELECT *
        FROM fixtures
        WHERE league_id = :league_id
        {played_filter}
        ORDER BY kickoff NULLS LAST, id
    """
    result = await database.fetch_all(query=query, values={"league_id": league_id})
    return [Fixture.model_validate(dict(row._mapping)) for row in result]


async def get_fixture_by_id(fixture_id: FixtureId, league_id: LeagueId) -> Fixture | None:
    query = """
        SELECT *
        FROM fixtures
        WHERE id = :fixture_id
        AND league_id = :league_id
    """
    result = await database.fetch_one(
        query=query, values={"fixture_id": fixture_id, "league_id": league_id}
    )
    return Fixture.model_validate(dict(result._mapping)) if result is not None else None


async def sql_create_fixtures(to_insert: list[FixtureInsertable]) -> list[FixtureId]:
    fixture_ids: list[FixtureId] = []
    async with database.transaction():
        for fixture in to_insert:
            fixture_ids.append(
                FixtureId(await database.execute(query=fixtures.insert(), values=fixture.model_dump()))
            )
    return fixture_ids


async def sql_update_fixture(
    fixture_id: FixtureId, league_id: LeagueId, values: dict[str, Any]
) -> None:
    await database.execute(
        query=fixtures.update().where(
            (fixtures.c.id == fixture_id) & (fixtures.c.league_id == league_id)
        ),
        values=values,
    )


async def sql_delete_fixture(fixture_id: FixtureId, league_id: LeagueId) -> None:
    await database.execute(
        query=fixtures.delete().where(
            (fixtures.c.id == fixture_id) & (fixtures.c.league_id == league_id)
        )
    )
