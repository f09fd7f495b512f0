from heliclockter import datetime_utc

from leagueboard.database import database
from leagueboard.models.db.league import League, LeagueInsertable, LeagueWithTeams
from leagueboard.models.db.team import TeamInsertable
from leagueboard.schema import leagues, teams
from leagueboard.sql.teams import get_teams_for_league
from leagueboard.utils.id_types import LeagueId, UserId


async def get_leagues(*, query: str | None = None, creator_id: UserId | None = None) -> list[League]:
    name_filter = "AND name ILIKE :query" if query else ""
    creator_filter = "AND creator_id = :creator_id" if creator_id is not None else ""
    sql = f"""
        SELECT *
        FROM leagues
        WHERE TRUE
        {name_filter}
        {creator_filter}
        ORDER BY created DESC
    """
    values: dict[str, object] = {}
    if query:
        values["query"] = f"%{query}%"
    if creator_id is not None:
        values["creator_id"] = creator_id

    result = await database.fetch_all(query=sql, values=values)
    return [League.model_validate(dict(row._mapping)) for row in result]


async def get_league_by_id(league_id: LeagueId) -> League | None:
    query = """
        SELECT *
        FROM leagues
        WHERE id = :league_id
    """
    result = await database.fetch_one(query=query, values={"league_id": league_id})
    return League.model_validate(dict(result._mapping)) if result is not None else None


async def get_league_with_teams(league_id: LeagueId) -> LeagueWithTeams | None:
    league = await get_league_by_id(league_id)
    if league is None:
        return None

    return LeagueWithTeams(**league.model_dump(), teams=await get_teams_for_league(league_id))


async def sql_create_league(league: LeagueInsertable, team_names: list[str]) -> LeagueId:
    async with database.transaction():
        league_id = await database.execute(query=leagues.insert(), values=league.model_dump())
        for team_name in team_names:
            await database.execute(
                query=teams.insert(),
                values=TeamInsertable(
                    name=team_name, league_id=LeagueId(league_id), created=datetime_utc.now()
                ).model_dump(),
            )

    return LeagueId(league_id)


async def sql_update_league_name(league_id: LeagueId, name: str) -> None:
    await database.execute(
        query=leagues.update().where(leagues.c.id == league_id), values={"name": name}
    )


async def sql_delete_league(league_id: LeagueId) -> None:
    async with database.transaction():
        await database.execute(
            query="DELETE FROM fixtures WHERE league_id = :league_id",
            values={"league_id": league_id},
        )
        await database.execute(
            query="DELETE FROM teams WHERE league_id = :league_id",
            values={"league_id": league_id},
        )
        await database.execute(query=leagues.delete().where(leagues.c.id == league_id))
