from leagueboard.database import database
from leagueboard.models.db.team import Team, TeamInsertable
from leagueboard.schema import teams
from leagueboard.utils.id_types import LeagueId, TeamId


async def get_teams_for_league(league_id: LeagueId) -> list[Team]:
    query = """
        SELECT *
        FROM teams
        WHERE league_id = :league_id
        ORDER BY id
    """
    result = await database.fetch_all(query=query, values={"league_id": league_id})
    return [Team.model_validate(dict(row._mapping)) for row in result]


async def get_team_by_id(team_id: TeamId, league_id: LeagueId) -> Team | None:
    query = """
        SELECT *
        FROM teams
        WHERE id = :team_id
        AND league_id = :league_id
    """
    result = await database.fetch_one(
        query=query, values={"team_id": team_id, "league_id": league_id}
    )
    return Team.model_validate(dict(result._mapping)) if result is not None else None


async def sql_create_team(team: TeamInsertable) -> TeamId:
    return TeamId(await database.execute(query=teams.insert(), values=team.model_dump()))


async def sql_update_team_name(team_id: TeamId, league_id: LeagueId, name: str) -> None:
    await database.execute(
        query=teams.update().where((teams.c.id == team_id) & (teams.c.league_id == league_id)),
        values={"name": name},
    )


async def sql_delete_team(league_id: LeagueId, team_id: TeamId) -> None:
    await database.execute(
        query=teams.delete().where((teams.c.id == team_id) & (teams.c.league_id == league_id))
    )
