from fastapi import APIRouter, Depends
from heliclockter import datetime_utc

from leagueboard.config import config
from leagueboard.models.db.league import League
from leagueboard.models.db.team import Team, TeamBody, TeamInsertable
from leagueboard.routes.models import SingleTeamResponse, SuccessResponse, TeamsResponse
from leagueboard.routes.util import league_dependency, league_owned_by_user, team_dependency
from leagueboard.sql.teams import (
    get_team_by_id,
    get_teams_for_league,
    sql_create_team,
    sql_delete_team,
    sql_update_team_name,
)
from leagueboard.utils.errors import (
    ForeignKey,
    UniqueIndex,
    check_foreign_key_violation,
    check_unique_constraint_violation,
)
from leagueboard.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/leagues/{league_id}/teams", response_model=TeamsResponse)
async def get_teams(league: League = Depends(league_dependency)) -> TeamsResponse:
    return TeamsResponse(data=await get_teams_for_league(league.id))


@router.post("/leagues/{league_id}/teams", response_model=SingleTeamResponse)
async def create_team(
    team_body: TeamBody, league: League = Depends(league_owned_by_user)
) -> SingleTeamResponse:
    with check_unique_constraint_violation({UniqueIndex.ix_teams_league_id_lower_name}):
        team_id = await sql_create_team(
            TeamInsertable(name=team_body.name, league_id=league.id, created=datetime_utc.now())
        )

    return SingleTeamResponse(data=assert_some(await get_team_by_id(team_id, league.id)))


@router.patch("/leagues/{league_id}/teams/{team_id}", response_model=SingleTeamResponse)
async def update_team(
    team_body: TeamBody,
    league: League = Depends(league_owned_by_user),
    team: Team = Depends(team_dependency),
) -> SingleTeamResponse:
    with check_unique_constraint_violation({UniqueIndex.ix_teams_league_id_lower_name}):
        await sql_update_team_name(team.id, league.id, team_body.name)

    return SingleTeamResponse(data=assert_some(await get_team_by_id(team.id, league.id)))


@router.delete("/leagues/{league_id}/teams/{team_id}", response_model=SuccessResponse)
async def delete_team(
    league: League = Depends(league_owned_by_user),
    team: Team = Depends(team_dependency),
) -> SuccessResponse:
    with check_foreign_key_violation(
        {ForeignKey.fixtures_home_team_id_fkey, ForeignKey.fixtures_away_team_id_fkey}
    ):
        await sql_delete_team(league.id, team.id)

    return SuccessResponse()
