from fastapi import APIRouter, Depends, HTTPException, Query
from heliclockter import datetime_utc
from starlette import status

from leagueboard.config import config
from leagueboard.logic.standings import calculate_standings
from leagueboard.models.db.league import (
    League,
    LeagueBody,
    LeagueCreateBody,
    LeagueInsertable,
    LeagueWithTeams,
)
from leagueboard.models.db.user import UserPublic
from leagueboard.routes.auth import user_authenticated
from leagueboard.routes.models import (
    FixturesResponse,
    LeagueResponse,
    LeaguesResponse,
    StandingsResponse,
    SuccessResponse,
)
from leagueboard.routes.util import league_owned_by_user, league_with_teams_dependency
from leagueboard.sql.fixtures import get_fixtures_for_league
from leagueboard.sql.leagues import (
    get_league_with_teams,
    get_leagues,
    sql_create_league,
    sql_delete_league,
    sql_update_league_name,
)
from leagueboard.utils.logging import logger
from leagueboard.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/leagues", response_model=LeaguesResponse)
async def list_leagues(
    query: str | None = Query(default=None, max_length=120),
    mine: bool = False,
    user: UserPublic = Depends(user_authenticated),
) -> LeaguesResponse:
    return LeaguesResponse(
        data=await get_leagues(query=query, creator_id=user.id if mine else None)
    )


@router.post("/leagues", response_model=LeagueResponse)
async def create_league(
    league_body: LeagueCreateBody, user: UserPublic = Depends(user_authenticated)
) -> LeagueResponse:
    normalized_names = [name.lower() for name in league_body.team_names]
    if len(set(normalized_names)) != len(normalized_names):
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "Team names must be unique")

    league_id = await sql_create_league(
        LeagueInsertable(name=league_body.name, created=datetime_utc.now(), creator_id=user.id),
        league_body.team_names,
    )
    logger.info(f"User {user.id} created league {league_id}")
    return LeagueResponse(data=assert_some(await get_league_with_teams(league_id)))


@router.get("/leagues/{league_id}", response_model=LeagueResponse)
async def get_league(
    league: LeagueWithTeams = Depends(league_with_teams_dependency),
) -> LeagueResponse:
    return LeagueResponse(data=league)


@router.patch("/leagues/{league_id}", response_model=LeagueResponse)
async def update_league(
    league_body: LeagueBody, league: League = Depends(league_owned_by_user)
) -> LeagueResponse:
    await sql_update_league_name(league.id, league_body.name)
    return LeagueResponse(data=assert_some(await get_league_with_teams(league.id)))


@router.delete("/leagues/{league_id}", response_model=SuccessResponse)
async def delete_league(league: League = Depends(league_owned_by_user)) -> SuccessResponse:
    await sql_delete_league(league.id)
    logger.info(f"Deleted league {league.id}")
    return SuccessResponse()


@router.get("/leagues/{league_id}/standings", response_model=StandingsResponse)
async def get_standings(
    league: LeagueWithTeams = Depends(league_with_teams_dependency),
) -> StandingsResponse:
    played = await get_fixtures_for_league(league.id, played=True)
    return StandingsResponse(data=calculate_standings(league.teams, played))


@router.get("/leagues/{league_id}/results", response_model=FixturesResponse)
async def get_results(
    league: LeagueWithTeams = Depends(league_with_teams_dependency),
) -> FixturesResponse:
    return FixturesResponse(data=await get_fixtures_for_league(league.id, played=True))
