from fastapi import APIRouter, Depends, HTTPException
from heliclockter import datetime_utc
from starlette import status

from leagueboard.config import config
from leagueboard.models.db.fixture import (
    Fixture,
    FixtureInsertable,
    FixturesCreateBody,
    FixtureUpdateBody,
)
from leagueboard.models.db.league import League
from leagueboard.routes.models import FixturesResponse, SingleFixtureResponse, SuccessResponse
from leagueboard.routes.util import fixture_dependency, league_dependency, league_owned_by_user
from leagueboard.sql.fixtures import (
    get_fixture_by_id,
    get_fixtures_for_league,
    sql_create_fixtures,
    sql_delete_fixture,
    sql_update_fixture,
)
from leagueboard.sql.teams import get_teams_for_league
from leagueboard.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


@router.get("/leagues/{league_id}/fixtures", response_model=FixturesResponse)
async def get_all_league_fixtures(league: League = Depends(league_dependency)) -> FixturesResponse:
    return FixturesResponse(data=await get_fixtures_for_league(league.id))


@router.post("/leagues/{league_id}/fixtures", response_model=FixturesResponse)
async def create_league_fixtures(
    fixtures_body: FixturesCreateBody, league: League = Depends(league_owned_by_user)
) -> FixturesResponse:
    team_ids = {team.id for team in await get_teams_for_league(league.id)}
    for fixture in fixtures_body.fixtures:
        if fixture.home_team_id not in team_ids or fixture.away_team_id not in team_ids:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST, "Both teams of a fixture must belong to the league"
            )

    now = datetime_utc.now()
    await sql_create_fixtures(
        [
            FixtureInsertable(**fixture.model_dump(), league_id=league.id, created=now)
            for fixture in fixtures_body.fixtures
        ]
    )
    return FixturesResponse(data=await get_fixtures_for_league(league.id))


@router.get("/leagues/{league_id}/fixtures/{fixture_id}", response_model=SingleFixtureResponse)
async def get_league_fixture(
    fixture: Fixture = Depends(fixture_dependency),
) -> SingleFixtureResponse:
    return SingleFixtureResponse(data=fixture)


@router.patch("/leagues/{league_id}/fixtures/{fixture_id}", response_model=SingleFixtureResponse)
async def update_league_fixture(
    fixture_body: FixtureUpdateBody,
    league: League = Depends(league_owned_by_user),
    fixture: Fixture = Depends(fixture_dependency),
) -> SingleFixtureResponse:
    values = fixture_body.model_dump(exclude_unset=True)
    home_score = values.get("home_score", fixture.home_score)
    away_score = values.get("away_score", fixture.away_score)
    if (home_score is None) != (away_score is None):
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST, "A result needs both a home and an away score"
        )

    if len(values) > 0:
        await sql_update_fixture(fixture.id, league.id, values)

    return SingleFixtureResponse(data=assert_some(await get_fixture_by_id(fixture.id, league.id)))


@router.delete("/leagues/{league_id}/fixtures/{fixture_id}", response_model=SuccessResponse)
async def delete_league_fixture(
    league: League = Depends(league_owned_by_user),
    fixture: Fixture = Depends(fixture_dependency),
) -> SuccessResponse:
    await sql_delete_fixture(fixture.id, league.id)
    return SuccessResponse()
