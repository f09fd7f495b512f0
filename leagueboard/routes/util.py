from fastapi import Depends, HTTPException
from starlette import status

from leagueboard.models.db.fixture import Fixture
from leagueboard.models.db.league import League, LeagueWithTeams
from leagueboard.models.db.team import Team
from leagueboard.models.db.user import UserPublic
from leagueboard.routes.auth import user_authenticated
from leagueboard.sql.fixtures import get_fixture_by_id
from leagueboard.sql.leagues import get_league_by_id, get_league_with_teams
from leagueboard.sql.teams import get_team_by_id
from leagueboard.utils.id_types import FixtureId, LeagueId, TeamId


async def league_dependency(league_id: LeagueId) -> League:
    league = await get_league_by_id(league_id)
    if league is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find league with id {league_id}",
        )
    return league


async def league_with_teams_dependency(league_id: LeagueId) -> LeagueWithTeams:
    league = await get_league_with_teams(league_id)
    if league is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find league with id {league_id}",
        )
    return league


async def league_owned_by_user(
    league: League = Depends(league_dependency),
    user: UserPublic = Depends(user_authenticated),
) -> League:
    if league.creator_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the creator of this league can change it",
        )
    return league


async def team_dependency(league_id: LeagueId, team_id: TeamId) -> Team:
    team = await get_team_by_id(team_id, league_id)
    if team is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find team with id {team_id}",
        )
    return team


async def fixture_dependency(league_id: LeagueId, fixture_id: FixtureId) -> Fixture:
    fixture = await get_fixture_by_id(fixture_id, league_id)
    if fixture is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find fixture with id {fixture_id}",
        )
    return fixture
