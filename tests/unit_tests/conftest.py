import itertools
from collections.abc import Iterator

import pytest
from heliclockter import datetime_utc

from leagueboard.app import app
from leagueboard.models.db.league import League, LeagueWithTeams
from leagueboard.models.db.team import Team, TeamInsertable
from leagueboard.models.db.user import UserPublic
from leagueboard.routes import leagues as league_routes
from leagueboard.routes import teams as team_routes
from leagueboard.routes import util as route_util
from leagueboard.routes.auth import user_authenticated
from leagueboard.utils.id_types import LeagueId, TeamId, UserId

NOW = datetime_utc.now()


def build_user(user_id: int = 1) -> UserPublic:
    return UserPublic(
        id=UserId(user_id),
        email=f"owner{user_id}@example.com",
        name=f"Owner {user_id}",
        created=NOW,
    )


class InMemoryLeagues:
    """Stand-in for the league and team SQL functions used by the routes."""

    def __init__(self) -> None:
        self.leagues: dict[LeagueId, League] = {}
        self.teams: dict[TeamId, Team] = {}
        self._team_ids = itertools.count(100)

    def add_league(self, league_id: int, name: str, teams: dict[int, str], creator_id: int = 1) -> None:
        self.leagues[LeagueId(league_id)] = League(
            id=LeagueId(league_id), name=name, created=NOW, creator_id=UserId(creator_id)
        )
        for team_id, team_name in teams.items():
            self.teams[TeamId(team_id)] = Team(
                id=TeamId(team_id), name=team_name, league_id=LeagueId(league_id), created=NOW
            )

    def team_names(self, league_id: int) -> list[str]:
        return [
            team.name
            for team in sorted(self.teams.values(), key=lambda team: team.id)
            if team.league_id == league_id
        ]

    async def get_league_by_id(self, league_id: LeagueId) -> League | None:
        return self.leagues.get(league_id)

    async def get_league_with_teams(self, league_id: LeagueId) -> LeagueWithTeams | None:
        league = self.leagues.get(league_id)
        if league is None:
            return None
        teams = sorted(
            (team for team in self.teams.values() if team.league_id == league_id),
            key=lambda team: team.id,
        )
        return LeagueWithTeams(**league.model_dump(), teams=teams)

    async def get_team_by_id(self, team_id: TeamId, league_id: LeagueId) -> Team | None:
        team = self.teams.get(team_id)
        return team if team is not None and team.league_id == league_id else None

    async def sql_create_team(self, team: TeamInsertable) -> TeamId:
        team_id = TeamId(next(self._team_ids))
        self.teams[team_id] = Team(id=team_id, **team.model_dump())
        return team_id

    async def sql_update_team_name(self, team_id: TeamId, league_id: LeagueId, name: str) -> None:
        self.teams[team_id] = self.teams[team_id].model_copy(update={"name": name})

    async def sql_delete_team(self, league_id: LeagueId, team_id: TeamId) -> None:
        del self.teams[team_id]

    async def sql_update_league_name(self, league_id: LeagueId, name: str) -> None:
        self.leagues[league_id] = self.leagues[league_id].model_copy(update={"name": name})


@pytest.fixture
def in_memory_leagues(monkeypatch: pytest.MonkeyPatch) -> Iterator[InMemoryLeagues]:
    store = InMemoryLeagues()

    monkeypatch.setattr(route_util, "get_league_by_id", store.get_league_by_id)
    monkeypatch.setattr(route_util, "get_league_with_teams", store.get_league_with_teams)
    monkeypatch.setattr(route_util, "get_team_by_id", store.get_team_by_id)
    monkeypatch.setattr(league_routes, "get_league_with_teams", store.get_league_with_teams)
    monkeypatch.setattr(league_routes, "sql_update_league_name", store.sql_update_league_name)
    monkeypatch.setattr(team_routes, "get_team_by_id", store.get_team_by_id)
    monkeypatch.setattr(team_routes, "sql_create_team", store.sql_create_team)
    monkeypatch.setattr(team_routes, "sql_update_team_name", store.sql_update_team_name)
    monkeypatch.setattr(team_routes, "sql_delete_team", store.sql_delete_team)

    app.dependency_overrides[user_authenticated] = lambda: build_user()
    yield store
    app.dependency_overrides.clear()
