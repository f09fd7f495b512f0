from typing import Annotated

from heliclockter import datetime_utc
from pydantic import BaseModel, Field, StringConstraints

from leagueboard.models.db.shared import BaseModelORM
from leagueboard.models.db.team import Team, TeamName
from leagueboard.utils.id_types import LeagueId, UserId

LeagueName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class LeagueInsertable(BaseModelORM):
    name: str
    created: datetime_utc
    creator_id: UserId


class League(LeagueInsertable):
    id: LeagueId


class LeagueWithTeams(League):
    teams: list[Team] = Field(default_factory=list)


class LeagueBody(BaseModel):
    name: LeagueName


class LeagueCreateBody(LeagueBody):
    team_names: list[TeamName] = Field(default_factory=list)
