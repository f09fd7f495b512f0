from typing import Annotated

from heliclockter import datetime_utc
from pydantic import BaseModel, StringConstraints

from leagueboard.models.db.shared import BaseModelORM
from leagueboard.utils.id_types import LeagueId, TeamId

TeamName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=80)]


class TeamInsertable(BaseModelORM):
    league_id: LeagueId
    name: str
    created: datetime_utc


class Team(TeamInsertable):
    id: TeamId


class TeamBody(BaseModel):
    name: TeamName
