from heliclockter import datetime_utc
from pydantic import BaseModel, Field, model_validator

from leagueboard.models.db.shared import BaseModelORM
from leagueboard.utils.id_types import FixtureId, LeagueId, TeamId


class FixtureBase(BaseModelORM):
    home_team_id: TeamId
    away_team_id: TeamId
    kickoff: datetime_utc | None = None
    home_score: int | None = None
    away_score: int | None = None

    @property
    def is_played(self) -> bool:
        return self.home_score is not None and self.away_score is not None


class FixtureInsertable(FixtureBase):
    league_id: LeagueId
    created: datetime_utc


class Fixture(FixtureInsertable):
    id: FixtureId


class FixtureBody(BaseModel):
    home_team_id: TeamId
    away_team_id: TeamId
    kickoff: datetime_utc | None = None

    @model_validator(mode="after")
    def teams_differ(self) -> "FixtureBody":
        if self.home_team_id == self.away_team_id:
            raise ValueError("A team cannot play against itself")
        return self


class FixturesCreateBody(BaseModel):
    fixtures: list[FixtureBody] = Field(min_length=1)


class FixtureUpdateBody(BaseModel):
    kickoff: datetime_utc | None = None
    home_score: int | None = Field(default=None, ge=0)
    away_score: int | None = Field(default=None, ge=0)
