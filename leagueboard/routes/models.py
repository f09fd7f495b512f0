from pydantic import BaseModel

from leagueboard.models.db.fixture import Fixture
from leagueboard.models.db.league import League, LeagueWithTeams
from leagueboard.models.db.team import Team
from leagueboard.models.db.user import UserPublic
from leagueboard.models.standings import StandingsRow


class SuccessResponse(BaseModel):
    success: bool = True


class DataResponse[DataT](BaseModel):
    data: DataT


class Token(BaseModel):
    access_token: str
    token_type: str
    user_id: int


class TokenResponse(DataResponse[Token]):
    pass


class UserPublicResponse(DataResponse[UserPublic]):
    pass


class LeaguesResponse(DataResponse[list[League]]):
    pass


class LeagueResponse(DataResponse[LeagueWithTeams]):
    pass


class TeamsResponse(DataResponse[list[Team]]):
    pass


class SingleTeamResponse(DataResponse[Team]):
    pass


class FixturesResponse(DataResponse[list[Fixture]]):
    pass


class SingleFixtureResponse(DataResponse[Fixture]):
    pass


class StandingsResponse(DataResponse[list[StandingsRow]]):
    pass
