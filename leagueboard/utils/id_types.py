from typing import NewType

UserId = NewType("UserId", int)
LeagueId = NewType("LeagueId", int)
TeamId = NewType("TeamId", int)
FixtureId = NewType("FixtureId", int)
