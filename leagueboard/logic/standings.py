from collections.abc import Sequence

from leagueboard.models.db.fixture import Fixture
from leagueboard.models.db.team import Team
from leagueboard.models.standings import StandingsRow

WIN_POINTS = 3
DRAW_POINTS = 1


def calculate_standings(teams: Sequence[Team], fixtures: Sequence[Fixture]) -> list[StandingsRow]:
    """
    Build the league table from all fixtures that have a result.

    Rows are ordered by points, then goal difference, then goals scored and finally by team
    name, so that teams without any played fixture still have a stable position.
    """
    rows = {team.id: StandingsRow(team_id=team.id, team_name=team.name) for team in teams}

    for fixture in fixtures:
        if fixture.home_score is None or fixture.away_score is None:
            continue

        home = rows.get(fixture.home_team_id)
        away = rows.get(fixture.away_team_id)
        if home is None or away is None:
            continue

        home.record_result(fixture.home_score, fixture.away_score)
        away.record_result(fixture.away_score, fixture.home_score)

    for row in rows.values():
        row.points = row.wins * WIN_POINTS + row.draws * DRAW_POINTS

    ranked = sorted(
        rows.values(),
        key=lambda row: (-row.points, -row.goal_difference, -row.goals_for, row.team_name.lower()),
    )
    for position, row in enumerate(ranked, start=1):
        row.position = position
    return ranked
