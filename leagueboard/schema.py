from sqlalchemy import Column, ForeignKey, Index, Integer, String, Table, func
from sqlalchemy.orm import declarative_base  # type: ignore[attr-defined]
from sqlalchemy.sql.sqltypes import BigInteger, DateTime

Base = declarative_base()
metadata = Base.metadata
DateTimeTZ = DateTime(timezone=True)

users = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True),
    Column("email", String, nullable=False, index=True, unique=True),
    Column("name", String, nullable=False),
    Column("password_hash", String, nullable=False),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
)

leagues = Table(
    "leagues",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True),
    Column("name", String, nullable=False, index=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column("creator_id", BigInteger, ForeignKey("users.id"), index=True, nullable=False),
)

teams = Table(
    "teams",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True),
    Column("name", String, nullable=False, index=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column(
        "league_id",
        BigInteger,
        ForeignKey("leagues.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    ),
)

Index(
    "ix_teams_league_id_lower_name",
    teams.c.league_id,
    func.lower(teams.c.name),
    unique=True,
)

fixtures = Table(
    "fixtures",
    metadata,
    Column("id", BigInteger, primary_key=True, index=True),
    Column("created", DateTimeTZ, nullable=False, server_default=func.now()),
    Column(
        "league_id",
        BigInteger,
        ForeignKey("leagues.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    ),
    Column("home_team_id", BigInteger, ForeignKey("teams.id"), index=True, nullable=False),
    Column("away_team_id", BigInteger, ForeignKey("teams.id"), index=True, nullable=False),
    Column("kickoff", DateTimeTZ, nullable=True),
    Column("home_score", Integer, nullable=True),
    Column("away_score", Integer, nullable=True),
)
