from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leagueboard.config import config, environment
from leagueboard.database import database
from leagueboard.routes import auth, fixtures, leagues, teams, users
from leagueboard.utils.alembic import alembic_run_migrations
from leagueboard.utils.logging import logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    await database.connect()
    if config.auto_run_migrations:
        alembic_run_migrations()
    logger.info(f"Started leagueboard in {environment.value} mode")

    yield

    await database.disconnect()


app = FastAPI(title="Leagueboard API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/ping", summary="Healthcheck ping")
async def ping() -> str:
    return "ping"


routers = {
    "Auth": auth.router,
    "Users": users.router,
    "Leagues": leagues.router,
    "Teams": teams.router,
    "Fixtures": fixtures.router,
}

for tag, router in routers.items():
    app.include_router(router, tags=[tag])
