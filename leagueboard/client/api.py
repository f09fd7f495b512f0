"""Async client for the league API, used by roster edit sessions to apply their changes."""

from types import TracebackType
from typing import Any

import httpx

from leagueboard.config import config
from leagueboard.logic.roster.planning import league_path
from leagueboard.models.db.league import LeagueWithTeams
from leagueboard.models.roster import OperationDescriptor, OperationVerb
from leagueboard.utils.http import HTTPMethod
from leagueboard.utils.id_types import LeagueId
from leagueboard.utils.logging import logger

VERB_TO_METHOD = {
    OperationVerb.CREATE: HTTPMethod.POST,
    OperationVerb.UPDATE: HTTPMethod.PATCH,
    OperationVerb.DELETE: HTTPMethod.DELETE,
}


class LeagueApiClient:
    def __init__(
        self,
        token: str,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=(base_url or config.api_base_url).rstrip("/") + config.api_prefix,
            headers={"Authorization": f"Bearer {token}"},
            timeout=timeout if timeout is not None else config.remote_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "LeagueApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def send(self, descriptor: OperationDescriptor) -> dict[str, Any] | None:
        """Perform a single operation, returning its response data or None when it failed."""
        method = VERB_TO_METHOD[descriptor.verb]
        try:
            response = await self._client.request(
                method.value, descriptor.path, json=descriptor.payload
            )
        except httpx.HTTPError as exc:
            logger.warning(f"Request {method.value} {descriptor.path} failed: {exc!r}")
            return None

        if response.is_error:
            logger.warning(
                f"Request {method.value} {descriptor.path} returned "
                f"{response.status_code}: {response.text[:500]}"
            )
            return None

        if len(response.content) == 0:
            return {}

        try:
            body = response.json()
        except ValueError:
            logger.warning(f"Request {method.value} {descriptor.path} returned a non-JSON body")
            return {}

        data = body.get("data") if isinstance(body, dict) else None
        return data if isinstance(data, dict) else {}

    async def load_league(self, league_id: LeagueId) -> LeagueWithTeams:
        response = await self._client.get(league_path(league_id))
        response.raise_for_status()
        return LeagueWithTeams.model_validate(response.json()["data"])
