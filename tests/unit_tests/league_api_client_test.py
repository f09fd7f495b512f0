import json

import httpx
import pytest

from leagueboard.client.api import LeagueApiClient
from leagueboard.models.roster import OperationDescriptor, OperationVerb
from leagueboard.utils.id_types import LeagueId, TeamId


def _client(handler: httpx.MockTransport) -> LeagueApiClient:
    return LeagueApiClient("secret-token", base_url="http://leagueboard.test", transport=handler)


@pytest.mark.asyncio
async def test_send_maps_verbs_to_http_methods() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "POST":
            return httpx.Response(200, json={"data": {"id": 12, "name": "C"}})
        if request.method == "DELETE":
            return httpx.Response(200, json={"success": True})
        return httpx.Response(200, json={"data": {"id": 1, "name": "A2"}})

    async with _client(httpx.MockTransport(handler)) as client:
        created = await client.send(
            OperationDescriptor(
                verb=OperationVerb.CREATE,
                path="/leagues/3/teams",
                payload={"name": "C"},
                placeholder_id="t0",
            )
        )
        updated = await client.send(
            OperationDescriptor(
                verb=OperationVerb.UPDATE, path="/leagues/3/teams/1", payload={"name": "A2"}
            )
        )
        deleted = await client.send(
            OperationDescriptor(verb=OperationVerb.DELETE, path="/leagues/3/teams/2")
        )

    assert created == {"id": 12, "name": "C"}
    assert updated == {"id": 1, "name": "A2"}
    assert deleted == {}
    assert [(request.method, request.url.path) for request in requests] == [
        ("POST", "/leagues/3/teams"),
        ("PATCH", "/leagues/3/teams/1"),
        ("DELETE", "/leagues/3/teams/2"),
    ]
    assert json.loads(requests[0].content) == {"name": "C"}
    assert all(request.headers["Authorization"] == "Bearer secret-token" for request in requests)


@pytest.mark.asyncio
async def test_send_returns_none_on_error_response() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"detail": "This team still has fixtures"})

    async with _client(httpx.MockTransport(handler)) as client:
        result = await client.send(
            OperationDescriptor(verb=OperationVerb.DELETE, path="/leagues/3/teams/2")
        )

    assert result is None


@pytest.mark.asyncio
async def test_send_treats_non_json_success_body_as_success() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="OK")

    async with _client(httpx.MockTransport(handler)) as client:
        result = await client.send(
            OperationDescriptor(verb=OperationVerb.DELETE, path="/leagues/3/teams/2")
        )

    assert result == {}


@pytest.mark.asyncio
async def test_send_returns_none_on_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(httpx.MockTransport(handler)) as client:
        result = await client.send(
            OperationDescriptor(verb=OperationVerb.UPDATE, path="/leagues/3", payload={"name": "X"})
        )

    assert result is None


@pytest.mark.asyncio
async def test_load_league_parses_teams() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/leagues/3"
        return httpx.Response(
            200,
            json={
                "data": {
                    "id": 3,
                    "name": "Sunday League",
                    "created": "2026-01-01T10:00:00+00:00",
                    "creator_id": 1,
                    "teams": [
                        {
                            "id": 1,
                            "name": "A",
                            "league_id": 3,
                            "created": "2026-01-01T10:00:00+00:00",
                        }
                    ],
                }
            },
        )

    async with _client(httpx.MockTransport(handler)) as client:
        league = await client.load_league(LeagueId(3))

    assert league.name == "Sunday League"
    assert [team.id for team in league.teams] == [TeamId(1)]


@pytest.mark.asyncio
async def test_load_league_raises_on_missing_league() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"detail": "Could not find league with id 3"})

    async with _client(httpx.MockTransport(handler)) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await client.load_league(LeagueId(3))
