from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from edgeping.config import ResolverConfig
from edgeping.probe import ip_from_headers, resolve_ipv4


def _resolve(handler) -> str | None:
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await resolve_ipv4(client, "dev.opendrive.com", ResolverConfig(enabled=True))

    return asyncio.run(go())


def test_first_a_record_is_returned() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["name"] == "dev.opendrive.com"
        assert request.url.params["type"] == "A"
        assert request.headers["accept"] == "application/dns-json"
        return httpx.Response(
            200,
            json={
                "Answer": [
                    {"type": 5, "data": "edge.opendrive.com."},
                    {"type": 1, "data": "198.51.100.20"},
                    {"type": 1, "data": "198.51.100.21"},
                ]
            },
        )

    assert _resolve(handler) == "198.51.100.20"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"Status": 3}),
        httpx.Response(200, json={"Answer": []}),
        httpx.Response(200, json=["unexpected"]),
    ],
)
def test_failures_resolve_to_none(response: httpx.Response, caplog) -> None:
    caplog.set_level(logging.WARNING, logger="edgeping.probe.resolver")
    assert _resolve(lambda request: response) is None
    assert "DNS lookup for dev.opendrive.com" in caplog.text


def test_network_error_resolves_to_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route", request=request)

    assert _resolve(handler) is None


def test_ip_from_headers_prefers_cloudflare() -> None:
    headers = httpx.Headers({"x-real-ip": "192.0.2.2", "cf-connecting-ip": "192.0.2.1"})
    assert ip_from_headers(headers) == "192.0.2.1"
    assert ip_from_headers(httpx.Headers({"X-Real-IP": "192.0.2.2"})) == "192.0.2.2"
    assert ip_from_headers(httpx.Headers()) is None
    assert ip_from_headers(None) is None
