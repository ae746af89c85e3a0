from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from edgeping.config import ResolverConfig

logger = logging.getLogger(__name__)

A_RECORD = 1
IP_HEADERS = ("CF-Connecting-IP", "X-Real-IP")


async def resolve_ipv4(
    client: httpx.AsyncClient,
    host: str,
    resolver: ResolverConfig,
) -> str | None:
    """Look up the first A record for ``host`` over DNS-over-HTTPS.

    Failures are logged and reported as ``None``; the lookup is diagnostic
    only and is never retried.
    """
    try:
        resp = await client.get(
            resolver.url,
            params={"name": host, "type": "A"},
            headers={"Accept": "application/dns-json"},
            timeout=resolver.timeout_sec,
        )
        resp.raise_for_status()
        payload = resp.json()
    except httpx.HTTPError as exc:
        logger.warning("DNS lookup for %s failed: %s", host, exc)
        return None
    except ValueError as exc:
        logger.warning("DNS lookup for %s returned malformed JSON: %s", host, exc)
        return None
    address = _first_a_record(payload)
    if address is None:
        logger.warning("DNS lookup for %s returned no A records", host)
    return address


def _first_a_record(payload: Any) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    answers = payload.get("Answer")
    if not isinstance(answers, list):
        return None
    for answer in answers:
        if isinstance(answer, Mapping) and answer.get("type") == A_RECORD:
            data = answer.get("data")
            if isinstance(data, str) and data:
                return data
    return None


def ip_from_headers(headers: Mapping[str, str] | None) -> str | None:
    if headers is None:
        return None
    for name in IP_HEADERS:
        value = headers.get(name)
        if value:
            return value
    return None
