from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable

import httpx

from edgeping.config import TargetConfig
from edgeping.metrics import SampleResult

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "The operation was aborted due to timeout"
UNKNOWN_ERROR = "Unknown error"

Clock = Callable[[], float]


@dataclass(frozen=True, slots=True)
class Exchange:
    status_code: int
    reason_phrase: str
    response_size_bytes: int | None
    headers: httpx.Headers


@dataclass(frozen=True, slots=True)
class ProbeAttempt:
    result: SampleResult
    headers: httpx.Headers | None


async def send_probe(
    client: httpx.AsyncClient,
    attempt: int,
    target: TargetConfig,
    clock: Clock = time.perf_counter,
) -> ProbeAttempt:
    start = clock()
    try:
        exchange = await asyncio.wait_for(_exchange(client, target), timeout=target.timeout_sec)
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        error = str(exc) or TIMEOUT_MESSAGE
    except (httpx.HTTPError, OSError) as exc:
        error = str(exc) or UNKNOWN_ERROR
    else:
        latency_ms = (clock() - start) * 1000.0
        success = 200 <= exchange.status_code <= 299
        error = None if success else f"HTTP {exchange.status_code}: {exchange.reason_phrase}"
        logger.debug(
            "Attempt %d: %s %s -> %d in %.2f ms",
            attempt,
            target.method.value,
            target.url,
            exchange.status_code,
            latency_ms,
        )
        result = SampleResult(
            attempt=attempt,
            success=success,
            latency_ms=latency_ms,
            status_code=exchange.status_code,
            response_size_bytes=exchange.response_size_bytes,
            error=error,
        )
        return ProbeAttempt(result=result, headers=exchange.headers)
    latency_ms = (clock() - start) * 1000.0
    logger.debug("Attempt %d failed after %.2f ms: %s", attempt, latency_ms, error)
    result = SampleResult(
        attempt=attempt,
        success=False,
        latency_ms=latency_ms,
        status_code=None,
        response_size_bytes=None,
        error=error,
    )
    return ProbeAttempt(result=result, headers=None)


async def _exchange(client: httpx.AsyncClient, target: TargetConfig) -> Exchange:
    async with client.stream(
        target.method.value,
        target.url,
        headers=target.headers,
        timeout=target.timeout_sec,
        follow_redirects=True,
    ) as resp:
        size = None
        if target.reads_body:
            await resp.aread()
            size = len(resp.text.encode("utf-8"))
        return Exchange(
            status_code=resp.status_code,
            reason_phrase=resp.reason_phrase,
            response_size_bytes=size,
            headers=resp.headers,
        )
