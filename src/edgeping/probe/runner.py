from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable

import httpx

from edgeping.config import ProbeConfig
from edgeping.metrics import SampleResult, aggregate_samples
from edgeping.probe.client import Clock, send_probe
from edgeping.probe.report import MeasurementPoint, OriginMetadata, ProbeReport
from edgeping.probe.resolver import ip_from_headers, resolve_ipv4

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


async def run_probe(
    config: ProbeConfig,
    samples: int,
    origin: OriginMetadata | None = None,
    client: httpx.AsyncClient | None = None,
    sleep: Sleep = asyncio.sleep,
    clock: Clock = time.perf_counter,
) -> ProbeReport:
    samples = config.sampling.clamp(samples)
    if client is None:
        async with httpx.AsyncClient() as owned:
            return await _probe(config, samples, origin, owned, sleep, clock)
    return await _probe(config, samples, origin, client, sleep, clock)


async def _probe(
    config: ProbeConfig,
    samples: int,
    origin: OriginMetadata | None,
    client: httpx.AsyncClient,
    sleep: Sleep,
    clock: Clock,
) -> ProbeReport:
    target = config.target
    ip = None
    if config.resolver.enabled:
        ip = await resolve_ipv4(client, target.host, config.resolver)

    results: list[SampleResult] = []
    for attempt in range(1, samples + 1):
        probe = await send_probe(client, attempt, target, clock)
        results.append(probe.result)
        if ip is None and not config.resolver.enabled:
            ip = ip_from_headers(probe.headers)
        if attempt < samples:
            await sleep(config.sampling.inter_attempt_delay_sec)

    metrics = aggregate_samples(samples, results)
    logger.info(
        "Probed %s %d times: avg %.2f ms, jitter %.2f ms, loss %.2f%%",
        target.url,
        samples,
        metrics.avg_latency_ms,
        metrics.jitter_ms,
        metrics.packet_loss_pct,
    )
    measurement_point = None
    if config.report_measurement_point:
        measurement_point = MeasurementPoint.from_origin(origin)
    return ProbeReport(
        target=target.host,
        url=target.url if config.reports_url else None,
        ip=ip or config.ip_placeholder,
        timestamp=_utc_timestamp(),
        measurement_point=measurement_point,
        metrics=metrics,
        results=results,
        include_response_size=config.reports_response_size,
    )


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
