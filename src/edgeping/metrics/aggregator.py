from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

import numpy as np

from edgeping.metrics.models import AggregateMetrics, SampleResult


def round_half_up(value: float, places: int = 2) -> float:
    """Round the exact binary value of ``value`` with halves going up, like ``toFixed``."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def aggregate_samples(samples: int, results: Sequence[SampleResult]) -> AggregateMetrics:
    """Reduce per-attempt results into summary metrics.

    Latency figures and the average response size only consider successful
    attempts. Jitter is the population standard deviation and stays at zero
    until two attempts have succeeded.
    """
    if samples < 1:
        msg = f"samples must be at least 1, got {samples}"
        raise ValueError(msg)
    successful = [r for r in results if r.success]
    latencies = np.array([r.latency_ms for r in successful], dtype=float)
    if latencies.size:
        min_ms = float(latencies.min())
        max_ms = float(latencies.max())
        avg_ms = float(latencies.mean())
    else:
        min_ms = max_ms = avg_ms = 0.0
    jitter = float(latencies.std(ddof=0)) if latencies.size > 1 else 0.0
    sizes = [r.response_size_bytes for r in successful if r.response_size_bytes is not None]
    avg_size = int(np.floor(np.mean(sizes) + 0.5)) if sizes else 0
    packet_loss = (samples - len(successful)) / samples * 100
    return AggregateMetrics(
        samples=samples,
        min_latency_ms=round_half_up(min_ms),
        max_latency_ms=round_half_up(max_ms),
        avg_latency_ms=round_half_up(avg_ms),
        jitter_ms=round_half_up(jitter),
        packet_loss_pct=round_half_up(packet_loss),
        avg_response_size_bytes=avg_size,
    )
