from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SampleResult:
    attempt: int
    success: bool
    latency_ms: float
    status_code: int | None
    response_size_bytes: int | None
    error: str | None


@dataclass(frozen=True, slots=True)
class AggregateMetrics:
    samples: int
    min_latency_ms: float
    max_latency_ms: float
    avg_latency_ms: float
    jitter_ms: float
    packet_loss_pct: float
    avg_response_size_bytes: int
