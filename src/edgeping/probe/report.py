from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from edgeping.metrics import AggregateMetrics, SampleResult, round_half_up

MEASUREMENT_DESCRIPTION = (
    "Latency measured from the edge location executing this function, "
    "not from the client that called it"
)


@dataclass(frozen=True, slots=True)
class OriginMetadata:
    datacenter: str | None = None
    city: str | None = None
    country: str | None = None

    def location(self) -> str | None:
        parts = [p for p in (self.city, self.country) if p]
        return ", ".join(parts) if parts else None


@dataclass(frozen=True, slots=True)
class MeasurementPoint:
    description: str
    datacenter: str | None
    worker_location: str | None

    @classmethod
    def from_origin(cls, origin: OriginMetadata | None) -> MeasurementPoint:
        origin = origin or OriginMetadata()
        return cls(
            description=MEASUREMENT_DESCRIPTION,
            datacenter=origin.datacenter,
            worker_location=origin.location(),
        )


@dataclass(frozen=True, slots=True)
class ProbeReport:
    target: str
    url: str | None
    ip: str | None
    timestamp: str
    measurement_point: MeasurementPoint | None
    metrics: AggregateMetrics
    results: list[SampleResult]
    include_response_size: bool = False

    def to_payload(self) -> dict[str, Any]:
        result: dict[str, Any] = {"target": self.target}
        if self.url is not None:
            result["url"] = self.url
        result["ip"] = self.ip
        result["timestamp"] = self.timestamp
        if self.measurement_point is not None:
            result["measurementPoint"] = {
                "description": self.measurement_point.description,
                "cloudflareDatacenter": self.measurement_point.datacenter,
                "workerLocation": self.measurement_point.worker_location,
            }
        metrics: dict[str, Any] = {
            "samples": self.metrics.samples,
            "minLatency": self.metrics.min_latency_ms,
            "maxLatency": self.metrics.max_latency_ms,
            "avgLatency": self.metrics.avg_latency_ms,
            "jitter": self.metrics.jitter_ms,
            "packetLoss": self.metrics.packet_loss_pct,
        }
        if self.include_response_size:
            metrics["avgResponseSize"] = self.metrics.avg_response_size_bytes
        result["metrics"] = metrics
        result["individualResults"] = [self._attempt_payload(r) for r in self.results]
        return {"success": True, "result": result}

    def _attempt_payload(self, sample: SampleResult) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "attempt": sample.attempt,
            "success": sample.success,
            "latency": round_half_up(sample.latency_ms),
            "statusCode": sample.status_code,
        }
        if self.include_response_size:
            payload["responseSize"] = sample.response_size_bytes
        payload["error"] = sample.error
        return payload
