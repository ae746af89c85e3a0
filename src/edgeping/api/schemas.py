from __future__ import annotations

from pydantic import BaseModel, Field


class MeasurementPointModel(BaseModel):
    description: str
    cloudflareDatacenter: str | None = None
    workerLocation: str | None = None


class MetricsModel(BaseModel):
    samples: int
    minLatency: float = Field(description="Minimum latency in ms")
    maxLatency: float = Field(description="Maximum latency in ms")
    avgLatency: float = Field(description="Average latency in ms")
    jitter: float = Field(description="Jitter (standard deviation) in ms")
    packetLoss: float = Field(description="Packet loss percentage")
    avgResponseSize: int | None = Field(default=None, description="Average response size in bytes")


class AttemptModel(BaseModel):
    attempt: int
    success: bool
    latency: float | None = None
    statusCode: int | None = None
    responseSize: int | None = None
    error: str | None = None


class PingResultModel(BaseModel):
    target: str
    url: str | None = None
    ip: str | None = None
    timestamp: str
    measurementPoint: MeasurementPointModel | None = None
    metrics: MetricsModel
    individualResults: list[AttemptModel]


class PingResponse(BaseModel):
    success: bool
    result: PingResultModel
