from __future__ import annotations

import logging

import httpx
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum

from edgeping.api.origin import origin_from_headers
from edgeping.api.schemas import PingResponse
from edgeping.config import ProbeConfig
from edgeping.probe import run_probe

logger = logging.getLogger(__name__)


def create_app(
    config: ProbeConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    config = config or ProbeConfig.from_env()
    app = FastAPI(title="edgeping", summary="Edge-to-origin latency probe")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.probe_config = config
    app.state.transport = transport

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/ping",
        tags=["Network"],
        summary=f"Ping {config.target.host} and return network metrics",
        operation_id="ping-opendrive",
        response_model=PingResponse,
        response_description="Returns network metrics including latency, IP, jitter, etc.",
    )
    async def ping(
        request: Request,
        samples: str = Query(
            default=str(config.sampling.default_samples),
            description=(
                "Number of ping samples to collect "
                f"({config.sampling.min_samples}-{config.sampling.max_samples})"
            ),
        ),
    ) -> JSONResponse:
        probe_config: ProbeConfig = request.app.state.probe_config
        count = probe_config.sampling.parse(samples)
        origin = origin_from_headers(request.headers)
        logger.info("Ping requested: samples=%r -> %d", samples, count)
        async with httpx.AsyncClient(transport=request.app.state.transport) as client:
            report = await run_probe(probe_config, count, origin=origin, client=client)
        return JSONResponse(content=report.to_payload())

    return app


app = create_app()

# Mangum adapter for AWS Lambda style serverless runtimes
handler = Mangum(app, lifespan="off")
