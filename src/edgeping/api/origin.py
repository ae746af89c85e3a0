from __future__ import annotations

from typing import Mapping
from urllib.parse import unquote

from edgeping.probe import OriginMetadata


def origin_from_headers(headers: Mapping[str, str]) -> OriginMetadata:
    """Read the edge location the platform stamped on the inbound request.

    Cloudflare puts the colo after the last dash of ``cf-ray``; Vercel
    prefixes ``x-vercel-id`` with the executing region. Absent headers
    leave the matching field as ``None``.
    """
    return OriginMetadata(
        datacenter=_cloudflare_colo(headers) or _vercel_region(headers),
        city=_first(headers, "cf-ipcity", "x-vercel-ip-city"),
        country=_first(headers, "cf-ipcountry", "x-vercel-ip-country"),
    )


def _cloudflare_colo(headers: Mapping[str, str]) -> str | None:
    ray = headers.get("cf-ray")
    if not ray or "-" not in ray:
        return None
    colo = ray.rsplit("-", 1)[1].strip()
    return colo or None


def _vercel_region(headers: Mapping[str, str]) -> str | None:
    request_id = headers.get("x-vercel-id")
    if not request_id or "::" not in request_id:
        return None
    region = request_id.split("::", 1)[0].strip()
    return region or None


def _first(headers: Mapping[str, str], *names: str) -> str | None:
    for name in names:
        value = headers.get(name)
        if value:
            return unquote(value)
    return None
