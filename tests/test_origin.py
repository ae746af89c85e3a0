from __future__ import annotations

from edgeping.api import origin_from_headers


def test_cloudflare_headers() -> None:
    origin = origin_from_headers(
        {"cf-ray": "8a1b2c3d4e5f6789-AMS", "cf-ipcity": "Amsterdam", "cf-ipcountry": "NL"}
    )
    assert origin.datacenter == "AMS"
    assert origin.location() == "Amsterdam, NL"


def test_vercel_headers() -> None:
    origin = origin_from_headers(
        {
            "x-vercel-id": "fra1::iad1::abcde-1700000000000-0123456789ab",
            "x-vercel-ip-city": "S%C3%A3o%20Paulo",
            "x-vercel-ip-country": "BR",
        }
    )
    assert origin.datacenter == "fra1"
    assert origin.city == "São Paulo"
    assert origin.country == "BR"


def test_missing_headers() -> None:
    origin = origin_from_headers({})
    assert origin.datacenter is None
    assert origin.city is None
    assert origin.country is None
    assert origin.location() is None


def test_country_only() -> None:
    origin = origin_from_headers({"cf-ipcountry": "US", "cf-ray": "nodash"})
    assert origin.datacenter is None
    assert origin.location() == "US"
