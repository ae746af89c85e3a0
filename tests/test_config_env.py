from __future__ import annotations

import pytest

from edgeping.config import (
    OAUTH_PATH,
    ProbeConfig,
    ProbeMethod,
    edge_get_probe,
    revision_preset,
    root_head_probe,
)


def test_default_is_edge_revision() -> None:
    config = ProbeConfig.from_env({})
    assert config == edge_get_probe()
    assert config.target.url == f"https://dev.opendrive.com{OAUTH_PATH}"
    assert config.target.method is ProbeMethod.GET
    assert config.resolver.enabled
    assert config.report_measurement_point


def test_head_revision_preset() -> None:
    config = root_head_probe()
    assert config.target.url == "https://dev.opendrive.com"
    assert config.target.method is ProbeMethod.HEAD
    assert not config.resolver.enabled
    assert not config.reports_response_size


def test_overrides() -> None:
    config = ProbeConfig.from_env(
        {
            "EDGEPING_REVISION": "head",
            "EDGEPING_HOST": "example.org",
            "EDGEPING_PATH": "/status",
            "EDGEPING_METHOD": "get",
            "EDGEPING_TIMEOUT_SEC": "2.5",
            "EDGEPING_MAX_SAMPLES": "20",
            "EDGEPING_DELAY_SEC": "0",
            "EDGEPING_RESOLVE_IP": "yes",
        }
    )
    assert config.target.url == "https://example.org/status"
    assert config.target.method is ProbeMethod.GET
    assert config.target.timeout_sec == 2.5
    assert config.sampling.parse("15") == 15
    assert config.sampling.inter_attempt_delay_sec == 0
    assert config.resolver.enabled
    assert config.to_metadata()["target"]["method"] == "GET"


@pytest.mark.parametrize(
    "env",
    [
        {"EDGEPING_REVISION": "v9"},
        {"EDGEPING_METHOD": "POST"},
        {"EDGEPING_MIN_SAMPLES": "6", "EDGEPING_MAX_SAMPLES": "4"},
    ],
)
def test_invalid_settings_rejected(env: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        ProbeConfig.from_env(env)


def test_revision_names_are_case_insensitive() -> None:
    assert revision_preset(" GET ") == revision_preset("get")
