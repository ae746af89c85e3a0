from __future__ import annotations

from edgeping.config.models import (
    IP_PLACEHOLDER,
    OAUTH_PATH,
    REVISIONS,
    TARGET_HOST,
    ProbeConfig,
    ProbeMethod,
    ResolverConfig,
    SamplingConfig,
    TargetConfig,
    edge_get_probe,
    oauth_get_probe,
    revision_preset,
    root_head_probe,
)
from edgeping.config.settings import LOG_FORMAT, LOG_LEVEL, configure_logging

__all__ = [
    "IP_PLACEHOLDER",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "OAUTH_PATH",
    "REVISIONS",
    "TARGET_HOST",
    "ProbeConfig",
    "ProbeMethod",
    "ResolverConfig",
    "SamplingConfig",
    "TargetConfig",
    "configure_logging",
    "edge_get_probe",
    "oauth_get_probe",
    "revision_preset",
    "root_head_probe",
]
