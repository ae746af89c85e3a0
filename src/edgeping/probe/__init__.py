from __future__ import annotations

from edgeping.probe.client import ProbeAttempt, send_probe
from edgeping.probe.report import MeasurementPoint, OriginMetadata, ProbeReport
from edgeping.probe.resolver import ip_from_headers, resolve_ipv4
from edgeping.probe.runner import run_probe

__all__ = [
    "MeasurementPoint",
    "OriginMetadata",
    "ProbeAttempt",
    "ProbeReport",
    "ip_from_headers",
    "resolve_ipv4",
    "run_probe",
    "send_probe",
]
