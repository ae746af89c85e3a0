from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping

TARGET_HOST = "dev.opendrive.com"
OAUTH_PATH = "/api/resources/oauth2.json"
IP_PLACEHOLDER = "N/A (resolved by edge platform)"

_LEADING_INT = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


class ProbeMethod(str, Enum):
    HEAD = "HEAD"
    GET = "GET"


@dataclass(frozen=True, slots=True)
class TargetConfig:
    host: str = TARGET_HOST
    path: str = ""
    method: ProbeMethod = ProbeMethod.HEAD
    timeout_sec: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"https://{self.host}{self.path}"

    @property
    def reads_body(self) -> bool:
        return self.method is ProbeMethod.GET


@dataclass(frozen=True, slots=True)
class SamplingConfig:
    default_samples: int = 5
    min_samples: int = 1
    max_samples: int = 10
    inter_attempt_delay_sec: float = 0.1

    def __post_init__(self) -> None:
        if self.min_samples < 1:
            msg = f"min_samples must be at least 1, got {self.min_samples}"
            raise ValueError(msg)
        if not self.min_samples <= self.default_samples <= self.max_samples:
            msg = (
                f"default_samples {self.default_samples} outside "
                f"[{self.min_samples}, {self.max_samples}]"
            )
            raise ValueError(msg)
        if self.inter_attempt_delay_sec < 0:
            msg = f"inter_attempt_delay_sec must be >= 0, got {self.inter_attempt_delay_sec}"
            raise ValueError(msg)

    def clamp(self, value: int) -> int:
        return min(max(value, self.min_samples), self.max_samples)

    def parse(self, raw: str | None) -> int:
        """Parse a ``samples`` query value the way ``parseInt`` would.

        Leading digits win and trailing junk is ignored ("7abc" is 7). A
        ``0x`` prefix reads hex digits ("0x8" is 8). Input with no leading
        integer falls back to ``default_samples``. The result is always
        clamped to ``[min_samples, max_samples]``.
        """
        if raw is None:
            return self.default_samples
        match = _LEADING_INT.match(raw)
        if match is None:
            return self.default_samples
        sign, hex_digits, digits = match.groups()
        if hex_digits is not None:
            if not hex_digits:
                return self.default_samples
            digits, base = hex_digits.lstrip("0") or "0", 16
        else:
            digits, base = digits.lstrip("0") or "0", 10
        if len(digits) > 8:
            return self.min_samples if sign == "-" else self.max_samples
        return self.clamp(int(sign + digits, base))


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    enabled: bool = False
    url: str = "https://cloudflare-dns.com/dns-query"
    timeout_sec: float = 5.0


@dataclass(frozen=True, slots=True)
class ProbeConfig:
    target: TargetConfig = field(default_factory=TargetConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    report_measurement_point: bool = False
    ip_placeholder: str = IP_PLACEHOLDER

    @property
    def reports_url(self) -> bool:
        return self.target.reads_body

    @property
    def reports_response_size(self) -> bool:
        return self.target.reads_body

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ProbeConfig:
        env = os.environ if environ is None else environ
        base = revision_preset(env.get("EDGEPING_REVISION", "edge"))
        target = base.target
        if "EDGEPING_HOST" in env:
            target = replace(target, host=env["EDGEPING_HOST"])
        if "EDGEPING_PATH" in env:
            target = replace(target, path=env["EDGEPING_PATH"])
        if "EDGEPING_METHOD" in env:
            target = replace(target, method=_method(env["EDGEPING_METHOD"]))
        if "EDGEPING_TIMEOUT_SEC" in env:
            target = replace(target, timeout_sec=float(env["EDGEPING_TIMEOUT_SEC"]))
        sampling = SamplingConfig(
            default_samples=int(env.get("EDGEPING_DEFAULT_SAMPLES", base.sampling.default_samples)),
            min_samples=int(env.get("EDGEPING_MIN_SAMPLES", base.sampling.min_samples)),
            max_samples=int(env.get("EDGEPING_MAX_SAMPLES", base.sampling.max_samples)),
            inter_attempt_delay_sec=float(
                env.get("EDGEPING_DELAY_SEC", base.sampling.inter_attempt_delay_sec)
            ),
        )
        resolver = base.resolver
        if "EDGEPING_RESOLVER_URL" in env:
            resolver = replace(resolver, url=env["EDGEPING_RESOLVER_URL"])
        if "EDGEPING_RESOLVE_IP" in env:
            resolver = replace(resolver, enabled=_flag(env["EDGEPING_RESOLVE_IP"]))
        return replace(base, target=target, sampling=sampling, resolver=resolver)

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "target": {
                "host": self.target.host,
                "path": self.target.path,
                "method": self.target.method.value,
                "timeout_sec": self.target.timeout_sec,
            },
            "sampling": {
                "default_samples": self.sampling.default_samples,
                "min_samples": self.sampling.min_samples,
                "max_samples": self.sampling.max_samples,
                "inter_attempt_delay_sec": self.sampling.inter_attempt_delay_sec,
            },
            "resolver": {
                "enabled": self.resolver.enabled,
                "url": self.resolver.url,
            },
            "report_measurement_point": self.report_measurement_point,
        }


def root_head_probe() -> ProbeConfig:
    return ProbeConfig(target=TargetConfig(method=ProbeMethod.HEAD))


def oauth_get_probe() -> ProbeConfig:
    return ProbeConfig(
        target=TargetConfig(path=OAUTH_PATH, method=ProbeMethod.GET),
        resolver=ResolverConfig(enabled=True),
    )


def edge_get_probe() -> ProbeConfig:
    return replace(oauth_get_probe(), report_measurement_point=True)


REVISIONS = {
    "head": root_head_probe,
    "get": oauth_get_probe,
    "edge": edge_get_probe,
}


def revision_preset(name: str) -> ProbeConfig:
    try:
        factory = REVISIONS[name.strip().lower()]
    except KeyError:
        msg = f"Unsupported probe revision: {name!r}"
        raise ValueError(msg) from None
    return factory()


def _method(value: str) -> ProbeMethod:
    try:
        return ProbeMethod(value.strip().upper())
    except ValueError:
        msg = f"Unsupported probe method: {value!r}"
        raise ValueError(msg) from None


def _flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}
