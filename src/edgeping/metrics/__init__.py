from __future__ import annotations

from edgeping.metrics.aggregator import aggregate_samples, round_half_up
from edgeping.metrics.models import AggregateMetrics, SampleResult

__all__ = ["AggregateMetrics", "SampleResult", "aggregate_samples", "round_half_up"]
