from __future__ import annotations

from edgeping.metrics import SampleResult, aggregate_samples
from edgeping.probe import ProbeReport
from edgeping.ui.frames import COLUMNS, results_frame


def test_results_frame() -> None:
    results = [
        SampleResult(1, True, 12.346, 200, 64, None),
        SampleResult(2, False, 10000.0, None, None, "timed out"),
    ]
    report = ProbeReport(
        target="dev.opendrive.com",
        url=None,
        ip=None,
        timestamp="2024-01-01T00:00:00.000Z",
        measurement_point=None,
        metrics=aggregate_samples(2, results),
        results=results,
    )
    frame = results_frame(report)
    assert list(frame.columns) == COLUMNS + ["outcome"]
    assert frame["attempt"].tolist() == [1, 2]
    assert frame["latency_ms"].tolist() == [12.35, 10000.0]
    assert frame["outcome"].tolist() == ["success", "failure"]
