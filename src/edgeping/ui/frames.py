from __future__ import annotations

import pandas as pd

from edgeping.probe import ProbeReport

COLUMNS = ["attempt", "success", "latency_ms", "status_code", "response_size_bytes", "error"]


def results_frame(report: ProbeReport) -> pd.DataFrame:
    rows = [
        {
            "attempt": r.attempt,
            "success": r.success,
            "latency_ms": round(r.latency_ms, 2),
            "status_code": r.status_code,
            "response_size_bytes": r.response_size_bytes,
            "error": r.error,
        }
        for r in report.results
    ]
    frame = pd.DataFrame(rows, columns=COLUMNS)
    frame["outcome"] = frame["success"].map({True: "success", False: "failure"})
    return frame
