from __future__ import annotations

import asyncio

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from edgeping.config import REVISIONS, ProbeConfig, revision_preset
from edgeping.probe import ProbeReport, run_probe
from edgeping.ui.frames import results_frame


st.set_page_config(page_title="edgeping", layout="wide")


def _render_header() -> None:
    st.title("edgeping")
    st.caption("Round-trip latency and reliability from this host to a fixed target.")


def _build_config() -> tuple[ProbeConfig, int]:
    with st.sidebar:
        st.header("Probe")
        revision = st.selectbox("Revision", sorted(REVISIONS), index=sorted(REVISIONS).index("edge"))
        config = revision_preset(revision)
        samples = st.slider(
            "Samples",
            config.sampling.min_samples,
            config.sampling.max_samples,
            config.sampling.default_samples,
        )
    return config, samples


def _run_button(config: ProbeConfig, samples: int) -> None:
    if st.sidebar.button("Run probe"):
        with st.spinner(f"Probing {config.target.url}..."):
            report = asyncio.run(run_probe(config, samples))
        st.session_state["report"] = report


def _render_metrics(report: ProbeReport) -> None:
    metrics = report.metrics
    cols = st.columns(6)
    cols[0].metric("Min latency", f"{metrics.min_latency_ms:.2f} ms")
    cols[1].metric("Avg latency", f"{metrics.avg_latency_ms:.2f} ms")
    cols[2].metric("Max latency", f"{metrics.max_latency_ms:.2f} ms")
    cols[3].metric("Jitter", f"{metrics.jitter_ms:.2f} ms")
    cols[4].metric("Packet loss", f"{metrics.packet_loss_pct:.2f} %")
    if report.include_response_size:
        cols[5].metric("Avg size", f"{metrics.avg_response_size_bytes} B")


def _plot_attempts(frame: pd.DataFrame) -> go.Figure:
    if frame.empty:
        return go.Figure()
    fig = px.bar(
        frame,
        x="attempt",
        y="latency_ms",
        color="outcome",
        color_discrete_map={"success": "#2ca02c", "failure": "#d62728"},
        title="Latency per attempt",
    )
    fig.update_layout(height=300, margin=dict(l=10, r=10, t=30, b=10))
    return fig


def main() -> None:
    _render_header()
    config, samples = _build_config()
    _run_button(config, samples)
    report: ProbeReport | None = st.session_state.get("report")
    if report is None:
        st.info("Run a probe to see results.")
        return
    st.subheader(f"{report.target} ({report.ip})")
    st.caption(report.timestamp)
    if report.measurement_point is not None:
        st.caption(
            f"Measured from {report.measurement_point.datacenter or 'unknown datacenter'}"
            f" / {report.measurement_point.worker_location or 'unknown location'}"
        )
    _render_metrics(report)
    frame = results_frame(report)
    st.plotly_chart(_plot_attempts(frame), use_container_width=True)
    st.dataframe(frame, use_container_width=True)


if __name__ == "__main__":
    main()
