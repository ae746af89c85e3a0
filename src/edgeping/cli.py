from __future__ import annotations

import argparse
import asyncio
import json

from edgeping.config import REVISIONS, configure_logging, revision_preset
from edgeping.probe import run_probe


def main() -> None:
    parser = argparse.ArgumentParser(description="Edge latency probe")
    parser.add_argument("--samples", default=None, help="Number of samples (clamped to 1-10)")
    parser.add_argument("--revision", choices=sorted(REVISIONS), default="edge")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--indent", type=int, default=2)

    args = parser.parse_args()

    configure_logging(args.log_level)
    config = revision_preset(args.revision)
    samples = config.sampling.parse(args.samples)
    report = asyncio.run(run_probe(config, samples))
    print(json.dumps(report.to_payload(), indent=args.indent))


if __name__ == "__main__":
    main()
