#!/usr/bin/env python3
"""
Command-line front end for the SenseFreq analysis pipeline.

Reads a recording CSV (``timestamp_ms,x,y,z``), prints the effective sample
rate and the dominant frequencies of each axis, and optionally writes the full
magnitude spectra to a CSV file::

    sensefreq-analyze recording.csv --top-k 5 --spectrum-out spectrum.csv
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Sequence

from ..analysis.errors import AnalysisError
from ..analysis.pipeline import AnalysisResult, analyze_recording
from ..analysis.peaks import format_peaks
from ..analysis.spectrum import bin_width_hz
from ..config.analysis import FREQUENCY_MAPPINGS, AnalysisConfig, load_config
from ..dataio.recording_csv import load_recording_csv, write_spectrum_csv

logger = logging.getLogger(__name__)

EXIT_ANALYSIS_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sensefreq-analyze",
        description="Estimate dominant vibration frequencies of a 3-axis recording.",
    )
    parser.add_argument("recording", type=Path, help="Recording CSV with timestamp_ms,x,y,z columns.")
    parser.add_argument("-c", "--config", type=Path, help="YAML file with an 'analysis' block.")
    parser.add_argument("-k", "--top-k", type=int, help="Number of dominant peaks per axis.")
    parser.add_argument("--min-samples", type=int, help="Minimum samples required for analysis.")
    parser.add_argument(
        "--mapping",
        choices=FREQUENCY_MAPPINGS,
        help="Frequency-axis convention (default: conventional).",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Analyse the three axes on a thread pool.",
    )
    parser.add_argument("-o", "--spectrum-out", type=Path, help="Write magnitude spectra to this CSV.")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _resolve_config(args: argparse.Namespace) -> AnalysisConfig:
    cfg = load_config(args.config)
    overrides: Dict[str, Any] = {}
    if args.top_k is not None:
        overrides["top_k"] = args.top_k
    if args.min_samples is not None:
        overrides["min_samples"] = args.min_samples
    if args.mapping is not None:
        overrides["frequency_mapping"] = args.mapping
    if args.parallel:
        overrides["parallel_axes"] = True
    return replace(cfg, **overrides).sanitized()


def result_to_json(result: AnalysisResult) -> Dict[str, Any]:
    summary = result.summary
    payload: Dict[str, Any] = {
        "sample_count": summary.sample_count,
        "duration_s": summary.duration_s,
        "sample_rate_hz": summary.sample_rate_hz,
        "padded_length": result.padded_length,
        "axes": {},
    }
    for spec in result.axes():
        payload["axes"][spec.axis] = {
            "dominant": [
                {"frequency_hz": p.frequency_hz, "magnitude": p.magnitude} for p in spec.dominant
            ],
            "insufficient_peaks": spec.insufficient_peaks,
            "error": str(spec.error) if spec.error is not None else None,
        }
    return payload


def format_report(result: AnalysisResult, mapping: str = "conventional") -> str:
    summary = result.summary
    width = bin_width_hz(summary.sample_rate_hz, result.padded_length, mapping=mapping)
    lines = [
        f"Samples: {summary.sample_count}",
        f"Duration: {summary.duration_s:.2f} s",
        f"Rate: {summary.sample_rate_hz:.2f} Hz",
        f"FFT length: {result.padded_length} (bin width {width:.3f} Hz)",
        "Dominant frequencies:",
    ]
    for spec in result.axes():
        suffix = " [spectrum failed]" if spec.error is not None else ""
        lines.append(f"  {spec.axis.upper()}-axis: {format_peaks(spec.dominant)}{suffix}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    recording_path = args.recording.expanduser()
    if not recording_path.exists():
        parser.error(f"Recording file not found: {recording_path}")

    try:
        cfg = _resolve_config(args)
        buffer = load_recording_csv(recording_path)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return EXIT_ANALYSIS_ERROR

    try:
        result = analyze_recording(buffer, cfg)
    except AnalysisError as exc:
        logger.error("Analysis skipped: %s", exc)
        return EXIT_ANALYSIS_ERROR

    if args.spectrum_out is not None:
        try:
            write_spectrum_csv(args.spectrum_out, result)
        except OSError as exc:
            logger.error("Cannot write spectrum to %s: %s", args.spectrum_out, exc)
            return EXIT_ANALYSIS_ERROR
        logger.info("Spectrum written to %s", args.spectrum_out)

    if args.json:
        print(json.dumps(result_to_json(result), indent=2))
    else:
        print(format_report(result, cfg.frequency_mapping))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
