"""Load and save recordings (``timestamp_ms,x,y,z``) and export spectra."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from ..analysis.pipeline import AnalysisResult
from ..core.models import AXES, RecordingBuffer, Sample

RECORDING_HEADER = ("timestamp_ms", "x", "y", "z")
TIMESTAMP_ALIASES = ("timestamp_ms", "t_ms", "timestamp")


def _column_index(header: List[str], path: Path) -> Dict[str, int]:
    """Map the required column names onto positions in ``header``."""
    normalized = [h.strip().lower() for h in header]
    index: Dict[str, int] = {}
    for alias in TIMESTAMP_ALIASES:
        if alias in normalized:
            index["timestamp_ms"] = normalized.index(alias)
            break
    for axis in AXES:
        if axis in normalized:
            index[axis] = normalized.index(axis)
    missing = [name for name in RECORDING_HEADER if name not in index]
    if missing:
        raise ValueError(f"{path} is missing column(s): {', '.join(missing)}")
    return index


def load_recording_csv(path: Path) -> RecordingBuffer:
    """
    Load a recording from a CSV file with a header row.

    Column order is free; ``t_ms`` and ``timestamp`` are accepted in place of
    ``timestamp_ms``. Blank lines are skipped.
    """
    path = Path(path)
    with path.open("r", newline="", encoding="utf-8") as fh:
        reader = csv.reader(fh)
        try:
            header = next(reader)
        except StopIteration:
            raise ValueError(f"{path} is empty") from None
        index = _column_index(header, path)

        samples: List[Sample] = []
        for line_no, row in enumerate(reader, start=2):
            if not row or not any(cell.strip() for cell in row):
                continue
            try:
                values = {name: float(row[pos]) for name, pos in index.items()}
            except (IndexError, ValueError) as exc:
                raise ValueError(f"Invalid row at line {line_no} in {path}: {exc}") from exc
            samples.append(Sample(**values))

    return RecordingBuffer.from_samples(samples)


def _write_table(path: Path, header: Sequence[str], rows: Iterable[Sequence[float]]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(header)
        writer.writerows(rows)


def write_recording_csv(path: Path, buffer: RecordingBuffer) -> None:
    """Write ``buffer`` in the layout :func:`load_recording_csv` reads back."""
    _write_table(path, RECORDING_HEADER, ((s.timestamp_ms, s.x, s.y, s.z) for s in buffer))


def write_spectrum_csv(path: Path, result: AnalysisResult) -> None:
    """Write ``frequency_hz,x,y,z`` magnitude rows for every spectrum bin."""
    freqs = result.x.frequencies
    rows = zip(
        freqs.tolist(),
        result.x.magnitudes.tolist(),
        result.y.magnitudes.tolist(),
        result.z.magnitudes.tolist(),
    )
    _write_table(path, ("frequency_hz",) + AXES, rows)
