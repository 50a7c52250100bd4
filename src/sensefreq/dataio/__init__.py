"""Data input/output helpers.

:mod:`recording_csv` reads and writes ``timestamp_ms,x,y,z`` recordings and
exports per-bin magnitude spectra.
"""
