"""
detect-cycles: print the repeating cycle of tokens that ends each line.

Backward-scan cycle extraction plus a thin file-reading CLI.
"""

from detect_cycles.extractor import (
    extract_cycle,
    extract_cycles,
    format_cycle,
    scan_cycle,
    scan_lines,
)
from detect_cycles.schemas import CycleScan, StopReason

__all__ = [
    "extract_cycle",
    "extract_cycles",
    "format_cycle",
    "scan_cycle",
    "scan_lines",
    "CycleScan",
    "StopReason",
]
