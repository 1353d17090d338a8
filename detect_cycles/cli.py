"""CLI entry point for detect-cycles.

Reads a file of whitespace-separated tokens and prints, for each line, the
repeating cycle of tokens at the end of that line.

Entry point:
    detect-cycles <file> [--json] [--encoding ENC] [-v]
    python -m detect_cycles <file>
"""

import argparse
import json
import logging
import os
import sys
from typing import Iterator, Optional

from dotenv import load_dotenv

from detect_cycles.config import LOG_FORMAT, get_encoding, get_log_level
from detect_cycles.extractor import format_cycle, scan_lines
from detect_cycles.schemas import CycleScan

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────
# ARGUMENT PARSING
# ─────────────────────────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="detect-cycles",
        description="Print the repeating cycle at the end of each input line.",
    )
    parser.add_argument("path", help="Input file, one token sequence per line")
    parser.add_argument(
        "--json", action="store_true", dest="json_output",
        help="One JSON object per line (cycle, period, stop reason)",
    )
    parser.add_argument(
        "--encoding", default=None,
        help="Input file encoding (default: $DETECT_CYCLES_ENCODING or utf-8)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


# ─────────────────────────────────────────────────────────────────────
# INPUT
# ─────────────────────────────────────────────────────────────────────


def iter_lines(path: str, encoding: Optional[str] = None) -> Iterator[str]:
    """Yield the file's lines lazily; the file stays open until exhausted."""
    encoding = get_encoding(encoding)
    logger.debug("Opening %s (%s)", path, encoding)
    with open(path, "r", encoding=encoding) as f:
        yield from f


# ─────────────────────────────────────────────────────────────────────
# COMMANDS
# ─────────────────────────────────────────────────────────────────────


def _render(scan: CycleScan, number: int, json_output: bool) -> str:
    """Format one scan result as an output line."""
    if json_output:
        record = {
            "line": number,
            "cycle": scan.tokens,
            "period": scan.period,
            "stop": scan.stop.value,
        }
        return json.dumps(record) + "\n"
    return format_cycle(scan.tokens) + "\n"


def _silence_stdout() -> None:
    """Point stdout at devnull so the exit-time flush can't raise again."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        # In-memory stream, nothing to redirect
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def _cmd_extract(
    path: str,
    json_output: bool = False,
    encoding: Optional[str] = None,
) -> int:
    """Print one cycle per input line. Returns exit code.

    Input failures and output failures are reported separately: a reader
    that goes away (e.g. `| head -1`) ends the run quietly.
    """
    scans = scan_lines(iter_lines(path, encoding))
    count = 0

    while True:
        try:
            scan = next(scans, None)
        except FileNotFoundError:
            print(f"Error: input file not found: {path}", file=sys.stderr)
            return 1
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {path}: {e}", file=sys.stderr)
            return 1
        if scan is None:
            break

        count += 1
        try:
            sys.stdout.write(_render(scan, count, json_output))
            # Earlier lines must survive a later read failure
            sys.stdout.flush()
        except BrokenPipeError:
            logger.debug("Output closed after %d lines", count - 1)
            _silence_stdout()
            return 1
        except OSError as e:
            print(f"Error: cannot write output: {e}", file=sys.stderr)
            return 1

    logger.debug("Processed %d lines from %s", count, path)
    return 0


# ─────────────────────────────────────────────────────────────────────
# ENTRY POINT
# ─────────────────────────────────────────────────────────────────────


def main():
    parser = _build_parser()
    args = parser.parse_args()

    # Load env before reading any setting from it
    load_dotenv()

    # Logging
    level = get_log_level(args.verbose)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)

    code = _cmd_extract(
        path=args.path,
        json_output=args.json_output,
        encoding=args.encoding,
    )
    sys.exit(code)


if __name__ == "__main__":
    main()
