"""
Terminal cycle extraction for token lines.

A line is assumed to be a non-repeating prefix followed by a cycle of
tokens repeated two or more times, running to the end of the line:

    z y a b c a b c a b c
        ^^^^^ ^^^^^ ^^^^^

Scanning backward from the end, the first token seen is the cycle's last
token. The next time that same token shows up, one full repetition has
been consumed, so the tokens collected up to that point (reversed) are
the cycle. The scan never looks at more than one repetition plus one
token, however many times the cycle repeats and however long the prefix.

Lines that break the assumption (no repeat at all) fall through to the
start of the line and return every token: best-effort, never an error.
"""

import logging
from typing import Iterable, Iterator, Sequence

from detect_cycles.config import TOKEN_SEPARATOR
from detect_cycles.schemas import CycleScan, StopReason

logger = logging.getLogger(__name__)


def scan_cycle(line: str) -> CycleScan:
    """
    Scan a line backward and collect one repetition of its terminal cycle.

    Runs of whitespace count as a single token boundary, so empty tokens
    never reach the comparison. The first token collected can't stop the
    scan because there is nothing to compare it with yet.

    Args:
        line: Text of one input record. Leading/trailing whitespace is
            tolerated but callers normally pass a trimmed line.

    Returns:
        CycleScan with the cycle tokens in original left-to-right order.

    Examples:
        >>> scan_cycle("z a b a b").tokens
        ['a', 'b']
        >>> scan_cycle("x x x x x").stop
        <StopReason.DUPLICATE: 'duplicate'>
    """
    # Both lists are built back to front and flipped once at the end.
    collected: list[str] = []
    chars: list[str] = []

    for index in range(len(line) - 1, -1, -1):
        char = line[index]
        if not char.isspace():
            chars.append(char)
            if index > 0:
                continue

        if not chars:
            continue

        value = "".join(reversed(chars))
        chars.clear()

        # collected[0] is the last token of the line
        if collected and value == collected[0]:
            collected.reverse()
            return CycleScan(
                tokens=collected,
                stop=StopReason.DUPLICATE,
                chars_scanned=len(line) - index,
            )
        collected.append(value)

    collected.reverse()
    if collected:
        logger.debug("No repeat found, returning all %d tokens", len(collected))
    return CycleScan(
        tokens=collected,
        stop=StopReason.LINE_START,
        chars_scanned=len(line),
    )


def extract_cycle(line: str) -> list[str]:
    """Return one repetition of the line's terminal cycle."""
    return scan_cycle(line).tokens


def format_cycle(tokens: Sequence[str]) -> str:
    return TOKEN_SEPARATOR.join(tokens)


def scan_lines(lines: Iterable[str]) -> Iterator[CycleScan]:
    """Scan each trimmed line in turn, one result per line, in order."""
    for line in lines:
        yield scan_cycle(line.strip())


def extract_cycles(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield the formatted cycle for every line.

    Strictly one output per input, in input order. Empty or
    whitespace-only lines yield an empty string.
    """
    for scan in scan_lines(lines):
        yield format_cycle(scan.tokens)
