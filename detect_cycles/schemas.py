"""
Cycle scan result schemas.

Pydantic model describing one backward scan over a line, plus the
reason the scan stopped.
"""

from enum import Enum

from pydantic import BaseModel, Field


class StopReason(str, Enum):
    """Why a backward scan ended."""
    DUPLICATE = "duplicate"  # Met the line's last token again, one repetition back
    LINE_START = "line_start"  # Consumed the whole line without a repeat


class CycleScan(BaseModel):
    """Outcome of scanning one line for its terminal cycle.

    tokens holds one repetition of the cycle in forward order.
    chars_scanned counts every character visited, including the
    token that triggered the stop.
    """

    tokens: list[str] = Field(default_factory=list)
    stop: StopReason = StopReason.LINE_START
    chars_scanned: int = 0

    @property
    def period(self) -> int:
        """Number of tokens in one repetition."""
        return len(self.tokens)

    @property
    def found_repeat(self) -> bool:
        return self.stop == StopReason.DUPLICATE
