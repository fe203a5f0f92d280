"""Fence-aware line scanning: document chunks and reveal steps.

Every split in the compiler goes through :class:`FenceScanner` so that a
``---`` or ``<!-- pause -->`` written inside a fenced code block is left
alone as example text.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Iterable, Iterator

from .models import DELIMITER, FENCE_MARKER, PAUSE_RE

logger = logging.getLogger(__name__)


class FenceState(enum.Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


def is_fence(line: str) -> bool:
    return line.strip().startswith(FENCE_MARKER)


class FenceScanner:
    """Two-state automaton tracking whether lines sit inside a code fence.

    A fence line toggles the state before it is reported, so the opening
    fence reads as ``INSIDE`` and the closing fence as ``OUTSIDE``.
    """

    def __init__(self) -> None:
        self.state = FenceState.OUTSIDE

    @property
    def inside(self) -> bool:
        return self.state is FenceState.INSIDE

    def feed(self, line: str) -> FenceState:
        if is_fence(line):
            self.state = (
                FenceState.OUTSIDE if self.inside else FenceState.INSIDE
            )
        return self.state

    def scan(self, lines: Iterable[str]) -> Iterator[tuple[str, FenceState]]:
        for line in lines:
            yield line, self.feed(line)


def split_outside_fences(text: str, is_boundary: Callable[[str], bool]) -> list[str]:
    """Split *text* on boundary lines that are not inside a code fence.

    Boundary lines are dropped. The trailing segment is always kept, even
    when empty, so the result has one more entry than there are boundaries.
    """
    segments: list[str] = []
    current: list[str] = []

    for line, state in FenceScanner().scan(text.split("\n")):
        if state is FenceState.OUTSIDE and is_boundary(line):
            segments.append("\n".join(current))
            current = []
        else:
            current.append(line)
    segments.append("\n".join(current))
    return segments


def is_delimiter(line: str) -> bool:
    return line.strip() == DELIMITER


def is_pause_marker(line: str) -> bool:
    return PAUSE_RE.match(line) is not None


def split_chunks(markdown: str) -> list[str]:
    """Split a whole document into top-level chunks on ``---`` lines."""
    chunks = split_outside_fences(markdown, is_delimiter)
    logger.debug("Split document into %d chunk(s)", len(chunks))
    return chunks


def split_steps(content: str) -> list[str]:
    """Split slide content into reveal segments on ``<!-- pause -->`` lines."""
    return split_outside_fences(content, is_pause_marker)
