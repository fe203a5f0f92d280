"""Structural fingerprint of a slide's markdown, used to pick a layout."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .models import PAUSE_RE
from .scanner import FenceScanner, FenceState, is_fence

_HEADING_RE = re.compile(r"^#{1,6} ")
_TABLE_ROW_RE = re.compile(r"^\|.+\|")
_LIST_ITEM_RE = re.compile(r"^[-*+] |^\d+\. ")
_BLOCKQUOTE_RE = re.compile(r"^> ")


def _text_length(text: str) -> int:
    """Length in UTF-16 code units, so astral characters such as emoji count twice."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


@dataclass
class ContentProfile:
    headings: int = 0
    paragraph_blocks: int = 0
    code_blocks: int = 0
    code_block_lines: int = 0
    list_items: int = 0
    blockquote_blocks: int = 0
    table_blocks: int = 0
    text_length: int = 0

    @property
    def total_blocks(self) -> int:
        """Paragraphs, code, quotes and tables, plus one unit for any list."""
        return (
            self.paragraph_blocks
            + self.code_blocks
            + (1 if self.list_items > 0 else 0)
            + self.blockquote_blocks
            + self.table_blocks
        )

    @property
    def has_heading(self) -> bool:
        return self.headings > 0


def analyze_content(markdown: str) -> ContentProfile:
    """Count semantic blocks in *markdown* rather than raw lines.

    A fenced code block counts once however long it is. Runs of adjacent
    table rows or quote lines count as one block; a blank line ends the run.
    """
    profile = ContentProfile()
    scanner = FenceScanner()
    in_quote = in_table = False

    for line in markdown.split("\n"):
        trimmed = line.strip()

        if is_fence(trimmed):
            if scanner.feed(trimmed) is FenceState.INSIDE:
                profile.code_blocks += 1
                profile.code_block_lines = 0
            continue
        if scanner.inside:
            profile.code_block_lines += 1
            continue

        if not trimmed:
            in_quote = in_table = False
            continue

        if PAUSE_RE.match(trimmed):
            continue

        if _HEADING_RE.match(trimmed):
            profile.headings += 1
            continue

        if _TABLE_ROW_RE.match(trimmed):
            if not in_table:
                profile.table_blocks += 1
                in_table = True
            continue

        if _LIST_ITEM_RE.match(trimmed):
            profile.list_items += 1
            continue

        if _BLOCKQUOTE_RE.match(trimmed):
            if not in_quote:
                profile.blockquote_blocks += 1
                in_quote = True
            profile.text_length += _text_length(trimmed)
            continue

        profile.paragraph_blocks += 1
        profile.text_length += _text_length(trimmed)

    return profile
