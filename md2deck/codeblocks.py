"""Fenced code block output: line emphasis and diagram passthrough."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from markdown_it.common.utils import escapeHtml

DIAGRAM_LANGUAGE = "mermaid"

# ```python {2,4-6}
_LINE_SPEC_RE = re.compile(r"^(\S*)\s*\{(.+?)\}\s*$")
_RANGE_RE = re.compile(r"^(\d+)-(\d+)$")
_NUMBER_RE = re.compile(r"^\d+")


@dataclass(frozen=True)
class LineRanges:
    """Inclusive 1-based line ranges, kept as bounds rather than expanded."""

    ranges: tuple[tuple[int, int], ...] = ()

    def __contains__(self, number: int) -> bool:
        return any(start <= number <= end for start, end in self.ranges)

    def __bool__(self) -> bool:
        return bool(self.ranges)


def parse_line_spec(spec: str) -> LineRanges:
    """Parse ``2,4-6`` into ranges covering 2, 4, 5 and 6. Unreadable parts are skipped."""
    ranges: list[tuple[int, int]] = []
    for part in spec.split(","):
        part = part.strip()
        range_match = _RANGE_RE.match(part)
        if range_match:
            start, end = int(range_match.group(1)), int(range_match.group(2))
            if start <= end:
                ranges.append((start, end))
            continue
        number_match = _NUMBER_RE.match(part)
        if number_match:
            number = int(number_match.group(0))
            ranges.append((number, number))
    return LineRanges(tuple(ranges))


def split_info(info: str) -> tuple[str, LineRanges]:
    """Split a fence info string into (language, highlighted line ranges)."""
    info = info.strip()
    spec_match = _LINE_SPEC_RE.match(info)
    if spec_match:
        return spec_match.group(1), parse_line_spec(spec_match.group(2))
    return (info.split()[0] if info else ""), LineRanges()


def mark_lines(highlighted: str, lines: LineRanges) -> str:
    """Wrap each output line in a span, flagging the 1-based numbers in *lines*."""
    wrapped = []
    for number, line in enumerate(highlighted.split("\n"), start=1):
        cls = "code-line line-highlight" if number in lines else "code-line"
        wrapped.append(f'<span class="{cls}">{line}</span>')
    return "\n".join(wrapped)


def render_code_block(
    info: str,
    code: str,
    highlight: Callable[[str, str], str],
    diagram_language: str = DIAGRAM_LANGUAGE,
) -> str:
    code = code.rstrip("\n")
    lang, lines = split_info(info)

    # Diagrams are drawn by the presentation layer; ship the source inert.
    if lang == diagram_language:
        return f'<div class="{diagram_language}">{escapeHtml(code)}</div>'

    highlighted = highlight(code, lang)
    if lines:
        highlighted = mark_lines(highlighted, lines)

    lang_class = f"highlight language-{escapeHtml(lang)}" if lang else "highlight"
    return f'<pre><code class="{lang_class}">{highlighted}</code></pre>'
