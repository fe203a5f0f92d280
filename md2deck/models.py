"""Shared data models and parsing constants."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

# Layout names assigned by the classifier.
LAYOUT_CENTER = "center"
LAYOUT_COVER = "cover"
LAYOUT_DEFAULT = "default"

# Slide delimiter: a line that is exactly "---" once trimmed.
DELIMITER = "---"

# Opening or closing line of a fenced code block.
FENCE_MARKER = "```"

# Reveal marker on its own line: <!-- pause -->
PAUSE_RE = re.compile(r"^\s*<!--\s*pause\s*-->\s*$")

# Trailing HTML comment at the very end of a slide; may span lines but must
# not contain another comment opener.
NOTES_RE = re.compile(r"\n?<!--((?:(?!<!--).)*?)-->\s*\Z", re.DOTALL)

# Metadata line: key: value
META_LINE_RE = re.compile(r"^([\w-]+)\s*:\s*(.+)", re.ASCII)
META_KEY_RE = re.compile(r"^[\w-]+\s*:", re.ASCII)


@dataclass
class Slide:
    index: int
    raw_content: str
    notes: str | None
    frontmatter: dict[str, str] = field(default_factory=dict)
    steps: list[str] = field(default_factory=list)

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def rendered_full(self) -> str:
        """The fully revealed slide: every step fragment in order."""
        return "".join(self.steps)

    @property
    def layout(self) -> str | None:
        return self.frontmatter.get("layout")

    def to_dict(self) -> dict:
        data = {
            "index": self.index,
            "content": self.rendered_full,
            "rawMarkdown": self.raw_content,
            "frontmatter": dict(self.frontmatter),
            "steps": list(self.steps),
            "totalSteps": self.total_steps,
        }
        if self.notes is not None:
            data["notes"] = self.notes
        return data


@dataclass
class Deck:
    meta: Mapping[str, str]
    slides: list[Slide] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.meta = MappingProxyType(dict(self.meta))

    def __len__(self) -> int:
        return len(self.slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    @property
    def title(self) -> str:
        return self.meta["title"]

    @property
    def theme(self) -> str:
        return self.meta["theme"]

    @property
    def slide_count(self) -> int:
        return len(self.slides)

    def to_dict(self, live: bool = False) -> dict:
        """Convert to the payload handed to the presentation layer."""
        return {
            "meta": dict(self.meta),
            "slides": [slide.to_dict() for slide in self.slides],
            "live": live,
        }

    def to_json(self, live: bool = False, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(live=live), indent=indent, ensure_ascii=False)
