"""Markdown deck compiler: document text in, :class:`Deck` out."""

from __future__ import annotations

import logging

from .frontmatter import attach_frontmatter, extract_document_meta
from .layout import detect_layout
from .models import NOTES_RE, Deck, Slide
from .renderer import MarkdownRenderer, Renderer
from .scanner import split_chunks, split_steps

logger = logging.getLogger(__name__)


def extract_notes(chunk: str) -> tuple[str, str | None]:
    """Strip a trailing ``<!-- ... -->`` comment from *chunk* as speaker notes.

    Only a comment at the very end counts; ``<!-- pause -->`` is left in
    place for step splitting. Returns (content, notes).
    """
    match = NOTES_RE.search(chunk)
    if match is None:
        return chunk, None
    notes = match.group(1).strip()
    if notes == "pause":
        return chunk, None
    return chunk[: match.start()].strip(), notes


def build_slide(
    index: int,
    chunk: str,
    frontmatter: dict[str, str],
    renderer: Renderer,
) -> Slide:
    content, notes = extract_notes(chunk)
    # Each step is rendered on its own so it stands alone as HTML.
    steps = [renderer.render(segment.strip()) for segment in split_steps(content)]
    notes_len = len(notes) if notes else 0
    logger.debug(
        "  Slide %d: steps=%d, notes=%d chars", index, len(steps), notes_len
    )
    return Slide(
        index=index,
        raw_content=content,
        notes=notes,
        frontmatter=dict(frontmatter),
        steps=steps,
    )


def parse_deck(markdown: str, renderer: Renderer | None = None) -> Deck:
    """Compile a markdown document into a :class:`Deck`.

    Slides are separated by ``---`` lines outside code fences. A document
    that opens with ``---`` carries global ``key: value`` metadata in its
    first block; a ``key: value`` block between slides applies to the
    slide after it. Never raises on any input and always yields at least
    one slide.
    """
    if renderer is None:
        renderer = MarkdownRenderer()

    # A byte order mark would hide a leading "---".
    markdown = markdown.removeprefix("\ufeff")
    chunks = split_chunks(markdown)
    meta, start = extract_document_meta(chunks)

    slides: list[Slide] = []
    for frontmatter, chunk in attach_frontmatter(chunks[start:]):
        slides.append(build_slide(len(slides), chunk, frontmatter, renderer))

    if not slides:
        logger.debug("No content chunks, rendering the whole document as one slide")
        slides.append(
            Slide(index=0, raw_content=markdown, notes=None, steps=[renderer.render(markdown)])
        )

    for slide in slides:
        if not slide.frontmatter.get("layout"):
            slide.frontmatter["layout"] = detect_layout(
                slide.raw_content, slide.index, len(slides)
            )

    logger.info("Parsed %d slide(s), title=%r", len(slides), meta["title"])
    return Deck(meta=meta, slides=slides)


def parse_file(path: str, renderer: Renderer | None = None) -> Deck:
    """Read a UTF-8 markdown file and compile it with :func:`parse_deck`."""
    with open(path, encoding="utf-8-sig") as f:
        raw = f.read()
    logger.debug("Read %d characters from %s", len(raw), path)
    return parse_deck(raw, renderer)
