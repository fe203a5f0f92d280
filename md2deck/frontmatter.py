"""Document-level and per-slide ``key: value`` metadata."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .models import META_KEY_RE, META_LINE_RE

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"
DEFAULT_THEME = "default"


def is_metadata_chunk(chunk: str) -> bool:
    """Return True when every non-blank line of *chunk* looks like ``key: value``.

    A chunk with no non-blank lines is never metadata. Prose in which every
    line happens to carry a leading ``word:`` label is accepted as metadata
    too; there is no way to tell the two apart from the text alone.
    """
    lines = [line for line in chunk.split("\n") if line.strip()]
    if not lines:
        return False
    return all(META_KEY_RE.match(line) for line in lines)


def parse_metadata(chunk: str) -> dict[str, str]:
    """Parse ``key: value`` lines, ignoring anything that does not match."""
    result: dict[str, str] = {}
    for line in chunk.split("\n"):
        match = META_LINE_RE.match(line)
        if match:
            result[match.group(1)] = match.group(2).strip()
    return result


def build_document_meta(raw: dict[str, str]) -> dict[str, str]:
    meta = dict(raw)
    meta["title"] = raw.get("title") or DEFAULT_TITLE
    meta["theme"] = raw.get("theme") or DEFAULT_THEME
    return meta


def extract_document_meta(chunks: list[str]) -> tuple[dict[str, str], int]:
    """Pick out the global metadata block, if the document opens with one.

    A document that starts with ``---`` yields a blank first chunk; when
    there are more than two chunks, the second one is the global metadata.

    Returns (meta, index of the first chunk holding slides).
    """
    if len(chunks) > 2 and chunks[0].strip() == "":
        raw = parse_metadata(chunks[1])
        logger.debug("Global metadata keys: %s", sorted(raw))
        return build_document_meta(raw), 2
    return build_document_meta({}), 0


def attach_frontmatter(chunks: Iterable[str]) -> Iterator[tuple[dict[str, str], str]]:
    """Pair every content chunk with the metadata chunk that preceded it.

    Chunks are trimmed and blank ones skipped. A metadata chunk is held
    until the next content chunk; a second metadata chunk in a row replaces
    the first.
    """
    pending: dict[str, str] | None = None
    for chunk in chunks:
        chunk = chunk.strip()
        if not chunk:
            continue
        if is_metadata_chunk(chunk):
            if pending is not None:
                logger.debug("Replacing pending frontmatter %s", sorted(pending))
            pending = parse_metadata(chunk)
            continue
        yield (pending if pending is not None else {}), chunk
        pending = None
