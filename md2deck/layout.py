"""Heuristic layout detection for slides that don't declare one."""

from __future__ import annotations

import logging

from .analyzer import ContentProfile, analyze_content
from .models import LAYOUT_CENTER, LAYOUT_COVER, LAYOUT_DEFAULT

logger = logging.getLogger(__name__)


def classify_layout(profile: ContentProfile, index: int, total: int) -> str:
    """Pick a layout from a content profile and the slide's position.

    Rules, first match wins:
      1. "center"  - nothing but blank lines or markers
      2. "cover"   - first or last slide, heading plus light content, no table
      3. "center"  - only blockquotes
      4. "center"  - heading with at most two short blocks and a short list
      5. "center"  - heading alone
      6. "default" - everything else
    """
    if not profile.has_heading and profile.total_blocks == 0:
        return LAYOUT_CENTER

    is_edge = index == 0 or index == total - 1
    if (
        is_edge
        and profile.has_heading
        and profile.total_blocks <= 3
        and profile.text_length < 200
        and profile.table_blocks == 0
    ):
        return LAYOUT_COVER

    if (
        profile.blockquote_blocks > 0
        and profile.paragraph_blocks == 0
        and profile.code_blocks == 0
        and profile.list_items == 0
        and profile.table_blocks == 0
    ):
        return LAYOUT_CENTER

    if (
        profile.has_heading
        and profile.total_blocks <= 2
        and profile.text_length < 200
        and profile.table_blocks == 0
        and profile.list_items <= 3
    ):
        return LAYOUT_CENTER

    if profile.has_heading and profile.total_blocks == 0:
        return LAYOUT_CENTER

    return LAYOUT_DEFAULT


def detect_layout(markdown: str, index: int, total: int) -> str:
    layout = classify_layout(analyze_content(markdown), index, total)
    logger.debug("  Slide %d: inferred layout %s", index, layout)
    return layout
