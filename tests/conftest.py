"""Shared fixtures for md2deck tests."""

from __future__ import annotations

import textwrap

import pytest


# ---------------------------------------------------------------------------
# Decks (strings) used across multiple test modules
# ---------------------------------------------------------------------------

MINIMAL_DECK = textwrap.dedent("""\
    ---
    title: My Talk
    theme: dark
    ---

    # Slide One

    <!-- Hello world. -->

    ---

    # Slide Two
    """)

DECK_WITH_STEPS = textwrap.dedent("""\
    # Agenda

    - First point

    <!-- pause -->

    - Second point

    <!-- pause -->

    - Third point
    """)

DECK_WITH_SLIDE_FRONTMATTER = textwrap.dedent("""\
    ---
    title: Frontmatter
    ---

    # Intro

    ---
    layout: two-cols
    bg: black
    ---

    # Explicit layout

    Body text.

    ---

    # Closing
    """)


class FakeRenderer:
    """Renderer stand-in that wraps text in a marker and records calls."""

    def __init__(self) -> None:
        self.rendered: list[str] = []

    def render(self, text: str) -> str:
        self.rendered.append(text)
        return f"<r>{text}</r>"

    def highlight(self, code: str, lang: str) -> str:
        return code


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def tmp_deck(tmp_path):
    """Write MINIMAL_DECK to a temp file and return its path."""
    p = tmp_path / "deck.md"
    p.write_text(MINIMAL_DECK, encoding="utf-8")
    return p
