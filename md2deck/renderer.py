"""Markdown to HTML rendering with markdown-it-py and Pygments."""

from __future__ import annotations

import logging
from typing import Protocol

from markdown_it import MarkdownIt
from markdown_it.common.utils import unescapeAll
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from .codeblocks import DIAGRAM_LANGUAGE, render_code_block

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, text: str) -> str: ...

    def highlight(self, code: str, lang: str) -> str: ...


class MarkdownRenderer:
    """Default renderer: CommonMark plus tables, with highlighted code fences."""

    def __init__(self, html: bool = True, diagram_language: str = DIAGRAM_LANGUAGE) -> None:
        self.diagram_language = diagram_language
        self._formatter = HtmlFormatter(nowrap=True)
        self._md = MarkdownIt("commonmark", {"html": html}).enable(["table", "strikethrough"])

        def fence(renderer, tokens, idx, options, env):
            token = tokens[idx]
            info = unescapeAll(token.info) if token.info else ""
            return render_code_block(
                info, token.content, self.highlight, self.diagram_language
            ) + "\n"

        self._md.add_render_rule("fence", fence)

    def render(self, text: str) -> str:
        return self._md.render(text)

    def highlight(self, code: str, lang: str) -> str:
        """Highlight *code*; an unknown or missing *lang* is guessed from the code."""
        lexer = None
        if lang:
            try:
                lexer = get_lexer_by_name(lang, stripnl=False)
            except ClassNotFound:
                logger.debug("No lexer for %r, guessing from content", lang)
        if lexer is None:
            try:
                lexer = guess_lexer(code, stripnl=False)
            except ClassNotFound:
                lexer = TextLexer(stripnl=False)
        return pygments_highlight(code, lexer, self._formatter).rstrip("\n")
