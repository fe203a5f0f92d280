"""Tests for md2deck.analyzer — block counting."""

from __future__ import annotations

import textwrap

from md2deck.analyzer import analyze_content


class TestHeadingsAndParagraphs:
    def test_heading_not_a_block(self):
        profile = analyze_content("# Title")
        assert profile.headings == 1
        assert profile.total_blocks == 0
        assert profile.text_length == 0

    def test_heading_needs_space(self):
        profile = analyze_content("#hashtag")
        assert profile.headings == 0
        assert profile.paragraph_blocks == 1

    def test_seven_hashes_is_paragraph(self):
        assert analyze_content("####### deep").headings == 0

    def test_each_paragraph_line_counts(self):
        profile = analyze_content("one\ntwo\n\nthree")
        assert profile.paragraph_blocks == 3
        assert profile.text_length == len("one") + len("two") + len("three")

    def test_text_length_uses_trimmed_lines(self):
        assert analyze_content("   hello   ").text_length == 5

    def test_text_length_counts_utf16_units(self):
        assert analyze_content("caf\u00e9 \U0001F600").text_length == 7

    def test_lone_surrogate_does_not_raise(self):
        assert analyze_content("a\ud800b").text_length == 3

    def test_empty(self):
        profile = analyze_content("")
        assert profile.total_blocks == 0
        assert not profile.has_heading


class TestCodeBlocks:
    def test_fenced_block_counts_once(self):
        md = textwrap.dedent("""\
            ```python
            a = 1
            b = 2
            c = 3
            ```""")
        profile = analyze_content(md)
        assert profile.code_blocks == 1
        assert profile.code_block_lines == 3
        assert profile.total_blocks == 1
        assert profile.paragraph_blocks == 0

    def test_code_interior_not_classified(self):
        md = "```\n# not a heading\n- not a list\n> not a quote\n```"
        profile = analyze_content(md)
        assert profile.headings == 0
        assert profile.list_items == 0
        assert profile.blockquote_blocks == 0
        assert profile.code_blocks == 1

    def test_two_fences(self):
        assert analyze_content("```\na\n```\n\n```\nb\n```").code_blocks == 2


class TestLists:
    def test_items_counted_individually(self):
        profile = analyze_content("- a\n- b\n* c\n+ d\n1. e")
        assert profile.list_items == 5

    def test_list_contributes_one_block(self):
        profile = analyze_content("- a\n- b\n\n- c\n\n1. d")
        assert profile.list_items == 4
        assert profile.total_blocks == 1

    def test_list_item_text_not_accumulated(self):
        assert analyze_content("- some item").text_length == 0


class TestQuotesAndTables:
    def test_adjacent_quote_lines_one_block(self):
        profile = analyze_content("> a\n> b")
        assert profile.blockquote_blocks == 1
        assert profile.text_length == len("> a") + len("> b")

    def test_blank_line_ends_quote(self):
        assert analyze_content("> a\n\n> b").blockquote_blocks == 2

    def test_table_rows_one_block(self):
        profile = analyze_content("| a | b |\n|---|---|\n| 1 | 2 |")
        assert profile.table_blocks == 1
        assert profile.total_blocks == 1

    def test_blank_line_ends_table(self):
        assert analyze_content("| a |\n\n| b |").table_blocks == 2

    def test_heading_does_not_end_table_run(self):
        assert analyze_content("| a |\n# H\n| b |").table_blocks == 1


class TestPauseMarkers:
    def test_marker_ignored(self):
        profile = analyze_content("one\n\n<!-- pause -->\n\ntwo")
        assert profile.paragraph_blocks == 2
        assert profile.text_length == 6

    def test_other_comment_is_paragraph(self):
        assert analyze_content("<!-- note -->").paragraph_blocks == 1


class TestTotalBlocks:
    def test_mixed_content(self):
        md = textwrap.dedent("""\
            # Title

            Intro paragraph.

            - a
            - b

            > quote

            | t |

            ```
            code
            ```
            """)
        profile = analyze_content(md)
        assert profile.headings == 1
        assert profile.paragraph_blocks == 1
        assert profile.list_items == 2
        assert profile.blockquote_blocks == 1
        assert profile.table_blocks == 1
        assert profile.code_blocks == 1
        assert profile.total_blocks == 5
