"""Tests for the main section line classifier."""

import pytest

from athn.core import ir
from athn.core.errors import ErrorKind, ParseError
from athn.core.line_parser import classify_line, parse_form_line, parse_link


class TestLinks:
    def test_link_with_label(self) -> None:
        assert parse_link("https://example.com/ Example site") == ir.Link(
            url="https://example.com/", label="Example site"
        )

    def test_link_without_label(self) -> None:
        assert parse_link("/relative.athn") == ir.Link(url="/relative.athn")

    def test_link_line(self) -> None:
        line = classify_line("=> https://localhost/ Home")
        assert line == ir.LinkLine(link=ir.Link(url="https://localhost/", label="Home"))


class TestSimpleLines:
    def test_preformatted(self) -> None:
        assert classify_line("```let x = 1;") == ir.PreformattedLine(
            textual=False, content="let x = 1;"
        )

    def test_textual_preformatted(self) -> None:
        assert classify_line("'''  indented") == ir.PreformattedLine(
            textual=True, content="  indented"
        )

    def test_separator_ignores_remainder(self) -> None:
        assert classify_line("-------") == ir.SeparatorLine()
        assert classify_line("---") == ir.SeparatorLine()

    def test_quote(self) -> None:
        assert classify_line(">> Quoted") == ir.QuoteLine(content="Quoted")

    @pytest.mark.parametrize(
        ("prefix", "kind"),
        [
            ("_! ", ir.AdmonitionKind.NOTE),
            ("*! ", ir.AdmonitionKind.WARNING),
            ("!! ", ir.AdmonitionKind.DANGER),
        ],
    )
    def test_admonitions(self, prefix: str, kind: ir.AdmonitionKind) -> None:
        assert classify_line(prefix + "Careful") == ir.AdmonitionLine(
            admonition=kind, content="Careful"
        )

    @pytest.mark.parametrize("level", range(1, 7))
    def test_levels(self, level: int) -> None:
        assert classify_line(f"{level}# Title") == ir.HeadingLine(level=level, content="Title")
        assert classify_line(f"{level}* Item") == ir.UListLine(level=level, content="Item")

    def test_unknown_level_is_text(self) -> None:
        assert classify_line("7# Title") == ir.TextLine(content="7# Title")

    def test_plain_text(self) -> None:
        assert classify_line("Just some text") == ir.TextLine(content="Just some text")

    def test_short_line_is_text(self) -> None:
        assert classify_line("()") == ir.TextLine(content="()")

    def test_prefix_is_matched_literally(self) -> None:
        line = classify_line("=> is how arrows look")
        assert line == ir.LinkLine(link=ir.Link(url="is", label="how arrows look"))


class TestDelimitedLines:
    def test_ordered_list(self) -> None:
        assert classify_line("2- a) And subitems") == ir.OListLine(
            level=2, bullet="a)", content="And subitems"
        )

    def test_ordered_list_without_content(self) -> None:
        with pytest.raises(ParseError) as exc:
            classify_line("1- 1.")
        assert exc.value.kind is ErrorKind.INVALID_ORDERED_LIST_LINE

    def test_dropdown(self) -> None:
        assert classify_line("\\/ Dropdown | This is a dropdown line") == ir.DropdownLine(
            summary="Dropdown", content="This is a dropdown line"
        )

    def test_dropdown_splits_on_first_delimiter(self) -> None:
        line = classify_line("\\/ A | B | C")
        assert line == ir.DropdownLine(summary="A", content="B | C")

    def test_dropdown_without_delimiter(self) -> None:
        with pytest.raises(ParseError) as exc:
            classify_line("\\/ Dropdown|no spaces")
        assert exc.value.kind is ErrorKind.INVALID_DROPDOWN_LINE


class TestFormLines:
    def test_form_line(self) -> None:
        line = parse_form_line("[] Send:submit \\dest /one", 2)
        assert line.form_index == 2
        assert line.field == ir.SubmitField(id=ir.ID.new("Send"), destination="/one")

    def test_text_before_sentinel_is_dropped(self) -> None:
        line = parse_form_line("ignored [] ok:bool", 0)
        assert line.field == ir.BooleanField(id=ir.ID.new("ok"))
