"""Tests for parse error formatting and classification."""

from athn.core.errors import ErrorContext, ErrorKind, ParseError, make_parse_error


class TestErrorContext:
    def test_format_with_snippet(self) -> None:
        assert ErrorContext(line=3, snippet="XX bad").format() == "line 3: | XX bad"

    def test_format_without_snippet(self) -> None:
        assert ErrorContext(line=3).format() == "line 3"


class TestParseError:
    def test_message_without_context(self) -> None:
        error = ParseError("Something broke", ErrorKind.INVALID_FIELD_TYPE)
        assert str(error) == "Something broke"
        assert error.context is None

    def test_make_parse_error_attaches_context(self) -> None:
        error = make_parse_error(
            "Invalid header line", ErrorKind.INVALID_HEADER_LINE, line=7, snippet="oops"
        )
        assert error.kind is ErrorKind.INVALID_HEADER_LINE
        assert error.context == ErrorContext(line=7, snippet="oops")
        assert str(error) == "line 7: | oops\nInvalid header line"

    def test_make_parse_error_without_line(self) -> None:
        assert make_parse_error("x", ErrorKind.INVALID_DEFAULT).context is None


class TestErrorKind:
    def test_categories(self) -> None:
        assert ErrorKind.INVALID_DROPDOWN_LINE.category == "structural"
        assert ErrorKind.MISSING_FIELD_ID.category == "identifier"
        assert ErrorKind.FORBIDDEN_PROPERTY.category == "field"

    def test_every_kind_has_a_category(self) -> None:
        assert {kind.category for kind in ErrorKind} == {"structural", "identifier", "field"}
