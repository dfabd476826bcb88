"""Tests for the metadata builder and tag parser."""

import pytest

from athn.core.config import ParserConfig
from athn.core.errors import ErrorKind, ParseError
from athn.core.metadata_parser import MetadataBuilder, parse_metadata_line


def _parse(*lines: str, config: ParserConfig | None = None) -> MetadataBuilder:
    builder = MetadataBuilder(config=config) if config else MetadataBuilder()
    for line in lines:
        parse_metadata_line(builder, line)
    return builder


class TestMetadataBuilder:
    """Builder defaults and capacity limits."""

    def test_empty_build(self) -> None:
        metadata = MetadataBuilder().build()
        assert metadata.title == ""
        assert metadata.subtitle is None
        assert metadata.author is None
        assert metadata.license is None
        assert metadata.language is None
        assert metadata.cache is None

    def test_too_many_authors(self) -> None:
        builder = MetadataBuilder()
        for i in range(1, 19):
            builder.add_author(str(i))
        assert builder.build().author == [str(i) for i in range(1, 17)]

    def test_too_many_licenses(self) -> None:
        builder = MetadataBuilder()
        for _ in range(5):
            builder.add_license("CC0-1.0")
        builder.add_license("Unlicense")
        assert builder.build().license == ["CC0-1.0"] * 4

    def test_too_many_languages(self) -> None:
        builder = MetadataBuilder()
        for i in range(300):
            builder.add_language(f"lang{i}")
        languages = builder.build().language
        assert languages is not None
        assert len(languages) == 256
        assert languages[-1] == "lang255"

    def test_custom_limits(self) -> None:
        builder = _parse("AU one", "AU two", config=ParserConfig(max_authors=1))
        assert builder.build().author == ["one"]


class TestMetadataTags:
    def test_title_overwrites(self) -> None:
        assert _parse("TI First", "TI Hello world!").build().title == "Hello world!"

    def test_subtitle(self) -> None:
        assert _parse("ST Hello world!").build().subtitle == "Hello world!"

    def test_repeatable_tags(self) -> None:
        metadata = _parse("AU Author 1", "AU Author 2", "LA en_US", "LA en_GB").build()
        assert metadata.author == ["Author 1", "Author 2"]
        assert metadata.language == ["en_US", "en_GB"]

    def test_cache(self) -> None:
        assert _parse("CH 100").build().cache == 100

    @pytest.mark.parametrize("value", ["1o0", "-1", "", " 100", "4294967296"])
    def test_invalid_cache(self, value: str) -> None:
        with pytest.raises(ParseError) as exc:
            _parse(f"CH {value}")
        assert exc.value.kind is ErrorKind.INVALID_CACHE_VALUE

    def test_unknown_tag(self) -> None:
        with pytest.raises(ParseError) as exc:
            _parse("XX something")
        assert exc.value.kind is ErrorKind.INVALID_METADATA_TAG
        assert exc.value.kind.category == "structural"

    def test_tag_requires_space(self) -> None:
        with pytest.raises(ParseError):
            _parse("TIHello")

    def test_tag_only_line_sets_empty_value(self) -> None:
        assert _parse("ST ").build().subtitle == ""
