"""Tests for small helpers: hashing, logging, locations, StringBuilder and errors."""

import logging

import pytest

from mdexport import ConfigError, MdExportError, RenderError, SourceLocation, parse
from mdexport.stringbuilder import StringBuilder
from mdexport.utils import get_logger, hash_str


class TestHashStr:
    def test_known_digest(self) -> None:
        assert hash_str("hello", truncate=16) == "2cf24dba5fb0a30e"

    def test_algorithm(self) -> None:
        assert len(hash_str("x", algorithm="md5")) == 32


class TestGetLogger:
    def test_prefixes_namespace(self) -> None:
        assert get_logger("parser").name == "mdexport.parser"

    def test_keeps_qualified_names(self) -> None:
        assert get_logger("mdexport.parser").name == "mdexport.parser"
        assert get_logger("mdexport").name == "mdexport"

    def test_parser_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="mdexport"):
            parse("# A\n- b")
        assert any("Parsed 2 block(s) from 2 line(s)" in r.getMessage() for r in caplog.records)


class TestSourceLocation:
    def test_str(self) -> None:
        assert str(SourceLocation(3, 1)) == "3:1"
        assert str(SourceLocation(3, 5, source_file="notes.md")) == "notes.md:3:5"

    def test_shifted(self) -> None:
        loc = SourceLocation(2, 3, offset=10, end_offset=20).shifted(4, 2)
        assert (loc.lineno, loc.col_offset, loc.offset, loc.end_offset) == (2, 7, 14, 16)

    def test_unknown(self) -> None:
        assert SourceLocation.unknown() == SourceLocation(0, 0)


class TestStringBuilder:
    def test_build(self) -> None:
        assert StringBuilder().append("<p>").append("Hi").append("</p>").build() == "<p>Hi</p>"

    def test_empty_parts_skipped(self) -> None:
        sb = StringBuilder().append("")
        assert not sb
        assert sb.build() == ""


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(RenderError, MdExportError)
        assert issubclass(ConfigError, MdExportError)

    def test_render_error_names_node(self) -> None:
        error = RenderError("Cannot project block", 42)
        assert str(error) == "Cannot project block: int"
        assert error.node == 42

    def test_render_error_without_node(self) -> None:
        assert str(RenderError("bad")) == "bad"

    def test_config_error_message(self) -> None:
        error = ConfigError("scale", "must be positive")
        assert str(error) == "Option 'scale': must be positive"
        assert error.option == "scale"
