"""Tests for the high-level API: render, render_html, parse and Converter."""

import json
import threading

import pytest

import mdexport
from mdexport import (
    ConfigError,
    Converter,
    DictParseCache,
    FixedNode,
    NodeKind,
    ParseConfig,
    ReflowNode,
    get_parse_config,
    parse,
    render,
    render_html,
)


class TestRender:
    """The render(markdown, as_reflow) entry point."""

    def test_default_target_is_fixed(self) -> None:
        assert isinstance(render("x"), FixedNode)

    def test_reflow_target(self) -> None:
        assert isinstance(render("x", as_reflow=True), ReflowNode)

    def test_scale_applies_to_fixed(self) -> None:
        (h1,) = render("# A", scale=0.5).children
        assert h1.metrics.font_size == 12.0

    def test_invalid_scale(self) -> None:
        with pytest.raises(ConfigError):
            render("x", scale=0)

    def test_never_raises_on_markdown(self) -> None:
        for source in ["", "\n", "**", "[", "#", "1.", "> ", "\r\r", "***\n---"]:
            render(source)
            render(source, as_reflow=True)


class TestParse:
    """The parse() function."""

    def test_document_span(self) -> None:
        doc = parse("a\r\nb")
        assert doc.location.lineno == 1
        assert doc.location.end_offset == 3

    def test_source_file_recorded(self) -> None:
        doc = parse("text", source_file="draft.md")
        assert doc.location.source_file == "draft.md"
        assert doc.children[0].location.source_file == "draft.md"


class TestConverter:
    """Converter keeps config and scale across calls."""

    def test_call_returns_html(self) -> None:
        convert = Converter()
        assert convert("**hi**") == render_html("**hi**")

    def test_config_applied_only_inside_calls(self) -> None:
        convert = Converter(config=ParseConfig(trailing_spacer=True))
        doc = convert.parse("a\n\n")
        assert doc.children[-1].count == 1
        assert get_parse_config() == ParseConfig()

    def test_default_config(self) -> None:
        assert Converter().config == ParseConfig()

    def test_to_fixed_scaled(self) -> None:
        page = Converter(scale=2.0).to_fixed("# A")
        assert page.children[0].metrics.font_size == 48.0

    def test_to_reflow(self) -> None:
        tree = Converter().to_reflow("- a")
        assert tree.children[0].kind == NodeKind.BULLET_LIST

    def test_to_json(self) -> None:
        data = json.loads(Converter().to_json("# A"))
        assert data["_type"] == "FixedNode"
        assert data["kind"] == "document"
        assert data["children"][0]["metrics"]["font_size"] == 24.0

    def test_parse_many(self) -> None:
        cache = DictParseCache()
        docs = Converter().parse_many(["# A", "b", "# A"], cache=cache)
        assert len(docs) == 3
        assert docs[0] is docs[2]
        assert len(cache) == 2

    def test_invalid_scale(self) -> None:
        with pytest.raises(ConfigError):
            Converter(scale=-1)

    def test_thread_isolation(self) -> None:
        """Converters with different configs do not see each other's settings."""
        keep = Converter(config=ParseConfig(trailing_spacer=True))
        drop = Converter(config=ParseConfig(trailing_spacer=False))
        results: dict[str, int] = {}
        errors: list[BaseException] = []

        def run(name: str, convert: Converter) -> None:
            try:
                for _ in range(50):
                    results[name] = len(convert.parse("a\n\n").children)
            except BaseException as e:  # noqa: BLE001
                errors.append(e)

        threads = [
            threading.Thread(target=run, args=("keep", keep)),
            threading.Thread(target=run, args=("drop", drop)),
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert results == {"keep": 2, "drop": 1}


class TestPublicSurface:
    """Everything in __all__ is importable."""

    def test_all_exports_exist(self) -> None:
        for name in mdexport.__all__:
            assert hasattr(mdexport, name), name

    def test_version(self) -> None:
        assert isinstance(mdexport.__version__, str)
