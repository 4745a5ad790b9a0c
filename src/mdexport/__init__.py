"""
mdexport — Markdown to reflow and fixed-layout trees

Converts a small line-oriented Markdown dialect into a typed AST and
projects it onto two targets from one parse: a reflow tree for on-screen
preview (semantic classes, serializable to HTML) and a fixed-layout tree
for paginated export (explicit numeric metrics on every node).

Quick Start:
    >>> from mdexport import render, render_html
    >>> page = render("# Hello **World**")            # fixed-layout tree
    >>> page.children[0].metrics.font_size
    24.0
    >>> html = render_html("# Hello **World**")       # preview fragment

    >>> # Or keep settings on a Converter
    >>> from mdexport import Converter, ParseConfig
    >>> convert = Converter(config=ParseConfig(trailing_spacer=True), scale=0.75)
    >>> tree = convert.to_fixed("Hello\\n\\n")

Supported syntax: ``#``/``##``/``###`` headings, ``-``/``*`` and ``1.``
list items, ``>`` quotes, ``---``/``***`` rules, one paragraph per line;
inline ``***x***``, ``**_x_**``, ``**x**``, ``_x_``, ``*x*``, `` `x` `` and
``[x](url)``.
"""

from collections.abc import Iterable

from mdexport.cache import DictParseCache, ParseCache, hash_config, hash_content
from mdexport.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from mdexport.errors import ConfigError, MdExportError, RenderError
from mdexport.lexer import Lexer, normalize_newlines
from mdexport.location import SourceLocation
from mdexport.nodes import (
    Block,
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    Inline,
    Link,
    List,
    ListItem,
    Paragraph,
    Spacer,
    Strong,
    StrongEmphasis,
    Text,
    ThematicBreak,
)
from mdexport.parser import Parser
from mdexport.parsing import SPAN_PATTERNS, format_inline
from mdexport.renderers.html import HtmlRenderer
from mdexport.renderers.projector import (
    FixedProjector,
    Projector,
    ReflowProjector,
    Target,
    get_projector,
)
from mdexport.renderers.tree import FixedNode, ReflowNode
from mdexport.serialization import from_dict, from_json, to_dict, to_json
from mdexport.styles import (
    FIXED_METRICS,
    REFLOW_CLASSES,
    BoxMetrics,
    NodeKind,
)
from mdexport.tokens import Token, TokenType

__version__ = "0.1.0"


def _parse_with_current_config(
    source: str,
    source_file: str | None,
    cache: ParseCache | None,
) -> Document:
    """Parse using whatever ParseConfig is active in this context."""
    config = get_parse_config()
    if cache is not None:
        content_hash = hash_content(source, source_file)
        config_hash = hash_config(config)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            return cached

    blocks = Parser(source, source_file=source_file).parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(normalize_newlines(source)),
        source_file=source_file,
    )
    doc = Document(location=loc, children=tuple(blocks))

    if cache is not None:
        cache.put(content_hash, config_hash, doc)
    return doc


def parse(
    source: str,
    *,
    source_file: str | None = None,
    cache: ParseCache | None = None,
) -> Document:
    """Parse Markdown source into a typed AST.

    Uses the ParseConfig active in the current context (see
    ``parse_config_context``). Never raises for any input string.

    Args:
        source: Markdown source text
        source_file: Optional source file path recorded in locations
        cache: Optional content-addressed parse cache

    Returns:
        Document AST root node

    Example:
        >>> doc = parse("- a\\n- b\\n- c")
        >>> len(doc.children[0].items)
        3
    """
    return _parse_with_current_config(source, source_file, cache)


def project(
    doc: Document,
    target: Target | str,
    *,
    scale: float = 1.0,
) -> ReflowNode | FixedNode:
    """Project a parsed Document onto ``target`` ("reflow" or "fixed").

    Raises:
        ConfigError: For an unknown target or an invalid scale.
    """
    return get_projector(target, scale=scale).project(doc)


def render(
    markdown: str,
    as_reflow: bool = False,
    *,
    scale: float = 1.0,
) -> ReflowNode | FixedNode:
    """Convert Markdown to an output tree.

    Args:
        markdown: Markdown source text
        as_reflow: True for the reflow (preview) tree, False for the
            fixed-layout (export) tree
        scale: Size multiplier for the fixed-layout target

    Returns:
        DOCUMENT root of the requested tree

    Example:
        >>> render("5. a\\n5. b").children[0].children[1].marker
        '2.'
    """
    target = Target.REFLOW if as_reflow else Target.FIXED
    return project(parse(markdown), target, scale=scale)


def render_html(markdown: str) -> str:
    """Convert Markdown straight to an HTML preview fragment.

    Example:
        >>> render_html("> quote")
        '<div class="prose max-w-none p-4">\\n<blockquote class="border-l-4 border-gray-300 pl-4 italic text-gray-600">quote</blockquote>\\n</div>\\n'
    """
    return HtmlRenderer().render(ReflowProjector().project(parse(markdown)))


class Converter:
    """High-level converter holding a ParseConfig and an export scale.

    Usage:
        >>> convert = Converter()
        >>> convert("**hi**")
        '<div class="prose max-w-none p-4">\\n<p class="text-base my-2"><span class="font-bold">hi</span></p>\\n</div>\\n'

        >>> page = convert.to_fixed("# Title")
        >>> page.children[0].kind
        <NodeKind.HEADING_1: 'heading_1'>

    Thread Safety:
        Config is set through a ContextVar for the duration of each call,
        so one Converter can be used from several threads.

    """

    __slots__ = ("_config", "_reflow", "_fixed", "_html")

    def __init__(
        self,
        *,
        config: ParseConfig | None = None,
        scale: float = 1.0,
    ) -> None:
        """Initialize converter.

        Args:
            config: Parse configuration (defaults to ParseConfig())
            scale: Size multiplier for the fixed-layout target

        Raises:
            ConfigError: If ``scale`` is not a positive number.
        """
        self._config = config or ParseConfig()
        self._reflow = ReflowProjector()
        self._fixed = FixedProjector(scale=scale)
        self._html = HtmlRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render to HTML in one call."""
        return self.to_html(source)

    def parse(
        self,
        source: str,
        *,
        source_file: str | None = None,
        cache: ParseCache | None = None,
    ) -> Document:
        """Parse Markdown source into an AST using this converter's config."""
        with parse_config_context(self._config):
            return _parse_with_current_config(source, source_file, cache)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        cache: ParseCache | None = None,
    ) -> list[Document]:
        """Parse several sources, setting the config once for the batch."""
        with parse_config_context(self._config):
            return [_parse_with_current_config(source, None, cache) for source in sources]

    def to_reflow(self, source: str) -> ReflowNode:
        """Convert to the reflow (preview) tree."""
        return self._reflow.project(self.parse(source))

    def to_fixed(self, source: str) -> FixedNode:
        """Convert to the fixed-layout (export) tree."""
        return self._fixed.project(self.parse(source))

    def to_html(self, source: str) -> str:
        """Convert to an HTML preview fragment."""
        return self._html.render(self.to_reflow(source))

    def to_json(self, source: str, *, indent: int | None = None) -> str:
        """Convert to the fixed-layout tree serialized as JSON.

        This is the payload handed to the external page writer.
        """
        return to_json(self.to_fixed(source), indent=indent)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "project",
    "render",
    "render_html",
    "Converter",
    # Parse cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Block nodes
    "Block",
    "BlockQuote",
    "Document",
    "Heading",
    "List",
    "ListItem",
    "Paragraph",
    "Spacer",
    "ThematicBreak",
    # Inline nodes
    "Inline",
    "CodeSpan",
    "Emphasis",
    "Link",
    "Strong",
    "StrongEmphasis",
    "Text",
    # Parser components
    "Lexer",
    "Parser",
    "SPAN_PATTERNS",
    "format_inline",
    "Token",
    "TokenType",
    # Projection
    "Target",
    "Projector",
    "ReflowProjector",
    "FixedProjector",
    "get_projector",
    "ReflowNode",
    "FixedNode",
    "HtmlRenderer",
    # Styles
    "NodeKind",
    "BoxMetrics",
    "REFLOW_CLASSES",
    "FIXED_METRICS",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "MdExportError",
    "RenderError",
    "ConfigError",
    # Location
    "SourceLocation",
]
