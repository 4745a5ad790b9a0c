"""ContextVar-based parse configuration for mdexport.

Config is set once per Converter instance and read by the parser in the
current context. ContextVars are thread-local, so concurrent conversions in
different threads never see each other's settings.

Usage:
    from mdexport.config import ParseConfig, parse_config_context
    from mdexport.parser import Parser

    with parse_config_context(ParseConfig(trailing_spacer=True)):
        blocks = Parser("text\\n\\n").parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Only blank runs at the document boundaries are configurable. Blank runs
    between two content lines always become exactly one Spacer.

    Attributes:
        leading_spacer: Emit a Spacer for blank lines before the first
            content line.
        trailing_spacer: Emit a Spacer for blank lines after the last
            content line (including a document made only of blank lines).

    """

    leading_spacer: bool = True
    trailing_spacer: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> ParseConfig.from_dict({"trailing_spacer": True, "theme": "dark"})
            ParseConfig(leading_spacer=True, trailing_spacer=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "mdexport_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the parse configuration active in this context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the module-level default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Temporarily use ``config``, restoring the previous one on exit.

    The previous config is restored even if the body raises.
    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
