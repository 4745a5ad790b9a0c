"""Content-addressed parse cache for mdexport.

Maps (content_hash, config_hash) -> Document so that re-rendering an
unchanged draft (preview refreshes, repeated exports) skips the parse.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking.

Example:
    >>> from mdexport import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> doc1 = parse("# Hello", cache=cache)
    >>> doc2 = parse("# Hello", cache=cache)  # Cache hit, no re-parse
    >>> doc1 is doc2
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from mdexport.utils.hashing import hash_str

if TYPE_CHECKING:
    from mdexport.config import ParseConfig
    from mdexport.nodes import Document


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cached Documents are immutable and safe to hand out repeatedly.
    """

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictParseCache:
    """In-memory parse cache backed by a dict."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Document] = {}

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        self._data[(content_hash, config_hash)] = doc

    def __len__(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        self._data.clear()


def hash_content(source: str, source_file: str | None = None) -> str:
    """Compute the cache key for a source text.

    The source file is part of the key because it is recorded in every
    node location. It is length-prefixed, and None gets its own marker, so
    no (source, source_file) pair shares a key with another.
    """
    file_part = "-" if source_file is None else f"{len(source_file)}:{source_file}"
    return hash_str(f"{file_part}\0{source}")


def hash_config(config: ParseConfig) -> str:
    """Compute the cache key for a ParseConfig."""
    parts = (
        f"leading_spacer={config.leading_spacer}",
        f"trailing_spacer={config.trailing_spacer}",
    )
    return hash_str("|".join(parts))


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
