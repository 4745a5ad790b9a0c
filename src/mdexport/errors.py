"""Exception classes for mdexport.

Parsing never raises: every string has a defined parse. These exceptions
cover misuse of the projection and configuration APIs.
"""

from __future__ import annotations


class MdExportError(Exception):
    """Base exception for all mdexport errors."""

    pass


class RenderError(MdExportError):
    """Error during projection onto an output target.

    Raised when the projector is handed a value that is not an AST node.
    """

    def __init__(self, message: str, node: object | None = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            node: The offending value (optional)
        """
        self.node = node
        if node is not None:
            message = f"{message}: {type(node).__name__}"
        super().__init__(message)


class ConfigError(MdExportError):
    """Invalid configuration value.

    Raised for an unknown output target or a non-positive size scale.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "target", "scale")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")
