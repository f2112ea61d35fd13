"""
Custom exceptions for the SVG Components Builder.
"""

# SPDX-License-Identifier: GPL-3.0-or-later


class SvgComponentsError(Exception):
    """Base exception for all SVG Components Builder errors."""

    pass


class ConfigurationError(SvgComponentsError):
    """Raised when configuration is invalid or the entry folder is missing."""

    pass


class StructuralConflictError(SvgComponentsError):
    """Raised when the output tree would overlap the entry tree."""

    def __init__(self, message: str, folder: str = "", entry: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.folder = folder
        self.entry = entry

    def __str__(self) -> str:
        return f"{self.args[0]} (Folder: {self.folder}, Entry: {self.entry})"


class MarkupRewriteError(SvgComponentsError):
    """Raised when SVG markup does not have the structure a rewrite expects."""

    def __init__(self, message: str, element: str = "") -> None:
        """Initialize the error."""
        super().__init__(message)
        self.element = element


class FormatterError(SvgComponentsError):
    """Raised when the source formatter rejects generated code."""

    pass


class ToolchainError(SvgComponentsError):
    """Raised when an external tool cannot be executed."""

    pass
