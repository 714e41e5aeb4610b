"""
Error types for Prism template parsing, configuration and project loading.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .ir.assets import TextStyle


class PrismError(Exception):
    """Base exception for all Prism errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class TemplateError(PrismError):
    """
    Raised when a template cannot be processed against a project.

    All template errors abort the whole parse; no partial output is
    ever returned.
    """

    def locate(self, context: ErrorContext) -> TemplateError:
        """Attach a template location, unless an inner frame already did."""
        if self.context is None:
            self.context = context
            self.args = (self._format_message(),)
        return self


class UnknownLoopError(TemplateError):
    """A FOR block names neither ``color`` nor ``textStyle``."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Illegal FOR loop identifier '{identifier}'")


class OpenBlockError(TemplateError):
    """A FOR/IF block has no matching close before the template ends."""

    def __init__(self, keyword: str, identifier: str):
        self.keyword = keyword
        self.identifier = identifier
        super().__init__(f"Detected {keyword} block '{identifier}' with no closing")


class InlineLoopError(TemplateError):
    """A FOR block opens and closes on the same line, leaving it no body lines."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"FOR block '{identifier}' must span lines; inline loops aren't supported")


class UnknownTokenError(TemplateError):
    """A token is not a known attribute, or is used outside of a loop."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Illegal token in template '{token}'")


class MissingColorForTextStyleError(TemplateError):
    """
    A text style's color identity was requested, but its color value
    doesn't match any named color of the project.
    """

    def __init__(self, text_style: TextStyle):
        self.text_style = text_style
        color = text_style.color
        super().__init__(
            f"Text Style {text_style.name} has a color "
            f"RGBA({color.r}, {color.g}, {color.b}, {color.a}), "
            "but it has no matching color identity"
        )


class ProhibitedIdentitiesError(TemplateError):
    """One or more generated identifiers collide with reserved names."""

    def __init__(self, identities: str):
        self.identities = identities
        super().__init__(f"Prohibited identities '{identities}' can't be used")


class UnknownTransformationError(TemplateError):
    """A pipeline segment names a transformation that isn't registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"There is no transformation called '{name}'")


class NestingDepthError(TemplateError):
    """Blocks are nested deeper than the parser allows."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"Template blocks are nested deeper than the maximum of {depth}")


class ConfigurationError(PrismError):
    """
    Raised when a Prism configuration file can't be loaded.

    Examples:
    - Missing file
    - Invalid YAML
    - Values failing schema validation
    """

    pass


class ProjectLoadError(PrismError):
    """
    Raised when exported project assets can't be decoded.

    Examples:
    - Invalid JSON
    - Color channels out of range
    - Text style without a color
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error within a template.

    Attributes:
        line: Line number (1-indexed)
        template: Optional template name, usually its file path
        snippet: Optional text of the offending line
    """

    line: int
    template: str | None = None
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "Colors.swift.prism:10"
        """
        if self.template:
            location = f"{self.template}:{self.line}"
        else:
            location = f"line {self.line}"

        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the offending line with its line number."""
        return f"{self.line:4d} | {self.snippet}"
