"""
Prism - platform-native style code from a design project's assets.

Turns the colors and text styles of a design project into source files
(Swift color constants, Android resources, ...) by processing small,
line-oriented templates.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used types for convenience
from .core import ir
from .core.config import PrismConfiguration, load_configuration
from .core.errors import ConfigurationError, PrismError, ProjectLoadError, TemplateError
from .core.ir import Color, ProjectAssets, RawColor, TextStyle
from .core.project_loader import load_project_assets
from .core.template_parser import TemplateParser, render_template

try:
    __version__ = _metadata_version("prismkit")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ir",
    "Color",
    "ProjectAssets",
    "RawColor",
    "TextStyle",
    "TemplateParser",
    "render_template",
    "PrismConfiguration",
    "load_configuration",
    "load_project_assets",
    "PrismError",
    "TemplateError",
    "ConfigurationError",
    "ProjectLoadError",
]
