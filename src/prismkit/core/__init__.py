"""Core Prism functionality: asset IR, template parser, tokens, transformations, configuration."""

from . import ir
from .blocks import Block, detect_block
from .colors import identity_matching
from .config import PrismConfiguration, find_configuration, load_configuration
from .errors import (
    ConfigurationError,
    ErrorContext,
    InlineLoopError,
    MissingColorForTextStyleError,
    NestingDepthError,
    OpenBlockError,
    PrismError,
    ProhibitedIdentitiesError,
    ProjectLoadError,
    TemplateError,
    UnknownLoopError,
    UnknownTokenError,
    UnknownTransformationError,
)
from .project_loader import load_project_assets, parse_project_assets
from .reserved import ensure_no_reserved_identities, find_reserved_identities
from .template_parser import TemplateParser, render_template
from .tokens import (
    COLOR_TOKENS,
    TEXT_STYLE_TOKENS,
    ColorContext,
    TextStyleContext,
    TokenContext,
    resolve_token,
)
from .transformations import (
    TRANSFORMATIONS,
    Transformation,
    apply_pipeline,
    lookup_transformation,
    parse_pipeline,
)

__all__ = [
    "ir",
    "PrismError",
    "TemplateError",
    "UnknownLoopError",
    "OpenBlockError",
    "InlineLoopError",
    "UnknownTokenError",
    "MissingColorForTextStyleError",
    "ProhibitedIdentitiesError",
    "UnknownTransformationError",
    "NestingDepthError",
    "ConfigurationError",
    "ProjectLoadError",
    "ErrorContext",
    "TemplateParser",
    "render_template",
    "Block",
    "detect_block",
    "identity_matching",
    "ColorContext",
    "TextStyleContext",
    "TokenContext",
    "resolve_token",
    "COLOR_TOKENS",
    "TEXT_STYLE_TOKENS",
    "TRANSFORMATIONS",
    "Transformation",
    "lookup_transformation",
    "parse_pipeline",
    "apply_pipeline",
    "ensure_no_reserved_identities",
    "find_reserved_identities",
    "PrismConfiguration",
    "load_configuration",
    "find_configuration",
    "load_project_assets",
    "parse_project_assets",
]
