"""
Prism Intermediate Representation (IR) types.

Design assets as consumed by the template parser. All types are
re-exported from this package.
"""

from .assets import (
    Color,
    ProjectAssets,
    RawColor,
    TextAlignment,
    TextStyle,
)
from .identity import IdentityStyle

__all__ = [
    "Color",
    "IdentityStyle",
    "ProjectAssets",
    "RawColor",
    "TextAlignment",
    "TextStyle",
]
