"""
Color identity matching.

Text styles embed a plain RGBA value. To reference a text style's color by
name, the value is matched back against the project's named colors.
"""

from __future__ import annotations

from collections.abc import Iterable

from .ir.assets import Color, RawColor

# Exported alpha values carry float noise (0.79999995 for 0.8).
ALPHA_EPSILON = 1e-4


def colors_match(color: RawColor, other: RawColor) -> bool:
    """Exact channel equality, alpha equal within ALPHA_EPSILON."""
    return (
        color.r == other.r
        and color.g == other.g
        and color.b == other.b
        and abs(color.a - other.a) <= ALPHA_EPSILON
    )


def identity_matching(raw: RawColor, colors: Iterable[Color]) -> Color | None:
    """Return the first named color matching ``raw``, in project order.

    Anonymous colors are skipped since they can't be referenced. When two
    named colors share the same RGBA, the earlier one wins.
    """
    for color in colors:
        if color.identity is not None and colors_match(raw, color):
            return color
    return None
