"""
Identity styles for generated platform identifiers.

A color or text style named ``Clear Reddish`` in the design project becomes
``clearReddish`` in Swift, ``clear_reddish`` in Android resources, and so on.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum

from ..strings import to_camel_case, to_kebab_case, to_pascal_case, to_snake_case


class IdentityStyle(StrEnum):
    """Naming style applied to an asset identity."""

    RAW = "raw"
    CAMELCASE = "camelcase"
    PASCALCASE = "pascalcase"
    SNAKECASE = "snakecase"
    KEBABCASE = "kebabcase"

    def identifier(self, identity: str) -> str:
        """Render an identity in this style."""
        return _STYLE_FORMATTERS[self](identity)


_STYLE_FORMATTERS: dict[IdentityStyle, Callable[[str], str]] = {
    IdentityStyle.RAW: lambda identity: identity,
    IdentityStyle.CAMELCASE: to_camel_case,
    IdentityStyle.PASCALCASE: to_pascal_case,
    IdentityStyle.SNAKECASE: to_snake_case,
    IdentityStyle.KEBABCASE: to_kebab_case,
}
