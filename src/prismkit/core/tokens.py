"""
Token resolution against the active loop context.

Inside ``{{% FOR color %}}`` the active context is a single color, inside
``{{% FOR textStyle %}}`` a single text style. Outside of any loop there is
no context and every token is illegal.

Token vocabulary::

    color.identity[.camelcase|.pascalcase|.snakecase|.kebabcase|.raw]
    color.r  color.g  color.b  color.a  color.rgb  color.argb

    textStyle.identity[.<style>]
    textStyle.fontName  textStyle.fontFamily  textStyle.fontSize
    textStyle.fontWeight  textStyle.lineHeight  textStyle.letterSpacing
    textStyle.alignment
    textStyle.color.identity[.<style>]
    textStyle.color.r  ...  textStyle.color.argb
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .colors import identity_matching
from .errors import MissingColorForTextStyleError, UnknownTokenError
from .ir.assets import Color, RawColor, TextStyle
from .ir.identity import IdentityStyle
from .transformations import Transformation, apply_pipeline


@dataclass(frozen=True)
class ColorContext:
    """A single color bound by a color loop."""

    color: Color


@dataclass(frozen=True)
class TextStyleContext:
    """A single text style bound by a text style loop."""

    text_style: TextStyle


TokenContext = ColorContext | TextStyleContext | None


def format_number(value: float | int | None) -> str | None:
    """Render a number without a trailing ``.0`` for integral values."""
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _identity_tokens(prefix: str) -> dict[str, IdentityStyle]:
    tokens = {f"{prefix}.identity": IdentityStyle.RAW}
    tokens.update({f"{prefix}.identity.{style.value}": style for style in IdentityStyle})
    return tokens


def _raw_color_tokens(prefix: str) -> dict[str, Callable[[RawColor], str | None]]:
    return {
        f"{prefix}.r": lambda color: str(color.r),
        f"{prefix}.g": lambda color: str(color.g),
        f"{prefix}.b": lambda color: str(color.b),
        f"{prefix}.a": lambda color: format_number(color.a),
        f"{prefix}.rgb": lambda color: color.rgb_value,
        f"{prefix}.argb": lambda color: color.argb_value,
    }


def _color_identity_getter(style: IdentityStyle) -> Callable[[Color], str | None]:
    return lambda color: color.identifier(style)


def _text_style_identity_getter(style: IdentityStyle) -> Callable[[TextStyle], str | None]:
    return lambda text_style: text_style.identifier(style)


def _embedded_color_getter(
    getter: Callable[[RawColor], str | None],
) -> Callable[[TextStyle], str | None]:
    return lambda text_style: getter(text_style.color)


COLOR_TOKENS: dict[str, Callable[[Color], str | None]] = {
    **{
        name: _color_identity_getter(style)
        for name, style in _identity_tokens("color").items()
    },
    **_raw_color_tokens("color"),
}

TEXT_STYLE_TOKENS: dict[str, Callable[[TextStyle], str | None]] = {
    **{
        name: _text_style_identity_getter(style)
        for name, style in _identity_tokens("textStyle").items()
    },
    "textStyle.fontName": lambda text_style: text_style.font_name,
    "textStyle.fontFamily": lambda text_style: text_style.font_family,
    "textStyle.fontSize": lambda text_style: format_number(text_style.font_size),
    "textStyle.fontWeight": lambda text_style: format_number(text_style.font_weight),
    "textStyle.lineHeight": lambda text_style: format_number(text_style.line_height),
    "textStyle.letterSpacing": lambda text_style: format_number(text_style.letter_spacing),
    "textStyle.alignment": lambda text_style: (
        text_style.alignment.value if text_style.alignment is not None else None
    ),
    **{
        name: _embedded_color_getter(getter)
        for name, getter in _raw_color_tokens("textStyle.color").items()
    },
}

# Resolved through the project's colors rather than the text style itself.
TEXT_STYLE_COLOR_IDENTITY_TOKENS: dict[str, IdentityStyle] = _identity_tokens("textStyle.color")


def _resolve_text_style_token(
    token: str,
    text_style: TextStyle,
    colors: Sequence[Color],
    strict: bool,
) -> str | None:
    getter = TEXT_STYLE_TOKENS.get(token)
    if getter is not None:
        return getter(text_style)

    style = TEXT_STYLE_COLOR_IDENTITY_TOKENS.get(token)
    if style is None:
        raise UnknownTokenError(token)

    color = identity_matching(text_style.color, colors)
    if color is None:
        if strict:
            raise MissingColorForTextStyleError(text_style)
        return None
    return color.identifier(style)


def resolve_token(
    token: str,
    context: TokenContext,
    colors: Sequence[Color] = (),
    transformations: Sequence[Transformation] = (),
    *,
    strict: bool = True,
) -> str | None:
    """Resolve a token name to its string value for the active context.

    Args:
        token: Token name, e.g. ``color.identity.camelcase``.
        context: Active loop context.
        colors: Project colors, used to name a text style's color.
        transformations: Pipeline applied to a present value.
        strict: If False, an unmatched text style color yields None
            instead of raising.

    Returns:
        The resolved value, or None when the attribute has no value
        for this context (an anonymous color's identity, an unset
        line height, ...).

    Raises:
        UnknownTokenError: Unknown token, or no active context.
        MissingColorForTextStyleError: Text style color identity requested
            but the color matches no named project color (strict only).
    """
    if isinstance(context, ColorContext):
        getter = COLOR_TOKENS.get(token)
        if getter is None:
            raise UnknownTokenError(token)
        value = getter(context.color)
    elif isinstance(context, TextStyleContext):
        value = _resolve_text_style_token(token, context.text_style, colors, strict)
    else:
        raise UnknownTokenError(token)

    if value is None:
        return None
    return apply_pipeline(transformations, value)
