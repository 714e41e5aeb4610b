"""
Design asset IR types: colors, text styles and the project aggregate.

These models are produced by whatever fetched the design project and are
consumed read-only by the template parser. Every model is frozen and every
sequence is a tuple, so a ProjectAssets can't change while a template is
being processed.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .identity import IdentityStyle


class TextAlignment(StrEnum):
    """Horizontal text alignment of a text style."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    JUSTIFY = "justify"


class RawColor(BaseModel):
    """An RGBA sample, as embedded in text styles."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red channel (0-255)")
    g: int = Field(ge=0, le=255, description="Green channel (0-255)")
    b: int = Field(ge=0, le=255, description="Blue channel (0-255)")
    a: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha (0-1)")

    @property
    def alpha_byte(self) -> int:
        """Alpha scaled to 0-255, rounded half up."""
        return max(0, min(255, int(self.a * 255 + 0.5)))

    @property
    def rgb_value(self) -> str:
        """Lowercase ``#rrggbb``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def argb_value(self) -> str:
        """Lowercase ``#aarrggbb``."""
        return f"#{self.alpha_byte:02x}{self.rgb_value[1:]}"


class Color(RawColor):
    """A color asset of the design project."""

    identity: str | None = Field(
        default=None,
        validation_alias=AliasChoices("identity", "name"),
        description="Project-assigned name; anonymous colors have none",
    )

    def identifier(self, style: IdentityStyle = IdentityStyle.RAW) -> str | None:
        """Generated identifier in the given style, or None if anonymous."""
        if self.identity is None:
            return None
        return style.identifier(self.identity)

    @property
    def ios(self) -> str | None:
        return self.identifier(IdentityStyle.CAMELCASE)

    @property
    def android(self) -> str | None:
        return self.identifier(IdentityStyle.SNAKECASE)


class TextStyle(BaseModel):
    """A text style asset of the design project.

    The embedded color is a value, not a reference. Its identity is recovered
    by matching it against the project's colors.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    font_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("font_name", "postscript_name", "fontName"),
        description="PostScript font name",
    )
    font_family: str | None = Field(
        default=None, validation_alias=AliasChoices("font_family", "fontFamily")
    )
    font_size: float | None = Field(
        default=None, gt=0, validation_alias=AliasChoices("font_size", "fontSize")
    )
    font_weight: int | None = Field(
        default=None, validation_alias=AliasChoices("font_weight", "fontWeight")
    )
    line_height: float | None = Field(
        default=None, validation_alias=AliasChoices("line_height", "lineHeight")
    )
    letter_spacing: float | None = Field(
        default=None, validation_alias=AliasChoices("letter_spacing", "letterSpacing")
    )
    alignment: TextAlignment | None = Field(
        default=None, validation_alias=AliasChoices("alignment", "text_align", "textAlign")
    )
    color: RawColor

    def identifier(self, style: IdentityStyle = IdentityStyle.RAW) -> str:
        """Generated identifier in the given style."""
        return style.identifier(self.name)


class ProjectAssets(BaseModel):
    """All colors and text styles of a design project, in project order."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    colors: tuple[Color, ...] = ()
    text_styles: tuple[TextStyle, ...] = Field(
        default=(), validation_alias=AliasChoices("text_styles", "textStyles")
    )
