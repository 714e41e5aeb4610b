"""Tests for token resolution against color and text style contexts."""

from __future__ import annotations

import pytest

from prismkit.core.errors import MissingColorForTextStyleError, UnknownTokenError
from prismkit.core.ir import Color, ProjectAssets, TextStyle
from prismkit.core.tokens import (
    COLOR_TOKENS,
    ColorContext,
    TextStyleContext,
    format_number,
    resolve_token,
)
from prismkit.core.transformations import parse_pipeline


class TestFormatNumber:
    def test_integral_floats_drop_fraction(self):
        assert format_number(24.0) == "24"

    def test_fractions(self):
        assert format_number(1.5) == "1.5"
        assert format_number(0.79999995) == "0.8"

    def test_ints_and_none(self):
        assert format_number(400) == "400"
        assert format_number(None) is None


class TestColorTokens:
    """Tokens inside a color loop."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("color.identity", "Clear Reddish"),
            ("color.identity.raw", "Clear Reddish"),
            ("color.identity.camelcase", "clearReddish"),
            ("color.identity.pascalcase", "ClearReddish"),
            ("color.identity.snakecase", "clear_reddish"),
            ("color.identity.kebabcase", "clear-reddish"),
            ("color.r", "223"),
            ("color.g", "99"),
            ("color.b", "105"),
            ("color.a", "0.8"),
            ("color.rgb", "#df6369"),
            ("color.argb", "#ccdf6369"),
        ],
    )
    def test_values(self, clear_reddish: Color, token: str, expected: str):
        assert resolve_token(token, ColorContext(clear_reddish)) == expected

    def test_anonymous_identity_is_none(self, anonymous_color: Color):
        context = ColorContext(anonymous_color)
        assert resolve_token("color.identity", context) is None
        assert resolve_token("color.identity.camelcase", context) is None
        assert resolve_token("color.rgb", context) == "#0a0a0a"

    def test_unknown_token(self, clear_reddish: Color):
        with pytest.raises(UnknownTokenError) as exc:
            resolve_token("color.hsl", ColorContext(clear_reddish))
        assert exc.value.token == "color.hsl"

    def test_text_style_token_in_color_loop(self, clear_reddish: Color):
        with pytest.raises(UnknownTokenError):
            resolve_token("textStyle.fontName", ColorContext(clear_reddish))

    def test_registered_names(self):
        assert "color.identity" in COLOR_TOKENS
        assert "color.argb" in COLOR_TOKENS


class TestTextStyleTokens:
    """Tokens inside a text style loop."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("textStyle.identity", "Large Heading"),
            ("textStyle.identity.camelcase", "largeHeading"),
            ("textStyle.identity.snakecase", "large_heading"),
            ("textStyle.fontName", "Helvetica-Bold"),
            ("textStyle.fontFamily", "Helvetica"),
            ("textStyle.fontSize", "24"),
            ("textStyle.fontWeight", "700"),
            ("textStyle.alignment", "left"),
            ("textStyle.color.rgb", "#df6369"),
            ("textStyle.color.argb", "#ccdf6369"),
            ("textStyle.color.a", "0.8"),
            ("textStyle.color.identity", "Clear Reddish"),
            ("textStyle.color.identity.camelcase", "clearReddish"),
            ("textStyle.color.identity.snakecase", "clear_reddish"),
        ],
    )
    def test_values(self, project: ProjectAssets, large_heading: TextStyle, token: str, expected: str):
        context = TextStyleContext(large_heading)
        assert resolve_token(token, context, project.colors) == expected

    def test_unset_attributes_are_none(self, project: ProjectAssets, large_heading: TextStyle):
        context = TextStyleContext(large_heading)
        assert resolve_token("textStyle.lineHeight", context, project.colors) is None
        assert resolve_token("textStyle.letterSpacing", context, project.colors) is None

    def test_set_attributes(self, project: ProjectAssets, body: TextStyle):
        context = TextStyleContext(body)
        assert resolve_token("textStyle.lineHeight", context, project.colors) == "20"
        assert resolve_token("textStyle.letterSpacing", context, project.colors) == "0.5"
        assert resolve_token("textStyle.color.identity.camelcase", context, project.colors) == "blueSky"

    def test_unmatched_color_identity_raises(
        self, project_with_unmatched_style: ProjectAssets, unmatched_style: TextStyle
    ):
        context = TextStyleContext(unmatched_style)
        with pytest.raises(MissingColorForTextStyleError, match="Highlight") as exc:
            resolve_token("textStyle.color.identity", context, project_with_unmatched_style.colors)
        assert exc.value.text_style is unmatched_style

    def test_unmatched_color_identity_is_none_when_lenient(
        self, project_with_unmatched_style: ProjectAssets, unmatched_style: TextStyle
    ):
        context = TextStyleContext(unmatched_style)
        colors = project_with_unmatched_style.colors
        assert resolve_token("textStyle.color.identity", context, colors, strict=False) is None

    def test_unmatched_color_values_still_resolve(
        self, project_with_unmatched_style: ProjectAssets, unmatched_style: TextStyle
    ):
        context = TextStyleContext(unmatched_style)
        colors = project_with_unmatched_style.colors
        assert resolve_token("textStyle.color.rgb", context, colors) == "#010203"

    def test_unknown_token(self, large_heading: TextStyle):
        with pytest.raises(UnknownTokenError):
            resolve_token("textStyle.shadow", TextStyleContext(large_heading))


class TestContextAndTransformations:
    def test_no_context(self):
        with pytest.raises(UnknownTokenError, match="color.identity"):
            resolve_token("color.identity", None)

    def test_pipeline_applied(self, clear_reddish: Color):
        pipeline = parse_pipeline(["snakecase", "uppercase"])
        value = resolve_token("color.identity", ColorContext(clear_reddish), (), pipeline)
        assert value == "CLEAR_REDDISH"

    def test_pipeline_skipped_for_missing_value(self, anonymous_color: Color):
        pipeline = parse_pipeline(["uppercase"])
        assert resolve_token("color.identity", ColorContext(anonymous_color), (), pipeline) is None

    def test_empty_pipeline_matches_no_pipeline(self, clear_reddish: Color):
        context = ColorContext(clear_reddish)
        assert resolve_token("color.identity", context, (), ()) == resolve_token(
            "color.identity", context
        )
