"""Shared pytest fixtures for Prism tests."""

import pytest

from prismkit.core.ir import Color, ProjectAssets, RawColor, TextAlignment, TextStyle


@pytest.fixture
def clear_reddish() -> Color:
    """Return a translucent named color."""
    return Color(identity="Clear Reddish", r=223, g=99, b=105, a=0.8)


@pytest.fixture
def blue_sky() -> Color:
    """Return an opaque named color."""
    return Color(identity="Blue Sky", r=98, g=182, b=223, a=1.0)


@pytest.fixture
def anonymous_color() -> Color:
    """Return a color without an identity."""
    return Color(r=10, g=10, b=10, a=1.0)


@pytest.fixture
def large_heading() -> TextStyle:
    """Return a text style whose color carries export noise in its alpha."""
    return TextStyle(
        name="Large Heading",
        font_name="Helvetica-Bold",
        font_family="Helvetica",
        font_size=24.0,
        font_weight=700,
        alignment=TextAlignment.LEFT,
        color=RawColor(r=223, g=99, b=105, a=0.79999995),
    )


@pytest.fixture
def body() -> TextStyle:
    """Return a text style with a line height and letter spacing."""
    return TextStyle(
        name="Body",
        font_name="Helvetica",
        font_size=14.0,
        line_height=20.0,
        letter_spacing=0.5,
        color=RawColor(r=98, g=182, b=223, a=1.0),
    )


@pytest.fixture
def unmatched_style() -> TextStyle:
    """Return a text style whose color isn't one of the project colors."""
    return TextStyle(
        name="Highlight",
        font_name="Helvetica",
        font_size=12.0,
        color=RawColor(r=1, g=2, b=3, a=1.0),
    )


@pytest.fixture
def project(
    clear_reddish: Color,
    blue_sky: Color,
    large_heading: TextStyle,
    body: TextStyle,
) -> ProjectAssets:
    """Return a project where every text style color is a named project color."""
    return ProjectAssets(
        name="Styleguide",
        colors=(clear_reddish, blue_sky),
        text_styles=(large_heading, body),
    )


@pytest.fixture
def project_with_anonymous_color(
    clear_reddish: Color,
    anonymous_color: Color,
) -> ProjectAssets:
    """Return a project holding one named and one anonymous color."""
    return ProjectAssets(colors=(clear_reddish, anonymous_color))


@pytest.fixture
def project_with_unmatched_style(
    clear_reddish: Color,
    large_heading: TextStyle,
    unmatched_style: TextStyle,
) -> ProjectAssets:
    """Return a project with a text style whose color has no identity."""
    return ProjectAssets(colors=(clear_reddish,), text_styles=(large_heading, unmatched_style))


@pytest.fixture
def empty_project() -> ProjectAssets:
    """Return a project without any assets."""
    return ProjectAssets()
