"""
Reserved identity guard.

Generated identifiers may collide with names a platform already uses (a
``UIColor.clear`` extension, an Android ``white`` resource). Configuration
lists such names, and a project producing any of them is rejected before a
single template line is processed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .config import PrismConfiguration
from .errors import ProhibitedIdentitiesError
from .ir.assets import ProjectAssets
from .ir.identity import IdentityStyle

logger = logging.getLogger(__name__)


def _all_identifiers(identities: Iterable[str | None]) -> set[str]:
    return {
        style.identifier(identity)
        for identity in identities
        if identity is not None
        for style in IdentityStyle
    }


def find_reserved_identities(
    project: ProjectAssets,
    configuration: PrismConfiguration | None,
) -> set[str]:
    """Reserved names produced by the project's colors or text styles, in any style."""
    if configuration is None:
        return set()

    used: set[str] = set()

    if configuration.reserved_colors:
        color_identifiers = _all_identifiers(color.identity for color in project.colors)
        used |= configuration.reserved_colors & color_identifiers

    if configuration.reserved_text_styles:
        text_style_identifiers = _all_identifiers(
            text_style.name for text_style in project.text_styles
        )
        used |= configuration.reserved_text_styles & text_style_identifiers

    return used


def ensure_no_reserved_identities(
    project: ProjectAssets,
    configuration: PrismConfiguration | None,
) -> None:
    """Raise ProhibitedIdentitiesError if the project uses any reserved name."""
    used = find_reserved_identities(project, configuration)
    if used:
        identities = ", ".join(sorted(used))
        logger.debug("Project uses reserved identities: %s", identities)
        raise ProhibitedIdentitiesError(identities)
