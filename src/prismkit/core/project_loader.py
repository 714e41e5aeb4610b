"""
Decoding of exported design projects.

Fetching a project from the design service is left to a separate client.
This module decodes what it produces, either an already-parsed payload or a
JSON export on disk::

    {
      "name": "Styleguide",
      "colors": [{"name": "Clear Reddish", "r": 223, "g": 99, "b": 105, "a": 0.8}],
      "text_styles": [
        {
          "name": "Large Heading",
          "postscript_name": "Helvetica-Bold",
          "font_size": 24,
          "text_align": "left",
          "color": {"r": 223, "g": 99, "b": 105, "a": 0.79999995}
        }
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import ProjectLoadError
from .ir.assets import ProjectAssets

logger = logging.getLogger(__name__)


def parse_project_assets(data: dict[str, Any]) -> ProjectAssets:
    """Decode a project payload into ProjectAssets.

    Raises:
        ProjectLoadError: If the payload doesn't describe valid assets.
    """
    try:
        project = ProjectAssets.model_validate(data)
    except ValidationError as e:
        raise ProjectLoadError(f"Invalid project assets: {e}") from e

    anonymous = sum(1 for color in project.colors if color.identity is None)
    if anonymous:
        logger.debug("%d anonymous colors can't be referenced by identity", anonymous)
    return project


def load_project_assets(path: Path) -> ProjectAssets:
    """Load ProjectAssets from a JSON export.

    Raises:
        ProjectLoadError: If the file is missing, isn't JSON, or is invalid.
    """
    if not path.exists():
        raise ProjectLoadError(f"Project export not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProjectLoadError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProjectLoadError(f"Expected a JSON object at the top level of {path}")

    project = parse_project_assets(data)
    logger.info(
        "Loaded project %s: %d colors, %d text styles",
        project.name or path.stem,
        len(project.colors),
        len(project.text_styles),
    )
    return project
