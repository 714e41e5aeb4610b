"""
Prism configuration loading.

Reads the YAML configuration that sits next to a project's templates::

    # .prism/config.yml
    project_id: "5xxad123dsadasxsaxsa"
    templates_path: "Resources/Templates"
    output_path: "Sources/Styleguide"
    reserved_colors:
      - primary
    reserved_textstyles:
      - body

Default location: {project_root}/.prism/config.yml
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_DIR = ".prism"
CONFIG_FILES = ("config.yml", "config.yaml")
DEFAULT_MAX_NESTING_DEPTH = 64
MAX_NESTING_DEPTH_LIMIT = 256


class PrismConfiguration(BaseModel):
    """Configuration consumed by the template parser and its collaborators."""

    model_config = ConfigDict(frozen=True)

    project_id: str | None = Field(default=None, description="Design project identifier")
    templates_path: str | None = Field(default=None, description="Directory of .prism templates")
    output_path: str | None = Field(default=None, description="Directory for generated files")
    reserved_colors: frozenset[str] = Field(
        default=frozenset(),
        description="Generated color identifiers that must not be produced",
    )
    reserved_text_styles: frozenset[str] = Field(
        default=frozenset(),
        validation_alias=AliasChoices("reserved_text_styles", "reserved_textstyles"),
        description="Generated text style identifiers that must not be produced",
    )
    max_nesting_depth: int = Field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        ge=1,
        le=MAX_NESTING_DEPTH_LIMIT,
        description="Deepest allowed nesting of FOR/IF blocks",
    )


# =============================================================================
# Path helpers
# =============================================================================


def get_configuration_paths(project_root: Path) -> list[Path]:
    """Candidate configuration file paths, in lookup order."""
    return [project_root / CONFIG_DIR / name for name in CONFIG_FILES]


def find_configuration(project_root: Path) -> PrismConfiguration | None:
    """Load the project's configuration, or None if it has none."""
    for path in get_configuration_paths(project_root):
        if path.exists():
            return load_configuration(path)
    logger.debug("No Prism configuration found under %s", project_root)
    return None


# =============================================================================
# Loading
# =============================================================================


def load_configuration(path: Path) -> PrismConfiguration:
    """Load a configuration file.

    Args:
        path: Path to a YAML configuration file.

    Returns:
        PrismConfiguration instance. An empty file yields the defaults.

    Raises:
        ConfigurationError: If the file is missing, isn't valid YAML,
            or doesn't match the configuration schema.
    """
    if not path.exists():
        raise ConfigurationError(f"Configuration not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        logger.warning("Empty configuration at %s, using defaults", path)
        return PrismConfiguration()

    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top level of {path}")

    try:
        configuration = PrismConfiguration.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration schema in {path}: {e}") from e

    logger.info(
        "Loaded configuration from %s (%d reserved colors, %d reserved text styles)",
        path,
        len(configuration.reserved_colors),
        len(configuration.reserved_text_styles),
    )
    return configuration
