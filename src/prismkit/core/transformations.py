"""
Named string transformations for template tokens.

A token may carry a pipeline of transformations, ``{{% color.identity|snakecase|uppercase %}}``,
applied left to right to the resolved value. The registry is built once at
import time and only read afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import reduce
from types import MappingProxyType

from .errors import UnknownTransformationError
from .strings import (
    capitalize_first,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)


@dataclass(frozen=True)
class Transformation:
    """A named, pure string-to-string function."""

    name: str
    apply: Callable[[str], str]

    def __call__(self, value: str) -> str:
        return self.apply(value)


_BUILTIN_TRANSFORMATIONS: tuple[Transformation, ...] = (
    Transformation("uppercase", str.upper),
    Transformation("lowercase", str.lower),
    Transformation("capitalize", capitalize_first),
    Transformation("camelcase", to_camel_case),
    Transformation("pascalcase", to_pascal_case),
    Transformation("snakecase", to_snake_case),
    Transformation("kebabcase", to_kebab_case),
    Transformation("trim", str.strip),
)

TRANSFORMATIONS: MappingProxyType[str, Transformation] = MappingProxyType(
    {transformation.name: transformation for transformation in _BUILTIN_TRANSFORMATIONS}
)


def lookup_transformation(name: str) -> Transformation:
    """Get a registered transformation by name.

    Raises:
        UnknownTransformationError: If no transformation has that name.
    """
    transformation = TRANSFORMATIONS.get(name)
    if transformation is None:
        raise UnknownTransformationError(name)
    return transformation


def parse_pipeline(names: Iterable[str]) -> tuple[Transformation, ...]:
    """Resolve pipeline segment names, in order. Segments are trimmed."""
    return tuple(lookup_transformation(name.strip()) for name in names)


def apply_pipeline(pipeline: Sequence[Transformation], value: str) -> str:
    """Fold ``value`` through each transformation. An empty pipeline is identity."""
    return reduce(lambda result, transformation: transformation(result), pipeline, value)
