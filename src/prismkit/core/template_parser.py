"""
Template parser for Prism-flavored templates.

Processes a template line by line against a project's assets::

    {{% FOR color %}}
    static let {{% color.identity.camelcase %}} = UIColor(hex: "{{% color.argb %}}")
    {{% ENDFOR %}}

FOR loops repeat their body once per color or text style, binding it as the
active context. IF blocks keep their body only when the condition token has
a value for the active context. Any other ``{{% token|transformation %}}`` is
resolved and substituted in place.

Parsing is a pure function of the project, the configuration and the
template text: nothing is shared between calls, and any error aborts the
whole parse.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from .blocks import DIRECTIVE_MARKER, Block, detect_block
from .config import DEFAULT_MAX_NESTING_DEPTH, PrismConfiguration
from .errors import (
    ErrorContext,
    NestingDepthError,
    TemplateError,
    UnknownLoopError,
    UnknownTokenError,
)
from .ir.assets import ProjectAssets
from .reserved import ensure_no_reserved_identities
from .tokens import ColorContext, TextStyleContext, TokenContext, resolve_token
from .transformations import parse_pipeline

logger = logging.getLogger(__name__)

COLOR_LOOP = "color"
TEXT_STYLE_LOOP = "textStyle"

_TOKEN_PATTERN = re.compile(r"\{\{%(.*?)%\}\}")


class TemplateParser:
    """Parses templates against a single project."""

    def __init__(
        self,
        project: ProjectAssets,
        configuration: PrismConfiguration | None = None,
        *,
        max_depth: int | None = None,
    ):
        self.project = project
        self.configuration = configuration
        if max_depth is None:
            max_depth = (
                configuration.max_nesting_depth if configuration else DEFAULT_MAX_NESTING_DEPTH
            )
        self.max_depth = max_depth

    def parse(self, template: str, *, name: str | None = None) -> str:
        """Process a template into its generated output.

        Args:
            template: Template text.
            name: Optional template name (usually its path), used in errors.

        Returns:
            The generated text.

        Raises:
            TemplateError: On any template or configuration mistake.
        """
        ensure_no_reserved_identities(self.project, self.configuration)

        lines = template.split("\n")
        output = self._parse_lines(lines, None, depth=0, first_line=1, name=name)
        return "\n".join(output)

    def _parse_lines(
        self,
        lines: Sequence[str],
        context: TokenContext,
        *,
        depth: int,
        first_line: int,
        name: str | None,
    ) -> list[str]:
        """Process a run of lines under one context.

        ``first_line`` is the template line number of ``lines[0]``, so that
        errors point at the right place however deep the recursion goes.
        """
        if depth > self.max_depth:
            raise NestingDepthError(self.max_depth)

        output: list[str] = []
        index = 0

        while index < len(lines):
            line = lines[index]
            line_number = first_line + index
            try:
                index = self._parse_line(
                    lines, index, context, output, depth=depth, line_number=line_number, name=name
                )
            except TemplateError as error:
                error.locate(ErrorContext(line=line_number, template=name, snippet=line))
                raise

        return output

    def _parse_line(
        self,
        lines: Sequence[str],
        index: int,
        context: TokenContext,
        output: list[str],
        *,
        depth: int,
        line_number: int,
        name: str | None,
    ) -> int:
        """Process the construct starting at ``lines[index]``; return the next index."""
        line = lines[index]

        loop = detect_block("FOR", lines, index)
        if loop is not None:
            output.extend(self._expand_loop(loop, depth=depth, line_number=line_number, name=name))
            return loop.end_line + 1

        if DIRECTIVE_MARKER not in line:
            output.append(line)
            return index + 1

        condition = detect_block("IF", lines, index, "ENDIF")
        if condition is not None:
            output.extend(
                self._evaluate_condition(
                    condition, context, depth=depth, line_number=line_number, name=name
                )
            )
            return condition.end_line + 1

        output.append(self._resolve_line(line, context))
        return index + 1

    def _expand_loop(
        self,
        loop: Block,
        *,
        depth: int,
        line_number: int,
        name: str | None,
    ) -> list[str]:
        """Repeat a FOR body once per color or text style, in project order."""
        contexts: list[TokenContext]
        if loop.identifier == COLOR_LOOP:
            contexts = [ColorContext(color) for color in self.project.colors]
        elif loop.identifier == TEXT_STYLE_LOOP:
            contexts = [TextStyleContext(text_style) for text_style in self.project.text_styles]
        else:
            raise UnknownLoopError(loop.identifier)

        logger.debug("Expanding FOR %s over %d items", loop.identifier, len(contexts))

        output: list[str] = []
        for context in contexts:
            output.extend(
                self._parse_lines(
                    loop.body, context, depth=depth + 1, first_line=line_number + 1, name=name
                )
            )
        return output

    def _evaluate_condition(
        self,
        condition: Block,
        context: TokenContext,
        *,
        depth: int,
        line_number: int,
        name: str | None,
    ) -> list[str]:
        """Keep or drop an IF body depending on whether its token has a value."""
        token = condition.identifier.split("|", 1)[0].strip()
        if context is None:
            raise UnknownTokenError(token)

        # An empty string is still a value.
        is_met = resolve_token(token, context, self.project.colors, strict=False) is not None
        logger.debug("IF %s evaluated to %s", token, is_met)

        if condition.is_inline:
            kept = condition.body if is_met else ()
            candidate = "".join([condition.pre_body or "", *kept, condition.post_body or ""])
            if not candidate.strip():
                return []
            return self._parse_lines(
                [candidate], context, depth=depth + 1, first_line=line_number, name=name
            )

        if not is_met:
            return []
        return self._parse_lines(
            condition.body, context, depth=depth + 1, first_line=line_number + 1, name=name
        )

    def _resolve_line(self, line: str, context: TokenContext) -> str:
        """Substitute every ``{{% token|transformation... %}}`` on a line.

        Identical token occurrences are resolved once. A token without a
        value is replaced by an empty string.
        """
        values: dict[str, str] = {}

        for match in _TOKEN_PATTERN.finditer(line):
            content = match.group(1).strip()
            if content in values:
                continue
            token, *transformation_names = content.split("|")
            pipeline = parse_pipeline(transformation_names)
            value = resolve_token(token.strip(), context, self.project.colors, pipeline)
            values[content] = value if value is not None else ""

        return _TOKEN_PATTERN.sub(lambda match: values[match.group(1).strip()], line)


def render_template(
    project: ProjectAssets,
    template: str,
    configuration: PrismConfiguration | None = None,
    *,
    name: str | None = None,
) -> str:
    """Parse a template against a project in one call."""
    return TemplateParser(project, configuration).parse(template, name=name)
