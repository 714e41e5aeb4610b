"""
Block detection for FOR and IF directives.

A block opens with ``{{% <KEYWORD> <identifier> %}}`` and closes with the
matching ``{{% END<KEYWORD> %}}``. Nested blocks of the same keyword are
tracked with a depth counter so an inner block never closes the outer one.

Block form (directives on their own lines)::

    {{% IF color.identity %}}
    static let {{% color.identity.camelcase %}} = ...
    {{% ENDIF %}}

Inline form (directives share a line with other text)::

    case {{% textStyle.identity %}}{{% IF textStyle.lineHeight %}} // lh{{% ENDIF %}}

The opening line decides the form. Text around the closing directive of a
block-form IF is ignored. FOR blocks are always in block form: text beside
their directives is ignored, and a FOR that closes on its opening line is an
error.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from functools import lru_cache

from .errors import InlineLoopError, OpenBlockError

DIRECTIVE_MARKER = "{{%"
LOOP_KEYWORD = "FOR"


@dataclass(frozen=True)
class Block:
    """
    A detected FOR/IF block.

    Attributes:
        identifier: Loop identifier or condition token
        body: Lines strictly between the opening and closing directives.
            For inline blocks, the text between them.
        end_line: Index of the line holding the closing directive
        pre_body: Text before the opening directive (inline blocks only)
        post_body: Text after the closing directive (inline blocks only)
    """

    identifier: str
    body: tuple[str, ...]
    end_line: int
    pre_body: str | None = None
    post_body: str | None = None

    @property
    def is_inline(self) -> bool:
        return self.pre_body is not None and self.post_body is not None


@lru_cache(maxsize=None)
def _open_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(r"\{\{%\s*" + re.escape(keyword) + r"\s+(?P<identifier>\S+?)\s*%\}\}")


@lru_cache(maxsize=None)
def _close_pattern(end_keyword: str) -> re.Pattern[str]:
    return re.compile(r"\{\{%\s*" + re.escape(end_keyword) + r"\s*%\}\}")


def _directives(
    text: str,
    position: int,
    opener: re.Pattern[str],
    closer: re.Pattern[str],
) -> Iterator[tuple[bool, re.Match[str]]]:
    """Yield ``(is_open, match)`` for every directive from ``position``, in text order."""
    matches = [(True, match) for match in opener.finditer(text, position)]
    matches += [(False, match) for match in closer.finditer(text, position)]
    yield from sorted(matches, key=lambda item: item[1].start())


def detect_block(
    keyword: str,
    lines: Sequence[str],
    start: int,
    end_keyword: str | None = None,
) -> Block | None:
    """Detect a block opening on ``lines[start]``.

    Args:
        keyword: ``FOR`` or ``IF``.
        lines: Template lines.
        start: Index of the line that may open the block.
        end_keyword: Closing keyword, ``END<keyword>`` by default.

    Returns:
        The block, or None if ``lines[start]`` doesn't open one.

    Raises:
        OpenBlockError: If the block is never closed.
        InlineLoopError: If a FOR block opens and closes on one line.
    """
    end_keyword = end_keyword or f"END{keyword}"
    opener = _open_pattern(keyword)
    closer = _close_pattern(end_keyword)

    first_line = lines[start]
    opening = opener.search(first_line)
    if opening is None:
        return None

    identifier = opening.group("identifier")
    depth = 1

    for index in range(start, len(lines)):
        position = opening.end() if index == start else 0
        for is_open, match in _directives(lines[index], position, opener, closer):
            depth += 1 if is_open else -1
            if depth == 0:
                return _make_block(keyword, identifier, lines, start, opening, index, match)

    raise OpenBlockError(keyword, identifier)


def _make_block(
    keyword: str,
    identifier: str,
    lines: Sequence[str],
    start: int,
    opening: re.Match[str],
    end: int,
    closing: re.Match[str],
) -> Block:
    first_line = lines[start]
    last_line = lines[end]

    if keyword == LOOP_KEYWORD:
        if end == start:
            raise InlineLoopError(identifier)
        return Block(identifier=identifier, body=tuple(lines[start + 1 : end]), end_line=end)

    pre_body = first_line[: opening.start()]
    opens_alone = not pre_body.strip() and not first_line[opening.end() :].strip()

    # Text sharing a line with the closing directive only counts for inline blocks.
    if opens_alone:
        return Block(identifier=identifier, body=tuple(lines[start + 1 : end]), end_line=end)

    if end == start:
        body: tuple[str, ...] = (first_line[opening.end() : closing.start()],)
    else:
        body = (
            first_line[opening.end() :],
            *lines[start + 1 : end],
            last_line[: closing.start()],
        )

    return Block(
        identifier=identifier,
        body=body,
        end_line=end,
        pre_body=pre_body,
        post_body=last_line[closing.end() :],
    )
