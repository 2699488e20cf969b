from __future__ import annotations

import re
from typing import Callable, List, Sequence, Tuple

from ..comment import DESCRIPTION
from ..config import FormatOptions
from ..utils.text import capitalizer, collapse_whitespace
from .signatures import Boundary
from .tokenizer import Encoded
from .wrap import break_description_to_lines


# Outermost split first; each boundary is rejoined with its separator.
_LEVELS: Sequence[Tuple[Boundary, str]] = (
    (Boundary.PARAGRAPH_THREE_SPACE, "\n\n    "),
    (Boundary.EMPTY_LINE, "\n\n"),
    (Boundary.LINE_NUMBER, "\n"),
    (Boundary.PARAGRAPH_DASH, "\n\n- "),
    (Boundary.LINE_DASH, "\n- "),
)

COMMENT_GUTTER = 3  # ` * `
CONTINUATION_INDENT = "    "

_trailing_word_re = re.compile(r"(\w)\Z")


def max_content_width(tag_label: str, column: int, options: FormatOptions) -> int:
    return max(options.print_width - column - COMMENT_GUTTER, len(tag_label))


def _split_join(text: str, levels: Sequence[Tuple[Boundary, str]], leaf: Callable[[str], str]) -> str:
    if not levels:
        return leaf(text)
    boundary, separator = levels[0]
    return separator.join(_split_join(part, levels[1:], leaf) for part in text.split(boundary.value))


def _leaf_formatter(max_width: int, beginning_space: str, with_dot: bool, guard: str = "") -> Callable[[str], str]:
    def format_leaf(paragraph: str) -> str:
        paragraph = capitalizer(collapse_whitespace(paragraph).strip())
        # a leaf holding only the label guard has no text to end with a period
        if with_dot and paragraph != guard:
            paragraph = _trailing_word_re.sub(r"\1.", paragraph)
        return ("\n" + CONTINUATION_INDENT).join(
            break_description_to_lines(piece, max_width, beginning_space)
            for piece in paragraph.split(Boundary.LINE_THREE_SPACE.value)
        )

    return format_leaf


def splice_code(text: str, codes: List[str]) -> str:
    if not codes:
        return text
    parts = text.split(Boundary.CODE.value)
    out = parts[0]
    for index, part in enumerate(parts[1:]):
        out += (codes[index] if index < len(codes) else "") + part
    return out


def reflow(encoded: Encoded, tag: str, tag_label: str, column: int, options: FormatOptions) -> str:
    """Rebuild the structure of ``encoded`` with every leaf paragraph rewrapped.

    A guard of underscores as wide as ``tag_label`` is kept in front of the
    first line while wrapping so the label's width is accounted for, and
    removed afterwards.
    """
    guard = "_" * len(tag_label)
    text = guard + capitalizer(encoded.text)

    beginning_space = "" if tag == DESCRIPTION else CONTINUATION_INDENT
    leaf = _leaf_formatter(
        max_content_width(tag_label, column, options), beginning_space, options.description_with_dot, guard
    )
    text = _split_join(text, _LEVELS, leaf)

    text = splice_code(text, encoded.codes)
    if guard and text.startswith(guard):
        text = text[len(guard) :]
    return text
