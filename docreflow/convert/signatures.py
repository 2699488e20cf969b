from __future__ import annotations

from enum import Enum


class Boundary(str, Enum):
    """Structural boundaries that survive whitespace collapsing.

    Values are NUL-delimited so they never appear in real comment text and
    are left alone by whitespace, capitalization and dot rules.
    """

    EMPTY_LINE = "\x00docreflow:empty-line\x00"
    LINE_THREE_SPACE = "\x00docreflow:line-three-space\x00"
    LINE_DASH = "\x00docreflow:line-dash\x00"
    PARAGRAPH_DASH = "\x00docreflow:paragraph-dash\x00"
    LINE_NUMBER = "\x00docreflow:line-number\x00"
    PARAGRAPH_THREE_SPACE = "\x00docreflow:paragraph-three-space\x00"
    CODE = "\x00docreflow:code\x00"

    def __str__(self) -> str:
        return self.value
