from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Pattern, Tuple

from .signatures import Boundary


_code_re = re.compile(r"```((?!```).*\n)+```")

# Order matters: a span rewritten into a marker can no longer match a later rule.
_RULES: List[Tuple[Pattern[str], str]] = [
    # Description
    #
    # # Example
    #
    # Summary
    (re.compile(r"\A[ \t]*(#+)[ \t]+(.*)\s*"), r"\1 \2\n\n"),
    (re.compile(r"\s*\n[ \t]*(#+)[ \t]+(.*)\s*"), r"\n\n\1 \2\n\n"),
    # 1. a thing
    #
    # 2. another thing
    (re.compile(r"\A(\d+)[-.][\s\-.|]+"), r"\1. "),
    (re.compile(r"\s+(\d+)[-.][\s\-.|]+"), Boundary.LINE_NUMBER.value + r"\1. "),
    (re.compile(r"(\n\n\s\s\s+)|(\n\s+\n\s\s\s+)"), Boundary.PARAGRAPH_THREE_SPACE.value),
    # `\n\n - ` | `\n\n-` | `\n\n -` | `\n\n- `
    (re.compile(r"\n\n+\s*-\s*"), Boundary.PARAGRAPH_DASH.value),
    # `\n - ` | `\n-` | `\n -` | `\n- `
    (re.compile(r"\n\s*-\s*"), Boundary.LINE_DASH.value),
    (re.compile(r"(\n\n)|(\n\s+\n)"), Boundary.EMPTY_LINE.value),
    (re.compile(r"\n\s\s\s+"), Boundary.LINE_THREE_SPACE.value),
]


@dataclass
class Encoded:
    text: str
    codes: List[str] = field(default_factory=list)


def extract_code_blocks(text: str) -> Encoded:
    codes = [m.group(0) for m in _code_re.finditer(text)]
    for code in codes:
        text = text.replace(code, f"\n\n{Boundary.CODE.value}\n\n", 1)
    return Encoded(text=text, codes=codes)


def encode(text: str) -> Encoded:
    """Rewrite structural boundaries of ``text`` into :class:`Boundary` markers.

    Fenced code blocks are lifted out first and kept verbatim in
    ``Encoded.codes`` so that no rule can alter them.
    """
    encoded = extract_code_blocks(text)
    out = encoded.text
    for pattern, repl in _RULES:
        out = pattern.sub(repl, out)
    encoded.text = out
    return encoded
