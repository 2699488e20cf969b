from __future__ import annotations

from typing import Any, Dict

import mdformat

from ..config import FormatOptions, ProseWrap


class FormatError(Exception):
    """The markdown printer rejected its input."""


def printer_options(options: FormatOptions, width: int) -> Dict[str, Any]:
    opts = dict(options.markdown)
    opts["wrap"] = max(width, 1) if options.prose_wrap is ProseWrap.ALWAYS else "keep"
    return opts


def pretty_print(text: str, options: FormatOptions, width: int) -> str:
    """Format ``text`` as markdown with mdformat.

    Any printer failure is raised as :class:`FormatError`.
    """
    try:
        return mdformat.text(text, options=printer_options(options, width))
    except Exception as e:
        raise FormatError(str(e)) from e
