from __future__ import annotations

from typing import Callable, Optional

from .comment import DESCRIPTION, TAGS_WITH_END_LINE
from .config import FormatOptions
from .convert.markdown import FormatError, pretty_print
from .convert.reassemble import reflow
from .convert.tokenizer import encode
from .utils.logging import get_logger


Printer = Callable[[str, FormatOptions, int], str]

LIST_MARKER = "- "


def description_end_line(tag: str, is_end_tag: bool) -> str:
    if is_end_tag:
        return ""
    if tag in TAGS_WITH_END_LINE:
        return "\n"
    return ""


def _print_markdown(text: str, options: FormatOptions, width: int, printer: Printer) -> str:
    try:
        return printer(text, options, width).strip()
    except FormatError as e:
        get_logger().debug(f"Markdown formatting failed, keeping reflowed text: {e}")
        return text


def _print_as_list_item(text: str, options: FormatOptions, width: int, printer: Printer) -> str:
    # A one-line tag body only gets list-style formatting when printed as a list item.
    printed = _print_markdown(LIST_MARKER + text, options, width, printer)
    if printed.startswith(LIST_MARKER):
        printed = printed[len(LIST_MARKER) :]
    return printed


def format_description(
    tag: str,
    text: str,
    tag_label: str = "",
    column: int = 0,
    options: Optional[FormatOptions] = None,
    printer: Printer = pretty_print,
) -> str:
    """Reflow a tag description to the configured width.

    Tags outside ``options.tags_to_format`` and empty text are returned
    unchanged. When the markdown printer fails the reflowed text is used.
    """
    options = options or FormatOptions()
    if tag not in options.tags_to_format:
        return text
    if not text:
        return text

    text = reflow(encode(text), tag, tag_label, column, options)

    width = options.print_width - column
    if tag != DESCRIPTION and not text.startswith(LIST_MARKER):
        text = _print_as_list_item(text, options, width, printer)
    else:
        text = _print_markdown(text, options, width, printer)

    return text or ""
