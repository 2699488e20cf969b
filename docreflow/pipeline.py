from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .comment import DESCRIPTION, Comment, convert_comment_desc_to_desc_tag, tag_label
from .config import FormatOptions, ProseWrap
from .formatter import description_end_line, format_description
from .utils.io import read_text_file, write_text_file
from .utils.logging import get_logger


@dataclass
class RunConfig:
    input: Optional[Path]  # None=stdin
    output: Optional[Path]  # None=stdout
    tag: str = DESCRIPTION
    label: str = ""
    column: int = 0
    print_width: int = 80
    with_dot: bool = False
    prose_wrap: ProseWrap = ProseWrap.KEEP
    log_level: str = "INFO"

    def format_options(self) -> FormatOptions:
        return FormatOptions(
            print_width=self.print_width,
            description_with_dot=self.with_dot,
            prose_wrap=self.prose_wrap,
        )


def format_comment(comment: Comment, column: int = 0, options: Optional[FormatOptions] = None) -> List[str]:
    """Format every tag body of a parsed comment, in order.

    The bare description is merged into the description tag first. Each
    returned body already carries its end-of-description separator.
    """
    options = options or FormatOptions()
    convert_comment_desc_to_desc_tag(comment)

    bodies = []
    last = len(comment.tags) - 1
    for index, tag in enumerate(comment.tags):
        tag.description = format_description(tag.tag, tag.description, tag_label(tag), column, options)
        bodies.append(tag.description + description_end_line(tag.tag, index == last))
    return bodies


def run(cfg: RunConfig) -> str:
    logger = get_logger()
    source = read_text_file(cfg.input) if cfg.input else sys.stdin.read()
    logger.debug(f"Formatting @{cfg.tag} description ({len(source)} chars) at column {cfg.column}")

    result = format_description(cfg.tag, source, cfg.label, cfg.column, cfg.format_options())
    if not result.endswith("\n"):
        result += "\n"

    if cfg.output is None:
        sys.stdout.write(result)
    else:
        written = write_text_file(cfg.output, result)
        logger.info(f"Saved: {written.path} ({written.bytes_written} bytes)")
    return result
