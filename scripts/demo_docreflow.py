from __future__ import annotations

import argparse

from docreflow.comment import Comment, Tag
from docreflow.config import FormatOptions
from docreflow.pipeline import format_comment
from docreflow.utils.logging import setup_logger


SAMPLE = Comment(
    description=(
        "resolves a user record from the cache, falling back to the database when the entry is missing or "
        "has expired.\n\n"
        "# Lookup order\n"
        "1- memory cache\n"
        "2- redis\n"
        "3- postgres\n\n"
        "```js\n"
        "const user = await resolveUser(id,   { fresh: true });\n"
        "```"
    ),
    tags=[
        Tag(tag="param", name="id", type="string", description="identifier of the user that should be resolved"),
        Tag(tag="param", name="opts", type="object", optional=True, description="lookup options\n- fresh: skip caches\n- timeout: in ms"),
        Tag(tag="returns", type="Promise<User>", description="the resolved user"),
    ],
)


def main():
    p = argparse.ArgumentParser(description="Demo runner for docreflow")
    p.add_argument("--print-width", type=int, default=80, help="Target line width")
    p.add_argument("--column", type=int, default=0, help="Indentation column of the comment")
    p.add_argument("--with-dot", action="store_true", help="End descriptions with a period")
    p.add_argument("--log-level", default="INFO", help="Log level")
    args = p.parse_args()

    setup_logger(args.log_level)
    options = FormatOptions(print_width=args.print_width, description_with_dot=args.with_dot)
    for tag, body in zip(SAMPLE.tags, format_comment(SAMPLE, args.column, options)):
        print(f"[demo] @{tag.tag}")
        print(body)


if __name__ == "__main__":
    main()
