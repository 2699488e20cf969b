from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


DESCRIPTION = "description"
EXAMPLE = "example"
TODO = "todo"
PARAM = "param"
PROPERTY = "property"
RETURNS = "returns"
THROWS = "throws"
YIELDS = "yields"
DEPRECATED = "deprecated"
SINCE = "since"
SUMMARY = "summary"
CATEGORY = "category"
BORROWS = "borrows"
SEE = "see"

# Tags whose description is reflowed; everything else passes through untouched.
TAGS_NEED_FORMAT_DESCRIPTION = frozenset(
    {
        BORROWS,
        CATEGORY,
        DEPRECATED,
        DESCRIPTION,
        PARAM,
        PROPERTY,
        RETURNS,
        SINCE,
        SUMMARY,
        THROWS,
        TODO,
        YIELDS,
    }
)

# Tags followed by a blank line when another tag comes after them.
TAGS_WITH_END_LINE = frozenset({DESCRIPTION, EXAMPLE, TODO})


@dataclass
class Tag:
    tag: str
    description: str = ""
    name: str = ""
    type: str = ""
    optional: bool = False
    default: Optional[str] = None
    line: int = 0


@dataclass
class Comment:
    description: str = ""
    tags: List[Tag] = field(default_factory=list)


def tag_label(tag: Tag) -> str:
    """Text printed before the description on the tag's first line."""
    if tag.tag == DESCRIPTION:
        return ""
    parts = [f"@{tag.tag}"]
    if tag.type:
        parts.append(f"{{{tag.type}}}")
    if tag.name:
        name = tag.name
        if tag.optional:
            name = f"[{name}={tag.default}]" if tag.default is not None else f"[{name}]"
        parts.append(name)
    return " ".join(parts) + " "


def find_description_tag(comment: Comment) -> Optional[Tag]:
    for tag in comment.tags:
        if tag.tag.lower() == DESCRIPTION:
            return tag
    return None


def convert_comment_desc_to_desc_tag(comment: Comment) -> None:
    """Fold the comment's bare description into its ``description`` tag.

    The existing tag body comes first and the bare text is appended. When
    the comment has no such tag, one is added. Call once per parsed comment.
    """
    if not comment.description:
        return

    desc_tag = find_description_tag(comment)
    description = (desc_tag.description if desc_tag else "") + comment.description

    if desc_tag is not None:
        desc_tag.description = description
    else:
        comment.tags.append(Tag(tag=DESCRIPTION, description=description))
