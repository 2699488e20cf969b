from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping

from .comment import TAGS_NEED_FORMAT_DESCRIPTION


class ProseWrap(str, Enum):
    KEEP = "keep"
    ALWAYS = "always"  # lets mdformat rewrap at print_width - column


# camelCase keys accepted by FormatOptions.from_mapping
_ALIASES = {
    "printWidth": "print_width",
    "jsdocDescriptionWithDot": "description_with_dot",
    "proseWrap": "prose_wrap",
}


@dataclass
class FormatOptions:
    print_width: int = 80
    description_with_dot: bool = False
    tags_to_format: FrozenSet[str] = TAGS_NEED_FORMAT_DESCRIPTION
    prose_wrap: ProseWrap = ProseWrap.KEEP
    # Forwarded as-is to mdformat
    markdown: Dict[str, Any] = field(default_factory=lambda: {"number": True})

    def __post_init__(self) -> None:
        self.prose_wrap = ProseWrap(self.prose_wrap)
        self.tags_to_format = frozenset(self.tags_to_format)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormatOptions":
        """Build options from a flat mapping.

        Known keys (snake_case or the camelCase spelling) become fields;
        everything else is forwarded to the markdown printer.
        """
        known: Dict[str, Any] = {}
        markdown: Dict[str, Any] = {"number": True}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name == "markdown":
                markdown.update(value)
            elif name in cls.__dataclass_fields__:
                known[name] = value
            else:
                markdown[key] = value
        return cls(markdown=markdown, **known)
