from __future__ import annotations

import re


_url_re = re.compile(r"^https?://", re.IGNORECASE)
_ws_re = re.compile(r"\s+")


def capitalizer(text: str) -> str:
    if not text:
        return text
    if _url_re.match(text):
        return text
    if text.startswith("- "):
        return "- " + capitalizer(text[2:])
    return text[0].upper() + text[1:]


def collapse_whitespace(text: str) -> str:
    return _ws_re.sub(" ", text)
