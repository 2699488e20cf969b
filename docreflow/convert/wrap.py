from __future__ import annotations


# Slack that lets the last fragment overrun instead of leaving a near-empty line.
EXTRA_LAST_LINE_WIDTH = 10


def break_description_to_lines(text: str, max_width: int, beginning_space: str = "") -> str:
    """Greedy word wrap of a single flat paragraph.

    Continuation lines are prefixed with ``beginning_space``. A token longer
    than ``max_width`` is never split; it overruns on its own line.
    """
    rest = text.strip()
    if not rest:
        return rest

    result = ""
    while len(rest) > max_width + EXTRA_LAST_LINE_WIDTH:
        slice_index = rest.rfind(" ", 0, max(max_width, 0) + 1)
        if slice_index <= len(beginning_space):
            # first token is wider than the line, emit it whole
            slice_index = rest.find(" ", len(beginning_space) + 1)
        if slice_index == -1:
            break

        result += rest[:slice_index]
        rest = "\n" + beginning_space + rest[slice_index + 1 :]

    return result + rest
