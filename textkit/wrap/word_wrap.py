"""Greedy word wrapping that keeps the input's own spacing.

The wrapper never rebuilds lines from a word list. It walks the text once and
turns selected whitespace characters into newlines, so every other character,
including runs of spaces, is kept verbatim.

Column accounting:
    * A line and the whitespace character that ends it must fit in ``width``
      columns, so a wrapped line holds at most ``width - 1`` characters.
    * An existing newline is a forced break. It restarts the count and takes
      up the first column of the line that follows it.
    * Whitespace only becomes a break once the line holds a word, so
      wrapping never produces a line without one. Leading whitespace stays
      on the line it starts, as does whitespace trailing the last word
      before a newline or the end of the text.
    * A word that does not fit on a line of its own is not split. It stays
      whole and the line ends at the next whitespace or forced break.
"""

from __future__ import annotations

import logging

from ..const import DEFAULT_LINE_WIDTH, WRAP_BREAK_CHARS
from ..validation import validate_text_input, validate_width

_LOGGER = logging.getLogger(__name__)


def _blank_tail_end(text: str, start: int) -> int | None:
    """Return the end of the line at ``start`` if only whitespace is left on it."""
    end = start
    while end < len(text) and text[end] != "\n":
        if text[end] not in WRAP_BREAK_CHARS:
            return None
        end += 1
    return end


def word_wrap(text: str, width: int = DEFAULT_LINE_WIDTH) -> str:
    """Reflow text to ``width`` columns by breaking at whitespace.

    Args:
        text: Text to wrap. Newlines in it are kept as forced breaks, so
            blank lines between paragraphs survive.
        width: Number of columns per line.

    Returns:
        The wrapped text, of the same length as the input.

    Raises:
        ParameterError: If ``width`` is not a positive integer.
    """
    text = validate_text_input(text)
    width = validate_width(width)

    out = list(text)
    size = len(text)
    pos = 0
    while pos < size:
        last_break: int | None = None
        line_start = pos
        has_word = False
        column = 0
        while column < width:
            if pos == size:
                return "".join(out)
            char = text[pos]
            if char == "\n":
                column = 0
                last_break = None
                line_start = pos + 1
                has_word = False
            elif char in WRAP_BREAK_CHARS:
                # a break before the first word would leave an empty line
                if has_word:
                    last_break = pos
            else:
                has_word = True
            pos += 1
            column += 1

        if last_break is not None:
            tail_end = _blank_tail_end(text, last_break)
            if tail_end is not None:
                pos = tail_end
                continue
            out[last_break] = "\n"
            pos = last_break + 1
            continue

        # Nowhere to break: let the first word overflow up to its end
        while pos < size and text[pos] != "\n":
            if text[pos] in WRAP_BREAK_CHARS:
                if has_word:
                    break
            else:
                has_word = True
            pos += 1
        if pos - line_start > width:
            _LOGGER.debug("Unbreakable line of %d chars exceeds wrap width %d", pos - line_start, width)
        if pos < size and text[pos] != "\n":
            tail_end = _blank_tail_end(text, pos)
            if tail_end is not None:
                pos = tail_end
                continue
            out[pos] = "\n"
            pos += 1

    return "".join(out)
