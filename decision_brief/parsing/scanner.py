"""
Label scanner: the text primitives behind recommendation field extraction.

Every field in a report entry is read with the same two steps:

  1. Find the label (a fixed literal such as ``"- Status:"``).
  2. Capture from just after the label up to the *earliest* occurrence of any
     terminator in a fixed set, or to the end of the text.

Step 2 is a minimal capture: with several terminators present, the nearest
one wins regardless of the order the terminators are listed in. All functions
here are pure and never raise on missing labels; absence is reported as
``None`` or ``-1``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


def label_ends(text: str, label: str) -> Iterator[int]:
    """Yield the index just past each occurrence of ``label`` in ``text``."""
    pos = text.find(label)
    while pos != -1:
        end = pos + len(label)
        yield end
        pos = text.find(label, end)


def earliest(text: str, needles: tuple[str, ...], start: int = 0) -> int:
    """Return the lowest index >= ``start`` at which any needle occurs, or -1."""
    hits = [i for i in (text.find(n, start) for n in needles) if i != -1]
    return min(hits) if hits else -1


def capture_until(text: str, start: int, terminators: tuple[str, ...]) -> str:
    """Return ``text[start:]`` cut at the nearest terminator."""
    end = earliest(text, terminators, start)
    return text[start:] if end == -1 else text[start:end]


def capture_field(
    text: str,
    label: str,
    terminators: tuple[str, ...],
) -> Optional[str]:
    """Capture the trimmed value following the first ``label`` in ``text``.

    Args:
        text:        Text to scan (one recommendation block).
        label:       Field label literal.
        terminators: Strings that end the value.

    Returns:
        The stripped value, or ``None`` if the label does not occur.
    """
    start = next(label_ends(text, label), None)
    if start is None:
        return None
    return capture_until(text, start, terminators).strip()


def skip_whitespace(text: str, pos: int) -> int:
    """Return the first index >= ``pos`` that is not whitespace."""
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def first_line(text: str) -> str:
    """Return ``text`` up to (not including) the first line break."""
    return text.split("\n", 1)[0]
