"""
Window selection and line classification.

``target`` is the line number reported by the session, compared directly
against the 0-based scan cursor. With that convention the window holds
``lower`` lines before the current line, the current line itself (0-based
index ``target - 1``) and ``upper`` lines after it.
"""
from typing import Iterable, Iterator

from .models import ClassifiedLine, LineRole, WindowBounds


def in_window(cur: int, target: int, bounds: WindowBounds) -> bool:
    """Return True if the line at cursor ``cur`` is inside the window."""
    i = target - cur
    j = cur - target
    return (0 < i < bounds.lower + 2) or (0 <= j < bounds.upper)


def classify_line(cur: int, target: int, bounds: WindowBounds) -> LineRole:
    if not in_window(cur, target, bounds):
        return LineRole.SKIPPED
    if cur == target - 1:
        return LineRole.EMPHASIS
    return LineRole.INFO


def classify_lines(lines: Iterable[str], target: int, bounds: WindowBounds) -> Iterator[ClassifiedLine]:
    """Classify every line of ``lines`` in a single forward pass."""
    for cur, text in enumerate(lines):
        yield ClassifiedLine(cur, text, classify_line(cur, target, bounds))
