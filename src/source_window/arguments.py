"""
Argument parsing for the source command.
"""
import re
from typing import Optional

from .config import Config
from .errors import InvalidLowerBoundError, InvalidUpperBoundError
from .models import WindowBounds


_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_int(token: str) -> Optional[int]:
    # ASCII digits with an optional sign only
    if not _INT_PATTERN.fullmatch(token.strip()):
        return None
    return int(token)


def parse_window_bounds(args: str, config: Optional[Config] = None) -> WindowBounds:
    """
    Parse the trailing argument string of ``source|src [lower] [upper]``.

    The lower bound is always made non-negative. The upper bound is used as
    given unless ``config.normalize_upper_bound`` is set.

    Args:
        args: Raw argument string (may be empty)
        config: Configuration supplying the default bounds

    Returns:
        The parsed window bounds

    Raises:
        InvalidLowerBoundError: If the first token is not an integer
        InvalidUpperBoundError: If the remaining text is not an integer
    """
    config = config or Config()
    lower = config.default_lower
    upper = config.default_upper

    tokens = args.split()
    if not tokens:
        return WindowBounds(lower, upper)

    lower_str = tokens[0]
    value = _parse_int(lower_str)
    if value is None:
        raise InvalidLowerBoundError(lower_str)
    lower = abs(value)

    # Everything after the first token, not just the second token
    rest = args.lstrip()[len(lower_str):].strip()
    if rest:
        value = _parse_int(rest)
        if value is None:
            raise InvalidUpperBoundError(rest)
        upper = abs(value) if config.normalize_upper_bound else value

    return WindowBounds(lower, upper)
