"""
Source Window - the source|src debugger command: show the source around the current stack frame.
"""

from .errors import (
    SourceCommandError,
    NoActiveFrameError,
    InvalidLowerBoundError,
    InvalidUpperBoundError,
    NoSourceInfoError,
    SourceFileNotFoundError,
    SourceFileUnreadableError
)
