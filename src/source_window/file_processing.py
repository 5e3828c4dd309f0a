"""
Source file access for the source command.
"""
import codecs
import logging
import os
from typing import Optional, TextIO

import chardet

from .config import Config
from .errors import SourceFileNotFoundError, SourceFileUnreadableError
from .session import Executable

logger = logging.getLogger(__name__)


class SourceFileService:
    """Opens source files and answers questions about them."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def detect_encoding(self, file_path: str) -> str:
        """
        Pick the encoding used to read a source file.

        The configured encoding wins. Otherwise a leading sample is tried as
        UTF-8, then handed to chardet, then latin-1 is used.
        """
        if self.config.source_encoding:
            return self.config.source_encoding

        with open(file_path, "rb") as f:
            sample = f.read(self.config.encoding_sample_bytes)

        try:
            # Incremental so a multi-byte sequence cut by the sample is not an error
            codecs.getincrementaldecoder("utf-8")().decode(sample, final=False)
            # utf-8-sig drops a leading byte-order mark
            return "utf-8-sig"
        except UnicodeDecodeError:
            pass

        detected = chardet.detect(sample)
        encoding = detected.get("encoding")
        if encoding:
            try:
                codecs.lookup(encoding)
                return encoding
            except LookupError:
                logger.debug(f"chardet suggested unknown encoding {encoding} for {file_path}")
        return "latin-1"

    def open_source(self, file_path: str) -> TextIO:
        """
        Open a source file for reading.

        Raises:
            SourceFileNotFoundError: If nothing exists at the path
            SourceFileUnreadableError: If the file cannot be opened or the
                encoding is unknown
        """
        if not os.path.exists(file_path):
            raise SourceFileNotFoundError(file_path)

        try:
            encoding = self.detect_encoding(file_path)
            handle = open(file_path, "r", encoding=encoding, errors="replace")
        except (OSError, LookupError) as e:
            # LookupError: unknown configured encoding
            raise SourceFileUnreadableError(file_path, e) from e

        logger.debug(f"Opened {file_path} as {encoding}")
        return handle

    def is_newer_than(self, file_path: str, executable: Optional[Executable]) -> bool:
        """Return True if the source file was modified after the executable."""
        if executable is None:
            return False
        try:
            return os.path.getmtime(file_path) > executable.last_write_time
        except OSError as e:
            logger.debug(f"Could not compare modification times of {file_path} and {executable.path}: {e}")
            return False
