"""
Services that separate the source command's logic from presentation.
"""

from .source_service import SourceService

__all__ = [
    'SourceService',
]
