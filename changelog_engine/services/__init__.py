"""
Services Package
Document processing services for the changelog engine.
"""

# Changelog Services
from .changelog import *

__all__ = [
    'Category',
    'Document',
    'Entry',
    'Reference',
    'ReferenceKind',
    'ChangelogParser',
    'ChangelogError',
    'ChangelogReadError',
    'ReleaseDateError',
    'parse_changelog',
    'render_document',
    'render_entry'
]
