"""
Changelog Services Module
Parse and regenerate "Keep a Changelog" documents.

Components:
- Line classifier: tags headings, category subheadings, references, content
- Parser: single-pass assembler building the Document model
- Serializer: regenerates Unreleased, re-emits history and references verbatim
"""

from .models import Category, Document, Entry, Reference, ReferenceKind
from .parser import (
    ChangelogError,
    ChangelogParser,
    ChangelogReadError,
    ParserState,
    ReleaseDateError,
    get_changelog_parser,
    parse_changelog,
)
from .patterns import ClassifiedLine, LineKind, classify_line
from .serializer import render_document, render_entry, write_document, write_entry

__all__ = [
    # Model
    'Category',
    'Document',
    'Entry',
    'Reference',
    'ReferenceKind',

    # Classifier
    'ClassifiedLine',
    'LineKind',
    'classify_line',

    # Parser
    'ChangelogParser',
    'ParserState',
    'get_changelog_parser',
    'parse_changelog',

    # Errors
    'ChangelogError',
    'ChangelogReadError',
    'ReleaseDateError',

    # Serializer
    'render_document',
    'render_entry',
    'write_document',
    'write_entry'
]
