# changelog_engine package initialization
"""
Changelog Engine - Source Package
Parses "Keep a Changelog" documents and regenerates their Unreleased section
while re-emitting every other line verbatim.
"""

__version__ = "1.0.0"
__description__ = "Round-trip parser and serializer for Keep a Changelog documents"

from .services.changelog import (
    Category,
    ChangelogError,
    ChangelogParser,
    ChangelogReadError,
    Document,
    Entry,
    Reference,
    ReferenceKind,
    ReleaseDateError,
    parse_changelog,
    render_document,
    render_entry,
    write_document,
)

# Alias used by callers that think in "parse" / "render" pairs
render_changelog = render_document

__all__ = [
    "Category",
    "ChangelogError",
    "ChangelogParser",
    "ChangelogReadError",
    "Document",
    "Entry",
    "Reference",
    "ReferenceKind",
    "ReleaseDateError",
    "parse_changelog",
    "render_changelog",
    "render_document",
    "render_entry",
    "write_document",
    "config",
    "schemas",
    "services",
    "utils",
]
