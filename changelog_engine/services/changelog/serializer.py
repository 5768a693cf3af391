"""Render parsed changelogs back to markdown text."""

from __future__ import annotations

from typing import IO

from ...utils.logging import get_logger
from .models import Document, Entry

logger = get_logger(__name__)


def render_entry(entry: Entry) -> str:
    """
    Render one entry in the regenerated style.

    Categories come out in the fixed Added, Changed, Deprecated, Fixed,
    Removed, Security order; empty ones are left out.
    """
    parts = [f"## [{entry.tag}]"]
    if entry.release_date is not None:
        parts.append(f" - {entry.release_date.isoformat()}")
    if entry.yanked:
        parts.append(" [YANKED]")
    parts.append("\n")

    for category, body in entry.categories():
        parts.append(f"### {category.label}\n{body}\n\n")

    return "".join(parts)


def render_document(document: Document) -> str:
    """Header, regenerated Unreleased block, verbatim history, then references."""
    parts = [document.header, render_entry(document.unreleased), document.rest]
    parts.extend(f"{reference.render()}\n" for reference in document.references)
    return "".join(parts)


def write_entry(entry: Entry, stream: IO[str]) -> int:
    """Write a rendered entry to ``stream``; returns characters written."""
    return stream.write(render_entry(entry))


def write_document(document: Document, stream: IO[str]) -> int:
    """Write a rendered document to ``stream``; returns characters written."""
    written = stream.write(render_document(document))
    logger.debug(f"Wrote changelog ({written} characters, {len(document.references)} references)")
    return written
