"""
Changelog parser for "Keep a Changelog" documents.

Single pass over the input: every line is classified (see ``patterns``) and
folded into a Document by a small state machine. Two views of history are
built in the same pass:
- structured Entry objects (tag, date, six category bodies)
- the raw ``rest`` text, kept verbatim so unmodified history round-trips

Only the Unreleased section is left out of ``rest``; it is regenerated from
its Entry when the document is rendered.
"""

from __future__ import annotations

import codecs
import io
import re
import time
from datetime import date
from enum import Enum
from typing import IO, Iterator, List, Optional, Union

from ...config.settings import settings
from ...utils.logging import get_logger, log_error, log_timing
from .models import UNRELEASED_TAG, Category, Document, Entry, Reference, ReferenceKind, trim_blank_lines
from .patterns import ClassifiedLine, LineKind, classify_line

logger = get_logger(__name__)

ChangelogSource = Union[str, bytes, IO[str], IO[bytes]]

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class ChangelogError(Exception):
    """Base error for changelog parsing."""


class ChangelogReadError(ChangelogError):
    """The input stream could not be read or decoded."""


class ReleaseDateError(ChangelogError, ValueError):
    """A version heading carries a date that is not a valid YYYY-MM-DD day."""

    def __init__(self, value: str, line_number: int, line: str):
        self.value = value
        self.line_number = line_number
        self.line = line
        super().__init__(f"Invalid release date {value!r} on line {line_number}: {line!r}")


class ParserState(Enum):
    """Where the assembler is relative to headings and subheadings."""
    BEFORE_HEADER = "before_header"
    IN_ENTRY = "in_entry"
    IN_CATEGORY = "in_category"
    # Past the first heading with no entry open (after a reference line)
    IN_REFERENCES = "in_references"


def parse_release_date(value: str, line_number: int, line: str) -> date:
    """Parse an ISO calendar date from a version heading."""
    if not ISO_DATE_RE.match(value):
        raise ReleaseDateError(value, line_number, line)
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ReleaseDateError(value, line_number, line) from None


class _DocumentAssembler:
    """Mutable cursors and text buffers for one parse."""

    def __init__(self):
        self.state = ParserState.BEFORE_HEADER
        self.document = Document()
        self.current: Optional[Entry] = None
        self.category: Optional[Category] = None
        self.unreleased_seen = False

        self.header: List[str] = []
        self.rest: List[str] = []
        self.category_buffer: List[str] = []

    # ---- transitions -------------------------------------------------

    def feed(self, classified: ClassifiedLine, line_number: int) -> None:
        kind = classified.kind
        if kind is LineKind.UNRELEASED_HEADING:
            self._on_unreleased_heading(classified)
        elif kind is LineKind.VERSION_HEADING:
            self._on_version_heading(classified, line_number)
        elif kind is LineKind.CATEGORY_HEADING and self.current is not None:
            self._on_category_heading(classified)
        elif kind.is_reference and self.state is not ParserState.BEFORE_HEADER:
            self._on_reference(classified)
        else:
            # Includes subheadings outside an entry and references in the header
            self._on_content(classified.text)

    def _on_unreleased_heading(self, classified: ClassifiedLine) -> None:
        self._open_entry(Entry(classified.tag))
        self.document.unreleased = self.current
        self.unreleased_seen = True

    def _on_version_heading(self, classified: ClassifiedLine, line_number: int) -> None:
        release_date = None
        if classified.date:
            try:
                release_date = parse_release_date(classified.date, line_number, classified.text)
            except ReleaseDateError as e:
                logger.warning(f"Rejecting version heading on line {line_number}", extra=log_error(e, line_number=line_number))
                raise
        self._open_entry(Entry(classified.tag, release_date=release_date, yanked=classified.yanked))
        self._append_text(classified.text)

    def _on_category_heading(self, classified: ClassifiedLine) -> None:
        self._flush_category()
        self.category = Category.from_label(classified.category)
        self.state = ParserState.IN_CATEGORY
        self._append_text(classified.text)

    def _on_reference(self, classified: ClassifiedLine) -> None:
        # A reference line terminates the entry above it
        self._close_entry()
        self.state = ParserState.IN_REFERENCES
        self.document.references.append(self._build_reference(classified))

    def _on_content(self, text: str) -> None:
        if self.state is ParserState.IN_CATEGORY:
            self.category_buffer.append(text)
        self._append_text(text)

    # ---- helpers -----------------------------------------------------

    def _open_entry(self, entry: Entry) -> None:
        if self.state is ParserState.BEFORE_HEADER:
            self.document.header = "".join(f"{line}\n" for line in self.header)
        self._close_entry()
        logger.debug(f"Opening changelog entry {entry.tag!r}")
        self.current = entry
        self.state = ParserState.IN_ENTRY

    def _close_entry(self) -> None:
        if self.current is not None:
            self._flush_category()
            self.document.entries.append(self.current)
            self.current = None
        self.category = None
        self.category_buffer = []

    def _flush_category(self) -> None:
        if self.category is not None and self.current is not None:
            body = trim_blank_lines("\n".join(self.category_buffer))
            if body:
                self.current.merge(self.category, body)
        self.category_buffer = []

    def _append_text(self, text: str) -> None:
        if self.state is ParserState.BEFORE_HEADER:
            self.header.append(text)
        elif self.current is None or self.current is not self.document.unreleased:
            self.rest.append(text)

    @staticmethod
    def _build_reference(classified: ClassifiedLine) -> Reference:
        if classified.kind is LineKind.COMPARE_REFERENCE:
            return Reference(
                tag=classified.tag,
                raw=classified.text,
                kind=ReferenceKind.COMPARE,
                spacing=classified.spacing,
                base_url=classified.base_url,
                from_tag=classified.from_tag,
                to_tag=classified.to_tag,
                separator=classified.separator,
            )
        return Reference(tag=classified.tag, raw=classified.text, target=classified.target)

    def finish(self) -> Document:
        document = self.document
        self._close_entry()
        if self.state is ParserState.BEFORE_HEADER:
            document.header = "".join(f"{line}\n" for line in self.header)
        document.rest = "".join(f"{line}\n" for line in self.rest)

        if not self.unreleased_seen:
            # Rendered right after the header, so that is where it lives
            document.unreleased = Entry(UNRELEASED_TAG)
            document.entries.insert(0, document.unreleased)
        return document


class ChangelogParser:
    """
    Parser turning changelog text into a Document.

    The parser itself is stateless between calls; each ``parse`` runs its own
    assembler, so one instance may be reused.
    """

    def __init__(self, encoding: Optional[str] = None):
        """Initialize parser; ``encoding`` applies to bytes input."""
        self.encoding = encoding or settings.input_encoding
        logger.debug(f"Initialized ChangelogParser with encoding {self.encoding}")

    def parse(self, source: ChangelogSource) -> Document:
        """
        Parse a changelog.

        Args:
            source: Text, bytes, or a readable text/binary stream

        Returns:
            Parsed Document

        Raises:
            ChangelogReadError: The source could not be read or decoded
            ReleaseDateError: A version heading has an invalid date
        """
        started = time.perf_counter()
        assembler = _DocumentAssembler()
        line_number = 0

        for line_number, line in enumerate(self._iter_lines(source), start=1):
            assembler.feed(classify_line(line), line_number)

        document = assembler.finish()

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"Parsed changelog: {len(document.entries)} entries, {len(document.references)} references",
            extra=log_timing(
                "parse_changelog",
                duration_ms,
                lines=line_number,
                entries=len(document.entries),
                references=len(document.references),
            ),
        )
        return document

    def _iter_lines(self, source: ChangelogSource) -> Iterator[str]:
        """Yield lines without terminators; a trailing carriage return is dropped."""
        if isinstance(source, str):
            stream = io.StringIO(source, newline="\n")
        elif isinstance(source, (bytes, bytearray)):
            stream = io.BytesIO(source)
        else:
            stream = source

        decoder = codecs.getincrementaldecoder(self.encoding)()
        try:
            for chunk in stream:
                if isinstance(chunk, (bytes, bytearray)):
                    chunk = decoder.decode(chunk)
                yield self._strip_terminator(chunk)
            # Raises on a truncated multi-byte sequence at end of input
            tail = decoder.decode(b"", final=True)
            if tail:
                yield self._strip_terminator(tail)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read changelog source", extra=log_error(e))
            raise ChangelogReadError(f"Failed to read changelog: {e}") from e

    @staticmethod
    def _strip_terminator(line: str) -> str:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line


# Module-level convenience functions
_parser = None

def get_changelog_parser() -> ChangelogParser:
    """Get singleton changelog parser instance."""
    global _parser
    if _parser is None:
        _parser = ChangelogParser()
    return _parser


def parse_changelog(source: ChangelogSource) -> Document:
    """Parse a changelog using the singleton parser."""
    return get_changelog_parser().parse(source)
