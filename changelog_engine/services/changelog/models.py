"""Data model for parsed changelogs: categories, entries, references, documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterator, List, Optional, Tuple

UNRELEASED = "unreleased"
UNRELEASED_TAG = "Unreleased"


class Category(Enum):
    """The six change kinds, declared in the order they are serialized."""
    ADDED = "Added"
    CHANGED = "Changed"
    DEPRECATED = "Deprecated"
    FIXED = "Fixed"
    REMOVED = "Removed"
    SECURITY = "Security"

    @property
    def label(self) -> str:
        return self.value

    @property
    def field_name(self) -> str:
        """Name of the Entry attribute holding this category's body."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "Category":
        """Resolve a label case-insensitively ("fixed", "FIXED", "Fixed")."""
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown changelog category: {label!r}") from None


def trim_blank_lines(text: str) -> str:
    """Drop leading and trailing blank lines, keeping inner lines untouched."""
    lines = text.split("\n")
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])


@dataclass
class Entry:
    """One release bucket: a dated version or the Unreleased section."""

    tag: str
    added: Optional[str] = None
    changed: Optional[str] = None
    deprecated: Optional[str] = None
    fixed: Optional[str] = None
    removed: Optional[str] = None
    security: Optional[str] = None
    release_date: Optional[date] = None
    yanked: bool = False

    @property
    def is_unreleased(self) -> bool:
        return self.tag.lower() == UNRELEASED

    @property
    def is_empty(self) -> bool:
        return not any(self.get(category) for category in Category)

    def get(self, category: Category) -> Optional[str]:
        return getattr(self, category.field_name)

    def set(self, category: Category, text: Optional[str]) -> None:
        """Replace a category body; blank text clears the category."""
        body = trim_blank_lines(text) if text else ""
        setattr(self, category.field_name, body or None)

    def merge(self, category: Category, text: str) -> None:
        """Append a block below the existing body of a category."""
        current = self.get(category)
        self.set(category, f"{current}\n{text}" if current else text)

    def add(self, category: Category, line: str) -> None:
        """Append a single line, typically a "- something" bullet."""
        self.merge(category, line.rstrip("\n"))

    def categories(self) -> Iterator[Tuple[Category, str]]:
        """Yield non-empty (category, body) pairs in serialization order."""
        for category in Category:
            body = self.get(category)
            if body:
                yield category, body


class ReferenceKind(Enum):
    """How a link-reference-definition line is re-emitted."""
    COMPARE = "compare"
    PLAIN = "plain"


@dataclass(frozen=True)
class Reference:
    """A markdown link-reference-definition, e.g. a version compare link."""

    tag: str
    raw: str
    kind: ReferenceKind = ReferenceKind.PLAIN
    target: Optional[str] = None

    # Compare links only: BASE_URL/compare/FROM_TAG<SEPARATOR>TO_TAG
    base_url: Optional[str] = None
    from_tag: Optional[str] = None
    to_tag: Optional[str] = None
    separator: Optional[str] = None
    spacing: str = " "

    @property
    def is_compare(self) -> bool:
        return self.kind is ReferenceKind.COMPARE

    def render(self) -> str:
        """Line text without terminator."""
        if self.is_compare:
            return f"[{self.tag}]:{self.spacing}{self.base_url}/compare/{self.from_tag}{self.separator}{self.to_tag}"
        return self.raw


@dataclass
class Document:
    """
    A parsed changelog.

    ``rest`` keeps everything after the header that is neither the Unreleased
    section nor a reference line, byte for byte, so history is re-emitted
    without re-formatting. ``entries`` holds the same history in structured
    form; ``unreleased`` is the very Entry object found in ``entries``.
    """

    header: str = ""
    entries: List[Entry] = field(default_factory=list)
    unreleased: Entry = field(default_factory=lambda: Entry(UNRELEASED_TAG))
    rest: str = ""
    references: List[Reference] = field(default_factory=list)

    @property
    def releases(self) -> List[Entry]:
        """Entries other than Unreleased, in document order."""
        return [entry for entry in self.entries if entry is not self.unreleased]

    @property
    def latest_release(self) -> Optional[Entry]:
        releases = self.releases
        return releases[0] if releases else None

    def find(self, tag: str) -> Optional[Entry]:
        """Case-insensitive lookup of an entry by tag."""
        wanted = tag.lower()
        for entry in self.entries:
            if entry.tag.lower() == wanted:
                return entry
        return None

    def find_reference(self, tag: str) -> Optional[Reference]:
        wanted = tag.lower()
        for reference in self.references:
            if reference.tag.lower() == wanted:
                return reference
        return None
