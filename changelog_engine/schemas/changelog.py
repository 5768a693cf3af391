"""Report contract for parsed changelogs, with validation."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..services.changelog.models import Document, Entry, Reference


class EntryReport(BaseModel):
    tag: str
    release_date: Optional[date] = None
    yanked: bool = False
    unreleased: bool = False
    # Category label -> body, only non-empty categories, in serialization order
    categories: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_entry(cls, entry: Entry) -> "EntryReport":
        return cls(
            tag=entry.tag,
            release_date=entry.release_date,
            yanked=entry.yanked,
            unreleased=entry.is_unreleased,
            categories={category.label: body for category, body in entry.categories()},
        )


class ReferenceReport(BaseModel):
    tag: str
    kind: str
    raw: str
    target: Optional[str] = None
    base_url: Optional[str] = None
    from_tag: Optional[str] = None
    to_tag: Optional[str] = None
    separator: Optional[str] = None

    @classmethod
    def from_reference(cls, reference: Reference) -> "ReferenceReport":
        return cls(
            tag=reference.tag,
            kind=reference.kind.value,
            raw=reference.raw,
            target=reference.target,
            base_url=reference.base_url,
            from_tag=reference.from_tag,
            to_tag=reference.to_tag,
            separator=reference.separator,
        )


class ChangelogReport(BaseModel):
    """Structured, JSON-serializable view of a parsed changelog."""

    unreleased: EntryReport
    entries: List[EntryReport] = Field(default_factory=list)
    references: List[ReferenceReport] = Field(default_factory=list)

    @classmethod
    def from_document(cls, document: Document) -> "ChangelogReport":
        return cls(
            unreleased=EntryReport.from_entry(document.unreleased),
            entries=[EntryReport.from_entry(entry) for entry in document.entries],
            references=[ReferenceReport.from_reference(ref) for ref in document.references],
        )


def validate_report_json(obj: dict) -> ChangelogReport:
    """Validate and return ChangelogReport, raising verbose errors."""
    try:
        return ChangelogReport.model_validate(obj)
    except ValidationError as exc:
        errors = [f"{e['loc']}: {e['msg']}" for e in exc.errors()]
        raise ValueError("Invalid changelog report: " + "; ".join(errors)) from exc
