"""Pydantic contracts exposed for reporting."""

from .changelog import ChangelogReport, EntryReport, ReferenceReport, validate_report_json

__all__ = ["ChangelogReport", "EntryReport", "ReferenceReport", "validate_report_json"]
