"""
Line classifier for "Keep a Changelog" documents.

Tags every line of a changelog as one of:
- ## [Unreleased]
- ## [v0.3.0] - 2016-12-03  /  ## [0.1.0]  /  ## 1.2.0 - 2020-01-01
- ### Added (and the other five category subheadings)
- [v0.3.0]: https://github.com/user/project/compare/v0.2.0...v0.3.0
- [Keep a Changelog]: http://keepachangelog.com/
- anything else (content)

Patterns are evaluated in a fixed precedence; the first match wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern, Tuple


class LineKind(Enum):
    """Classification of a single changelog line."""
    UNRELEASED_HEADING = "unreleased_heading"
    VERSION_HEADING = "version_heading"
    CATEGORY_HEADING = "category_heading"
    COMPARE_REFERENCE = "compare_reference"
    PLAIN_REFERENCE = "plain_reference"
    CONTENT = "content"

    @property
    def is_heading(self) -> bool:
        """True for the level-2 headings that open an entry."""
        return self in (LineKind.UNRELEASED_HEADING, LineKind.VERSION_HEADING)

    @property
    def is_reference(self) -> bool:
        return self in (LineKind.COMPARE_REFERENCE, LineKind.PLAIN_REFERENCE)


# Version tag: optional "v", then a digit, then alphanumerics, dots and hyphens
VERSION_TAG = r"v?[0-9][0-9A-Za-z.\-]*"
RELEASE_DATE = r"(?P<date>[0-9\-]+)"
CATEGORY_LABELS = r"added|changed|deprecated|fixed|removed|security"
# Keep a Changelog marks pulled releases with a trailing "[YANKED]"
YANKED_MARKER = r"(?:\s+\[(?P<yanked>yanked)\])?"

UNRELEASED_HEADING_RE = re.compile(r"^##\s*\[?(?P<tag>unreleased)\]?\s*$", re.IGNORECASE)

# "## [TAG]", "## [TAG] - DATE" and the bare "## TAG", "## TAG - DATE" forms.
# The bare form needs whitespace before the dash so hyphenated tags stay whole.
VERSION_HEADING_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(rf"^##\s*\[(?P<tag>{VERSION_TAG})\](?:\s*-?\s*{RELEASE_DATE})?{YANKED_MARKER}\s*$", re.IGNORECASE),
    re.compile(rf"^##\s*(?P<tag>{VERSION_TAG})(?:\s+-\s*{RELEASE_DATE})?{YANKED_MARKER}\s*$", re.IGNORECASE),
)

CATEGORY_HEADING_RE = re.compile(rf"^###\s+(?P<category>{CATEGORY_LABELS})\s*$", re.IGNORECASE)

# Host agnostic: GitHub uses "...", Bitbucket uses "%0D" between the two refs
COMPARE_REFERENCE_RE = re.compile(
    r"^\[(?P<tag>[^\]]+)\]:(?P<spacing>\s*)(?P<base_url>.*)/compare/(?P<from_tag>.*)(?P<separator>\.\.\.|%0D)(?P<to_tag>.*)$",
    re.IGNORECASE,
)
PLAIN_REFERENCE_RE = re.compile(r"^\[(?P<tag>[^\]]+)\]:\s*(?P<target>.*)$")


@dataclass(frozen=True)
class ClassifiedLine:
    """A line together with its classification and captured fields."""

    kind: LineKind
    text: str
    tag: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None

    # Reference decomposition
    base_url: Optional[str] = None
    from_tag: Optional[str] = None
    separator: Optional[str] = None
    to_tag: Optional[str] = None
    target: Optional[str] = None
    # Whitespace between "]:" and the URL, kept for byte-identical rebuilds
    spacing: Optional[str] = None
    yanked: bool = False


def classify_line(line: str) -> ClassifiedLine:
    """
    Classify one line of a changelog.

    Args:
        line: Line text without its terminator

    Returns:
        ClassifiedLine for the first pattern that matches, CONTENT otherwise
    """
    m = UNRELEASED_HEADING_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.UNRELEASED_HEADING, line, tag=m.group("tag"))

    for pattern in VERSION_HEADING_PATTERNS:
        m = pattern.match(line)
        if m:
            return ClassifiedLine(
                LineKind.VERSION_HEADING,
                line,
                tag=m.group("tag"),
                date=m.group("date"),
                yanked=m.group("yanked") is not None,
            )

    m = CATEGORY_HEADING_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.CATEGORY_HEADING, line, category=m.group("category"))

    m = COMPARE_REFERENCE_RE.match(line)
    if m:
        d = m.groupdict()
        return ClassifiedLine(
            LineKind.COMPARE_REFERENCE,
            line,
            tag=d["tag"],
            spacing=d["spacing"],
            base_url=d["base_url"],
            from_tag=d["from_tag"],
            separator=d["separator"],
            to_tag=d["to_tag"],
        )

    m = PLAIN_REFERENCE_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.PLAIN_REFERENCE, line, tag=m.group("tag"), target=m.group("target"))

    return ClassifiedLine(LineKind.CONTENT, line)
