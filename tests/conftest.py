"""
Pytest configuration and shared fixtures for the changelog engine.

Provides:
- Environment configuration for tests (set before the package is imported)
- Sample changelogs in GitHub and Bitbucket compare-link styles
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

# Set test environment variables before any imports
os.environ.update({
    "CHANGELOG_LOG_LEVEL": "WARNING",  # Reduce noise during tests
    "CHANGELOG_LOG_STRUCTURED": "true",
})


GITHUB_STYLE_CHANGELOG = """# Changelog
All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](http://keepachangelog.com/en/1.0.0/)
and this project adheres to [Semantic Versioning](http://semver.org/spec/v2.0.0.html).

## [Unreleased]
### Fixed
- something broken
- some issue

### Removed
- some old stuff
- bad code

## [v0.3.0] - 2016-12-03
### Added
- This awesome feature
- More pewpew.

## [v0.2.0] - 2015-10-06
### Changed
- a thingy with some subpoints:
\t- this one
\t- that one
\t- yay!

### Deprecated
- legacy stuff
- args of some function

## [0.1.0] - 2014-09-02
### Security
- hard coded passwords have been removed
- stack overflow issue solved!

[Unreleased]: https://github.com/myuser/myproject/compare/v0.3.0...HEAD
[v0.3.0]: https://github.com/myuser/myproject/compare/v0.2.0...v0.3.0
[v0.2.0]: https://github.com/myuser/myproject/compare/v0.1.0...v0.2.0
[0.1.0]: https://github.com/myuser/myproject/compare/v0.0.8...v0.1.0
"""

GITHUB_STYLE_HEADER = """# Changelog
All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](http://keepachangelog.com/en/1.0.0/)
and this project adheres to [Semantic Versioning](http://semver.org/spec/v2.0.0.html).

"""

GITHUB_STYLE_REST = """## [v0.3.0] - 2016-12-03
### Added
- This awesome feature
- More pewpew.

## [v0.2.0] - 2015-10-06
### Changed
- a thingy with some subpoints:
\t- this one
\t- that one
\t- yay!

### Deprecated
- legacy stuff
- args of some function

## [0.1.0] - 2014-09-02
### Security
- hard coded passwords have been removed
- stack overflow issue solved!

"""

BITBUCKET_STYLE_CHANGELOG = """# Changelog
All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](http://keepachangelog.com/en/1.0.0/)
and this project adheres to [Semantic Versioning](http://semver.org/spec/v2.0.0.html).

## [Unreleased]
### Added
- add infrastructure resource catalog

[Unreleased]: https://bitbucket.org/helsternware/www.helstern.org/branches/compare/HEAD%0D8765b1b1f001ea69377bf4fe38fadc0953cf248f
"""


@pytest.fixture
def github_changelog() -> str:
    return GITHUB_STYLE_CHANGELOG


@pytest.fixture
def github_header() -> str:
    return GITHUB_STYLE_HEADER


@pytest.fixture
def github_rest() -> str:
    return GITHUB_STYLE_REST


@pytest.fixture
def bitbucket_changelog() -> str:
    return BITBUCKET_STYLE_CHANGELOG
