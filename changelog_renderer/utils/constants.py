"""Shared constants used across the application."""

import re

# Release Constants
# -----------------

UNRELEASED_TAG = "___unreleased___"
"""Reserved release name for commits that have not been tagged into a version yet."""

DEFAULT_CATEGORIES = ["UI", "fix", "feat"]
"""Default category labels, in the order their sections appear in a release."""

DEFAULT_UNRELEASED_NAME = "Unreleased"
"""Default display name for the unreleased release heading."""

OTHER_PACKAGES_LABEL = "Other"
"""Package label used for commits that do not touch any known package."""

# Regex Patterns
# --------------

ORGANIZATION_PREFIX_PATTERN = re.compile(r"^@[^/@]+/")
"""Pattern to match an npm-style organization prefix (e.g. @scope/) on a release name."""

ISSUE_CLOSING_PATTERN = re.compile(r"(fix|close|resolve)(e?s|e?d)? [T#](\d+)", re.IGNORECASE)
"""Pattern to match issue-closing references like 'Fixes #42' or 'resolved T7' in issue titles."""

# Rendering Constants
# -------------------

BREAKING_CHANGE_MARKER = "💥"
"""Marker placed in front of conventional-commit feature entries."""

BUG_MARKER = "🐛"
"""Marker placed in front of conventional-commit fix entries."""

RELEASE_CHORE_MARKER = "chore(release)"
"""Commits whose message contains this are release bookkeeping and never rendered."""

CHANGELOG_DOCUMENT_SUFFIX = ".changelog.md"
"""Suffix of per-group changelog documents handed to the document sink."""

CHANGELOG_DOCUMENT_TEMPLATE = "changelog_document.j2"
"""File name of the Jinja2 template wrapping per-group changelog documents."""

SHORT_SHA_LENGTH = 7
"""Number of SHA characters shown in commit link text."""
