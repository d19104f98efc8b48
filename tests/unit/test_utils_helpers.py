"""Unit tests for release name helpers: strip_organization_prefix, strip_version_suffix and derive_release_scope."""

import pytest

from changelog_renderer.utils.helpers import derive_release_scope, strip_organization_prefix, strip_version_suffix


@pytest.mark.parametrize(
    "release_name,scope_prefix,expected",
    [
        ("@scope/pkg@1.2.3", None, "pkg@1.2.3"),
        ("pkg@1.2.3", None, "pkg@1.2.3"),
        ("@ant-design/pro-table@2.0.0", "@ant-design/pro-", "table@2.0.0"),
        ("@ant-design/pro-table@2.0.0", None, "pro-table@2.0.0"),
        ("___unreleased___", None, "___unreleased___"),
    ],
)
def test_strip_organization_prefix(release_name: str, scope_prefix: str | None, expected: str) -> None:
    """Test strip_organization_prefix with and without a configured prefix."""
    assert strip_organization_prefix(release_name, scope_prefix) == expected


@pytest.mark.parametrize(
    "release_name,expected",
    [
        ("pkg@1.2.3", "pkg"),
        ("pkg", "pkg"),
        ("pkg@1.0.0-beta.1", "pkg"),
        ("", ""),
    ],
)
def test_strip_version_suffix(release_name: str, expected: str) -> None:
    """Test strip_version_suffix with various release names."""
    assert strip_version_suffix(release_name) == expected


@pytest.mark.parametrize(
    "release_name,scope_prefix,expected",
    [
        ("@scope/pkg@1.2.3", None, "pkg"),
        ("@scope/pkg", None, "pkg"),
        ("pkg@1.2.3", None, "pkg"),
        ("@ant-design/pro-layout@6.5.0", "@ant-design/pro-", "layout"),
        ("___unreleased___", None, "___unreleased___"),
    ],
)
def test_derive_release_scope(release_name: str, scope_prefix: str | None, expected: str) -> None:
    """Test derive_release_scope strips both the organization prefix and the version."""
    assert derive_release_scope(release_name, scope_prefix) == expected
