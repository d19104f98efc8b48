"""General utility functions for deriving keys from release names."""

from changelog_renderer.utils.constants import ORGANIZATION_PREFIX_PATTERN


def strip_organization_prefix(release_name: str, scope_prefix: str | None = None) -> str:
    """Remove the organization prefix from a release name.

    When ``scope_prefix`` is given, its first occurrence is removed verbatim
    (e.g. ``"@ant-design/pro-"``). Otherwise a leading ``@org/`` segment is removed.
    """
    if scope_prefix:
        return release_name.replace(scope_prefix, "", 1)
    return ORGANIZATION_PREFIX_PATTERN.sub("", release_name, count=1)


def strip_version_suffix(release_name: str) -> str:
    """Remove a trailing '@<version>' from a release name without an organization prefix."""
    return release_name.split("@")[0]


def derive_release_scope(release_name: str, scope_prefix: str | None = None) -> str:
    """Derive the package scope of a release (e.g. '@scope/pkg@1.2.3' -> 'pkg').

    The scope doubles as the key releases are sorted and grouped by.
    """
    return strip_version_suffix(strip_organization_prefix(release_name, scope_prefix))
