"""Data models used while rendering changelogs."""

from dataclasses import dataclass, field

from changelog_renderer.schemas.release import Commit


@dataclass
class CategoryGroup:
    """Commits of a release that fall under one category label."""

    name: str | None
    commits: list[Commit] = field(default_factory=list)

    def __bool__(self) -> bool:
        """A group is truthy when it holds at least one commit."""
        return bool(self.commits)
