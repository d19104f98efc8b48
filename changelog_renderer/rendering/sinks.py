"""Document sinks receiving the per-group changelog documents."""

from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)


class DocumentSink(Protocol):
    """Protocol for destinations of rendered changelog documents."""

    def write(self, name: str, content: str) -> None:
        """Persist ``content`` under ``name``, replacing any previous document."""
        ...


class FileSystemDocumentSink:
    """Writes documents as files into a directory (the current working directory by default)."""

    def __init__(self, directory: Path | str | None = None) -> None:
        """Initialize with the target directory."""
        self.directory = Path(directory) if directory is not None else Path.cwd()

    def write(self, name: str, content: str) -> None:
        """Write the document to ``<directory>/<name>``."""
        path = self.directory / name
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote changelog document", path=str(path), length=len(content))


class InMemoryDocumentSink:
    """Keeps documents in a dictionary keyed by name."""

    def __init__(self) -> None:
        """Initialize with no documents."""
        self.documents: dict[str, str] = {}

    def write(self, name: str, content: str) -> None:
        """Store the document, replacing any previous one with the same name."""
        self.documents[name] = content
