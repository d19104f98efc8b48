"""Markdown formatting collaborators used as the final pass over rendered documents."""

from typing import Protocol

import mdformat
import structlog

from .exceptions import MarkdownFormattingError

logger = structlog.get_logger(__name__)

SUPPORTED_PARSERS = ("markdown",)


class MarkdownFormatter(Protocol):
    """Protocol for formatters normalizing rendered markdown."""

    def format(self, markdown: str, parser: str = "markdown") -> str:
        """Return the normalized form of ``markdown``.

        Raises:
            MarkdownFormattingError: If the markdown cannot be formatted.
        """
        ...


def check_parser(parser: str, markdown: str) -> None:
    """Raise if the requested parser mode is not supported."""
    if parser not in SUPPORTED_PARSERS:
        raise MarkdownFormattingError(f"Unsupported parser mode '{parser}'", markdown)


class MdformatFormatter:
    """Formats markdown with mdformat, keeping YAML front matter intact."""

    def __init__(self, print_width: int | None = None, extensions: tuple[str, ...] = ("frontmatter",)) -> None:
        """Initialize with the wrap width (None keeps existing line breaks) and mdformat extensions."""
        self.print_width = print_width
        self.extensions = extensions

    def format(self, markdown: str, parser: str = "markdown") -> str:
        """Format markdown with mdformat."""
        check_parser(parser, markdown)
        wrap: int | str = self.print_width if self.print_width is not None else "keep"
        try:
            return mdformat.text(markdown, options={"wrap": wrap}, extensions=self.extensions)
        except Exception as exc:
            logger.error("Failed to format markdown", error=str(exc), length=len(markdown))
            raise MarkdownFormattingError(f"Failed to format markdown: {exc}", markdown) from exc


class PassthroughFormatter:
    """Returns markdown unchanged; used where exact assembled output matters."""

    def format(self, markdown: str, parser: str = "markdown") -> str:
        """Return the markdown as-is."""
        check_parser(parser, markdown)
        return markdown
