"""Contains exceptions raised while rendering changelogs."""


class ChangelogRenderError(Exception):
    """Base class for errors raised while rendering changelog documents."""

    pass


class MarkdownFormattingError(ChangelogRenderError):
    """Raised when the markdown formatter rejects a generated document."""

    def __init__(self, message: str, markdown: str) -> None:
        """Initializes the exception with the markdown that failed to format."""
        super().__init__(message)
        self.markdown = markdown
