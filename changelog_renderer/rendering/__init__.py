"""Changelog classification and rendering module."""

from .classifier import CommitClassifier, render_package_names
from .contributors import collect_contributors, render_contributor, render_contributor_list
from .exceptions import ChangelogRenderError, MarkdownFormattingError
from .formatter import MarkdownFormatter, MdformatFormatter, PassthroughFormatter
from .markdown import MarkdownRenderer
from .models import CategoryGroup
from .sinks import DocumentSink, FileSystemDocumentSink, InMemoryDocumentSink

__all__ = [
    "CategoryGroup",
    "CommitClassifier",
    "render_package_names",
    "MarkdownRenderer",
    "render_contributor",
    "render_contributor_list",
    "collect_contributors",
    "MarkdownFormatter",
    "MdformatFormatter",
    "PassthroughFormatter",
    "DocumentSink",
    "FileSystemDocumentSink",
    "InMemoryDocumentSink",
    "ChangelogRenderError",
    "MarkdownFormattingError",
]
