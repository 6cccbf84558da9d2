"""
Host layer: file discovery, filtering and I/O around the organizer core.
"""

from .text_source import TextSource, FileSystemTextSource, BufferTextSource
from .file_filter import FileFilter
from .workspace import WorkspaceOrganizer, FileOutcome, OrganizeReport, SOURCE_EXTENSIONS

__all__ = [
    "TextSource",
    "FileSystemTextSource",
    "BufferTextSource",
    "FileFilter",
    "WorkspaceOrganizer",
    "FileOutcome",
    "OrganizeReport",
    "SOURCE_EXTENSIONS",
]
