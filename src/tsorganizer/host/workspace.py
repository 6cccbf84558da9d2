"""
Workspace host: the glue between files on disk and the organizer core.

Entry points used by the CLI (and by editor integrations):
- organize_file: organize a single file (command / save hook)
- organize_all: organize every TypeScript file under a directory
"""

import os
import tempfile
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from tsorganizer.config.models import Configuration
from tsorganizer.exceptions import ParseError
from tsorganizer.host.file_filter import FileFilter
from tsorganizer.host.text_source import FileSystemTextSource, TextSource
from tsorganizer.logging_config import logger
from tsorganizer.organizer.facade import organize

SOURCE_EXTENSIONS = (".ts", ".tsx", ".mts", ".cts")

DEFAULT_IGNORE_DIRS = {"node_modules", ".git"}


@dataclass
class FileOutcome:
    """What happened to one file."""
    path: str
    status: str  # organized | unchanged | skipped | failed
    reason: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class OrganizeReport:
    """Summary of a multi-file run."""
    outcomes: List[FileOutcome] = field(default_factory=list)

    @property
    def files(self) -> int:
        return len(self.outcomes)

    @property
    def organized(self) -> int:
        return sum(1 for o in self.outcomes if o.status == "organized")

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.status == "failed")

    def to_dict(self) -> dict:
        return {
            "files": self.files,
            "organized": self.organized,
            "failed": self.failed,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }


class WorkspaceOrganizer:
    """
    Organize files that belong to a workspace.

    Each file is independent; the configuration is shared read-only.
    """

    def __init__(
        self,
        workspace_root: Path,
        configuration: Configuration,
        text_source: Optional[TextSource] = None,
        check_only: bool = False,
    ):
        """
        Args:
            workspace_root: Root that include/exclude patterns are relative to
            configuration: Resolved configuration
            text_source: Where current file text comes from (filesystem by default)
            check_only: Report changes without writing them
        """
        self.workspace_root = Path(workspace_root).resolve()
        self.configuration = configuration
        self.text_source = text_source or FileSystemTextSource()
        self.check_only = check_only
        self.file_filter = FileFilter(configuration.files)

    def relative_path(self, path: Path) -> str:
        return Path(os.path.relpath(path, self.workspace_root)).as_posix()

    def organize_file(self, path: Path) -> FileOutcome:
        """
        Organize one file and write it back if it changed.

        Read and parse errors are reported in the outcome, not raised.
        """
        path = Path(path).resolve()

        if path.suffix.lower() not in SOURCE_EXTENSIONS:
            return FileOutcome(str(path), "skipped", "is not a TypeScript file")

        should_organize, reason = self.file_filter.check(self.relative_path(path))
        if not should_organize:
            logger.info(f"tsorganizer skipping organizing {path}, because it {reason}")
            return FileOutcome(str(path), "skipped", reason)

        try:
            source_text = self.text_source.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"tsorganizer failed to read {path}: {e}")
            return FileOutcome(str(path), "failed", str(e))

        try:
            result = organize(str(path), source_text, self.configuration)
        except ParseError as e:
            logger.error(f"tsorganizer failed to organize {path}: {e}")
            return FileOutcome(str(path), "failed", str(e))

        if not result.changed:
            logger.info(f"tsorganizer skipping organizing {path}, because it is already organized")
            return FileOutcome(str(path), "unchanged")

        if self.check_only:
            logger.info(f"tsorganizer would organize {path}")
            return FileOutcome(str(path), "organized")

        if not self._atomic_write(path, result.output_text):
            return FileOutcome(str(path), "failed", "write failed")

        logger.info(f"tsorganizer organized {path}")
        return FileOutcome(str(path), "organized")

    def organize_files(self, paths: Iterable[Path]) -> OrganizeReport:
        report = OrganizeReport()
        for path in paths:
            report.outcomes.append(self.organize_file(path))
        return report

    def organize_all(self, directory: Optional[Path] = None) -> OrganizeReport:
        """Organize every TypeScript file under directory (workspace root by default)."""
        report = self.organize_files(self.find_source_files(directory or self.workspace_root))
        if report.organized > 0:
            logger.info(f"tsorganizer organized {report.organized} of {report.files} files")
        else:
            logger.info("tsorganizer did not find any files in need of organizing")
        return report

    def find_source_files(self, directory: Path) -> List[Path]:
        found = []
        for root, dirs, files in os.walk(directory):
            # Prune ignored directories in-place
            dirs[:] = sorted(d for d in dirs if d not in DEFAULT_IGNORE_DIRS)
            for file_name in sorted(files):
                if Path(file_name).suffix.lower() in SOURCE_EXTENSIONS:
                    found.append(Path(root) / file_name)
        return found

    def _atomic_write(self, path: Path, content: str) -> bool:
        """
        Write file atomically using temp file + rename.

        Returns:
            True if successful
        """
        fd, temp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.chmod(temp_path, path.stat().st_mode)
            os.replace(temp_path, str(path))
            logger.debug(f"Atomic write completed: {path}")
            return True
        except OSError as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            logger.error(f"Failed during atomic write: {e}")
            return False
