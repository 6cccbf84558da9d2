"""
Include/exclude matching for workspace-relative paths.
"""

from typing import Optional, Tuple

import pathspec

from tsorganizer.config.models import FilesConfig


def _normalize(relative_path: str) -> str:
    return relative_path.replace("\\", "/").replace("../", "").replace("./", "")


class FileFilter:
    """
    Decide which files the host hands to the organizer.

    An empty include list includes everything; exclude wins over include.
    """

    def __init__(self, files: FilesConfig):
        self.include = pathspec.PathSpec.from_lines("gitignore", files.include) if files.include else None
        self.exclude = pathspec.PathSpec.from_lines("gitignore", files.exclude) if files.exclude else None

    @staticmethod
    def _matches(spec: pathspec.PathSpec, relative_path: str) -> bool:
        return spec.match_file(relative_path.replace("\\", "/")) or spec.match_file(_normalize(relative_path))

    def check(self, relative_path: str) -> Tuple[bool, Optional[str]]:
        """
        Returns:
            (should_organize, reason when skipped)
        """
        if self.include is not None and not self._matches(self.include, relative_path):
            return False, "does not match file include patterns"
        if self.exclude is not None and self._matches(self.exclude, relative_path):
            return False, "matches file exclude patterns"
        return True, None

    def __call__(self, relative_path: str) -> bool:
        return self.check(relative_path)[0]
