"""
Collects local files to upload.
"""
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List

from loguru import logger

from ..exceptions import LocalSourceError
from ..models.data_models import AccessLevel, FileEntry


class FileCollector:
    """Walks a local directory and produces FileEntry objects."""

    def __init__(self, access_level: AccessLevel = AccessLevel.PUBLIC_READ, exclude: Iterable[str] = ()):
        self.access_level = access_level
        self.exclude = list(exclude)

    def _is_excluded(self, relative_path: str) -> bool:
        return any(fnmatch(relative_path, pattern) for pattern in self.exclude)

    def collect(self, root: str) -> List[FileEntry]:
        """
        Collect every file under root, sorted by relative path.

        Args:
            root: Local directory to walk

        Returns:
            List of FileEntry with POSIX relative paths

        Raises:
            LocalSourceError: If root does not exist or is not a directory
        """
        base_path = Path(root).expanduser()
        if not base_path.exists():
            raise LocalSourceError(f"Local directory does not exist: {base_path}")
        if not base_path.is_dir():
            raise LocalSourceError(f"Local path must be a directory: {base_path}")

        entries: List[FileEntry] = []
        for file_path in sorted(base_path.rglob('*')):
            if not file_path.is_file():
                continue

            relative_path = file_path.relative_to(base_path).as_posix()
            if self._is_excluded(relative_path):
                logger.debug(f"Excluding {relative_path}")
                continue

            entries.append(FileEntry(
                relative_path=relative_path,
                local_source_path=str(file_path),
                access_level=self.access_level
            ))

        logger.info(f"Collected {len(entries)} files from {base_path}")
        return entries
