"""
Persists generated source files.
"""

from pathlib import Path
from typing import Union

from .errors import FilesystemWriteError, PreexistingTargetError
from ...logging_config import get_logger

logger = get_logger(__name__)

DIRECTORY_MODE = 0o777


class SourceWriter:
    """Writes generated source, refusing to clobber existing files."""

    def write(self, path: Union[str, Path], content: str, force: bool = False) -> Path:
        """
        Write ``content`` to ``path``.

        Args:
            path: Destination file
            content: Full file content
            force: Overwrite an existing file

        Returns:
            The written path

        Raises:
            PreexistingTargetError: If the file exists and ``force`` is not set
            FilesystemWriteError: If the directory or file cannot be written
        """
        target = Path(path)

        if target.exists() and not force:
            logger.info("Refusing to overwrite %s", target)
            raise PreexistingTargetError(target)

        self.make_directory(target)

        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FilesystemWriteError(f"Failed to write {target}: {e}") from e

        logger.info("Wrote %d characters to %s", len(content), target)
        return target

    def make_directory(self, path: Path) -> Path:
        """Build the parent directory of ``path`` if necessary."""
        directory = path.parent
        if not directory.is_dir():
            try:
                directory.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
            except OSError as e:
                raise FilesystemWriteError(
                    f"Failed to create directory {directory}: {e}"
                ) from e
            logger.debug("Created directory %s", directory)
        return path
