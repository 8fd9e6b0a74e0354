"""Finding the locale files to validate."""

from pathlib import Path
from typing import List, Optional, Union

import structlog

logger = structlog.get_logger(__name__)


def discover_locale_files(
    directory: Union[str, Path],
    pattern: str = "*.json",
    exclude: Optional[str] = None,
) -> List[Path]:
    """List locale files directly under ``directory``.

    Args:
        directory: Directory to search (not recursive)
        pattern: Glob pattern for locale files
        exclude: File name to leave out, normally the reference locale

    Returns:
        Matching files sorted by name
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Locale directory not found", dir=str(directory))
        return []

    files = sorted(
        (path for path in directory.glob(pattern) if path.is_file() and path.name != exclude),
        key=lambda path: path.name,
    )
    logger.debug("Discovered locale files", dir=str(directory), count=len(files))
    return files
