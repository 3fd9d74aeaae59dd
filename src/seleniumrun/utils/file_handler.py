import logging
import re
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9 ._-]+")


def ensure_directory_exists(dir_path: Path) -> None:
    """Ensures that the specified directory exists, creating it if necessary."""
    try:
        if not dir_path.exists():
            dir_path.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created directory: {dir_path}")
        elif not dir_path.is_dir():
            logger.error(f"Path exists but is not a directory: {dir_path}")
            raise NotADirectoryError(f"{dir_path} exists but is not a directory.")
    except OSError as e:
        logger.error(f"Error creating directory {dir_path}: {e}")
        raise


def clean_filename(value: Optional[str], fallback: str) -> str:
    """Replaces characters that are unsafe in file names with '_'."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub('_', (value or '').strip()).strip(' .')
    return cleaned or fallback
