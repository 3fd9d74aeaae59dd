import logging
import os
from typing import Optional

from ..errors import DebugLogFileError, PathTooLong
from .constants import DEBUG_LOG_HEADER, MAX_PATH_LENGTH

logger = logging.getLogger(__name__)


def _split_log_path(raw_path: str):
    if raw_path.startswith('.'):
        # Leading-dot paths land in the parent of the directory they name:
        # './logs/sel.log' -> '<cwd>/sel.log'.
        folder = os.path.dirname(os.path.abspath(os.path.dirname(raw_path)))
    else:
        folder = os.path.dirname(raw_path)
    folder = os.path.abspath(folder) if folder.strip() else os.getcwd()

    name, ext = os.path.splitext(os.path.basename(raw_path))
    # Path is usually passed on the command line, so spaces are dropped.
    name = name.replace(' ', '')
    return folder, name, ext


def fit_path_length(folder: str, name: str, ext: str, limit: int = MAX_PATH_LENGTH) -> str:
    """
    Returns the file name, truncated from the end so folder + name + ext + 2
    separators fits within limit.

    Raises:
        PathTooLong: the folder leaves no room for any part of the name.
    """
    total = len(folder) + len(name) + len(ext) + 2
    logger.debug(f"Selenium Debug File TotalPathLength = {total}")
    if total <= limit:
        return name

    excess = total - limit
    if len(folder) - len(name) - len(ext) - 2 > limit or excess >= len(name):
        logger.debug(f"Debug log folder length {len(folder)} so cannot fix path length by truncating file name")
        raise PathTooLong(os.path.join(folder, name + ext), total, limit)

    logger.debug(f"Reducing path length by truncating file name (length currently {len(name)})")
    name = name[:len(name) - excess]
    logger.debug(f"Reduced to length {len(name)}")
    return name


def prepare_debug_log_file(raw_path: Optional[str]) -> Optional[str]:
    """
    Resolves where the driver server should write its log and creates the file
    with a header line.

    Returns None when no path is configured, meaning the driver logs to the
    console. Returns the absolute path otherwise. An existing file is overwritten.

    Raises:
        PathTooLong: the path cannot be shortened to MAX_PATH_LENGTH.
        DebugLogFileError: the folder or file could not be created.
    """
    if raw_path is None or not str(raw_path).strip():
        return None

    raw_path = str(raw_path)
    folder, name, ext = _split_log_path(raw_path)
    logger.debug(f"SeleniumDebugFile: [{raw_path}] folder: [{folder}] name: [{name}] ext: [{ext}]")

    name = fit_path_length(folder, name, ext)
    path = os.path.join(folder, name + ext)
    try:
        os.makedirs(folder, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(DEBUG_LOG_HEADER + '\n')
    except OSError as e:
        raise DebugLogFileError(path, e) from e
    return path
