# This file makes seleniumrun.utils a package and exposes key utilities.

from .file_handler import clean_filename, ensure_directory_exists
from .logger import setup_logger

__all__ = [
    "clean_filename",
    "ensure_directory_exists",
    "setup_logger",
]
