import io
import logging
import os
from pathlib import Path
from typing import Optional

from PIL import Image
from selenium.webdriver.remote.webdriver import WebDriver

from ..config_loader import RunConfiguration
from ..errors import ScreenshotIOFailure, ScreenshotUnsupported
from ...data_models import Browser
from ...utils.file_handler import clean_filename, ensure_directory_exists
from .capabilities import substitute_tokens
from .constants import (
    DEFAULT_SCREENSHOT_FOLDER,
    DEFAULT_SCREENSHOT_NAME,
    SCREENSHOT_EXTENSION,
    SCREENSHOT_FILENAME,
    SCREENSHOT_FILEPATH,
)

logger = logging.getLogger(__name__)


def supports_screenshots(driver: WebDriver) -> bool:
    return callable(getattr(driver, 'get_screenshot_as_png', None))


def resolve_screenshot_path(config: RunConfiguration, browser: Optional[Browser] = None,
                            file_name: Optional[str] = None) -> Path:
    """Explicit name, else [Screenshot.Filename], else 'Screenshot'; folder from [Screenshot.FilePath] or ./Screenshots."""
    if file_name is None:
        configured = config.get_item_or_default(*SCREENSHOT_FILENAME, default=None)
        if configured is not None:
            file_name = substitute_tokens(str(configured), browser)
    name = clean_filename(file_name, DEFAULT_SCREENSHOT_NAME) + SCREENSHOT_EXTENSION

    folder = config.get_item_or_default(*SCREENSHOT_FILEPATH, default=None)
    if folder:
        return Path(folder).absolute() / name
    return Path(os.getcwd()) / DEFAULT_SCREENSHOT_FOLDER / name


def save_jpeg(png_bytes: bytes, path: Path) -> None:
    with Image.open(io.BytesIO(png_bytes)) as image:
        image.convert('RGB').save(path, format='JPEG')


def capture_screenshot(driver: WebDriver, config: RunConfiguration, browser: Optional[Browser] = None,
                       file_name: Optional[str] = None) -> str:
    """
    Saves the current browser viewport as a JPEG and returns its path.

    Raises:
        ScreenshotUnsupported: the driver cannot take screenshots.
        ScreenshotIOFailure: capturing, encoding or writing the image failed.
    """
    if not supports_screenshots(driver):
        raise ScreenshotUnsupported(type(driver).__name__)

    path = None
    try:
        path = resolve_screenshot_path(config, browser, file_name)
        ensure_directory_exists(path.parent)
        png_bytes = driver.get_screenshot_as_png()
        logger.info(f"Screenshot - {path}")
        save_jpeg(png_bytes, path)
    except Exception as e:
        raise ScreenshotIOFailure(str(path) if path else str(file_name or DEFAULT_SCREENSHOT_NAME), e) from e
    return str(path)
