import os
from pathlib import Path

# Reuse the single source of truth for project root from core.config_loader
from ..config_loader import PROJECT_ROOT as CONFIG_PROJECT_ROOT

PROJECT_ROOT: Path = CONFIG_PROJECT_ROOT
DEFAULT_WDM_CACHE_PATH: Path = PROJECT_ROOT / ".wdm_cache"

# Environment variable key used by webdriver_manager to control SSL verification
WDM_SSL_VERIFY_ENV = "WDM_SSL_VERIFY"

# (category, name) run configuration keys
SELENIUM_SERVER_FOLDER = ("Selenium", "SeleniumServerFolder")
ELEMENT_FIND_TIMEOUT = ("Selenium", "ElementFindTimeout")
POLL_INTERVAL = ("Selenium", "PollInterval")
PAGE_LOAD_TIMEOUT = ("Selenium", "PageLoadTimeout")
POPUP_WINDOW_TIMEOUT = ("Selenium", "PopupWindowTimeout")
POPUP_WINDOW_POLL_INTERVAL = ("Selenium", "PopupWindowPollInterval")
BROWSER = ("Selenium", "Browser")
DEVICE = ("Selenium", "Device")
HOST = ("Selenium", "Host")
HOST_URI = ("Selenium", "HostURI")
CONNECTION_TIMEOUT = ("Selenium", "ConnectionTimeout")
DEBUG_MODE = ("Selenium", "DebugMode")
LOG_FILE = ("Selenium", "LogFile")
ARGUMENTS = ("Selenium", "Arguments")
DRIVER_CACHE_PATH = ("Selenium", "DriverCachePath")
WDM_SSL_VERIFY = ("Selenium", "WebDriverManagerSSLVerify")
TAKE_SCREENSHOT = ("Debug", "TakeScreenshot")
SCREENSHOT_FILENAME = ("Screenshot", "Filename")
SCREENSHOT_FILEPATH = ("Screenshot", "FilePath")

# Defaults in milliseconds
DEFAULT_ELEMENT_FIND_TIMEOUT_MS = 60000
DEFAULT_POLL_INTERVAL_MS = 500
DEFAULT_PAGE_LOAD_TIMEOUT_MS = 60000
DEFAULT_POPUP_WINDOW_TIMEOUT_MS = 60000
DEFAULT_POPUP_WINDOW_POLL_INTERVAL_MS = 500

DEFAULT_SERVER_FOLDER = "."
LOCAL_HOSTS = ("localhost",)
LOCAL_HOST_PREFIXES = ("127.0.0.1",)

MAX_PATH_LENGTH = 248
DEBUG_LOG_HEADER = "seleniumrun Selenium Debug File"

BROWSER_TOKEN = "%Browser%"

DEFAULT_SCREENSHOT_NAME = "Screenshot"
DEFAULT_SCREENSHOT_FOLDER = "Screenshots"
SCREENSHOT_EXTENSION = ".jpg"


def set_wdm_ssl_verify(enabled: bool) -> None:
    os.environ[WDM_SSL_VERIFY_ENV] = '1' if enabled else '0'
