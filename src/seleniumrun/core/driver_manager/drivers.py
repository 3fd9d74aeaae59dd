import logging
import subprocess
from abc import ABC, abstractmethod
from datetime import timedelta
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

from selenium import webdriver
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.ie.service import Service as IeService
from selenium.webdriver.remote.client_config import ClientConfig
from selenium.webdriver.remote.webdriver import WebDriver
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.core.driver_cache import DriverCacheManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager, IEDriverManager

from ...data_models import Browser
from .constants import DEFAULT_WDM_CACHE_PATH
from .options import (
    build_chrome_options,
    build_edge_options,
    build_firefox_options,
    build_ie_options,
    build_remote_options,
)

logger = logging.getLogger(__name__)


def _log_output(log_path: Optional[str]) -> Union[str, int]:
    if log_path:
        logger.info(f"Writing Selenium Server Output to: {log_path}")
        return log_path
    logger.info("Writing Selenium Server Output to console")
    return subprocess.STDOUT


class LocalBackend(ABC):
    """
    Starts one kind of browser through a driver server on this machine.

    Subclasses name the driver executables they look for in the server folder
    and how to fetch one with webdriver_manager when the folder has none.
    """

    browser: Browser
    executable_names: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.browser.display_name

    def find_executable(self, folder: str) -> Optional[str]:
        for exe in self.executable_names:
            candidate = Path(folder) / exe
            if candidate.is_file():
                return str(candidate.resolve())
        return None

    def resolve_executable(self, folder: str, cache_path: Optional[Path] = None) -> str:
        local_driver = self.find_executable(folder)
        if local_driver:
            logger.info(f"Using local driver server at: {local_driver}")
            return local_driver
        logger.info(f"No {self.name} driver server in [{folder}]. Falling back to webdriver_manager (requires internet).")
        cache_manager = DriverCacheManager(root_dir=str(cache_path or DEFAULT_WDM_CACHE_PATH))
        return self.download_driver(cache_manager)

    @abstractmethod
    def download_driver(self, cache_manager: DriverCacheManager) -> str:
        """Fetches the driver server with webdriver_manager and returns its path."""

    @abstractmethod
    def start(self, folder: str, log_path: Optional[str], verbose: bool,
              arguments: Optional[List[str]] = None, *, cache_path: Optional[Path] = None) -> WebDriver:
        """Starts the browser, preferring a driver server found in folder."""


class InternetExplorerBackend(LocalBackend):
    browser = Browser.INTERNET_EXPLORER
    executable_names = ('IEDriverServer.exe', 'IEDriverServer')

    def download_driver(self, cache_manager: DriverCacheManager) -> str:
        return IEDriverManager(cache_manager=cache_manager).install()

    def start(self, folder, log_path, verbose, arguments=None, *, cache_path=None):
        log_level = 'DEBUG' if verbose else 'INFO'
        logger.info(f"Selenium Server Log Level: {log_level}")
        service = IeService(
            executable_path=self.resolve_executable(folder, cache_path),
            log_level=log_level,
            log_output=_log_output(log_path),
        )
        if arguments:
            logger.debug(f"Arguments {arguments} not applied to Internet Explorer")
        return webdriver.Ie(service=service, options=build_ie_options())


class EdgeBackend(LocalBackend):
    browser = Browser.EDGE
    executable_names = ('msedgedriver.exe', 'msedgedriver')

    def download_driver(self, cache_manager: DriverCacheManager) -> str:
        return EdgeChromiumDriverManager(cache_manager=cache_manager).install()

    def start(self, folder, log_path, verbose, arguments=None, *, cache_path=None):
        logger.info(f"Selenium Server Log Level: {'Verbose' if verbose else 'Not verbose'}")
        service = EdgeService(
            executable_path=self.resolve_executable(folder, cache_path),
            service_args=['--verbose'] if verbose else None,
            log_output=_log_output(log_path),
        )
        return webdriver.Edge(service=service, options=build_edge_options(arguments))


class ChromeBackend(LocalBackend):
    browser = Browser.CHROME
    executable_names = ('chromedriver.exe', 'chromedriver')

    def download_driver(self, cache_manager: DriverCacheManager) -> str:
        return ChromeDriverManager(cache_manager=cache_manager).install()

    def start(self, folder, log_path, verbose, arguments=None, *, cache_path=None):
        service = ChromeService(
            executable_path=self.resolve_executable(folder, cache_path),
            service_args=['--verbose'] if verbose else None,
            log_output=_log_output(log_path),
        )
        return webdriver.Chrome(service=service, options=build_chrome_options(arguments))


class FirefoxBackend(LocalBackend):
    browser = Browser.FIREFOX
    executable_names = ('geckodriver.exe', 'geckodriver')

    def download_driver(self, cache_manager: DriverCacheManager) -> str:
        return GeckoDriverManager(cache_manager=cache_manager).install()

    def start(self, folder, log_path, verbose, arguments=None, *, cache_path=None):
        service = FirefoxService(
            executable_path=self.resolve_executable(folder, cache_path),
            log_output=_log_output(log_path),
        )
        return webdriver.Firefox(service=service, options=build_firefox_options(arguments, verbose))


LOCAL_BACKENDS: Dict[Browser, LocalBackend] = {
    Browser.INTERNET_EXPLORER: InternetExplorerBackend(),
    Browser.EDGE: EdgeBackend(),
    Browser.CHROME: ChromeBackend(),
    Browser.FIREFOX: FirefoxBackend(),
}


def register_local_backend(browser: Browser, backend: LocalBackend) -> None:
    LOCAL_BACKENDS[browser] = backend


def start_remote_session(uri: str, capabilities: Mapping[str, str], connection_timeout: timedelta) -> WebDriver:
    """Starts a session on a remote Selenium server with the given capabilities."""
    client_config = ClientConfig(remote_server_addr=uri, timeout=connection_timeout.total_seconds())
    return webdriver.Remote(
        command_executor=uri,
        options=build_remote_options(capabilities),
        client_config=client_config,
    )
