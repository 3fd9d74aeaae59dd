import logging
import os
from datetime import timedelta
from pathlib import Path
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional
from urllib.parse import urlparse

from selenium.webdriver.remote.webdriver import WebDriver

from ..config_loader import RunConfiguration
from ..errors import DriverInitializationFailure, InvalidEndpoint, LocalFolderMissing, SeleniumRunError
from ...data_models import Browser, RunMode, TimingSettings
from .capabilities import build_capabilities, summarize_capabilities
from .constants import (
    ARGUMENTS,
    BROWSER,
    CONNECTION_TIMEOUT,
    DEBUG_MODE,
    DEFAULT_SERVER_FOLDER,
    DEFAULT_WDM_CACHE_PATH,
    DEVICE,
    DRIVER_CACHE_PATH,
    HOST,
    HOST_URI,
    LOG_FILE,
    SELENIUM_SERVER_FOLDER,
    WDM_SSL_VERIFY,
    set_wdm_ssl_verify,
)
from .drivers import LOCAL_BACKENDS, LocalBackend, start_remote_session
from .log_file import prepare_debug_log_file
from .run_mode import resolve_run_mode
from .waits import apply_page_load_timeout, load_timing_settings

logger = logging.getLogger(__name__)

RemoteStarter = Callable[[str, Mapping[str, str], timedelta], WebDriver]

UNDEFINED_BROWSER = "Undefined"


class ProvisionedDriver(NamedTuple):
    driver: WebDriver
    mode: RunMode
    browser: Optional[Browser]
    timings: TimingSettings


def validate_host_uri(uri: str) -> str:
    parsed = urlparse(uri)
    if not parsed.scheme or not parsed.netloc:
        raise InvalidEndpoint(uri)
    return uri


class DriverProvisioner:
    """
    Starts exactly one WebDriver for a run, locally or on a remote Selenium
    server, and works out the timings that govern it.

    Single pass, no retries: any failure aborts provisioning with a
    SeleniumRunError and no live driver is left behind.
    """

    def __init__(self, config: RunConfiguration,
                 backends: Optional[Dict[Browser, LocalBackend]] = None,
                 remote_starter: Optional[RemoteStarter] = None):
        self.config = config
        self.backends = backends if backends is not None else LOCAL_BACKENDS
        self.remote_starter = remote_starter or start_remote_session

    def resolve_browser(self, browser: Optional[Browser] = None) -> Optional[Browser]:
        if browser is not None:
            return browser
        configured = self.config.get_item_or_default(*BROWSER, default=None)
        resolved = Browser.parse(configured)
        if configured and resolved is None:
            logger.warning(f"Run Parameter [{BROWSER[0]}.{BROWSER[1]}] = [{configured}] is not a known browser")
        device = self.config.get_item_or_default(*DEVICE, default=None)
        logger.info(f"Test browser: [{resolved.display_name if resolved else UNDEFINED_BROWSER}] Device: [{device or 'not set'}]")
        return resolved

    def provision(self, browser: Optional[Browser] = None) -> ProvisionedDriver:
        browser = self.resolve_browser(browser)
        mode = resolve_run_mode(self.config)
        timings = load_timing_settings(self.config)

        if mode is RunMode.LOCAL:
            driver = self.start_local(browser)
        else:
            driver = self.start_remote(browser)

        try:
            apply_page_load_timeout(driver, timings.page_load_timeout)
        except Exception as e:
            logger.error(f"Failed applying timeouts, closing new WebDriver: {e}")
            try:
                driver.quit()
            except Exception as quit_error:
                logger.warning(f"Error quitting WebDriver after failed setup: {quit_error}")
            raise DriverInitializationFailure(self._session_target(mode), browser.display_name if browser else UNDEFINED_BROWSER, e) from e

        logger.info(
            f"WebDriver ready ({mode.value}). Find timeout {timings.element_find.timeout}, "
            f"poll {timings.element_find.poll_interval}, page load {timings.page_load_timeout}"
        )
        return ProvisionedDriver(driver=driver, mode=mode, browser=browser, timings=timings)

    def start_local(self, browser: Optional[Browser]) -> WebDriver:
        logger.debug("Running Selenium locally")
        folder = str(self.config.get_item_or_default(*SELENIUM_SERVER_FOLDER, default=DEFAULT_SERVER_FOLDER))
        verbose = self.config.get_bool(*DEBUG_MODE, default="false")
        arguments: Optional[List[str]] = self.config.get_string_list(*ARGUMENTS, default=None)
        _, debug_file = self.config.try_get_item(*LOG_FILE)

        if not os.path.isdir(folder):
            raise LocalFolderMissing(folder)

        browser_name = browser.display_name if browser else UNDEFINED_BROWSER
        backend = self.backends.get(browser) if browser else None
        if backend is None:
            raise DriverInitializationFailure(folder, browser_name)

        self._configure_driver_downloads()
        log_path = prepare_debug_log_file(debug_file)
        cache_path = Path(self.config.get_item_or_default(*DRIVER_CACHE_PATH, default=str(DEFAULT_WDM_CACHE_PATH)))

        try:
            driver = backend.start(folder, log_path, verbose, arguments, cache_path=cache_path)
        except SeleniumRunError:
            raise
        except Exception as e:
            logger.error(f"Failed to initialize {browser_name} driver: {e}", exc_info=True)
            raise DriverInitializationFailure(folder, browser_name, e) from e

        if driver is None:
            raise DriverInitializationFailure(folder, browser_name)
        logger.info(f"{browser_name} WebDriver initialized successfully.")
        return driver

    def start_remote(self, browser: Optional[Browser]) -> WebDriver:
        logger.debug("Running Selenium remotely")
        host = str(self.config.get_item(*HOST))
        capabilities = build_capabilities(self.config, host, browser)

        uri = validate_host_uri(str(self.config.get_item(*HOST_URI)))
        connection_timeout = self.config.get_positive_duration(*CONNECTION_TIMEOUT)

        try:
            driver = self.remote_starter(uri, capabilities, connection_timeout)
        except Exception as e:
            logger.error(f"Failed to start remote session on {uri}: {e}", exc_info=True)
            raise DriverInitializationFailure(uri, summarize_capabilities(capabilities), e) from e

        if driver is None:
            raise DriverInitializationFailure(uri, summarize_capabilities(capabilities))
        logger.info(f"Remote WebDriver session started on {uri}.")
        return driver

    def _session_target(self, mode: RunMode) -> str:
        """Server folder (local) or endpoint URI (remote) the session was started against."""
        if mode is RunMode.LOCAL:
            return str(self.config.get_item_or_default(*SELENIUM_SERVER_FOLDER, default=DEFAULT_SERVER_FOLDER))
        return str(self.config.get_item(*HOST_URI))

    def _configure_driver_downloads(self) -> None:
        ssl_verify = self.config.get_item_or_default(*WDM_SSL_VERIFY, default=None)
        if ssl_verify is not None:
            set_wdm_ssl_verify(self.config.get_bool(*WDM_SSL_VERIFY))
            logger.info("WebDriver Manager SSL verification set.")
