import logging
from datetime import timedelta
from typing import Optional

from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait

from ..config_loader import RunConfiguration
from ..errors import SeleniumRunError, TitleRetrievalFailure
from ...data_models import Browser, RunMode, WaitPolicy
from .constants import TAKE_SCREENSHOT
from .provisioner import DriverProvisioner
from .screenshots import capture_screenshot
from .waits import apply_page_load_timeout, build_wait

logger = logging.getLogger(__name__)


class SeleniumDriver:
    """
    Facade over one provisioned WebDriver session.

    The driver is started on construction (see DriverProvisioner) and must be
    released with close_driver(), or by using the instance as a context manager.
    """

    def __init__(self, config: Optional[RunConfiguration] = None, browser: Optional[Browser] = None,
                 provisioner: Optional[DriverProvisioner] = None):
        self.config = config if config else RunConfiguration()
        self.provisioner = provisioner if provisioner else DriverProvisioner(self.config)

        provisioned = self.provisioner.provision(browser)
        self.driver: Optional[WebDriver] = provisioned.driver
        self.mode: RunMode = provisioned.mode
        self.browser: Optional[Browser] = provisioned.browser
        self.element_find_policy: WaitPolicy = provisioned.timings.element_find
        self.popup_window_policy: WaitPolicy = provisioned.timings.popup_window
        self._page_load_timeout: timedelta = provisioned.timings.page_load_timeout

    @property
    def webdriver(self) -> Optional[WebDriver]:
        return self.driver

    @property
    def find_timeout(self) -> timedelta:
        return self.element_find_policy.timeout

    @property
    def poll_interval(self) -> timedelta:
        return self.element_find_policy.poll_interval

    @property
    def popup_timeout(self) -> timedelta:
        return self.popup_window_policy.timeout

    @property
    def page_load_timeout(self) -> timedelta:
        return self._page_load_timeout

    @page_load_timeout.setter
    def page_load_timeout(self, value: timedelta) -> None:
        self._page_load_timeout = value
        if self.driver:
            apply_page_load_timeout(self.driver, value)

    def element_wait(self, timeout: Optional[timedelta] = None,
                     poll_interval: Optional[timedelta] = None) -> WebDriverWait:
        return build_wait(self._require_driver(), self.element_find_policy, timeout, poll_interval)

    def popup_window_wait(self, timeout: Optional[timedelta] = None,
                          poll_interval: Optional[timedelta] = None) -> WebDriverWait:
        return build_wait(self._require_driver(), self.popup_window_policy, timeout, poll_interval)

    @property
    def page_title(self) -> str:
        """Title of the current window, or '' if it cannot be read."""
        try:
            if not self.driver:
                raise WebDriverException("No active WebDriver session")
            return self.driver.title or ""
        except Exception as e:
            logger.error(str(TitleRetrievalFailure(e)))
            return ""

    def take_screenshot(self, file_name: Optional[str] = None) -> str:
        """
        Saves a JPEG of the current page. Returns the file written, or '' when
        no screenshot could be taken (the reason is logged).
        """
        if not self.driver:
            logger.info("WebDriver is not active! Unable to take screenshot.")
            return ""
        try:
            return capture_screenshot(self.driver, self.config, self.browser, file_name)
        except SeleniumRunError as e:
            logger.error(str(e), exc_info=e.__cause__ is not None)
            return ""

    def close_driver(self) -> None:
        if not self.driver:
            return
        try:
            take_screenshot = self.config.get_bool(*TAKE_SCREENSHOT, default="false")
            if take_screenshot:
                logger.info(f"{TAKE_SCREENSHOT[0]}.{TAKE_SCREENSHOT[1]} = {take_screenshot} - Taking screenshot...")
                self.take_screenshot()
            else:
                logger.info(f"{TAKE_SCREENSHOT[0]}.{TAKE_SCREENSHOT[1]} = {take_screenshot} - NOT Taking screenshot...")
        finally:
            self._quit()

    def _quit(self) -> None:
        try:
            self.driver.quit()
            logger.info("WebDriver session closed.")
        except Exception as e:
            logger.error(f"Error closing WebDriver: {e}", exc_info=True)
        finally:
            self.driver = None

    def is_driver_active(self) -> bool:
        if not self.driver:
            return False
        try:
            _ = self.driver.current_url
            return True
        except Exception:
            logger.warning("WebDriver is not responsive.")
            return False

    def _require_driver(self) -> WebDriver:
        if not self.driver:
            raise WebDriverException("No active WebDriver session")
        return self.driver

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close_driver()
