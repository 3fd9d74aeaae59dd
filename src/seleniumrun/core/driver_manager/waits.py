import logging
import typing
from datetime import timedelta
from typing import Optional

from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.ui import WebDriverWait

from ..config_loader import RunConfiguration
from ...data_models import TimingSettings, WaitPolicy
from .constants import (
    ELEMENT_FIND_TIMEOUT,
    POLL_INTERVAL,
    PAGE_LOAD_TIMEOUT,
    POPUP_WINDOW_TIMEOUT,
    POPUP_WINDOW_POLL_INTERVAL,
    DEFAULT_ELEMENT_FIND_TIMEOUT_MS,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_PAGE_LOAD_TIMEOUT_MS,
    DEFAULT_POPUP_WINDOW_TIMEOUT_MS,
    DEFAULT_POPUP_WINDOW_POLL_INTERVAL_MS,
)

logger = logging.getLogger(__name__)


def load_timing_settings(config: RunConfiguration) -> TimingSettings:
    """
    Reads the element-find, popup-window and page-load timings, falling back to defaults.

    Raises:
        InvalidConfigurationValue: a timing is not a positive number of milliseconds.
    """
    element_find = WaitPolicy(
        timeout=config.get_positive_duration(*ELEMENT_FIND_TIMEOUT, default=DEFAULT_ELEMENT_FIND_TIMEOUT_MS),
        poll_interval=config.get_positive_duration(*POLL_INTERVAL, default=DEFAULT_POLL_INTERVAL_MS),
    )
    popup_window = WaitPolicy(
        timeout=config.get_positive_duration(*POPUP_WINDOW_TIMEOUT, default=DEFAULT_POPUP_WINDOW_TIMEOUT_MS),
        poll_interval=config.get_positive_duration(*POPUP_WINDOW_POLL_INTERVAL, default=DEFAULT_POPUP_WINDOW_POLL_INTERVAL_MS),
    )
    page_load_timeout = config.get_positive_duration(*PAGE_LOAD_TIMEOUT, default=DEFAULT_PAGE_LOAD_TIMEOUT_MS)
    return TimingSettings(element_find=element_find, popup_window=popup_window, page_load_timeout=page_load_timeout)


def apply_page_load_timeout(driver: WebDriver, timeout: timedelta) -> None:
    logger.debug(f"Setting Page Load timeout to {timeout.total_seconds() * 1000:.0f}mS")
    driver.set_page_load_timeout(timeout.total_seconds())


def build_wait(context: typing.Union[WebDriver, WebElement],
               policy: WaitPolicy,
               timeout: Optional[timedelta] = None,
               poll_interval: Optional[timedelta] = None) -> WebDriverWait:
    """
    Returns a WebDriverWait for the policy, optionally with a one-off timeout
    and/or poll interval. The policy itself is left unchanged.
    """
    effective = policy.with_overrides(timeout=timeout, poll_interval=poll_interval)
    return WebDriverWait(
        context,
        effective.timeout.total_seconds(),
        poll_frequency=effective.poll_interval.total_seconds(),
    )
