import logging
from typing import Iterable, Mapping, Optional, Union

from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.ie.options import Options as IeOptions

logger = logging.getLogger(__name__)


def add_arguments(options: Union[ChromeOptions, EdgeOptions, FirefoxOptions],
                  arguments: Optional[Iterable[str]]) -> None:
    if not arguments:
        return
    for arg in arguments:
        if isinstance(arg, str) and arg:
            options.add_argument(arg)
        else:
            logger.warning(f"Ignoring non-string driver argument: {arg!r}")


def build_ie_options() -> IeOptions:
    options = IeOptions()
    options.ensure_clean_session = True
    # Lets IE start when zones have differing Protected Mode settings.
    options.ignore_protected_mode_settings = True
    logger.info("IE Browser being used. Ignoring Protected Mode / security domain settings.")
    return options


def build_edge_options(arguments: Optional[Iterable[str]] = None) -> EdgeOptions:
    options = EdgeOptions()
    options.page_load_strategy = 'eager'
    add_arguments(options, arguments)
    return options


def build_chrome_options(arguments: Optional[Iterable[str]] = None) -> ChromeOptions:
    options = ChromeOptions()
    add_arguments(options, arguments)
    return options


def build_firefox_options(arguments: Optional[Iterable[str]] = None, verbose: bool = False) -> FirefoxOptions:
    options = FirefoxOptions()
    if verbose:
        options.log.level = 'trace'
    add_arguments(options, arguments)
    return options


def build_remote_options(capabilities: Mapping[str, str]) -> ArgOptions:
    options = ArgOptions()
    for key, value in capabilities.items():
        options.set_capability(key, value)
    return options
