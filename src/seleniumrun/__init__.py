"""Provisions a Selenium WebDriver for a test run from categorised run configuration."""

from .core import DriverProvisioner, ErrorKind, RunConfiguration, SeleniumDriver, SeleniumRunError
from .data_models import Browser, RunMode, TimingSettings, WaitPolicy

__version__ = "0.1.0"

__all__ = [
    "Browser",
    "DriverProvisioner",
    "ErrorKind",
    "RunConfiguration",
    "RunMode",
    "SeleniumDriver",
    "SeleniumRunError",
    "TimingSettings",
    "WaitPolicy",
]
