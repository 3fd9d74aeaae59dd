# This file makes seleniumrun.core a package and exposes key classes.

from .config_loader import RunConfiguration
from .driver_manager import DriverProvisioner, SeleniumDriver
from .errors import ErrorKind, SeleniumRunError

__all__ = [
    "DriverProvisioner",
    "ErrorKind",
    "RunConfiguration",
    "SeleniumDriver",
    "SeleniumRunError",
]
