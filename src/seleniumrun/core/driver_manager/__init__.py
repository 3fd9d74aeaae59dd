"""
Driver manager package.

Public API:
- SeleniumDriver: Facade over one provisioned WebDriver session.
- DriverProvisioner: Starts the WebDriver (local or remote) and works out its timings.
- LocalBackend / register_local_backend: Add or replace how a browser is started locally.
"""

from .drivers import LOCAL_BACKENDS, LocalBackend, register_local_backend
from .provisioner import DriverProvisioner, ProvisionedDriver
from .service import SeleniumDriver

__all__ = [
    "DriverProvisioner",
    "LOCAL_BACKENDS",
    "LocalBackend",
    "ProvisionedDriver",
    "SeleniumDriver",
    "register_local_backend",
]
