import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    CONFIGURATION_MISSING = "ConfigurationMissing"
    INVALID_CONFIGURATION_VALUE = "InvalidConfigurationValue"
    INVALID_ENDPOINT = "InvalidEndpoint"
    INVALID_CAPABILITY_TYPE = "InvalidCapabilityType"
    LOCAL_FOLDER_MISSING = "LocalFolderMissing"
    DRIVER_INITIALIZATION_FAILURE = "DriverInitializationFailure"
    PATH_TOO_LONG = "PathTooLong"
    SCREENSHOT_UNSUPPORTED = "ScreenshotUnsupported"
    SCREENSHOT_IO_FAILURE = "ScreenshotIOFailure"
    TITLE_RETRIEVAL_FAILURE = "TitleRetrievalFailure"


# Kinds that abort a provisioning attempt. Everything else degrades at the facade.
FATAL_KINDS = frozenset({
    ErrorKind.CONFIGURATION_MISSING,
    ErrorKind.INVALID_CONFIGURATION_VALUE,
    ErrorKind.INVALID_ENDPOINT,
    ErrorKind.INVALID_CAPABILITY_TYPE,
    ErrorKind.LOCAL_FOLDER_MISSING,
    ErrorKind.DRIVER_INITIALIZATION_FAILURE,
    ErrorKind.PATH_TOO_LONG,
})


class SeleniumRunError(Exception):
    """Base error. Callers branch on `kind` / `fatal` rather than on subclasses."""

    kind: ErrorKind = ErrorKind.DRIVER_INITIALIZATION_FAILURE

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    @property
    def fatal(self) -> bool:
        return self.kind in FATAL_KINDS

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class ConfigurationMissing(SeleniumRunError):
    kind = ErrorKind.CONFIGURATION_MISSING

    def __init__(self, category: str, name: Optional[str] = None):
        target = f"[{category}.{name}]" if name is not None else f"category [{category}]"
        super().__init__(f"Required run configuration {target} not set", {"category": category, "name": name})
        self.category = category
        self.name = name


class InvalidConfigurationValue(SeleniumRunError):
    kind = ErrorKind.INVALID_CONFIGURATION_VALUE

    def __init__(self, category: str, name: str, value: Any, expected: str):
        super().__init__(
            f"Run configuration [{category}.{name}] = [{value}] is not valid: must be {expected}",
            {"category": category, "name": name, "value": value, "expected": expected},
        )
        self.category = category
        self.name = name
        self.value = value
        self.expected = expected

class InvalidEndpoint(SeleniumRunError):
    kind = ErrorKind.INVALID_ENDPOINT

    def __init__(self, uri: str):
        super().__init__(f"Selenium host URI [{uri}] is not a valid absolute URI", {"uri": uri})
        self.uri = uri


class InvalidCapabilityType(SeleniumRunError):
    kind = ErrorKind.INVALID_CAPABILITY_TYPE

    def __init__(self, category: str, key: str, actual_type: str):
        super().__init__(
            f"Capability [{category}.{key}] is a {actual_type}! Must be a string",
            {"category": category, "key": key, "type": actual_type},
        )
        self.category = category
        self.key = key
        self.actual_type = actual_type


class LocalFolderMissing(SeleniumRunError):
    kind = ErrorKind.LOCAL_FOLDER_MISSING

    def __init__(self, folder: str):
        super().__init__(f"Selenium server folder [{folder}] not found", {"folder": folder})
        self.folder = folder


class DriverInitializationFailure(SeleniumRunError):
    kind = ErrorKind.DRIVER_INITIALIZATION_FAILURE

    def __init__(self, target: str, attempted: str, cause: Optional[BaseException] = None):
        # target is the server folder (local) or endpoint URI (remote); attempted is
        # the browser name (local) or the capability summary (remote).
        message = f"Error initializing Selenium WebDriver [{target}] [{attempted}]"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, {"target": target, "attempted": attempted})
        self.target = target
        self.attempted = attempted
        self.cause = cause


class DebugLogFileError(DriverInitializationFailure):
    def __init__(self, path: str, cause: BaseException):
        super().__init__(path, "Selenium debug log file", cause)
        self.message = f"Error creating Selenium debug information file ({path}): {cause}"
        self.path = path


class PathTooLong(SeleniumRunError):
    kind = ErrorKind.PATH_TOO_LONG

    def __init__(self, path: str, length: int, limit: int):
        super().__init__(
            f"Full path [{path}] ({length} chars) would be too long (Max {limit} chars)",
            {"path": path, "length": length, "limit": limit},
        )
        self.path = path
        self.length = length
        self.limit = limit


class ScreenshotUnsupported(SeleniumRunError):
    kind = ErrorKind.SCREENSHOT_UNSUPPORTED

    def __init__(self, driver_type: str):
        super().__init__(f"WebDriver [{driver_type}] cannot take screenshots", {"driver_type": driver_type})


class ScreenshotIOFailure(SeleniumRunError):
    kind = ErrorKind.SCREENSHOT_IO_FAILURE

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Exception saving screenshot [{path}]: {cause}", {"path": path})
        self.path = path


class TitleRetrievalFailure(SeleniumRunError):
    kind = ErrorKind.TITLE_RETRIEVAL_FAILURE

    def __init__(self, cause: BaseException):
        super().__init__(f"Error getting window title: {cause}")
