import unittest

from seleniumrun.core.errors import (
    ConfigurationMissing,
    DebugLogFileError,
    DriverInitializationFailure,
    ErrorKind,
    InvalidCapabilityType,
    InvalidConfigurationValue,
    PathTooLong,
    ScreenshotIOFailure,
    ScreenshotUnsupported,
    TitleRetrievalFailure,
)


class ErrorKindTest(unittest.TestCase):
    def test_provisioning_errors_are_fatal(self) -> None:
        self.assertTrue(ConfigurationMissing("Selenium", "HostURI").fatal)
        self.assertTrue(DriverInitializationFailure(".", "Chrome").fatal)
        self.assertTrue(PathTooLong("/x", 300, 248).fatal)
        self.assertTrue(InvalidCapabilityType("grid", "version", "int").fatal)
        self.assertTrue(InvalidConfigurationValue("Selenium", "PollInterval", "abc", "a number of milliseconds").fatal)

    def test_operational_errors_are_not_fatal(self) -> None:
        self.assertFalse(ScreenshotUnsupported("Fake").fatal)
        self.assertFalse(ScreenshotIOFailure("/x.jpg", OSError("disk full")).fatal)
        self.assertFalse(TitleRetrievalFailure(RuntimeError("gone")).fatal)

    def test_message_names_kind_and_details(self) -> None:
        error = InvalidCapabilityType("grid", "version", "int")
        self.assertEqual(ErrorKind.INVALID_CAPABILITY_TYPE, error.kind)
        self.assertIn("InvalidCapabilityType", str(error))
        self.assertIn("[grid.version]", str(error))
        self.assertEqual({"category": "grid", "key": "version", "type": "int"}, error.details)

    def test_invalid_configuration_value_names_setting(self) -> None:
        error = InvalidConfigurationValue("Selenium", "ElementFindTimeout", 0, "a positive number of milliseconds")
        self.assertEqual(ErrorKind.INVALID_CONFIGURATION_VALUE, error.kind)
        self.assertIn("[Selenium.ElementFindTimeout] = [0]", str(error))
        self.assertEqual("Selenium", error.details["category"])

    def test_debug_log_file_error_is_initialization_failure(self) -> None:
        error = DebugLogFileError("/logs/sel.log", PermissionError("denied"))
        self.assertIsInstance(error, DriverInitializationFailure)
        self.assertEqual(ErrorKind.DRIVER_INITIALIZATION_FAILURE, error.kind)
        self.assertIn("/logs/sel.log", str(error))
        self.assertIn("denied", str(error))

    def test_initialization_failure_carries_cause(self) -> None:
        cause = RuntimeError("session not created")
        error = DriverInitializationFailure("http://grid:4444/wd/hub", "browserName=chrome", cause)
        self.assertIs(cause, error.cause)
        self.assertIn("session not created", str(error))
        self.assertIn("http://grid:4444/wd/hub", str(error))


if __name__ == "__main__":
    unittest.main()
