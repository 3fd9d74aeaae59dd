import unittest
from datetime import timedelta

from pydantic import ValidationError

from seleniumrun.data_models import Browser, TimingSettings, WaitPolicy


class WaitPolicyTest(unittest.TestCase):
    def setUp(self) -> None:
        self.base = WaitPolicy.from_milliseconds(60000, 500)

    def test_from_milliseconds(self) -> None:
        self.assertEqual(timedelta(seconds=60), self.base.timeout)
        self.assertEqual(timedelta(milliseconds=500), self.base.poll_interval)

    def test_rejects_zero_and_negative_durations(self) -> None:
        with self.assertRaises(ValueError):
            WaitPolicy(timeout=timedelta(0), poll_interval=timedelta(milliseconds=500))
        with self.assertRaises(ValueError):
            WaitPolicy(timeout=timedelta(seconds=1), poll_interval=timedelta(milliseconds=-1))
        with self.assertRaises(ValueError):
            self.base.with_overrides(timeout=timedelta(0))

    def test_timeout_override_keeps_poll_interval(self) -> None:
        for seconds in (0.1, 5, 600):
            derived = self.base.with_overrides(timedelta(seconds=seconds), None)
            self.assertEqual(timedelta(seconds=seconds), derived.timeout)
            self.assertEqual(self.base.poll_interval, derived.poll_interval)

    def test_poll_override_keeps_timeout(self) -> None:
        for ms in (1, 250, 10000):
            derived = self.base.with_overrides(None, timedelta(milliseconds=ms))
            self.assertEqual(self.base.timeout, derived.timeout)
            self.assertEqual(timedelta(milliseconds=ms), derived.poll_interval)

    def test_override_leaves_base_untouched(self) -> None:
        derived = self.base.with_overrides(timedelta(seconds=1), timedelta(milliseconds=10))
        self.assertIsNot(derived, self.base)
        self.assertEqual(timedelta(seconds=60), self.base.timeout)
        self.assertEqual(timedelta(milliseconds=500), self.base.poll_interval)

    def test_no_overrides_gives_equal_copy(self) -> None:
        self.assertEqual(self.base, self.base.with_overrides())

    def test_policy_is_frozen(self) -> None:
        with self.assertRaises(ValidationError):
            self.base.timeout = timedelta(seconds=1)

    def test_timing_settings_rejects_non_positive_page_load(self) -> None:
        with self.assertRaises(ValueError):
            TimingSettings(element_find=self.base, popup_window=self.base, page_load_timeout=timedelta(0))


class BrowserTest(unittest.TestCase):
    def test_parse_aliases(self) -> None:
        self.assertEqual(Browser.CHROME, Browser.parse("chrome"))
        self.assertEqual(Browser.CHROME, Browser.parse("Chrome"))
        self.assertEqual(Browser.INTERNET_EXPLORER, Browser.parse("IE"))
        self.assertEqual(Browser.INTERNET_EXPLORER, Browser.parse("Internet Explorer"))
        self.assertEqual(Browser.EDGE, Browser.parse("msedge"))
        self.assertEqual(Browser.FIREFOX, Browser.parse("ff"))

    def test_parse_unknown_or_empty(self) -> None:
        self.assertIsNone(Browser.parse("safari"))
        self.assertIsNone(Browser.parse(""))
        self.assertIsNone(Browser.parse(None))

    def test_display_name(self) -> None:
        self.assertEqual("Internet Explorer", Browser.INTERNET_EXPLORER.display_name)


if __name__ == "__main__":
    unittest.main()
