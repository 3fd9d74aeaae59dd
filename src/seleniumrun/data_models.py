import enum
from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RunMode(str, enum.Enum):
    LOCAL = "Local"
    REMOTE = "Remote"


class Browser(str, enum.Enum):
    INTERNET_EXPLORER = "Internet Explorer"
    EDGE = "Edge"
    CHROME = "Chrome"
    FIREFOX = "Firefox"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional['Browser']:
        if not text:
            return None
        key = ''.join(str(text).split()).lower()
        return _BROWSER_ALIASES.get(key)


_BROWSER_ALIASES = {
    'ie': Browser.INTERNET_EXPLORER,
    'internetexplorer': Browser.INTERNET_EXPLORER,
    'iexplore': Browser.INTERNET_EXPLORER,
    'edge': Browser.EDGE,
    'msedge': Browser.EDGE,
    'microsoftedge': Browser.EDGE,
    'chrome': Browser.CHROME,
    'googlechrome': Browser.CHROME,
    'firefox': Browser.FIREFOX,
    'ff': Browser.FIREFOX,
}


class WaitPolicy(BaseModel):
    """Timeout and poll interval for a blocking wait. Immutable; use with_overrides for variants."""
    model_config = ConfigDict(frozen=True)

    timeout: timedelta = Field(..., description="How long to keep polling before giving up.")
    poll_interval: timedelta = Field(..., description="Delay between two checks of the condition.")

    @field_validator('timeout', 'poll_interval')
    @classmethod
    def _must_be_positive(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError(f"must be a positive duration, got {value}")
        return value

    @classmethod
    def from_milliseconds(cls, timeout_ms: float, poll_interval_ms: float) -> 'WaitPolicy':
        return cls(timeout=timedelta(milliseconds=timeout_ms), poll_interval=timedelta(milliseconds=poll_interval_ms))

    def with_overrides(self, timeout: Optional[timedelta] = None,
                       poll_interval: Optional[timedelta] = None) -> 'WaitPolicy':
        return WaitPolicy(
            timeout=self.timeout if timeout is None else timeout,
            poll_interval=self.poll_interval if poll_interval is None else poll_interval,
        )


class TimingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    element_find: WaitPolicy
    popup_window: WaitPolicy
    page_load_timeout: timedelta

    @field_validator('page_load_timeout')
    @classmethod
    def _page_load_positive(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError(f"page load timeout must be positive, got {value}")
        return value
