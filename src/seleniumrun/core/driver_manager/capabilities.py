import logging
from typing import Dict, Mapping, Optional

from ..config_loader import RunConfiguration, require_string
from ...data_models import Browser
from .constants import BROWSER_TOKEN

logger = logging.getLogger(__name__)


def substitute_tokens(value: str, browser: Optional[Browser]) -> str:
    return value.replace(BROWSER_TOKEN, browser.display_name if browser else "")


def build_capabilities(config: RunConfiguration, host_category: str,
                       browser: Optional[Browser] = None) -> Dict[str, str]:
    """
    Builds the capability map for a remote session from every entry in the
    host's configuration category. Values must be strings; %Browser% is
    replaced by the run's browser name.

    Raises:
        ConfigurationMissing: the host category does not exist.
        InvalidCapabilityType: a value in the category is not a string.
    """
    entries = config.get_category(host_category)
    # Every value is checked before any entry is added.
    raw = {key: require_string(host_category, key, value) for key, value in entries.items()}

    capabilities: Dict[str, str] = {}
    for key, value in raw.items():
        cap_value = substitute_tokens(value, browser)
        logger.info(f"Capabilities: [{key}] [{cap_value}]")
        capabilities[key] = cap_value
    return capabilities


def summarize_capabilities(capabilities: Mapping[str, str]) -> str:
    return ", ".join(f"{key}={value}" for key, value in capabilities.items())
