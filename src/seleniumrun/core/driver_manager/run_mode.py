import logging

from ..config_loader import RunConfiguration
from ...data_models import RunMode
from .constants import HOST, LOCAL_HOSTS, LOCAL_HOST_PREFIXES

logger = logging.getLogger(__name__)


def is_local_host(host: str) -> bool:
    host = host.lower()
    return host in LOCAL_HOSTS or host.startswith(LOCAL_HOST_PREFIXES)


def resolve_run_mode(config: RunConfiguration) -> RunMode:
    """Local when [Selenium.Host] is unset, empty, localhost or 127.0.0.1*; remote otherwise."""
    host = config.get_item_or_default(*HOST, default="")
    if not host:
        logger.info(f"Run Parameter [{HOST[0]}.{HOST[1]}] not set. Default to Local run.")
        return RunMode.LOCAL
    mode = RunMode.LOCAL if is_local_host(str(host)) else RunMode.REMOTE
    logger.info(f"Selenium host [{host}] - running in {mode.value} mode")
    return mode
