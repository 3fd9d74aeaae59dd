import logging
import sys

from .core.config_loader import RunConfiguration
from .core.driver_manager import SeleniumDriver
from .core.errors import SeleniumRunError
from .utils.logger import setup_logger

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    config = RunConfiguration(settings_file=argv[0]) if argv else RunConfiguration()
    try:
        setup_logger(config)
        with SeleniumDriver(config) as session:
            logger.info(f"Session started ({session.mode.value}). Page title: '{session.page_title}'")
    except SeleniumRunError as e:
        logger.critical(f"Could not start WebDriver: {e}", exc_info=True)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
