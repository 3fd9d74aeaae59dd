import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from ..core.config_loader import PROJECT_ROOT, RunConfiguration

LOGGING_CATEGORY = 'Logging'
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(message)s'
DEFAULT_LOG_FILE = 'logs/seleniumrun.log'


def setup_logger(config: Optional[RunConfiguration] = None, logger_name: Optional[str] = None) -> logging.Logger:
    """
    Sets up a logger (root logger by default) from the 'Logging' run configuration category.
    This function should ideally be called once at application startup.
    """
    if config is None:
        config = RunConfiguration()

    def setting(name, default=None):
        return config.get_item_or_default(LOGGING_CATEGORY, name, default)

    # --- General Logging Settings ---
    default_log_level_str = str(setting('Level', 'INFO')).upper()
    default_log_format = setting('Format', DEFAULT_LOG_FORMAT)
    log_level = getattr(logging, default_log_level_str, logging.INFO)

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    # Remove existing handlers so repeated calls don't duplicate output.
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if logger_name is not None:
        logger.propagate = config.get_bool(LOGGING_CATEGORY, 'Propagate', False)

    # --- Console Handler Settings ---
    if config.get_bool(LOGGING_CATEGORY, 'ConsoleEnabled', True):
        console_level = getattr(logging, str(setting('ConsoleLevel', default_log_level_str)).upper(), log_level)
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(setting('ConsoleFormat', default_log_format)))
        logger.addHandler(console_handler)

    # --- File Handler Settings ---
    if config.get_bool(LOGGING_CATEGORY, 'FileEnabled', False):
        log_file_path = Path(setting('FilePath', DEFAULT_LOG_FILE))
        if not log_file_path.is_absolute():
            log_file_path = PROJECT_ROOT / log_file_path

        try:
            log_file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # Logger is not usable yet, so report straight to stderr.
            print(f"Error: Could not create log directory {log_file_path.parent}. File logging disabled. Error: {e}", file=sys.stderr)
        else:
            rotation_type = setting('RotationType', None)
            if rotation_type == 'size':
                file_handler = logging.handlers.RotatingFileHandler(
                    log_file_path,
                    maxBytes=config.get_int(LOGGING_CATEGORY, 'MaxBytes', 1024 * 1024 * 5),
                    backupCount=config.get_int(LOGGING_CATEGORY, 'BackupCount', 5),
                    encoding='utf-8',
                )
            elif rotation_type == 'time':
                file_handler = logging.handlers.TimedRotatingFileHandler(
                    log_file_path,
                    when=setting('When', 'midnight'),
                    interval=config.get_int(LOGGING_CATEGORY, 'Interval', 1),
                    backupCount=config.get_int(LOGGING_CATEGORY, 'BackupCount', 5),
                    encoding='utf-8',
                )
            else:
                file_handler = logging.FileHandler(log_file_path, encoding='utf-8')

            file_level = getattr(logging, str(setting('FileLevel', default_log_level_str)).upper(), log_level)
            file_handler.setLevel(file_level)
            file_handler.setFormatter(logging.Formatter(setting('FileFormat', default_log_format)))
            logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
