# src/treeverb/core/utils/configure_logging.py
import logging
import sys

from tqdm import tqdm


class LogWithTqdm(logging.Handler):
    """
    A logging handler that redirects logging output to `tqdm.write()`,
    so that log lines don't tear the interactive prompt.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def configure_logger(general_level='WARNING', module_specific_levels=None):
    """
    Configures the root logger and specific module loggers with a
    TQDM-friendly handler.
    """
    handler = LogWithTqdm()
    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    )
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    log_level = getattr(logging, general_level.upper(), logging.WARNING) if isinstance(general_level, str) else general_level
    root_logger.setLevel(log_level)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if module_specific_levels:
        for name, level in module_specific_levels.items():
            level_to_set = getattr(logging, level.upper(), logging.INFO) if isinstance(level, str) else level
            logging.getLogger(name).setLevel(level_to_set)
