import logging
import sys

from shiritori import LOG_LEVEL

logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)


class _BelowWarning(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.WARNING


# Progress goes to stdout, problems to stderr; a record lands on exactly one
stdout_handler = logging.StreamHandler(sys.stdout)
stdout_handler.addFilter(_BelowWarning())
stderr_handler = logging.StreamHandler(sys.stderr)
stderr_handler.setLevel(logging.WARNING)

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
for handler in (stdout_handler, stderr_handler):
    handler.setFormatter(formatter)
    logger.addHandler(handler)
