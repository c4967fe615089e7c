import logging
import os

LOG_FORMAT = '[%(asctime)s] %(levelname)s:%(name)s:%(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Connection pool and AWS client chatter drowns the carrier request logs.
NOISY_LOGGERS = ('urllib3.connectionpool', 'botocore', 'boto3')


def log_level(default: int = logging.INFO) -> int:
    """Level named by LOG_LEVEL, or ``default`` when unset or unknown."""
    level = logging.getLevelName((os.environ.get('LOG_LEVEL') or '').upper())
    return level if isinstance(level, int) else default


class CustomStreamHandler(logging.StreamHandler):
    """
    One line per record, so multi-line carrier XML bodies stay in a single
    log event.
    """

    def emit(self, record):
        message = self.format(record)
        self.stream.write(message.replace('\n', '\r') + '\n')


def init_root_logger(name):
    level = log_level()

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, CustomStreamHandler):
            root.removeHandler(handler)

    handler = CustomStreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))

    logging.getLogger(name).debug('Root logger initialised at %s', logging.getLevelName(level))
