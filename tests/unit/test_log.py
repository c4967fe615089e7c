import io
import logging

import pytest

from inxpress_rates.log import CustomStreamHandler, init_root_logger, log_level


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_multiline_messages_stay_on_one_line():
    stream = io.StringIO()
    handler = CustomStreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(message)s'))
    handler.emit(logging.LogRecord('test', logging.INFO, __file__, 1, '<ratingResponse>\n</ratingResponse>', None, None))
    assert stream.getvalue() == '<ratingResponse>\r</ratingResponse>\n'


@pytest.mark.parametrize('value, expected', [
    ('debug', logging.DEBUG),
    ('WARNING', logging.WARNING),
    ('chatty', logging.INFO),
    ('', logging.INFO),
])
def test_log_level(monkeypatch, value, expected):
    monkeypatch.setenv('LOG_LEVEL', value)
    assert log_level() == expected


def test_init_is_idempotent(monkeypatch, root_logger):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    init_root_logger(__name__)
    init_root_logger(__name__)

    assert root_logger.level == logging.DEBUG
    assert len([h for h in root_logger.handlers if isinstance(h, CustomStreamHandler)]) == 1


def test_client_libraries_stay_at_warning(monkeypatch, root_logger):
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    init_root_logger(__name__)
    assert logging.getLogger('botocore').level == logging.WARNING
    assert logging.getLogger('urllib3.connectionpool').level == logging.WARNING
