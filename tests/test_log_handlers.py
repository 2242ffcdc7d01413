import logging

import pytest

from iopi import log_handlers


def test_getlogger_adds_one_handler():
    result, logger = log_handlers.getLogger(name='iopi_test_getlogger')
    assert result
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], log_handlers.IoPiConsoleHandler)
    result, same = log_handlers.getLogger(name='iopi_test_getlogger')
    assert not result
    assert same is logger
    assert len(logger.handlers) == 1


def test_console_handler_fifo():
    handler = log_handlers.IoPiConsoleHandler(name='fifo', max_len=2)
    logger = logging.getLogger('iopi_test_fifo')
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    for ctr in range(3):
        logger.info('message %i' % ctr)
    assert handler.get_log_strings() == [
        'iopi_test_fifo: message 1', 'iopi_test_fifo: message 2']
    assert handler.get_log_strings(1) == ['iopi_test_fifo: message 1']
    handler.set_max_len(1)
    assert handler.get_log_strings() == ['iopi_test_fifo: message 2']
    handler.clear_log()
    assert handler.get_log_strings() == []


def test_console_handler_format():
    handler = log_handlers.IoPiConsoleHandler(name='fmt')
    record = logging.LogRecord('iopi_test_fmt', logging.WARNING, 'device.py',
                               42, 'value %i', (7, ), None)
    text = handler.format(record)
    assert 'WARNING iopi_test_fmt device.py:42 - value 7' in text


def test_configure_console_logging():
    logger = logging.getLogger('iopi_test_console')
    assert log_handlers.configure_console_logging(logger)
    assert not log_handlers.configure_console_logging(logger)
    assert log_handlers.configure_console_logging(logger, 'second')


def test_configure_file_logging(tmp_path):
    logger = logging.getLogger('iopi_test_file')
    logger.setLevel(logging.INFO)
    filename = log_handlers.configure_file_logging(
        logger, filename='test.log', file_dir=str(tmp_path))
    logger.info('written to file')
    for handler in logger.handlers:
        handler.flush()
    assert filename == str(tmp_path / 'test.log')
    assert 'written to file' in (tmp_path / 'test.log').read_text()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_configure_file_logging_bad_dir(tmp_path):
    logger = logging.getLogger('iopi_test_bad_dir')
    with pytest.raises(ValueError):
        log_handlers.configure_file_logging(
            logger, filename='x.log', file_dir=str(tmp_path / 'missing'))


def test_log_level_from_name():
    assert log_handlers.log_level_from_name('debug') == logging.DEBUG
    assert log_handlers.log_level_from_name(' ERROR ') == logging.ERROR
    with pytest.raises(RuntimeError):
        log_handlers.log_level_from_name('LOUD')
