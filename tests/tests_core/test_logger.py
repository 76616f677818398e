"""
Test suite for core.logger.

Tests cover:
- ColoredFormatter level coloring without mutating shared records
- setup_logging handler configuration (console, file, levels)
- get_logger level override
"""

import logging

import pytest

from core.logger import ColoredFormatter, get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(level=logging.INFO, message="hello"):
    return logging.LogRecord("test", level, __file__, 1, message, None, None)


@pytest.mark.unit
def test_colored_formatter_wraps_level_name():
    formatter = ColoredFormatter('%(levelname)s %(message)s')
    
    output = formatter.format(make_record(logging.ERROR))
    
    assert output == '\033[31mERROR\033[0m hello'


@pytest.mark.unit
def test_colored_formatter_leaves_record_untouched():
    record = make_record(logging.WARNING)
    
    ColoredFormatter('%(levelname)s').format(record)
    
    assert record.levelname == 'WARNING'


@pytest.mark.unit
def test_setup_logging_console_only(restore_root_logger):
    setup_logging(log_level='DEBUG')
    
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ColoredFormatter)


@pytest.mark.unit
def test_setup_logging_without_colors(restore_root_logger):
    setup_logging(log_level='INFO', use_colors=False)
    
    formatter = restore_root_logger.handlers[0].formatter
    assert type(formatter) is logging.Formatter


@pytest.mark.unit
def test_setup_logging_with_file(restore_root_logger, tmp_path):
    setup_logging(log_level='INFO', log_file='queries.log', log_dir=str(tmp_path / 'logs'))
    
    logging.getLogger('builder.test').info("Executing statement")
    for handler in restore_root_logger.handlers:
        handler.flush()
    
    content = (tmp_path / 'logs' / 'queries.log').read_text(encoding='utf-8')
    assert 'Executing statement' in content
    assert len(restore_root_logger.handlers) == 2


@pytest.mark.unit
def test_setup_logging_replaces_handlers(restore_root_logger):
    setup_logging(log_level='INFO')
    setup_logging(log_level='WARNING')
    
    assert len(restore_root_logger.handlers) == 1
    assert restore_root_logger.level == logging.WARNING


@pytest.mark.unit
def test_setup_logging_defaults_to_config_level(restore_root_logger, monkeypatch):
    monkeypatch.setattr('core.logger.config.log_level', 'ERROR')
    
    setup_logging()
    
    assert restore_root_logger.level == logging.ERROR


@pytest.mark.unit
def test_get_logger_level_override():
    logger = get_logger('builder.custom', level='debug')
    
    assert logger.name == 'builder.custom'
    assert logger.level == logging.DEBUG
