"""
Тесты для настройки логирования библиотеки
"""

import logging

import pytest

from chinese_numerals import MyriadScaleInt
from chinese_numerals.core import logger as logger_module
from chinese_numerals.core.logger import (
    LIBRARY_LOGGER_NAME,
    LOG_LEVEL_ENV,
    auto_setup,
    disable_module_logging,
    get_logger,
    set_module_log_level,
    setup_logging,
)


@pytest.fixture
def restore_logging():
    """Возврат логгера библиотеки к состоянию после импорта"""
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    handlers = list(library_logger.handlers)
    level = library_logger.level
    configured = logger_module._configured
    yield
    for handler in library_logger.handlers:
        if handler not in handlers:
            handler.close()
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)
    logger_module._configured = configured
    logging.getLogger("chinese_numerals.tests").setLevel(logging.NOTSET)


class TestImportState:
    """Импорт библиотеки не настраивает логирование приложения"""

    def test_only_null_handler(self) -> None:
        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        assert library_logger.handlers
        assert all(isinstance(h, logging.NullHandler) for h in library_logger.handlers)

    def test_level_not_pinned(self) -> None:
        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.NOTSET

    def test_get_logger_does_not_configure(self) -> None:
        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        handlers = list(library_logger.handlers)
        get_logger("chinese_numerals.core.math.rendering")
        assert library_logger.handlers == handlers
        assert library_logger.level == logging.NOTSET

    def test_debug_reaches_application_handlers(self, caplog) -> None:
        """Уровень DEBUG приложения действует на логгеры библиотеки"""
        caplog.set_level(logging.DEBUG)
        with pytest.raises(ValueError):
            MyriadScaleInt.from_int(2**128)
        assert "MyriadScaleInt rejected" in caplog.text


class TestSetupLogging:
    """Тесты setup_logging"""

    def test_level(self, restore_logging) -> None:
        logger = setup_logging(level="DEBUG", force=True)
        assert logger.name == LIBRARY_LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self, restore_logging) -> None:
        logger = setup_logging(level="VERBOSE", force=True)
        assert logger.level == logging.WARNING

    def test_console_handler(self, restore_logging) -> None:
        logger = setup_logging(force=True)
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)

    def test_null_handler_without_outputs(self, restore_logging) -> None:
        logger = setup_logging(console_output=False, force=True)
        assert [type(h) for h in logger.handlers] == [logging.NullHandler]

    def test_file_handler(self, restore_logging, tmp_path) -> None:
        log_file = tmp_path / "numerals.log"
        logger = setup_logging(
            level="INFO", log_file=str(log_file), console_output=False, force=True
        )
        logger.info("written")
        for handler in logger.handlers:
            handler.flush()
        assert "written" in log_file.read_text(encoding="utf-8")
        for handler in logger.handlers:
            handler.close()

    def test_not_reconfigured_without_force(self, restore_logging) -> None:
        setup_logging(level="ERROR", force=True)
        logger = setup_logging(level="DEBUG")
        assert logger.level == logging.ERROR

    def test_root_logger_untouched(self, restore_logging) -> None:
        root_handlers = list(logging.getLogger().handlers)
        setup_logging(level="DEBUG", force=True)
        assert logging.getLogger().handlers == root_handlers

    def test_level_from_environment(self, restore_logging, monkeypatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert auto_setup().level == logging.ERROR


class TestModuleLoggers:
    """Тесты логгеров модулей"""

    def test_child_of_library_logger(self) -> None:
        logger = get_logger("chinese_numerals.core.domain.numeral")
        assert logger.parent is not None
        assert logger.name.startswith(LIBRARY_LOGGER_NAME)

    def test_set_module_level(self, restore_logging) -> None:
        set_module_log_level("chinese_numerals.tests", "debug")
        assert logging.getLogger("chinese_numerals.tests").level == logging.DEBUG

    def test_disable_module(self, restore_logging) -> None:
        disable_module_logging("chinese_numerals.tests")
        assert not logging.getLogger("chinese_numerals.tests").isEnabledFor(logging.CRITICAL)
