"""
Logger — Настройка логирования библиотеки

Все логгеры библиотеки — потомки логгера "chinese_numerals".
Корневой логгер приложения не переконфигурируется.

Импорт библиотеки добавляет только NullHandler и не меняет уровень:
записи уходят в обработчики приложения. Собственный вывод библиотеки
включается явно через setup_logging() или auto_setup().

Переменные окружения:
    CHINESE_NUMERALS_LOG_LEVEL: уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CHINESE_NUMERALS_LOG_FILE: путь к файлу лога
    CHINESE_NUMERALS_LOG_FORMAT: формат (default, simple)
"""

import logging
import os
import sys
from typing import Final, Optional


# =============================================================================
# CONSTANTS
# =============================================================================

LIBRARY_LOGGER_NAME: Final[str] = "chinese_numerals"

LOG_LEVEL_ENV: Final[str] = "CHINESE_NUMERALS_LOG_LEVEL"
LOG_FILE_ENV: Final[str] = "CHINESE_NUMERALS_LOG_FILE"
LOG_FORMAT_ENV: Final[str] = "CHINESE_NUMERALS_LOG_FORMAT"

LOG_LEVELS: Final[dict[str, int]] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT: Final[str] = "%(levelname)s - %(name)s - %(message)s"

_configured = False

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


# =============================================================================
# SETUP
# =============================================================================


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console_output: bool = True,
    force: bool = False,
) -> logging.Logger:
    """
    Настройка логгера библиотеки.

    Args:
        level: Уровень логирования; None → CHINESE_NUMERALS_LOG_LEVEL (default WARNING)
        log_file: Путь к файлу лога (дополнительно к консоли)
        format_string: Формат сообщений
        console_output: Выводить в stderr
        force: Переконфигурировать, даже если уже настроено

    Returns:
        Логгер библиотеки
    """
    global _configured

    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if _configured and not force:
        return library_logger

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    log_level = LOG_LEVELS.get(level.upper(), logging.WARNING)

    library_logger.setLevel(log_level)
    library_logger.handlers.clear()

    formatter = logging.Formatter(format_string)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        library_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        library_logger.addHandler(file_handler)

    if not library_logger.handlers:
        library_logger.addHandler(logging.NullHandler())

    _configured = True
    return library_logger


def get_logger(name: str) -> logging.Logger:
    """
    Логгер модуля библиотеки. Обработчики не настраиваются.

    Args:
        name: Имя логгера, обычно __name__

    Returns:
        logging.Logger (потомок логгера библиотеки)
    """
    return logging.getLogger(name)


def set_module_log_level(module_name: str, level: str) -> None:
    """Уровень логирования для отдельного модуля"""
    logging.getLogger(module_name).setLevel(LOG_LEVELS.get(level.upper(), logging.WARNING))


def disable_module_logging(module_name: str) -> None:
    """Отключение логирования модуля"""
    logging.getLogger(module_name).setLevel(logging.CRITICAL + 1)


def auto_setup() -> logging.Logger:
    """Настройка по переменным окружения CHINESE_NUMERALS_LOG_*"""
    log_format = os.environ.get(LOG_FORMAT_ENV, "default")
    format_string = SIMPLE_FORMAT if log_format == "simple" else DEFAULT_FORMAT
    return setup_logging(
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING"),
        log_file=os.environ.get(LOG_FILE_ENV),
        format_string=format_string,
        force=True,
    )
