"""
Logger Config — цветной консольный вывод логов для приложений

Библиотека пишет в логгеры `percent.*` и сама обработчиков не ставит
(только NullHandler). Приложение подключает вывод через get_logger.
"""

import logging

from colorlog import ColoredFormatter

LOG_FORMAT = "%(log_color)s%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "percent", level=logging.DEBUG) -> logging.Logger:
    """
    Логгер с цветным StreamHandler.

    Повторный вызов не добавляет второй обработчик.

    Args:
        name: Имя логгера (default: корневой логгер пакета)
        level: Уровень логирования

    Returns:
        Настроенный logging.Logger
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        logger.setLevel(level)

        formatter = ColoredFormatter(
            LOG_FORMAT,
            datefmt=DATE_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
