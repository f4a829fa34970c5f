"""
Пакет сервиса генерации штрихкодов
==================================

Ядро HTTP-утилиты генерации штрихкодов UPC-A, EAN-13 и Code128.

Этот пакет предоставляет:
    - Проверку запросов и контрольных цифр (взвешенный модуль 10)
    - Кодирование символов через python-barcode
    - Растровый рендеринг PNG (Pillow) с подписью моноширинным шрифтом
    - Векторный рендеринг SVG прямоугольниками по сериям штрихов
    - Централизованное логирование и загрузку конфигурации

Пример базового использования:
    >>> from src import get_logger, load_config
    >>> from src.barcodegen import BarcodeConfig, BarcodeService
    >>>
    >>> logger = get_logger(__name__)
    >>> service = BarcodeService(config=BarcodeConfig.from_mapping(load_config()))
    >>> image = service.generate_from_dict({"data": "036000291452", "type": "UPC-A"})
    >>> logger.info("Сгенерировано %d байт %s", len(image.content), image.content_type)

Автор: Barcode Service Development Team
Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "Barcode Service Development Team"
__description__ = "Stateless UPC-A / EAN-13 / Code128 barcode generation to PNG and SVG"
__license__ = "MIT"
__python_requires__ = ">=3.11"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# Module loggers use logging.getLogger(__name__), so they nest under this one.
LOGGER_NAMESPACE = __name__

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком, если задана переменная
      окружения BARCODEGEN_LOG_FILE

    Уровень логирования задаётся переменной окружения
    BARCODEGEN_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Идемпотентна - повторные вызовы не имеют дополнительного эффекта.
    """
    log_level_str = os.environ.get("BARCODEGEN_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Консольный обработчик (stderr) - WARNING и выше
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("BARCODEGEN_LOG_FILE")
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён пакета.

    Логгеры именуются как "<пакет>.<module_name>" и наследуют
    обработчики, настроенные в ``_setup_logging``.

    Аргументы:
        module_name: Имя модуля, обычно ``__name__``.

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.info("Генерация штрихкода: %s", "EAN-13")
    """
    if module_name == LOGGER_NAMESPACE or module_name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAMESPACE}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "barcode_default_width": 300,
    "barcode_default_height": 150,
    "barcode_default_format": "png",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из config.json или использовать значения
    по умолчанию.

    Если файл отсутствует или содержит недопустимый JSON, возвращается
    конфигурация по умолчанию с предупреждением в логе.

    Ключи конфигурации:
        - log_level: str - Уровень логирования
        - barcode_default_width: int - Ширина по умолчанию (пиксели)
        - barcode_default_height: int - Высота по умолчанию (пиксели)
        - barcode_default_format: str - Формат по умолчанию ("png"/"svg")

    Аргументы:
        config_path: Путь к файлу. Если None, ищет 'config.json' в
            текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, переопределёнными
        пользовательскими значениями.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("config.json")

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info(
            "Файл конфигурации %s не найден. Используется конфигурация по умолчанию.",
            config_path,
        )
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info("Конфигурация загружена из %s", config_path)
        logger.debug("Конфигурация: %s", config)

    except json.JSONDecodeError as e:
        logger.warning(
            "Не удалось разобрать %s: недопустимый JSON в строке %d, столбце %d. "
            "Используется конфигурация по умолчанию.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning(
            "Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.",
            config_path,
            e,
        )
    except ValueError as e:
        logger.warning(
            "Недопустимый формат конфигурации: %s. Используется конфигурация по умолчанию.",
            e,
        )

    return config


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПУБЛИЧНОГО API
# =============================================================================

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    "LOGGER_NAMESPACE",
    "get_logger",
    "load_config",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()
