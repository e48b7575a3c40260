import logging
import sys

from appserver.utils.context import request_id_var, trace_id_var

ROOT_LOGGER_NAME: str = "appserver"
LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(trace_id)s | %(message)s"


class RequestContextFilter(logging.Filter):
    """
    Дополняет записи журнала идентификаторами текущего запроса и трассировки.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()

        if not hasattr(record, "trace_id"):
            record.trace_id = trace_id_var.get()

        return True


def get_logger(name: str) -> logging.Logger:
    """
    Получает журнал внутри пространства имен приложения.

    :param name: Имя компонента.
    :return: Журнал компонента.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Настраивает вывод журнала приложения в стандартный поток, вызывается один раз при запуске.

    :param level: Уровень журналирования.
    :return: Корневой журнал приложения.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        handler.addFilter(RequestContextFilter())
        logger.addHandler(handler)

    logger.propagate = False
    return logger
