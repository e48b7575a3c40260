import argparse
import asyncio
import sys
import tomllib
from argparse import Namespace
from pathlib import Path
from typing import Optional, Sequence

from appserver.app_server import Server
from appserver.exceptions import BindError, InvalidAddressError, ServeError
from appserver.state import AppState
from appserver.utils.config import AppConfig, ServerConfig
from appserver.utils.log import get_logger, setup_logging

DEFAULT_CONFIG_PATH: Path = Path("./config.toml")


def parse_launch_arguments(argv: Optional[Sequence[str]] = None) -> Namespace:
    """
    Получает параметры запуска при инициализации приложения.

    :param argv: Аргументы командной строки, по умолчанию берутся из sys.argv.
    :return: Пространство имен с полученными переменными.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="appserver",
        add_help=False,
        description="HTTP сервер приложения"
    )
    parser.add_argument(
        '-h', '--help', action='help', default=argparse.SUPPRESS,
        help='Показывает сообщение с помощью и закрывает программу'
    )
    parser.add_argument(
        "--config", "-c", default=DEFAULT_CONFIG_PATH, type=Path,
        dest="config_path",
        help="Устанавливает путь до файла конфигурации приложения"
    )
    parser.add_argument(
        "--host", default=None,
        dest="host",
        help="Переопределяет хост для привязки сервера"
    )
    parser.add_argument(
        "--port", default=None, type=int,
        dest="port",
        help="Переопределяет порт для привязки сервера"
    )
    parser.add_argument(
        "--no-cors", action="store_true", default=False,
        dest="no_cors",
        help="Отключает разрешение запросов с других источников"
    )

    return parser.parse_args(argv)


def load_config(args: Namespace) -> AppConfig:
    """
    Загружает конфигурацию из файла и применяет переопределения из командной строки.

    :param args: Параметры запуска.
    :return: Конфигурация приложения.
    """
    config_path: Path = args.config_path
    if config_path.is_file():
        with open(config_path, mode="rb") as f:
            config_data = AppConfig(**tomllib.load(f))

    else:
        config_data = AppConfig()

    overrides: dict[str, object] = {}
    if args.host is not None:
        overrides["host"] = args.host

    if args.port is not None:
        overrides["port"] = args.port

    if args.no_cors:
        overrides["cors_enabled"] = False

    if overrides:
        server_settings = ServerConfig.model_validate(
            config_data.server_settings.model_dump() | overrides
        )
        config_data = config_data.model_copy(update={"server_settings": server_settings})

    return config_data


def main(argv: Optional[Sequence[str]] = None) -> None:
    args: Namespace = parse_launch_arguments(argv)
    config_data: AppConfig = load_config(args)

    setup_logging(config_data.log_level)
    logger = get_logger("main")

    server = Server(AppState(), config_data.server_settings)
    try:
        asyncio.run(server.run())

    except (InvalidAddressError, BindError, ServeError) as err:
        logger.error("Server failed: %s", err)
        sys.exit(1)


if __name__ == "__main__":
    main()
