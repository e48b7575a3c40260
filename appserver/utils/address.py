import asyncio
import ipaddress
import re
import socket
from typing import Any, NamedTuple

from appserver.exceptions import InvalidAddressError

_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
_DOTTED_DIGITS = re.compile(r"^[0-9.]+$")


class SocketAddress(NamedTuple):
    """
    Конкретный адрес сокета, полученный из пары хост и порт.
    """
    family: socket.AddressFamily
    sockaddr: tuple[Any, ...]

    @property
    def host(self) -> str:
        return self.sockaddr[0]

    @property
    def port(self) -> int:
        return self.sockaddr[1]

    def __str__(self) -> str:
        if self.family == socket.AF_INET6:
            return f"[{self.host}]:{self.port}"

        return f"{self.host}:{self.port}"


def format_address(host: str, port: int) -> str:
    """
    Склеивает хост и порт в строку без какой-либо проверки.

    :param host: Хост.
    :param port: Порт.
    :return: Строка вида host:port.
    """
    return f"{host}:{port}"


def _is_hostname(host: str) -> bool:
    if len(host) > 253 or _DOTTED_DIGITS.match(host):
        return False

    return all(_HOSTNAME_LABEL.match(label) for label in host.removesuffix(".").split("."))


def _literal_address(host: str, port: int) -> SocketAddress | None:
    try:
        ip = ipaddress.ip_address(host)

    except ValueError:
        return None

    if ip.version == 6:
        return SocketAddress(socket.AF_INET6, (str(ip), port, 0, 0))

    return SocketAddress(socket.AF_INET, (str(ip), port))


async def resolve_socket_addresses(host: str, port: int) -> list[SocketAddress]:
    """
    Преобразует хост и порт в список адресов сокета для привязки.

    IP адреса используются как есть (IPv6 можно указать в квадратных скобках),
    остальные имена разрешаются через getaddrinfo.

    :param host: Имя хоста или IP адрес.
    :param port: Порт.
    :return: Адреса сокета в порядке предпочтения.
    :raise InvalidAddressError: Когда хост или порт не приводятся к адресу сокета.
    """
    if not isinstance(port, int) or not (0 <= port <= 65535):
        raise InvalidAddressError(host, port, "port must be in range 0-65535")

    # Brackets are only valid around an IPv6 literal
    if host.startswith("[") and host.endswith("]"):
        address = _literal_address(host[1:-1], port)
        if address is None or address.family != socket.AF_INET6:
            raise InvalidAddressError(host, port)

        return [address]

    if (address := _literal_address(host, port)) is not None:
        return [address]

    if ":" in host or not _is_hostname(host):
        raise InvalidAddressError(host, port)

    loop = asyncio.get_running_loop()
    try:
        infos = await loop.getaddrinfo(host, port, type=socket.SOCK_STREAM)

    except socket.gaierror as err:
        raise InvalidAddressError(host, port, err.strerror or "name resolution failed") from err

    addresses: list[SocketAddress] = []
    for family, _, _, _, sockaddr in infos:
        address = SocketAddress(socket.AddressFamily(family), tuple(sockaddr))
        if address not in addresses:
            addresses.append(address)

    if not addresses:
        raise InvalidAddressError(host, port, "name resolved to no addresses")

    return addresses
