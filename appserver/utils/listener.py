import socket
from typing import Iterable

from appserver.exceptions import BindError
from appserver.utils.address import SocketAddress

LISTEN_BACKLOG: int = 2048


def bind_listener(addresses: Iterable[SocketAddress], backlog: int = LISTEN_BACKLOG) -> socket.socket:
    """
    Создает слушающий TCP сокет на первом адресе, к которому удалось привязаться.

    :param addresses: Адреса в порядке предпочтения.
    :param backlog: Размер очереди входящих соединений.
    :return: Привязанный и слушающий сокет.
    :raise BindError: Когда ни к одному адресу не удалось привязаться.
    """
    last_error: BindError | None = None

    for address in addresses:
        sock = socket.socket(address.family, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            if address.family == socket.AF_INET6:
                sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 1)

            sock.bind(address.sockaddr)
            sock.listen(backlog)

        except OSError as err:
            sock.close()
            last_error = BindError(str(address), err.errno, err.strerror)
            last_error.__cause__ = err
            continue

        return sock

    if last_error is None:
        raise BindError("<no addresses>", None, "nothing to bind to")

    raise last_error
