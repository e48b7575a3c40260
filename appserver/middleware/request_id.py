import re
import uuid

from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from appserver.utils.context import request_id_var

REQUEST_ID_HEADER: str = "X-Request-ID"
_VALID_REQUEST_ID = re.compile(r"^[\x21-\x7e]{1,128}$")


def pick_request_id(incoming: str | None) -> str:
    """
    Выбирает идентификатор запроса: переданный клиентом, если он корректен, иначе новый.

    :param incoming: Значение заголовка из запроса.
    :return: Идентификатор запроса.
    """
    if incoming is not None and _VALID_REQUEST_ID.match(incoming):
        return incoming

    return uuid.uuid4().hex


async def request_id_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """
    Назначает запросу идентификатор и возвращает его в заголовке ответа.

    :param request: Запрос для обработки.
    :param call_next: Следующий вызов.
    :return: Ответ на запрос.
    """
    request_id = pick_request_id(request.headers.get(REQUEST_ID_HEADER))
    request.state.request_id = request_id
    token = request_id_var.set(request_id)

    try:
        response: Response = await call_next(request)

    finally:
        request_id_var.reset(token)

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
