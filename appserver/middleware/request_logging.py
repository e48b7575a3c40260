import time

from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from appserver.utils.log import get_logger

logger = get_logger("http")


async def logging_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """
    Записывает в журнал каждый обработанный запрос и время его обработки.

    :param request: Запрос для обработки.
    :param call_next: Следующий вызов.
    :return: Ответ на запрос.
    """
    start_time = time.perf_counter()
    request_id: str = getattr(request.state, "request_id", "-")

    try:
        response: Response = await call_next(request)

    except Exception:
        logger.exception(
            "%s %s failed", request.method, request.url.path,
            extra={"request_id": request_id}
        )
        raise

    process_time = (time.perf_counter() - start_time) * 1000
    logger.info(
        "%s %s -> %d (%.2fms)", request.method, request.url.path, response.status_code, process_time,
        extra={"request_id": request_id}
    )
    return response
