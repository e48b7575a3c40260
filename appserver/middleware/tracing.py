import re
import secrets
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from appserver.utils.context import trace_id_var
from appserver.utils.log import get_logger

logger = get_logger("trace")

# W3C trace context: version-trace_id-parent_id-flags
_TRACEPARENT = re.compile(r"^[0-9a-f]{2}-(?P<trace_id>[0-9a-f]{32})-[0-9a-f]{16}-[0-9a-f]{2}$")


def continue_trace(traceparent: str | None) -> str:
    """
    Получает идентификатор трассировки из заголовка traceparent или создает новый.

    :param traceparent: Значение заголовка traceparent.
    :return: Идентификатор трассировки из 32 шестнадцатеричных символов.
    """
    if traceparent is not None and (match := _TRACEPARENT.match(traceparent.strip().lower())):
        trace_id = match.group("trace_id")
        if trace_id != "0" * 32:
            return trace_id

    return secrets.token_hex(16)


class TracingMiddleware(BaseHTTPMiddleware):
    """
    Открывает интервал трассировки на каждый запрос и сообщает время обработки.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        trace_id = continue_trace(request.headers.get("traceparent"))
        span_id = secrets.token_hex(8)
        token = trace_id_var.set(trace_id)

        logger.debug(
            "started processing request %s %s span=%s", request.method, request.url.path, span_id,
            extra={"trace_id": trace_id}
        )
        start_time = time.perf_counter()

        try:
            response: Response = await call_next(request)

        finally:
            trace_id_var.reset(token)

        process_time = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "finished processing request span=%s latency=%.4fms status=%d",
            span_id, process_time, response.status_code,
            extra={"trace_id": trace_id}
        )
        response.headers["Server-Timing"] = f"app;dur={round(process_time, 4)}"
        return response
