import logging
import time
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from imageshop.core.net_utils import get_client_ip

logger = logging.getLogger("imageshop.access")


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 접근 로그

    클라이언트는 프록시 신뢰 설정을 반영한 IP 로 기록하고, 응답 상태 코드
    구간에 따라 로그 레벨을 올린다. 처리 시간은 ``X-Process-Time`` 헤더로도 내려준다.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        client = get_client_ip(request)
        target = f"{request.method} {request.url.path}"
        if request.url.query:
            target = f"{target}?{request.url.query}"

        logger.info(f"[Request] {target} from {client}")
        try:
            response = await call_next(request)
        except Exception:
            # 예외 핸들러를 거치지 못한 오류
            logger.exception(f"[Unhandled Error] {target} from {client}")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Process-Time"] = f"{elapsed_ms:.1f}ms"
        logger.log(
            _level_for(response.status_code),
            f"[Response] {target} from {client} -> {response.status_code} in {elapsed_ms:.1f}ms",
        )
        return response
