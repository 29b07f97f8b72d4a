import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import BaseAPIException, InternalServerError
from .net_utils import get_client_ip

logger = logging.getLogger("imageshop")


def _envelope(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> dict:
    return {
        "success": False,
        "data": None,
        "error": {"code": code, "message": message, "details": details or {}},
        "meta": None,
    }


def _log(request: Request, kind: str, status_code: int, detail: Any) -> None:
    line = (
        f"[{kind}] {request.method} {request.url.path} "
        f"from {get_client_ip(request)} -> {status_code}: {detail}"
    )
    if status_code >= 500:
        logger.error(line)
    else:
        logger.warning(line)


async def handle_api_exception(request: Request, exc: BaseAPIException):
    _log(request, type(exc).__name__, exc.status_code, exc.message)
    content = _envelope(exc.error_code, exc.message, exc.details)
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    # 인증 의존성, 404 라우팅 등 프레임워크가 던지는 HTTPException
    _log(request, "HTTPException", exc.status_code, exc.detail)
    content = _envelope("HTTP_ERROR", str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None)
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = _jsonable_errors(exc.errors())
    _log(request, "ValidationError", 422, errors)
    content = _envelope("VALIDATION_001", "Validation failed", {"errors": errors})
    return JSONResponse(status_code=422, content=content)


async def handle_unexpected_error(request: Request, exc: Exception):
    tb_str = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(
        f"[Unhandled Error] {request.method} {request.url} from {get_client_ip(request)}\n"
        f"{type(exc).__name__}: {exc}\n{tb_str}"
    )
    internal = InternalServerError()
    content = _envelope(internal.error_code, internal.message)
    return JSONResponse(status_code=internal.status_code, content=content)


def _jsonable_errors(errors) -> list:
    # pydantic v2 의 ctx 에는 예외 객체가 들어갈 수 있음
    cleaned = []
    for err in errors:
        item = dict(err)
        if "ctx" in item:
            item["ctx"] = {k: str(v) for k, v in item["ctx"].items()}
        item.pop("input", None)
        cleaned.append(item)
    return cleaned


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, handle_api_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
