"""
클라이언트 IP 추출

프록시/로드밸런서가 붙이는 전달 헤더를 정해진 순서로 확인하고, 모두 없으면
소켓 피어 주소를 사용한다. 전달 헤더는 위조가 쉬우므로 ``TRUSTED_PROXIES``
설정에 등록된 피어에서 온 요청일 때만 신뢰한다.
"""

import logging
from typing import Iterable, Optional

from fastapi import Request

from imageshop.config import settings

logger = logging.getLogger(__name__)

# 확인 순서가 곧 우선순위
FORWARDED_IP_HEADERS = (
    "X-Forwarded-For",
    "Proxy-Client-IP",
    "WL-Proxy-Client-IP",
    "HTTP-CLIENT-IP",
    "HTTP_X_FORWARDED_FOR",
)

UNKNOWN_ADDRESS = "-"


def _remote_addr(request: Request) -> str:
    return request.client.host if request.client else UNKNOWN_ADDRESS


def is_trusted_proxy(peer: str, trusted_proxies: Iterable[str]) -> bool:
    trusted = list(trusted_proxies)
    return "*" in trusted or peer in trusted


def get_client_ip(
    request: Request, trusted_proxies: Optional[Iterable[str]] = None
) -> str:
    """요청의 클라이언트 IP 반환

    Args:
        request: 현재 요청
        trusted_proxies: 전달 헤더를 신뢰할 피어 목록 (기본값: settings.TRUSTED_PROXIES)

    Returns:
        str: 첫 번째로 존재하는 전달 헤더 값, 없으면 소켓 주소
    """
    if trusted_proxies is None:
        trusted_proxies = settings.TRUSTED_PROXIES

    remote_addr = _remote_addr(request)
    if not is_trusted_proxy(remote_addr, trusted_proxies):
        return remote_addr

    for header in FORWARDED_IP_HEADERS:
        value = request.headers.get(header)
        logger.debug(f">>>> {header} : {value}")
        if value:
            # X-Forwarded-For: client, proxy1, proxy2
            ip = value.split(",")[0].strip()
            if ip:
                logger.debug(f">>>> Result : IP Address : {ip}")
                return ip

    logger.debug(f">>>> Result : IP Address : {remote_addr}")
    return remote_addr
