"""
목적: 검색 HTTP 요청 관찰자 계약과 로깅 구현을 제공한다.
설명: httpx event_hooks에 등록되어 요청 시작/응답 종료 시점을 기록한다. URL의 `key` 파라미터는 제거한다.
디자인 패턴: 옵저버(Observer)
참조: src/genie_chat/integrations/search/google_client.py
"""

from __future__ import annotations

import time
from typing import Protocol

import httpx

from genie_chat.shared.logging import Logger, create_default_logger

_STARTED_AT_KEY = "genie_chat.started_at"


class RequestObserver(Protocol):
    """외부 HTTP 요청 관찰자 계약."""

    async def on_request_start(self, request: httpx.Request) -> None: ...

    async def on_response_end(self, request: httpx.Request, response: httpx.Response) -> None: ...


def redact_url(url: httpx.URL) -> str:
    """자격 증명 쿼리 파라미터를 제거한 URL 문자열을 반환한다."""

    return str(url.copy_remove_param("key"))


class LoggingRequestObserver:
    """요청 메서드/URL/상태/소요 시간을 기록한다."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger or create_default_logger("SearchHttp")

    async def on_request_start(self, request: httpx.Request) -> None:
        request.extensions[_STARTED_AT_KEY] = time.perf_counter()
        self._logger.debug(f"search.http.start: method={request.method}, url={redact_url(request.url)}")

    async def on_response_end(self, request: httpx.Request, response: httpx.Response) -> None:
        started_at = request.extensions.get(_STARTED_AT_KEY)
        elapsed_ms = 0.0
        if isinstance(started_at, float):
            elapsed_ms = (time.perf_counter() - started_at) * 1000
        self._logger.info(
            f"search.http.end: method={request.method}, url={redact_url(request.url)}, "
            f"status={response.status_code}, elapsed_ms={elapsed_ms:.1f}"
        )


def build_event_hooks(observers: list[RequestObserver]) -> dict[str, list]:
    """관찰자 목록을 httpx event_hooks 사전으로 변환한다."""

    async def _on_request(request: httpx.Request) -> None:
        for observer in observers:
            await observer.on_request_start(request)

    async def _on_response(response: httpx.Response) -> None:
        for observer in observers:
            await observer.on_response_end(response.request, response)

    return {"request": [_on_request], "response": [_on_response]}
