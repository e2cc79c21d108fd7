"""
목적: 속도 제한과 오류 변환을 포함한 웹 검색 서비스를 제공한다.
설명: 자격 증명 확인, 쿼터 확인, 공급자 호출, 응답 검증을 수행하며 어떤 실패도 예외 대신 합성 결과로 돌려준다.
디자인 패턴: 서비스 레이어 + 포트(Protocol)
참조: src/genie_chat/core/search/results.py, src/genie_chat/integrations/search/google_client.py
"""

from __future__ import annotations

from typing import Protocol

import httpx

from genie_chat.core.chat.const import WEB_SEARCH_ERROR_HISTORY_LIMIT, WEB_SEARCH_RESULT_LIMIT
from genie_chat.core.search import results as synthetic
from genie_chat.core.search.models import ProviderSearchResponse, SearchResult
from genie_chat.shared.logging import BoundedLogRepository, InMemoryLogger, Logger, create_default_logger
from genie_chat.shared.runtime import FixedWindowRateLimiter


class SearchProviderClient(Protocol):
    """검색 공급자 HTTP 클라이언트 계약."""

    @property
    def has_api_key(self) -> bool: ...

    @property
    def has_search_engine_id(self) -> bool: ...

    @property
    def has_credentials(self) -> bool: ...

    async def search(self, query: str, num: int) -> httpx.Response: ...


def create_search_error_logger(max_records: int = WEB_SEARCH_ERROR_HISTORY_LIMIT) -> InMemoryLogger:
    """최근 검색 오류만 보관하는 로거를 생성한다."""

    return InMemoryLogger(
        name="web_search.errors",
        repository=BoundedLogRepository(max_records=max_records),
    )


class WebSearchService:
    """웹 검색 서비스.

    Args:
        client: 검색 공급자 클라이언트.
        rate_limiter: 프로세스 전역 요청 제한기.
        logger: 실행 로그 기록기.
        error_logger: 최근 실패 이력 기록기. 진단 API가 이 저장소를 읽는다.
        result_limit: 반환할 최대 결과 수.
    """

    def __init__(
        self,
        client: SearchProviderClient,
        rate_limiter: FixedWindowRateLimiter,
        logger: Logger | None = None,
        error_logger: InMemoryLogger | None = None,
        result_limit: int = WEB_SEARCH_RESULT_LIMIT,
    ) -> None:
        self._client = client
        self._rate_limiter = rate_limiter
        self._logger = logger or create_default_logger("WebSearchService")
        self._error_logger = error_logger or create_search_error_logger()
        self._result_limit = result_limit

    @property
    def error_logger(self) -> InMemoryLogger:
        return self._error_logger

    @property
    def rate_limiter(self) -> FixedWindowRateLimiter:
        return self._rate_limiter

    async def search(self, query: str) -> list[SearchResult]:
        """검색을 수행한다. 반환 목록은 항상 1건 이상이다."""

        self._logger.info(f"web_search.start: query={query!r}")
        if not self._client.has_credentials:
            self._record_failure(query, "MISSING_CREDENTIALS", code="MISSING_CREDENTIALS")
            return synthetic.missing_credentials_results(
                api_key_set=self._client.has_api_key,
                search_engine_id_set=self._client.has_search_engine_id,
            )

        if not self._rate_limiter.try_acquire():
            self._record_failure(query, "RATE_LIMIT_EXCEEDED", code="429")
            return synthetic.local_rate_limit_results()

        try:
            response = await self._client.search(query, num=self._result_limit)
            if not response.is_success:
                self._record_failure(query, f"HTTP {response.status_code}", code=str(response.status_code))
                return synthetic.http_error_results(response.status_code, response.text)
            payload = ProviderSearchResponse.model_validate(response.json())
        except Exception as error:  # noqa: BLE001 - 검색 실패는 합성 결과로 대체한다.
            code = "NETWORK_ERROR" if isinstance(error, httpx.TransportError) else None
            self._record_failure(query, str(error) or type(error).__name__, code=code)
            return synthetic.exception_results(query, error)

        if payload.error is not None:
            error_code = None if payload.error.code is None else str(payload.error.code)
            self._record_failure(query, f"Error {payload.error.code}: {payload.error.message}", code=error_code)
            return synthetic.api_error_results(payload.error)
        if not payload.items:
            self._logger.info(f"web_search.empty: query={query!r}")
            return synthetic.no_results(query)

        items = payload.items[: self._result_limit]
        self._logger.info(f"web_search.done: query={query!r}, count={len(items)}")
        return [synthetic.to_search_result(item) for item in items]

    def _record_failure(self, query: str, error: str, code: str | None = None) -> None:
        self._logger.warning(f"web_search.failed: query={query!r}, error={error}")
        self._error_logger.error(
            "web_search.error",
            metadata={"query": query, "error": error, "code": code},
        )
