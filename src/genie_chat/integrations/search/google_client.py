"""
목적: Google Custom Search JSON API 클라이언트를 제공한다.
설명: 호출마다 httpx AsyncClient를 열고 관찰자 훅을 등록한 뒤 원본 응답을 반환한다. 상태 해석은 서비스가 담당한다.
디자인 패턴: 어댑터(Adapter)
참조: src/genie_chat/core/search/service.py, src/genie_chat/integrations/search/observers.py
"""

from __future__ import annotations

import httpx
from pydantic import SecretStr

from genie_chat.integrations.search.observers import RequestObserver, build_event_hooks

GOOGLE_CUSTOM_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


class GoogleCustomSearchClient:
    """Google Custom Search 호출 어댑터.

    Args:
        api_key: API 키. None이면 자격 증명 누락으로 취급한다.
        search_engine_id: 검색 엔진 식별자(cx).
        timeout_seconds: 요청 타임아웃(초).
        transport: 테스트용 httpx 전송 계층.
        observers: 요청 관찰자 목록.
    """

    def __init__(
        self,
        api_key: SecretStr | str | None,
        search_engine_id: str | None,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        observers: list[RequestObserver] | None = None,
        base_url: str = GOOGLE_CUSTOM_SEARCH_URL,
    ) -> None:
        if isinstance(api_key, SecretStr):
            api_key = api_key.get_secret_value()
        self._api_key = (api_key or "").strip()
        self._search_engine_id = (search_engine_id or "").strip()
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport
        self._observers = list(observers or [])
        self._base_url = base_url

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    @property
    def has_search_engine_id(self) -> bool:
        return bool(self._search_engine_id)

    @property
    def has_credentials(self) -> bool:
        return self.has_api_key and self.has_search_engine_id

    async def search(self, query: str, num: int) -> httpx.Response:
        """검색 요청을 보내고 응답을 그대로 반환한다."""

        params = {
            "key": self._api_key,
            "cx": self._search_engine_id,
            "q": query,
            "num": str(num),
        }
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            event_hooks=build_event_hooks(self._observers),
        ) as client:
            response = await client.get(
                self._base_url,
                params=params,
                headers={"Accept": "application/json"},
            )
            await response.aread()
            return response
