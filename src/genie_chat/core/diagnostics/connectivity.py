"""
목적: 웹 검색 연결성/오류 이력 진단을 제공한다.
설명: 외부 인터넷, 자체 API 엔드포인트 도달 여부와 최근 검색 오류 이력을 점검 항목 목록으로 반환한다.
디자인 패턴: 서비스 객체
참조: src/genie_chat/core/search/service.py, src/genie_chat/api/diagnostics/routers/diagnostics.py
"""

from __future__ import annotations

from typing import Any

import httpx

from genie_chat.core.diagnostics.models import DiagnosticCheck, DiagnosticStatus
from genie_chat.core.search.results import troubleshooting_message
from genie_chat.shared.logging import LogRepository, Logger, create_default_logger

NETWORK_PROBE_URL = "https://www.google.com"
PING_PATH = "/api/diagnostics/ping"


class WebSearchDiagnostics:
    """웹 검색 진단기.

    Args:
        app_base_url: 자체 API 기준 URL.
        error_repository: 최근 검색 오류 저장소.
        timeout_seconds: 각 HEAD 요청 타임아웃(초).
        transport: 테스트용 httpx 전송 계층.
    """

    def __init__(
        self,
        app_base_url: str,
        error_repository: LogRepository,
        timeout_seconds: float = 3.0,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._app_base_url = app_base_url.rstrip("/")
        self._error_repository = error_repository
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport
        self._logger = logger or create_default_logger("WebSearchDiagnostics")

    async def run(self) -> list[DiagnosticCheck]:
        """세 가지 점검을 순서대로 수행한다."""

        self._logger.info("diagnostics.web_search.start")
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            checks = [
                await self._check_network(client),
                await self._check_api_endpoint(client),
                self._check_previous_errors(),
            ]
        self._logger.info(
            "diagnostics.web_search.done: "
            + ", ".join(f"{check.name}={check.status.value}" for check in checks)
        )
        return checks

    def recent_errors(self) -> list[dict[str, Any]]:
        """최근 검색 오류를 `{timestamp, query, error, code}` 형태로 반환한다."""

        return [
            {
                "timestamp": record.timestamp.isoformat(),
                "query": record.metadata.get("query"),
                "error": record.metadata.get("error"),
                "code": record.metadata.get("code"),
            }
            for record in self._error_repository.list()
        ]

    async def _check_network(self, client: httpx.AsyncClient) -> DiagnosticCheck:
        name = "Network Connectivity"
        try:
            response = await client.head(NETWORK_PROBE_URL)
        except Exception as error:  # noqa: BLE001 - 진단은 실패 내용을 결과로 돌려준다.
            return DiagnosticCheck(
                name=name,
                status=DiagnosticStatus.ERROR,
                message=f"Failed to connect to internet: {error}",
            )
        if response.is_success:
            return DiagnosticCheck(name=name, status=DiagnosticStatus.OK, message="Internet connection is working")
        return DiagnosticCheck(
            name=name,
            status=DiagnosticStatus.WARNING,
            message=f"Internet connection may have issues. Status: {response.status_code}",
        )

    async def _check_api_endpoint(self, client: httpx.AsyncClient) -> DiagnosticCheck:
        name = "API Endpoint"
        try:
            response = await client.head(f"{self._app_base_url}{PING_PATH}")
        except Exception as error:  # noqa: BLE001 - 진단은 실패 내용을 결과로 돌려준다.
            return DiagnosticCheck(
                name=name,
                status=DiagnosticStatus.ERROR,
                message=f"Failed to reach API endpoint: {error}",
            )
        if response.is_success:
            return DiagnosticCheck(name=name, status=DiagnosticStatus.OK, message="API endpoint is reachable")
        return DiagnosticCheck(
            name=name,
            status=DiagnosticStatus.WARNING,
            message=f"API endpoint returned status {response.status_code}",
        )

    def _check_previous_errors(self) -> DiagnosticCheck:
        records = self._error_repository.list()
        if records:
            # 안내 문구는 가장 최근 오류 코드를 따른다.
            hint = troubleshooting_message(records[-1].metadata.get("code"))
            return DiagnosticCheck(
                name="Previous Errors",
                status=DiagnosticStatus.WARNING,
                message=f"Found {len(records)} previous web search errors. {hint}",
            )
        return DiagnosticCheck(
            name="Previous Errors",
            status=DiagnosticStatus.OK,
            message="No previous web search errors found",
        )
