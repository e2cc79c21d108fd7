"""
목적: 검색 공급자 자격 증명을 실제 요청 1건으로 검증한다.
설명: `q=test, num=1` 요청 결과를 상태 코드별로 해석해 CredentialStatus를 만들고, 사용자 안내 문구를 제공한다.
디자인 패턴: 서비스 객체 + 순수 함수
참조: src/genie_chat/core/search/service.py, src/genie_chat/api/config/routers/search_status.py
"""

from __future__ import annotations

from typing import Any

from genie_chat.core.diagnostics.models import REDACTED, CredentialCheck, CredentialStatus
from genie_chat.core.search.service import SearchProviderClient
from genie_chat.shared.logging import Logger, create_default_logger

_PROBE_QUERY = "test"


class SearchCredentialProbe:
    """검색 자격 증명 검증기."""

    def __init__(self, client: SearchProviderClient, logger: Logger | None = None) -> None:
        self._client = client
        self._logger = logger or create_default_logger("SearchCredentialProbe")

    async def probe(self) -> CredentialStatus:
        """자격 증명 상태를 확인한다. 어떤 실패도 예외 대신 결과 메시지로 반환한다."""

        status = CredentialStatus(
            api_key=_check(self._client.has_api_key),
            search_engine_id=_check(self._client.has_search_engine_id),
        )
        if not self._client.has_credentials:
            status.message = "Missing Google API credentials"
            status.guidance = describe_credential_status(status)
            return status

        try:
            response = await self._client.search(_PROBE_QUERY, num=1)
            if response.is_success:
                status.is_valid = True
                status.api_key.is_valid = True
                status.search_engine_id.is_valid = True
                status.message = "Google API credentials are valid"
            else:
                self._apply_error(status, response.status_code, _error_message(response.json()))
        except Exception as error:  # noqa: BLE001 - 진단은 실패 내용을 결과로 돌려준다.
            status.message = f"Error validating credentials: {error}"

        status.guidance = describe_credential_status(status)
        self._logger.info(f"search.credentials.probed: valid={status.is_valid}, message={status.message}")
        return status

    def _apply_error(self, status: CredentialStatus, status_code: int, message: str | None) -> None:
        if status_code == 403:
            status.api_key.error = message or "Access denied"
            status.message = "Invalid API key or insufficient permissions"
        elif status_code == 400 and message and "cx" in message:
            status.search_engine_id.error = message
            status.message = "Invalid Search Engine ID"
        else:
            status.message = f"API error: {message or status_code}"


def _check(exists: bool) -> CredentialCheck:
    return CredentialCheck(value=REDACTED if exists else None, exists=exists)


def _error_message(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return None


def describe_credential_status(status: CredentialStatus | None) -> str:
    """검증 결과를 사용자 안내 문구로 변환한다."""

    if status is None:
        return "Unable to validate API credentials"
    if status.is_valid:
        return "Google API credentials are valid"
    if not status.api_key.exists:
        return "Google API key is missing. Please set GOOGLE_API_KEY in your environment variables."
    if status.api_key.error:
        return f"Google API key is invalid: {status.api_key.error}"
    if not status.search_engine_id.exists:
        return (
            "Google Search Engine ID is missing. "
            "Please set GOOGLE_SEARCH_ENGINE_ID in your environment variables."
        )
    if status.search_engine_id.error:
        return f"Google Search Engine ID is invalid: {status.search_engine_id.error}"
    return status.message or "Unknown error with Google API configuration"
