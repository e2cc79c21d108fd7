"""
목적: 검색 자격 증명 검증 결과 해석을 검증한다.
설명: 상태 코드별 메시지와 camelCase 직렬화, 비밀 값 비노출을 확인한다.
디자인 패턴: 테스트 더블 기반 단위 테스트
참조: src/genie_chat/core/diagnostics/credential_probe.py
"""

from __future__ import annotations

import httpx
import pytest

from _chat_fakes import StaticSearchClient
from genie_chat.core.diagnostics import CredentialStatus, SearchCredentialProbe, describe_credential_status


@pytest.mark.asyncio
async def test_credential_check_reports_valid_credentials() -> None:
    client = StaticSearchClient(payload={"items": []})

    status = await SearchCredentialProbe(client).probe()

    assert status.is_valid is True
    assert status.message == "Google API credentials are valid"
    assert client.queries == [("test", 1)]
    dumped = status.model_dump(mode="json", by_alias=True)
    assert dumped["isValid"] is True
    assert dumped["apiKey"] == {"value": "[REDACTED]", "exists": True, "isValid": True, "error": None}
    assert dumped["guidance"] == "Google API credentials are valid"


@pytest.mark.asyncio
async def test_credential_check_skips_request_when_credentials_missing() -> None:
    client = StaticSearchClient(api_key=False)

    status = await SearchCredentialProbe(client).probe()

    assert status.is_valid is False
    assert status.message == "Missing Google API credentials"
    assert status.api_key.value is None
    assert status.guidance.startswith("Google API key is missing. Please set GOOGLE_API_KEY")
    assert status.search_engine_id.exists is True
    assert client.queries == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status_code, payload, message, guidance",
    [
        (
            403,
            {"error": {"message": "API key not valid"}},
            "Invalid API key or insufficient permissions",
            "Google API key is invalid: API key not valid",
        ),
        (
            400,
            {"error": {"message": "Invalid value for cx"}},
            "Invalid Search Engine ID",
            "Google Search Engine ID is invalid: Invalid value for cx",
        ),
        (500, {"error": {"message": "Backend Error"}}, "API error: Backend Error", "API error: Backend Error"),
    ],
)
async def test_credential_check_interprets_error_status(
    status_code: int, payload: dict, message: str, guidance: str
) -> None:
    status = await SearchCredentialProbe(StaticSearchClient(payload=payload, status_code=status_code)).probe()

    assert status.is_valid is False
    assert status.message == message
    assert status.guidance == guidance


@pytest.mark.asyncio
async def test_credential_check_reports_network_failure_as_message() -> None:
    client = StaticSearchClient(error=httpx.ConnectTimeout("timed out"))

    status = await SearchCredentialProbe(client).probe()

    assert status.message == "Error validating credentials: timed out"
    assert status.guidance == "Error validating credentials: timed out"


def test_describe_credential_status_messages() -> None:
    assert describe_credential_status(None) == "Unable to validate API credentials"

    missing_key = CredentialStatus()
    assert describe_credential_status(missing_key).startswith("Google API key is missing.")

    invalid_key = CredentialStatus.model_validate({"apiKey": {"exists": True, "error": "denied"}})
    assert describe_credential_status(invalid_key) == "Google API key is invalid: denied"

    unverified = CredentialStatus.model_validate(
        {"apiKey": {"exists": True}, "searchEngineId": {"exists": True}, "message": "API error: 500"}
    )
    assert describe_credential_status(unverified) == "API error: 500"
