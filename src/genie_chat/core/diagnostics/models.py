"""
목적: 검색 설정 진단 결과 모델을 정의한다.
설명: 자격 증명 검증 결과(camelCase 직렬화)와 연결성 점검 항목을 제공한다. 비밀 값은 포함하지 않는다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/genie_chat/core/diagnostics/credential_probe.py, src/genie_chat/api/config/routers/search_status.py
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


REDACTED = "[REDACTED]"


class CredentialCheck(BaseModel):
    """자격 증명 항목 1건의 검증 결과. 값 자체는 노출하지 않는다."""

    model_config = ConfigDict(populate_by_name=True)

    value: str | None = None
    exists: bool = False
    is_valid: bool = Field(default=False, alias="isValid")
    error: str | None = None


class CredentialStatus(BaseModel):
    """검색 자격 증명 검증 결과."""

    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(default=False, alias="isValid")
    api_key: CredentialCheck = Field(default_factory=CredentialCheck, alias="apiKey")
    search_engine_id: CredentialCheck = Field(default_factory=CredentialCheck, alias="searchEngineId")
    message: str = ""
    guidance: str = ""


class DiagnosticStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class DiagnosticCheck(BaseModel):
    """진단 점검 항목 1건."""

    name: str
    status: DiagnosticStatus
    message: str
