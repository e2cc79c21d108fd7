"""
목적: 예외 상세 모델을 정의한다.
설명: 라우터가 HTTP 상태를 고르는 code와 로그용 원인/힌트/메타데이터를 담는다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/genie_chat/shared/exceptions/base.py, src/genie_chat/core/chat/const/error_codes.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ExceptionDetail(BaseModel):
    """예외 상세.

    Args:
        code: ChatErrorCode 또는 LLM_* 형식의 에러 코드.
        cause: 로그에 남길 직접 원인(예: chat_id=...).
        hint: 운영자용 조치 힌트.
        metadata: 구조화 부가 정보.
    """

    code: str
    cause: Optional[str] = None
    hint: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
