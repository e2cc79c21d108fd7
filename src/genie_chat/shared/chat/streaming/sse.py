"""
목적: SSE 전송 페이로드 모델과 직렬화 함수를 제공한다.
설명: 스트림 이벤트를 `event: ...\ndata: ...\n\n` 프레임으로 변환한다.
디자인 패턴: 데이터 전송 객체(DTO) + 직렬화 함수
참조: src/genie_chat/shared/chat/services/service_executor.py
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel

StreamEventType = Literal["start", "token", "data", "tool_call", "tool_result", "error", "done"]


class StreamPayload(BaseModel):
    """SSE `data` 필드 본문."""

    chat_id: str
    type: StreamEventType
    content: str = ""
    data: Any = None
    message_id: str | None = None
    status: str | None = None
    error_message: str | None = None


def build_sse(event: str, payload: StreamPayload | dict[str, Any]) -> str:
    """SSE 프레임 문자열을 생성한다."""

    if isinstance(payload, StreamPayload):
        payload = payload.model_dump(mode="json")
    body = json.dumps(payload, ensure_ascii=True, default=str)
    return f"event: {event}\ndata: {body}\n\n"
