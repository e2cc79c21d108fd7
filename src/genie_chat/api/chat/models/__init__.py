"""
목적: Chat API 모델 공개 API를 제공한다.
설명: 요청/응답 DTO를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/api/chat/models/request.py, src/genie_chat/api/chat/models/response.py
"""

from genie_chat.api.chat.models.request import ChatRequest
from genie_chat.api.chat.models.response import (
    ChatHistoryResponse,
    ChatMessagesResponse,
    ChatModelsResponse,
    ChatSummaryResponse,
)

__all__ = [
    "ChatHistoryResponse",
    "ChatMessagesResponse",
    "ChatModelsResponse",
    "ChatRequest",
    "ChatSummaryResponse",
]
