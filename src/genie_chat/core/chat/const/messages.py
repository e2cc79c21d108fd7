"""
목적: 사용자에게 노출되는 고정 응답 문구를 정의한다.
설명: HTTP 평문 응답과 스트림 오류 안내 문구를 Enum으로 제공한다.
디자인 패턴: Enum 상수 객체
참조: src/genie_chat/api/chat/routers/common.py, src/genie_chat/shared/chat/services/service_executor.py
"""

from __future__ import annotations

from enum import Enum


class ChatResponseMessage(str, Enum):
    """평문 HTTP 응답 및 스트림 안내 문구."""

    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "Not Found"
    NO_USER_MESSAGE = "No user message found"
    UNKNOWN_MODEL = "Unknown chat model"
    REQUEST_FAILED = "An error occurred while processing your request!"
    CHAT_DELETED = "Chat deleted"
    STREAM_FAILED = "Oops, an error occurred!"
