"""
목적: Chat 도메인 에러 코드를 정의한다.
설명: ExceptionDetail.code에 사용하는 문자열 상수를 한곳에 모은다.
디자인 패턴: 상수 객체 패턴
참조: src/genie_chat/api/chat/routers/common.py, src/genie_chat/shared/chat/services/chat_service.py
"""

from __future__ import annotations


class ChatErrorCode:
    """Chat 도메인 에러 코드 상수."""

    UNAUTHORIZED = "CHAT_UNAUTHORIZED"
    NOT_FOUND = "CHAT_NOT_FOUND"
    USER_MESSAGE_MISSING = "CHAT_USER_MESSAGE_MISSING"
    MODEL_UNKNOWN = "CHAT_MODEL_UNKNOWN"
    STORE_ERROR = "CHAT_STORE_ERROR"
    STREAM_FAILED = "CHAT_STREAM_FAILED"
    NODE_INPUT_INVALID = "CHAT_NODE_INPUT_INVALID"
    STREAM_NODE_INVALID = "CHAT_STREAM_NODE_INVALID"
    NODE_FAILED = "CHAT_NODE_FAILED"
