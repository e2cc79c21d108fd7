"""
목적: Chat 코어 상수 공개 API를 제공한다.
설명: 저장 경로, 모델 식별자, 에러 코드, 응답 문구 상수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/core/chat/const/settings.py, src/genie_chat/core/chat/const/error_codes.py
"""

from genie_chat.core.chat.const.error_codes import ChatErrorCode
from genie_chat.core.chat.const.messages import ChatResponseMessage
from genie_chat.core.chat.const.settings import (
    ARTIFACT_MODEL_ID,
    CHAT_DB_PATH,
    CHAT_TITLE_MAX_LENGTH,
    DEFAULT_CHAT_MODEL_ID,
    DEFAULT_MAX_TOOL_STEPS,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    REASONING_CHAT_MODEL_ID,
    TITLE_MODEL_ID,
    TOOLLESS_MODEL_IDS,
    WEB_SEARCH_ERROR_HISTORY_LIMIT,
    WEB_SEARCH_PREFIX,
    WEB_SEARCH_RESULT_LIMIT,
    model_supports_tools,
)

__all__ = [
    "ARTIFACT_MODEL_ID",
    "CHAT_DB_PATH",
    "CHAT_TITLE_MAX_LENGTH",
    "ChatErrorCode",
    "ChatResponseMessage",
    "DEFAULT_CHAT_MODEL_ID",
    "DEFAULT_MAX_TOOL_STEPS",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "REASONING_CHAT_MODEL_ID",
    "TITLE_MODEL_ID",
    "TOOLLESS_MODEL_IDS",
    "WEB_SEARCH_ERROR_HISTORY_LIMIT",
    "WEB_SEARCH_PREFIX",
    "WEB_SEARCH_RESULT_LIMIT",
    "model_supports_tools",
]
