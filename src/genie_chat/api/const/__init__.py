"""
목적: API 상수 공개 API를 제공한다.
설명: 라우팅/인증 상수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/api/const/routes.py
"""

from genie_chat.api.const.routes import (
    API_PREFIX,
    CHAT_API_TAG,
    CHAT_MESSAGES_PATH,
    CHAT_PATH,
    CONFIG_API_TAG,
    DIAGNOSTICS_API_TAG,
    HISTORY_PATH,
    MODELS_PATH,
    PING_PATH,
    SEARCH_STATUS_PATH,
    SESSION_COOKIE_NAME,
    SSE_HEADERS,
    WEB_SEARCH_DIAGNOSTICS_PATH,
)

__all__ = [
    "API_PREFIX",
    "CHAT_API_TAG",
    "CHAT_MESSAGES_PATH",
    "CHAT_PATH",
    "CONFIG_API_TAG",
    "DIAGNOSTICS_API_TAG",
    "HISTORY_PATH",
    "MODELS_PATH",
    "PING_PATH",
    "SEARCH_STATUS_PATH",
    "SESSION_COOKIE_NAME",
    "SSE_HEADERS",
    "WEB_SEARCH_DIAGNOSTICS_PATH",
]
