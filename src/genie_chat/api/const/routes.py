"""
목적: API 라우팅/인증 상수를 정의한다.
설명: 경로 접두어, 태그, 인증 쿠키 이름, SSE 응답 헤더를 한곳에 모은다.
디자인 패턴: 상수 모듈
참조: src/genie_chat/api/chat/routers/router.py, src/genie_chat/api/auth/dependencies.py
"""

from __future__ import annotations

API_PREFIX = "/api"
CHAT_API_TAG = "chat"
CONFIG_API_TAG = "config"
DIAGNOSTICS_API_TAG = "diagnostics"

CHAT_PATH = "/chat"
CHAT_MESSAGES_PATH = "/chat/{chat_id}/messages"
HISTORY_PATH = "/history"
MODELS_PATH = "/models"
SEARCH_STATUS_PATH = "/config/google-api-status"
WEB_SEARCH_DIAGNOSTICS_PATH = "/diagnostics/web-search"
PING_PATH = "/diagnostics/ping"

SESSION_COOKIE_NAME = "session_token"

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}
