"""
목적: Chat API 서비스 공개 API를 제공한다.
설명: 런타임 싱글턴 접근 함수와 종료 함수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/api/chat/services/runtime.py
"""

from genie_chat.api.chat.services.runtime import (
    get_authenticator,
    get_chat_turn_service,
    get_credential_probe,
    get_model_registry,
    get_stream_executor,
    get_web_search_diagnostics,
    shutdown_chat_api_service,
)

__all__ = [
    "get_authenticator",
    "get_chat_turn_service",
    "get_credential_probe",
    "get_model_registry",
    "get_stream_executor",
    "get_web_search_diagnostics",
    "shutdown_chat_api_service",
]
