"""API 인증 의존성 모음."""

from genie_chat.api.auth.dependencies import extract_token, get_optional_session

__all__ = ["extract_token", "get_optional_session"]
