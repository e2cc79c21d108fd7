"""
목적: 요청에서 인증 세션을 해석하는 FastAPI 의존성을 제공한다.
설명: `Authorization: Bearer <token>` 헤더를 우선 사용하고, 없으면 세션 쿠키를 사용한다.
디자인 패턴: 의존성 주입
참조: src/genie_chat/shared/auth/authenticator.py, src/genie_chat/api/chat/services/runtime.py
"""

from __future__ import annotations

from fastapi import Depends, Request

from genie_chat.api.chat.services import get_authenticator
from genie_chat.api.const import SESSION_COOKIE_NAME
from genie_chat.shared.auth import AuthSession, SessionAuthenticator


def extract_token(request: Request) -> str | None:
    """요청에서 세션 토큰을 추출한다."""

    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return request.cookies.get(SESSION_COOKIE_NAME) or None


def get_optional_session(
    request: Request,
    authenticator: SessionAuthenticator = Depends(get_authenticator),
) -> AuthSession | None:
    """인증 세션을 반환한다. 인증 실패 판단은 서비스 계층이 한다."""

    return authenticator.resolve(extract_token(request))
