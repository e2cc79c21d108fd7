"""
목적: 요청 자격 증명을 사용자 세션으로 해석한다.
설명: 세션 발급은 외부 시스템 몫이며, 여기서는 토큰 -> 사용자 식별자 매핑만 제공한다.
디자인 패턴: 포트-어댑터(Port/Protocol)
참조: src/genie_chat/api/auth/dependencies.py, src/genie_chat/shared/config/settings.py
"""

from __future__ import annotations

import hmac
from collections.abc import Mapping
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field


class AuthSession(BaseModel):
    """인증된 요청 세션."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)


class SessionAuthenticator(Protocol):
    """토큰 해석기 계약."""

    def resolve(self, token: str | None) -> AuthSession | None:
        """토큰에 해당하는 세션을 반환한다. 없으면 None."""


class StaticTokenAuthenticator:
    """설정된 `토큰 -> 사용자` 매핑으로 세션을 해석한다."""

    def __init__(self, tokens: Mapping[str, str]) -> None:
        self._tokens = {token: user_id for token, user_id in tokens.items() if token and user_id}

    def resolve(self, token: str | None) -> AuthSession | None:
        if not token:
            return None
        for known, user_id in self._tokens.items():
            if hmac.compare_digest(known.encode("utf-8"), token.encode("utf-8")):
                return AuthSession(user_id=user_id)
        return None
