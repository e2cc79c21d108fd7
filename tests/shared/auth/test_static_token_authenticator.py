"""
목적: 정적 토큰 인증기의 세션 해석을 검증한다.
설명: 등록된 토큰만 사용자 세션으로 해석되고 나머지는 None인지 확인한다.
디자인 패턴: 단위 테스트
참조: src/genie_chat/shared/auth/authenticator.py
"""

from __future__ import annotations

import pytest

from genie_chat.shared.auth import AuthSession, StaticTokenAuthenticator


def test_known_token_resolves_to_session() -> None:
    authenticator = StaticTokenAuthenticator({"token-a": "user-a", "token-b": "user-b"})

    assert authenticator.resolve("token-b") == AuthSession(user_id="user-b")


@pytest.mark.parametrize("token", [None, "", "token-c", "토큰"])
def test_unknown_or_empty_token_resolves_to_none(token: str | None) -> None:
    authenticator = StaticTokenAuthenticator({"token-a": "user-a"})

    assert authenticator.resolve(token) is None


def test_blank_entries_are_ignored() -> None:
    authenticator = StaticTokenAuthenticator({"": "user-a", "token-b": ""})

    assert authenticator.resolve("token-b") is None
