"""인증 세션 해석 모듈."""

from genie_chat.shared.auth.authenticator import AuthSession, SessionAuthenticator, StaticTokenAuthenticator

__all__ = ["AuthSession", "SessionAuthenticator", "StaticTokenAuthenticator"]
