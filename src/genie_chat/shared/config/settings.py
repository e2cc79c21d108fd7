"""
목적: 애플리케이션 런타임 설정 모델을 제공한다.
설명: 검색 공급자 자격 증명, 저장소, 인증 토큰, 모델 이름을 환경 변수에서 읽어 Pydantic 모델로 묶는다.
디자인 패턴: 설정 객체(Settings Object)
참조: src/genie_chat/shared/config/runtime_env_loader.py, src/genie_chat/api/chat/services/runtime.py
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr

from genie_chat.core.chat.const import (
    ARTIFACT_MODEL_ID,
    CHAT_DB_PATH,
    DEFAULT_CHAT_MODEL_ID,
    REASONING_CHAT_MODEL_ID,
    TITLE_MODEL_ID,
)


class SearchSettings(BaseModel):
    """웹 검색 공급자 설정.

    Args:
        api_key: Google API 키. 비어 있으면 검색 기능은 비활성 상태로 취급한다.
        search_engine_id: Programmable Search Engine 식별자(cx).
        max_queries: 윈도우당 허용 쿼리 수.
        window_seconds: 쿼리 카운터 리셋 주기(초).
        timeout_seconds: 공급자 HTTP 요청 타임아웃(초).
    """

    api_key: SecretStr | None = None
    search_engine_id: str | None = None
    max_queries: int = Field(default=100, ge=1)
    window_seconds: float = Field(default=24 * 60 * 60, gt=0)
    timeout_seconds: float = Field(default=10.0, gt=0)


class AppSettings(BaseModel):
    """애플리케이션 설정 루트 모델."""

    search: SearchSettings = Field(default_factory=SearchSettings)
    chat_store_backend: str = "sqlite"
    chat_db_path: Path = Path(CHAT_DB_PATH)
    auth_tokens: dict[str, str] = Field(default_factory=dict)
    app_base_url: str = "http://127.0.0.1:8000"
    stream_smooth_delay_ms: int = Field(default=10, ge=0)
    max_tool_steps: int = Field(default=5, ge=1)
    openai_api_key: SecretStr | None = None
    model_names: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppSettings":
        """환경 변수에서 설정을 구성한다."""

        env = os.environ if environ is None else environ
        return cls(
            search=SearchSettings(
                api_key=_secret_or_none(env.get("GOOGLE_API_KEY")),
                search_engine_id=_str_or_none(env.get("GOOGLE_SEARCH_ENGINE_ID")),
                max_queries=int(env.get("WEB_SEARCH_MAX_QUERIES", "100")),
                window_seconds=float(env.get("WEB_SEARCH_WINDOW_SECONDS", str(24 * 60 * 60))),
                timeout_seconds=float(env.get("WEB_SEARCH_TIMEOUT_SECONDS", "10")),
            ),
            chat_store_backend=env.get("CHAT_STORE_BACKEND", "sqlite").strip().lower() or "sqlite",
            chat_db_path=Path(env.get("CHAT_DB_PATH", CHAT_DB_PATH)),
            auth_tokens=parse_auth_tokens(env.get("CHAT_AUTH_TOKENS", "")),
            app_base_url=env.get("APP_BASE_URL", "http://127.0.0.1:8000").rstrip("/"),
            stream_smooth_delay_ms=int(env.get("CHAT_STREAM_SMOOTH_DELAY_MS", "10")),
            max_tool_steps=int(env.get("CHAT_MAX_TOOL_STEPS", "5")),
            openai_api_key=_secret_or_none(env.get("OPENAI_API_KEY")),
            model_names={
                DEFAULT_CHAT_MODEL_ID: env.get("OPENAI_CHAT_MODEL", "gpt-4o-mini"),
                REASONING_CHAT_MODEL_ID: env.get("OPENAI_REASONING_MODEL", "o3-mini"),
                TITLE_MODEL_ID: env.get("OPENAI_TITLE_MODEL", "gpt-4o-mini"),
                ARTIFACT_MODEL_ID: env.get("OPENAI_ARTIFACT_MODEL", "gpt-4o-mini"),
            },
        )


def parse_auth_tokens(raw: str) -> dict[str, str]:
    """`token:user_id,token2:user_id2` 형식 문자열을 사전으로 변환한다."""

    tokens: dict[str, str] = {}
    for item in raw.split(","):
        token, separator, user_id = item.strip().partition(":")
        if not separator or not token.strip() or not user_id.strip():
            continue
        tokens[token.strip()] = user_id.strip()
    return tokens


def _str_or_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _secret_or_none(value: str | None) -> SecretStr | None:
    normalized = _str_or_none(value)
    if normalized is None:
        return None
    return SecretStr(normalized)
