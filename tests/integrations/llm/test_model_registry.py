"""
목적: ChatModelRegistry의 지연 생성/캐시/미지 모델 거부를 검증한다.
설명: 팩토리 호출 횟수로 모델이 식별자별 1회만 생성되는지 확인한다.
디자인 패턴: 레지스트리 단위 테스트
참조: src/genie_chat/integrations/llm/registry.py
"""

from __future__ import annotations

import pytest

from _chat_fakes import ScriptedChatModel
from genie_chat.core.chat.const import ChatErrorCode, DEFAULT_CHAT_MODEL_ID, REASONING_CHAT_MODEL_ID, TITLE_MODEL_ID
from genie_chat.integrations.llm import ChatModelRegistry
from genie_chat.shared.exceptions import BaseAppException


def test_registry_creates_each_model_once() -> None:
    created: list[tuple[str, str]] = []

    def factory(model_id: str, model_name: str) -> ScriptedChatModel:
        created.append((model_id, model_name))
        return ScriptedChatModel()

    registry = ChatModelRegistry({DEFAULT_CHAT_MODEL_ID: "gpt-small"}, factory=factory)

    assert created == []
    first = registry.get(DEFAULT_CHAT_MODEL_ID)
    second = registry.get(DEFAULT_CHAT_MODEL_ID)

    assert first is second
    assert created == [(DEFAULT_CHAT_MODEL_ID, "gpt-small")]


def test_registry_rejects_unknown_model() -> None:
    registry = ChatModelRegistry({DEFAULT_CHAT_MODEL_ID: "gpt-small"}, factory=lambda *_: ScriptedChatModel())

    assert registry.is_known("gpt-unknown") is False
    with pytest.raises(BaseAppException) as exc_info:
        registry.get("gpt-unknown")

    assert exc_info.value.detail.code == ChatErrorCode.MODEL_UNKNOWN


def test_registry_lists_only_configured_chat_models() -> None:
    """title/artifact 슬롯은 선택 가능한 채팅 모델 목록에 나오지 않아야 한다."""

    registry = ChatModelRegistry(
        {DEFAULT_CHAT_MODEL_ID: "a", REASONING_CHAT_MODEL_ID: "b", TITLE_MODEL_ID: "c"},
        factory=lambda *_: ScriptedChatModel(),
    )

    assert [item.id for item in registry.list_chat_models()] == [DEFAULT_CHAT_MODEL_ID, REASONING_CHAT_MODEL_ID]
