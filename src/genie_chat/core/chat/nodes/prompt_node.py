"""
목적: 시스템 프롬프트 조립 노드를 제공한다.
설명: 선택 모델과 검색 트리거 여부로 시스템 프롬프트를 만들어 state에 기록한다.
디자인 패턴: 함수 주입 노드
참조: src/genie_chat/core/chat/prompts/system_prompt.py, src/genie_chat/shared/chat/nodes/function_node.py
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from genie_chat.core.chat.const import DEFAULT_CHAT_MODEL_ID
from genie_chat.core.chat.prompts import compose_system_prompt
from genie_chat.shared.chat.nodes import FunctionNode


def _compose_prompt(state: Mapping[str, Any]) -> dict[str, Any]:
    model_id = str(state.get("selected_model_id") or DEFAULT_CHAT_MODEL_ID)
    return {"system_prompt": compose_system_prompt(model_id, bool(state.get("search_query")))}


prompt_node = FunctionNode(fn=_compose_prompt, node_name="prompt")

__all__ = ["prompt_node"]
