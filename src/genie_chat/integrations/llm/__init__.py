"""
목적: LLM 연동 모듈 공개 API를 제공한다.
설명: 로깅 래퍼 클라이언트와 모델 레지스트리를 노출한다.
디자인 패턴: 파사드
참조: src/genie_chat/integrations/llm/client.py, src/genie_chat/integrations/llm/registry.py
"""

from genie_chat.integrations.llm.client import LLMClient
from genie_chat.integrations.llm.registry import (
    CHAT_MODELS,
    ChatModelInfo,
    ChatModelRegistry,
    build_openai_chat_model,
)

__all__ = [
    "CHAT_MODELS",
    "ChatModelInfo",
    "ChatModelRegistry",
    "LLMClient",
    "build_openai_chat_model",
]
