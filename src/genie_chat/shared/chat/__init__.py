"""
목적: Chat 공통 실행 모듈의 공개 API를 제공한다.
설명: Chat 공통 추상체/그래프/서비스/저장소 구현을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/shared/chat/services/chat_service.py
"""

from genie_chat.shared.chat.graph import BaseChatGraph
from genie_chat.shared.chat.interface import ChatStorePort, GraphPort, StreamNodeConfig, TitleGeneratorPort
from genie_chat.shared.chat.repositories import InMemoryChatStore, SqliteChatStore, create_chat_store
from genie_chat.shared.chat.services import ChatStreamExecutor, ChatTurnService, LLMTitleGenerator

__all__ = [
    "StreamNodeConfig",
    "BaseChatGraph",
    "GraphPort",
    "ChatStorePort",
    "TitleGeneratorPort",
    "ChatTurnService",
    "ChatStreamExecutor",
    "LLMTitleGenerator",
    "InMemoryChatStore",
    "SqliteChatStore",
    "create_chat_store",
]
