"""
목적: Chat 실행 서비스 공개 API를 제공한다.
설명: 턴 서비스, SSE 실행기, 제목 생성기를 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/shared/chat/services/chat_service.py, src/genie_chat/shared/chat/services/service_executor.py
"""

from genie_chat.shared.chat.services.chat_service import ChatTurnService
from genie_chat.shared.chat.services.service_executor import ChatStreamExecutor
from genie_chat.shared.chat.services.title_generator import DEFAULT_TITLE, LLMTitleGenerator

__all__ = ["ChatStreamExecutor", "ChatTurnService", "DEFAULT_TITLE", "LLMTitleGenerator"]
