"""
목적: 채팅 도구 공개 API를 제공한다.
설명: 턴 단위 도구 팩토리와 도구 스키마를 노출한다.
디자인 패턴: 파사드
참조: src/genie_chat/core/chat/tools/factory.py
"""

from genie_chat.core.chat.tools.factory import DOCUMENT_NOT_FOUND, ChatToolFactory
from genie_chat.core.chat.tools.schemas import SuggestionDraft, SuggestionDraftList

__all__ = ["ChatToolFactory", "DOCUMENT_NOT_FOUND", "SuggestionDraft", "SuggestionDraftList"]
