"""
목적: `/web ` 접두어 기반 검색 트리거를 감지하고 사용자 메시지를 재작성한다.
설명: 첫 번째 파트만 검사하며, 트리거가 없으면 입력 메시지를 그대로 반환한다.
디자인 패턴: 순수 함수
참조: src/genie_chat/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from genie_chat.core.chat.const import WEB_SEARCH_PREFIX
from genie_chat.core.chat.models import ChatMessage
from genie_chat.core.search.models import SearchTrigger


def detect_search_trigger(message: ChatMessage) -> SearchTrigger | None:
    """첫 번째 텍스트 파트가 `/web `으로 시작하면 검색 질의를 추출한다."""

    if not message.parts:
        return None
    first = message.parts[0]
    if not first.is_text or not first.text.startswith(WEB_SEARCH_PREFIX):
        return None
    return SearchTrigger(query=first.text[len(WEB_SEARCH_PREFIX) :].strip())


def rewrite_search_message(message: ChatMessage, trigger: SearchTrigger | None) -> ChatMessage:
    """첫 번째 파트 텍스트를 검색 질의로 교체한 새 메시지를 반환한다.

    나머지 파트와 첨부는 유지한다. 트리거가 없으면 원본 객체를 그대로 반환한다.
    """

    if trigger is None or not message.parts:
        return message
    first = message.parts[0].model_copy(update={"text": trigger.query})
    return message.model_copy(update={"parts": [first, *message.parts[1:]]})


def apply_search_rewrite(
    messages: list[ChatMessage],
    user_message: ChatMessage,
) -> tuple[list[ChatMessage], ChatMessage, SearchTrigger | None]:
    """이력 안의 사용자 메시지를 재작성본으로 교체한다.

    Returns:
        (재작성된 이력, 재작성된 사용자 메시지, 트리거)
    """

    trigger = detect_search_trigger(user_message)
    if trigger is None:
        return messages, user_message, None
    rewritten = rewrite_search_message(user_message, trigger)
    replaced = [rewritten if item is user_message or item.id == user_message.id else item for item in messages]
    return replaced, rewritten, trigger
