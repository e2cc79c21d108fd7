"""
목적: Chat 도메인 모델 공개 API를 제공한다.
설명: 엔티티와 턴 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/core/chat/models/entities.py, src/genie_chat/core/chat/models/turn.py
"""

from genie_chat.core.chat.models.entities import (
    Attachment,
    Chat,
    ChatMessage,
    ChatRole,
    ChatVisibility,
    MessagePart,
    new_id,
    utc_now,
)
from genie_chat.core.chat.models.turn import ChatTurn, PreparedTurn

__all__ = [
    "Attachment",
    "Chat",
    "ChatMessage",
    "ChatRole",
    "ChatTurn",
    "ChatVisibility",
    "MessagePart",
    "PreparedTurn",
    "new_id",
    "utc_now",
]
