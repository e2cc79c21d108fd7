"""Chat 변환 유틸 모음."""

from genie_chat.core.chat.utils.message_mapper import content_to_text, to_langchain_messages
from genie_chat.core.chat.utils.reconcile import reconcile_assistant_message

__all__ = ["content_to_text", "reconcile_assistant_message", "to_langchain_messages"]
