"""
목적: `/web ` 트리거 감지와 사용자 메시지 재작성을 검증한다.
설명: 첫 파트만 검사하는지, 재작성 시 나머지 파트와 첨부가 보존되는지 확인한다.
디자인 패턴: 순수 함수 단위 테스트
참조: src/genie_chat/core/search/augmenter.py
"""

from __future__ import annotations

from genie_chat.core.chat.models import Attachment, ChatMessage, ChatRole, MessagePart
from genie_chat.core.search import apply_search_rewrite, detect_search_trigger, rewrite_search_message


def _user_message(*parts: MessagePart, attachments: list[Attachment] | None = None) -> ChatMessage:
    return ChatMessage(role=ChatRole.USER, parts=list(parts), attachments=attachments or [])


def test_detect_search_trigger_extracts_trimmed_query() -> None:
    message = _user_message(MessagePart(type="text", text="/web   latest python release  "))

    trigger = detect_search_trigger(message)

    assert trigger is not None
    assert trigger.query == "latest python release"


def test_detect_search_trigger_ignores_non_prefixed_messages() -> None:
    assert detect_search_trigger(_user_message(MessagePart(type="text", text="hello /web x"))) is None
    assert detect_search_trigger(_user_message(MessagePart(type="text", text="/webx query"))) is None
    assert detect_search_trigger(_user_message()) is None


def test_detect_search_trigger_only_examines_first_part() -> None:
    """두 번째 파트에 접두어가 있어도 트리거로 보지 않아야 한다."""

    message = _user_message(
        MessagePart(type="text", text="see below"),
        MessagePart(type="text", text="/web weather"),
    )

    assert detect_search_trigger(message) is None


def test_rewrite_search_message_keeps_other_parts_and_attachments() -> None:
    attachment = Attachment(url="https://files.example.com/a.png", name="a.png", content_type="image/png")
    message = _user_message(
        MessagePart(type="text", text="/web seoul weather"),
        MessagePart(type="text", text="extra context"),
        attachments=[attachment],
    )

    rewritten = rewrite_search_message(message, detect_search_trigger(message))

    assert rewritten.id == message.id
    assert [part.text for part in rewritten.parts] == ["seoul weather", "extra context"]
    assert rewritten.attachments == [attachment]
    assert message.parts[0].text == "/web seoul weather"


def test_rewrite_search_message_returns_original_without_trigger() -> None:
    message = _user_message(MessagePart(type="text", text="plain question"))

    assert rewrite_search_message(message, None) is message


def test_apply_search_rewrite_replaces_user_message_in_history() -> None:
    assistant = ChatMessage(role=ChatRole.ASSISTANT, content="previous answer")
    user = _user_message(MessagePart(type="text", text="/web news today"))

    messages, rewritten, trigger = apply_search_rewrite([assistant, user], user)

    assert trigger is not None and trigger.query == "news today"
    assert messages[0] is assistant
    assert messages[1] is rewritten
    assert rewritten.text_content() == "news today"
