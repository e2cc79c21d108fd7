"""
목적: 단어 단위 스트림 분할과 SSE 직렬화를 검증한다.
설명: 청크 경계와 무관하게 단어 단위로 나뉘고, 이어 붙인 결과가 원문과 같은지 확인한다.
디자인 패턴: 순수 함수 단위 테스트
참조: src/genie_chat/shared/chat/streaming/smooth.py, src/genie_chat/shared/chat/streaming/sse.py
"""

from __future__ import annotations

import json

from genie_chat.shared.chat.streaming import StreamPayload, WordChunker, build_sse


def test_word_chunker_emits_whole_words_across_chunk_boundaries() -> None:
    chunker = WordChunker()

    words = chunker.push("Hel") + chunker.push("lo wor") + chunker.push("ld, how ") + chunker.flush()

    assert words == ["Hello ", "world, ", "how "]


def test_word_chunker_preserves_text_with_leading_whitespace() -> None:
    """분할 결과를 이어 붙이면 입력과 같아야 한다."""

    text = "  first line\nsecond   line end"
    chunker = WordChunker()
    words: list[str] = []
    for index in range(0, len(text), 3):
        words.extend(chunker.push(text[index : index + 3]))
    words.extend(chunker.flush())

    assert "".join(words) == text
    assert words[0] == "  first "


def test_word_chunker_flush_on_empty_buffer() -> None:
    chunker = WordChunker()

    assert chunker.push("") == []
    assert chunker.flush() == []


def test_build_sse_formats_message_frame() -> None:
    frame = build_sse("message", StreamPayload(chat_id="c-1", type="token", content="안녕 "))

    assert frame.startswith("event: message\ndata: ")
    assert frame.endswith("\n\n")
    body = json.loads(frame.split("data: ", 1)[1])
    assert body["chat_id"] == "c-1"
    assert body["type"] == "token"
    assert body["content"] == "안녕 "
    assert "\\uc548" in frame
