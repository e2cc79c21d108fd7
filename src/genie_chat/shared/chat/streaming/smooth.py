"""
목적: 토큰 스트림을 단어 단위로 재분할한다.
설명: 공급자 토큰 경계와 무관하게 `단어+공백` 단위로 내보내고, 마지막 남은 조각은 flush로 배출한다.
디자인 패턴: 버퍼링 이터레이터
참조: src/genie_chat/core/chat/nodes/response_node.py
"""

from __future__ import annotations

import re

_WORD_PATTERN = re.compile(r"\S+\s+")


class WordChunker:
    """누적 버퍼에서 완성된 단어만 꺼내는 분할기.

    push/flush 결과를 모두 이어 붙이면 입력 텍스트와 같다.
    """

    def __init__(self) -> None:
        self._buffer = ""

    def push(self, text: str) -> list[str]:
        """텍스트를 추가하고 완성된 단어 목록을 반환한다."""

        if not text:
            return []
        self._buffer += text
        words: list[str] = []
        position = 0
        for match in _WORD_PATTERN.finditer(self._buffer):
            # 선행 공백은 다음 단어에 붙인다.
            words.append(self._buffer[position : match.end()])
            position = match.end()
        self._buffer = self._buffer[position:]
        return words

    def flush(self) -> list[str]:
        """남은 버퍼를 비우고 반환한다."""

        if not self._buffer:
            return []
        remaining, self._buffer = self._buffer, ""
        return [remaining]
