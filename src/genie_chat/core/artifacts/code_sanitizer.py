"""
목적: 코드 아티팩트 조각에서 마크다운 코드 펜스를 제거한다.
설명: 완전한 펜스 블록, 불완전/잘못된 블록, 펜스 없는 조각 세 경우를 처리하며 결과에는 펜스가 남지 않는다.
디자인 패턴: 순수 함수
참조: src/genie_chat/core/artifacts/handlers.py
"""

from __future__ import annotations

import re

FENCE = "```"

_FULL_BLOCK_OPEN = re.compile(r"^```[\w-]*\s")
_FULL_BLOCK_CLOSE = re.compile(r"```\s*$")
_LEADING_OPEN_LINE = re.compile(r"^```[\w-]*\s+")
_FIRST_OPEN_LINE = re.compile(r"```[\w-]*\s+|^```[\w-]*$")
_TRAILING_CLOSE = re.compile(r"\s*```\s*$")


def strip_code_fences(fragment: str) -> str:
    """코드 조각의 펜스를 제거하고 앞뒤 공백을 정리한다.

    Args:
        fragment: 모델이 스트리밍 중 생성한 누적 코드 문자열.

    Returns:
        펜스 표식이 없는 코드 문자열. 같은 함수를 다시 적용해도 결과가 바뀌지 않는다.
    """

    if _FULL_BLOCK_OPEN.search(fragment) and _FULL_BLOCK_CLOSE.search(fragment):
        cleaned = _LEADING_OPEN_LINE.sub("", fragment, count=1)
        cleaned = _TRAILING_CLOSE.sub("", cleaned, count=1)
    elif FENCE in fragment:
        cleaned = _FIRST_OPEN_LINE.sub("", fragment, count=1)
        cleaned = _TRAILING_CLOSE.sub("", cleaned, count=1)
    else:
        return fragment.strip()

    # 내부에 남은 표식은 모두 제거한다.
    return _scrub_fences(cleaned).strip()


def _scrub_fences(text: str) -> str:
    while FENCE in text:
        text = text.replace(FENCE, "")
    return text
