"""
목적: 코드 펜스 제거 함수를 검증한다.
설명: 완전/불완전/펜스 없는 조각 모두 결과에 펜스가 남지 않고 재적용해도 같은 값인지 확인한다.
디자인 패턴: 순수 함수 단위 테스트
참조: src/genie_chat/core/artifacts/code_sanitizer.py
"""

from __future__ import annotations

import pytest

from genie_chat.core.artifacts import strip_code_fences


@pytest.mark.parametrize(
    "fragment, expected",
    [
        ("```python\nprint('hi')\n```", "print('hi')"),
        ("```python\nprint('hi')", "print('hi')"),
        ("```py", ""),
        ("x = 1\n```", "x = 1"),
        ("x = 1 ```py", "x = 1 py"),
        ("  plain = True  ", "plain = True"),
        ("```\na = 1\n```\nextra ``` marker", "a = 1\n\nextra  marker"),
    ],
)
def test_strip_code_fences(fragment: str, expected: str) -> None:
    cleaned = strip_code_fences(fragment)

    assert cleaned == expected
    assert "```" not in cleaned


def test_strip_code_fences_is_idempotent() -> None:
    """스트리밍 중 누적 조각에 반복 적용해도 결과가 바뀌지 않아야 한다."""

    fragments = ["```python\n", "```python\nimport os\n", "```python\nimport os\nprint(os.sep)\n```"]

    for fragment in fragments:
        once = strip_code_fences(fragment)
        assert strip_code_fences(once) == once
