"""
목적: 테스트 공통 환경/로깅 훅을 단일화해 제공한다.
설명: 테스트 기본 환경 변수(메모리 저장소, 인증 토큰)를 준비하고 선택적으로 .env를 로드한다.
디자인 패턴: 테스트 픽스처 + 테스트 훅
참조: pyproject.toml, tests/_chat_fakes.py
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

_LOGGER = logging.getLogger("tests")
_PROJECT_ROOT = Path(__file__).resolve().parents[1]

TEST_AUTH_TOKEN = "test-token"
TEST_USER_ID = "user-1"


def _prepare_default_env() -> None:
    # 저장소는 항상 메모리, 토큰 지연은 0으로 고정한다.
    os.environ["CHAT_STORE_BACKEND"] = "memory"
    os.environ["CHAT_STREAM_SMOOTH_DELAY_MS"] = "0"
    os.environ.setdefault("CHAT_AUTH_TOKENS", f"{TEST_AUTH_TOKEN}:{TEST_USER_ID}")


def _load_env_files() -> None:
    """프로젝트 루트 .env가 있으면 기존 값을 덮어쓰지 않고 로드한다."""

    env_path = _PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


_prepare_default_env()
_load_env_files()


def pytest_sessionstart(session) -> None:
    _LOGGER.info("genie-chat 테스트 세션 시작: store=%s", os.environ["CHAT_STORE_BACKEND"])


def pytest_sessionfinish(session, exitstatus: int) -> None:
    _LOGGER.info("genie-chat 테스트 세션 종료: exitstatus=%s", exitstatus)


def pytest_runtest_logreport(report) -> None:
    """호출 단계 결과만 기록한다. setup/teardown 실패는 pytest 출력으로 확인한다."""

    if report.when != "call":
        return
    level, label = (
        (logging.INFO, "통과") if report.passed else (logging.WARNING, "스킵") if report.skipped else (logging.ERROR, "실패")
    )
    _LOGGER.log(level, "테스트 %s: %s", label, report.nodeid)
