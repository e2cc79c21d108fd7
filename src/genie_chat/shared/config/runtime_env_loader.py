"""
목적: 배포 단계별 `.env` 로딩을 제공한다.
설명: 루트 `.env`를 먼저 읽고 ENV/APP_ENV/APP_STAGE로 단계를 정한 뒤, local이 아니면 패키지 리소스의 단계별 `.env`를 추가로 읽는다.
디자인 패턴: 전략 패턴
참조: src/genie_chat/shared/config/settings.py, src/genie_chat/api/main.py
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

from dotenv import load_dotenv

from genie_chat.shared.logging import Logger, create_default_logger

LOCAL_ENV = "local"
RESOURCE_ENVS = ("dev", "stg", "prod")
ENV_ALIASES = {"development": "dev", "staging": "stg", "production": "prod"}
ENV_KEYS = ("ENV", "APP_ENV", "APP_STAGE")

_MODULE_PATH = Path(__file__).resolve()


def resolve_runtime_env(environ: Mapping[str, str], keys: Sequence[str] = ENV_KEYS) -> str:
    """환경 변수에서 배포 단계를 판별한다. 값이 없으면 local이다.

    Raises:
        ValueError: 알 수 없는 단계 값인 경우.
    """

    raw = next(
        (environ[name] for key in keys for name in (key, key.lower()) if (environ.get(name) or "").strip()),
        "",
    )
    if not raw:
        return LOCAL_ENV
    stage = ENV_ALIASES.get(raw.strip().lower(), raw.strip().lower())
    if stage != LOCAL_ENV and stage not in RESOURCE_ENVS:
        allowed = ", ".join((LOCAL_ENV, *RESOURCE_ENVS))
        raise ValueError(f"지원하지 않는 ENV 값입니다: {raw}. 허용값: {allowed}")
    return stage


class RuntimeEnvironmentLoader:
    """배포 단계별 `.env` 로더.

    Args:
        project_root: 루트 `.env`가 있는 디렉터리. 기본값은 저장소 루트.
        resources_root: `<stage>/.env`를 담은 디렉터리. 기본값은 `src/genie_chat/resources`.
        env_key_candidates: 단계 값을 읽을 환경 변수 이름들.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        project_root: Optional[Path] = None,
        resources_root: Optional[Path] = None,
        env_key_candidates: Optional[Sequence[str]] = None,
    ) -> None:
        self.project_root = Path(project_root or _MODULE_PATH.parents[4])
        self.resources_root = Path(resources_root or _MODULE_PATH.parents[2] / "resources")
        self._keys = tuple(env_key_candidates or ENV_KEYS)
        self._logger = logger or create_default_logger("RuntimeEnvironmentLoader")

    def load(self, override_root_env: bool = False) -> str:
        """`.env` 파일을 읽고 판별된 단계를 반환한다. 판별 결과는 ENV에 다시 기록한다.

        Raises:
            ValueError: 알 수 없는 단계 값인 경우.
            FileNotFoundError: dev/stg/prod인데 리소스 `.env`가 없는 경우.
        """

        root_env = self.project_root / ".env"
        if root_env.exists():
            load_dotenv(dotenv_path=root_env, override=override_root_env)
        else:
            self._logger.warning(f"config.env.root_missing: path={root_env}")

        stage = resolve_runtime_env(os.environ, self._keys)
        os.environ["ENV"] = stage
        if stage == LOCAL_ENV:
            self._logger.info(f"config.env.loaded: env={stage}, root={root_env}")
            return stage

        stage_env = self.resources_root / stage / ".env"
        if not stage_env.exists():
            raise FileNotFoundError(f"환경 파일을 찾을 수 없습니다: {stage_env}")
        # 루트/프로세스 값이 단계 파일보다 우선한다.
        load_dotenv(dotenv_path=stage_env, override=False)
        self._logger.info(f"config.env.loaded: env={stage}, resource={stage_env}")
        return stage
