"""
목적: 큐 런타임 설정 모델과 로딩 함수를 제공한다.
설명: .env 파일과 QUEUE_PROCESSOR_* 환경 변수를 병합해 검증된 QueueSettings를 생성한다.
디자인 패턴: 데이터 전송 객체(DTO), 팩토리 함수
참조: src/queue_processor/shared/config/loader.py, src/queue_processor/core/queue/base_queue.py
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field, field_validator

from queue_processor.shared.config.loader import ConfigLoader
from queue_processor.shared.const import SharedConst
from queue_processor.shared.logging import Logger


class QueueSettings(BaseModel):
    """큐 런타임 설정 모델이다.

    Args:
        redis_url: Redis 접속 URL.
        source: 큐 이름.
        processor: 프로세서 이름(fifo/lifo).
        default_timeout: 블로킹 팝 기본 대기 시간(초). 0이면 무기한 대기.
        max_connections: 커넥션 풀 최대 크기. None이면 redis-py 기본값.
    """

    redis_url: str = SharedConst.DEFAULT_REDIS_URL
    source: str = SharedConst.DEFAULT_SOURCE
    processor: str = "fifo"
    default_timeout: float = Field(default=SharedConst.BLOCK_FOREVER, ge=0)
    max_connections: Optional[int] = Field(default=None, ge=1)

    @field_validator("source", mode="before")
    @classmethod
    def _validate_source(cls, value: Any) -> str:
        text = str(value).strip()
        if not text:
            raise ValueError("source는 비어 있을 수 없습니다.")
        return text

    @field_validator("processor", mode="before")
    @classmethod
    def _validate_processor(cls, value: Any) -> str:
        normalized = str(value).strip().lower()
        if normalized not in {"fifo", "lifo"}:
            raise ValueError(f"지원하지 않는 프로세서입니다: {value}")
        return normalized


def load_queue_settings(
    env_file: Optional[Union[str, Path]] = ".env",
    overrides: Optional[Mapping[str, Any]] = None,
    logger: Optional[Logger] = None,
) -> QueueSettings:
    """환경 변수와 .env 파일에서 큐 설정을 로드한다.

    우선순위는 `.env` < 프로세스 환경 변수 < overrides 순이다.

    Args:
        env_file: 읽을 `.env` 경로. None이면 건너뛴다.
        overrides: 최종적으로 덮어쓸 설정 값.
        logger: 설정 로더에 주입할 로거.

    Returns:
        검증된 QueueSettings.
    """

    loader = ConfigLoader(logger=logger)
    if env_file is not None:
        loader.add_dotenv(env_file)
    loader.add_env()
    return QueueSettings.model_validate(loader.build(overrides))
