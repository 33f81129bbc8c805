"""
목적: 워커 설정 및 상태 모델을 정의한다.
설명: 큐 소비 워커의 실행 파라미터와 상태 값을 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/queue_processor/shared/runtime/worker/worker.py
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class WorkerState(str, Enum):
    """워커 상태 열거형."""

    IDLE = "IDLE"
    RUNNING = "RUNNING"
    STOPPED = "STOPPED"
    ERROR = "ERROR"


class WorkerConfig(BaseModel):
    """워커 설정 모델이다.

    Args:
        name: 워커 이름.
        poll_timeout: 한 번의 pull 대기 시간(초). 중지 요청을 확인하는 주기이므로 0보다 커야 한다.
        max_retries: 핸들러 실패 시 재시도 횟수.
        stop_on_error: 재시도를 모두 실패하면 워커를 중단할지 여부.
    """

    name: str = Field(default="queue-worker")
    poll_timeout: float = Field(default=1.0, gt=0)
    max_retries: int = Field(default=0, ge=0)
    stop_on_error: bool = Field(default=False)
