"""
목적: 큐 작업 예외를 정의한다.
설명: 저장소 명령 실패(StoreError)와 단발성 이동 시 빈 원본(EmptySourceError)을 구분해 제공한다.
디자인 패턴: 도메인 예외 객체
참조: src/queue_processor/shared/exceptions/base.py, src/queue_processor/core/processor/base.py
"""

from __future__ import annotations

from typing import Optional, Sequence

from queue_processor.shared.exceptions.base import BaseAppException
from queue_processor.shared.exceptions.models import ErrorCode, ExceptionDetail


class StoreError(BaseAppException):
    """저장소 명령이 실패했을 때 발생하는 예외이다.

    연결 실패, 프로토콜 오류, 저장소 계층 타임아웃을 모두 포함하며 재시도하지 않는다.

    Args:
        command: 실패한 저장소 명령 이름.
        keys: 명령에 사용된 리스트 이름 목록.
        original: redis-py가 발생시킨 원본 예외.
    """

    def __init__(
        self,
        command: str,
        keys: Sequence[str],
        original: Optional[Exception] = None,
    ) -> None:
        detail = ExceptionDetail(
            code=ErrorCode.STORE_ERROR,
            cause=str(original) if original else None,
            hint="저장소 연결 상태와 명령 인자를 확인하세요.",
            metadata={"command": command, "keys": list(keys)},
        )
        super().__init__(f"저장소 명령 {command} 실행에 실패했습니다.", detail, original)
        self.command = command
        self.keys = tuple(keys)


class EmptySourceError(BaseAppException):
    """단발성 이동(concat) 시 원본 큐가 비어 있을 때 발생하는 예외이다.

    Args:
        source: 비어 있던 원본 큐 이름.
        dest: 이동 대상 큐 이름.
    """

    def __init__(self, source: str, dest: str) -> None:
        detail = ExceptionDetail(
            code=ErrorCode.EMPTY_SOURCE,
            cause="원본 큐에 이동할 아이템이 없습니다.",
            metadata={"source": source, "dest": dest},
        )
        super().__init__(f"원본 큐가 비어 있습니다: {source}", detail)
        self.source = source
        self.dest = dest
