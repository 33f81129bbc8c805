"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 하위 공통 모듈(예외, 로깅)에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/queue_processor/shared/exceptions, src/queue_processor/shared/logging
"""

from queue_processor.shared.exceptions import (
    BaseAppException,
    EmptySourceError,
    ErrorCode,
    ExceptionDetail,
    StoreError,
)
from queue_processor.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)

__all__ = [
    "BaseAppException",
    "EmptySourceError",
    "ErrorCode",
    "ExceptionDetail",
    "StoreError",
    "InMemoryLogger",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "create_default_logger",
]
