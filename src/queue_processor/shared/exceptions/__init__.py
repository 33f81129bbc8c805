"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 외부에서 사용할 예외 모델, 베이스 클래스, 큐 예외를 노출한다.
디자인 패턴: 퍼사드
참조: src/queue_processor/shared/exceptions/models.py, src/queue_processor/shared/exceptions/base.py, src/queue_processor/shared/exceptions/queue_errors.py
"""

from queue_processor.shared.exceptions.base import BaseAppException
from queue_processor.shared.exceptions.models import ErrorCode, ExceptionDetail
from queue_processor.shared.exceptions.queue_errors import EmptySourceError, StoreError

__all__ = ["BaseAppException", "ErrorCode", "ExceptionDetail", "EmptySourceError", "StoreError"]
