"""
목적: 프로세서 모듈 공개 API를 제공한다.
설명: 프로세서 인터페이스, FIFO/LIFO 싱글턴, 이름 조회 함수를 노출한다.
디자인 패턴: 퍼사드
참조: src/queue_processor/core/processor/base.py, src/queue_processor/core/processor/registry.py
"""

from queue_processor.core.processor.base import Processor
from queue_processor.core.processor.fifo import FIFO, FifoProcessor
from queue_processor.core.processor.lifo import LIFO, LifoProcessor
from queue_processor.core.processor.registry import get_processor

__all__ = ["Processor", "FIFO", "LIFO", "FifoProcessor", "LifoProcessor", "get_processor"]
