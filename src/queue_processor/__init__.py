"""
목적: queue_processor 패키지 공개 API를 제공한다.
설명: 이름 있는 순서 큐, FIFO/LIFO 프로세서, 저장소 풀, 큐 예외를 한곳에서 노출한다.
디자인 패턴: 퍼사드
참조: src/queue_processor/core/queue/base_queue.py, src/queue_processor/core/processor/__init__.py
"""

from queue_processor.core.processor import FIFO, LIFO, Processor, get_processor
from queue_processor.core.queue import BaseQueue
from queue_processor.integrations.store import BaseConnectionPool, ListStore, RedisConnectionPool
from queue_processor.shared.config import QueueSettings, load_queue_settings
from queue_processor.shared.exceptions import EmptySourceError, StoreError

__all__ = [
    "BaseQueue",
    "Processor",
    "FIFO",
    "LIFO",
    "get_processor",
    "BaseConnectionPool",
    "ListStore",
    "RedisConnectionPool",
    "QueueSettings",
    "load_queue_settings",
    "EmptySourceError",
    "StoreError",
]
