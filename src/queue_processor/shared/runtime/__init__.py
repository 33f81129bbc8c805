"""
목적: 런타임 유틸리티 공개 API를 제공한다.
설명: 읽기/쓰기 잠금을 노출한다. 워커는 shared.runtime.worker에서 가져온다.
디자인 패턴: 퍼사드
참조: src/queue_processor/shared/runtime/sync.py, src/queue_processor/shared/runtime/worker/__init__.py
"""

from queue_processor.shared.runtime.sync import ReadWriteLock

__all__ = ["ReadWriteLock"]
