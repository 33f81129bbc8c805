"""
목적: 큐 모듈 공개 API를 제공한다.
설명: 프로세서에 작업을 위임하는 기본 큐 구현을 노출한다.
디자인 패턴: 퍼사드
참조: src/queue_processor/core/queue/base_queue.py
"""

from queue_processor.core.queue.base_queue import BaseQueue

__all__ = ["BaseQueue"]
