"""
목적: 리스트 저장소 어댑터 공개 API를 제공한다.
설명: 저장소 명령 계약, 커넥션 풀 인터페이스, Redis 풀 구현을 노출한다.
디자인 패턴: 퍼사드
참조: src/queue_processor/integrations/store/base.py, src/queue_processor/integrations/store/redis_pool.py
"""

from queue_processor.integrations.store.base import BaseConnectionPool, ListStore
from queue_processor.integrations.store.redis_pool import RedisConnectionPool

__all__ = ["BaseConnectionPool", "ListStore", "RedisConnectionPool"]
