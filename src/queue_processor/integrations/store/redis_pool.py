"""
목적: Redis 커넥션 풀 어댑터를 제공한다.
설명: redis-py ConnectionPool을 감싸 작업 단위로 단일 커넥션 클라이언트를 빌려주고 반환한다. 풀이 닫힌 뒤 끊긴 소켓에서 나는 오류는 redis 연결 오류로 바꾼다.
디자인 패턴: 어댑터 패턴, 오브젝트 풀
참조: src/queue_processor/integrations/store/base.py, src/queue_processor/core/queue/base_queue.py
"""

from __future__ import annotations

from typing import Any, Optional

import redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from queue_processor.integrations.store.base import BaseConnectionPool
from queue_processor.shared.exceptions import StoreError
from queue_processor.shared.logging import Logger, create_default_logger

_CLOSED_MESSAGE = "커넥션 풀이 닫혔습니다."
# 읽기 도중 버퍼와 소켓이 정리되면 redis-py 파서가 올리는 오류들
_CLOSED_SOCKET_ERRORS = (OSError, ValueError, AttributeError)


class _PooledRedis(redis.Redis):
    """소속 풀이 닫힌 뒤의 소켓 오류를 redis 연결 오류로 올리는 클라이언트.

    풀의 disconnect가 블로킹 중인 읽기 아래에서 소켓을 닫으면 redis-py는
    RedisError가 아닌 OSError/ValueError 등을 그대로 올린다.
    """

    def __init__(self, owner: "RedisConnectionPool", **kwargs: Any) -> None:
        self._owner = owner
        super().__init__(**kwargs)

    def execute_command(self, *args: Any, **options: Any) -> Any:
        try:
            return super().execute_command(*args, **options)
        except _CLOSED_SOCKET_ERRORS as exc:
            if not self._owner.closed:
                raise
            raise RedisConnectionError(_CLOSED_MESSAGE) from exc


class RedisConnectionPool(BaseConnectionPool):
    """redis-py 기반 커넥션 풀.

    페이로드는 불투명한 바이트로 다루므로 응답 디코딩을 항상 끈다.

    Args:
        url: Redis 접속 URL. pool을 주입하지 않으면 필수이다.
        pool: 외부에서 관리하는 redis-py ConnectionPool.
        max_connections: 새 풀을 만들 때의 최대 커넥션 수.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        pool: Optional[redis.ConnectionPool] = None,
        max_connections: Optional[int] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        if pool is None and not url:
            raise ValueError("url 또는 pool 중 하나는 필요합니다.")
        self._logger = logger or create_default_logger("RedisConnectionPool")
        if pool is None:
            pool = redis.ConnectionPool.from_url(
                url,
                max_connections=max_connections,
                decode_responses=False,
            )
            self._logger.info("Redis 커넥션 풀이 초기화되었습니다.")
        self._pool = pool
        self._closed = False

    @property
    def pool(self) -> redis.ConnectionPool:
        """내부 redis-py 풀을 반환한다."""

        return self._pool

    @property
    def closed(self) -> bool:
        """close가 호출되었는지 반환한다."""

        return self._closed

    def acquire(self) -> redis.Redis:
        if self._closed:
            raise StoreError("CONNECT", [], RedisConnectionError(_CLOSED_MESSAGE))
        try:
            return _PooledRedis(self, connection_pool=self._pool, single_connection_client=True)
        except RedisError as exc:
            raise StoreError("CONNECT", [], exc) from exc
        except _CLOSED_SOCKET_ERRORS as exc:
            if not self._closed:
                raise
            raise StoreError("CONNECT", [], RedisConnectionError(_CLOSED_MESSAGE)) from exc

    def release(self, connection: redis.Redis) -> None:
        connection.close()

    def close(self) -> None:
        """풀의 모든 커넥션을 끊는다.

        이후의 호출과 다른 스레드에서 블로킹 중인 명령은 StoreError로 끝난다.
        """

        self._closed = True
        self._pool.disconnect()
        self._logger.info("Redis 커넥션 풀이 종료되었습니다.")
