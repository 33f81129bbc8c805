"""
목적: 리스트 저장소 어댑터 계약과 커넥션 풀 추상화를 제공한다.
설명: 프로세서가 사용하는 리스트 명령 집합(Protocol)과, 커넥션 획득/반환 및 with 문 사용을 위한 풀 인터페이스를 정의한다.
디자인 패턴: 포트-어댑터, 오브젝트 풀
참조: src/queue_processor/integrations/store/redis_pool.py, src/queue_processor/core/processor/base.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Protocol, Sequence, Union

Key = Union[str, bytes]


class ListStore(Protocol):
    """프로세서가 소비하는 리스트 저장소 명령 집합.

    명령 이름과 반환 규약은 redis-py 클라이언트를 따른다. 데이터가 없으면 None을 반환한다.
    """

    def lpush(self, name: Key, *values: Any) -> Any:
        """리스트 머리에 추가한다."""
        ...

    def rpush(self, name: Key, *values: Any) -> Any:
        """리스트 꼬리에 추가한다."""
        ...

    def brpop(self, keys: Sequence[Key], timeout: Optional[float] = 0) -> Any:
        """리스트 꼬리에서 블로킹 팝을 수행한다."""
        ...

    def brpoplpush(self, src: Key, dst: Key, timeout: Optional[float] = 0) -> Any:
        """src 꼬리를 블로킹 팝해 dst 머리에 원자적으로 넣는다."""
        ...

    def rpoplpush(self, src: Key, dst: Key) -> Any:
        """src 꼬리를 팝해 dst 머리에 원자적으로 넣는다."""
        ...

    def llen(self, name: Key) -> Any:
        """리스트 길이를 반환한다."""
        ...


class BaseConnectionPool(ABC):
    """커넥션 풀 인터페이스."""

    @abstractmethod
    def acquire(self) -> ListStore:
        """커넥션을 획득한다."""

    @abstractmethod
    def release(self, connection: ListStore) -> None:
        """커넥션을 반환한다."""

    @abstractmethod
    def close(self) -> None:
        """풀의 모든 커넥션을 닫는다."""

    @contextmanager
    def connection(self) -> Iterator[ListStore]:
        """작업 하나 동안 커넥션을 빌려주고, 오류 여부와 관계없이 반환한다."""

        connection = self.acquire()
        try:
            yield connection
        finally:
            self.release(connection)
