"""
목적: 테스트 공통 픽스처와 로깅 훅을 제공한다.
설명: 스레드 안전한 인메모리 리스트 저장소 대역과 반환 횟수를 세는 커넥션 풀, 큐 생성 픽스처를 제공한다.
디자인 패턴: 테스트 픽스처 + 테스트 더블 + 테스트 훅
참조: src/queue_processor/integrations/store/base.py, src/queue_processor/core/queue/base_queue.py
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from queue_processor.core.processor import Processor
from queue_processor.core.queue import BaseQueue
from queue_processor.integrations.store import BaseConnectionPool

_LOGGER = logging.getLogger("tests")


class FakeListStore:
    """redis-py 리스트 명령을 흉내 내는 인메모리 저장소.

    리스트의 0번 인덱스가 머리(left)이다. 모든 명령은 하나의 잠금 아래에서 실행되어
    Redis의 단일 명령 원자성을 재현한다.
    """

    def __init__(self) -> None:
        self._lists: Dict[str, List[bytes]] = {}
        self._cond = threading.Condition()
        self.closed = False
        self.empty_sentinel = False
        self.commands: List[Tuple[str, Tuple[Any, ...]]] = []

    def lpush(self, name: str, *values: Any) -> int:
        with self._cond:
            self._check("LPUSH", name)
            items = self._lists.setdefault(name, [])
            for value in values:
                items.insert(0, _as_bytes(value))
            self._cond.notify_all()
            return len(items)

    def rpush(self, name: str, *values: Any) -> int:
        with self._cond:
            self._check("RPUSH", name)
            items = self._lists.setdefault(name, [])
            items.extend(_as_bytes(value) for value in values)
            self._cond.notify_all()
            return len(items)

    def brpop(self, keys: Sequence[str], timeout: Optional[float] = 0) -> Optional[Tuple[bytes, bytes]]:
        names = [keys] if isinstance(keys, str) else list(keys)
        with self._cond:
            self._check("BRPOP", *names)
            found = self._wait_for(lambda: next((n for n in names if self._lists.get(n)), None), timeout)
            if found is None:
                return None
            return found.encode(), self._lists[found].pop()

    def brpoplpush(self, src: str, dst: str, timeout: Optional[float] = 0) -> Optional[bytes]:
        with self._cond:
            self._check("BRPOPLPUSH", src, dst)
            found = self._wait_for(lambda: src if self._lists.get(src) else None, timeout)
            if found is None:
                return None
            return self._move(src, dst)

    def rpoplpush(self, src: str, dst: str) -> Optional[bytes]:
        with self._cond:
            self._check("RPOPLPUSH", src, dst)
            if not self._lists.get(src):
                return None
            return self._move(src, dst)

    def llen(self, name: str) -> int:
        with self._cond:
            self._check("LLEN", name)
            return len(self._lists.get(name, []))

    def snapshot(self, *names: str) -> Dict[str, List[bytes]]:
        """여러 리스트를 한 시점에 복사해 반환한다."""

        with self._cond:
            return {name: list(self._lists.get(name, [])) for name in names}

    def close(self) -> None:
        with self._cond:
            self.closed = True
            self._cond.notify_all()

    def _check(self, command: str, *args: Any) -> None:
        if self.closed:
            raise RedisConnectionError("Connection closed by server.")
        self.commands.append((command, args))

    def _wait_for(self, predicate: Callable[[], Optional[str]], timeout: Optional[float]) -> Optional[str]:
        if self.empty_sentinel:
            return predicate()
        deadline = None if not timeout else time.monotonic() + timeout
        while True:
            found = predicate()
            if found is not None:
                return found
            remaining = None if deadline is None else deadline - time.monotonic()
            if remaining is not None and remaining <= 0:
                return None
            self._cond.wait(remaining)
            if self.closed:
                raise RedisConnectionError("Connection closed by server.")

    def _move(self, src: str, dst: str) -> bytes:
        value = self._lists[src].pop()
        self._lists.setdefault(dst, []).insert(0, value)
        self._cond.notify_all()
        return value


class CountingPool(BaseConnectionPool):
    """커넥션 획득/반환 횟수를 세는 풀."""

    def __init__(self, store: FakeListStore) -> None:
        self.store = store
        self.acquired = 0
        self.released = 0
        self._lock = threading.Lock()

    def acquire(self) -> FakeListStore:
        with self._lock:
            self.acquired += 1
        return self.store

    def release(self, connection: FakeListStore) -> None:
        with self._lock:
            self.released += 1

    def close(self) -> None:
        self.store.close()


def _as_bytes(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value).encode()


@pytest.fixture
def store() -> FakeListStore:
    """빈 인메모리 리스트 저장소를 반환한다."""

    return FakeListStore()


@pytest.fixture
def pool(store: FakeListStore) -> CountingPool:
    """인메모리 저장소를 빌려주는 풀을 반환한다."""

    return CountingPool(store)


@pytest.fixture
def make_queue(pool: CountingPool) -> Callable[..., BaseQueue]:
    """인메모리 풀 위에 큐를 만드는 팩토리를 반환한다."""

    def _make(source: str = "jobs", processor: Optional[Processor] = None, **kwargs: Any) -> BaseQueue:
        if processor is None:
            return BaseQueue(pool, source, **kwargs)
        return BaseQueue(pool, source, processor=processor, **kwargs)

    return _make


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
