"""
목적: 큐 프로세서(순서/이동 전략) 인터페이스와 공통 동작을 제공한다.
설명: push/pull/pull_to/concat 네 가지 작업을 정의하고, 저장소 오류 변환과 빈 결과(None) 처리 규칙을 공유한다.
디자인 패턴: 전략 패턴, 템플릿 메서드
참조: src/queue_processor/core/processor/fifo.py, src/queue_processor/core/processor/lifo.py, src/queue_processor/integrations/store/base.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from redis.exceptions import RedisError

from queue_processor.integrations.store import ListStore
from queue_processor.shared.const import SharedConst
from queue_processor.shared.exceptions import EmptySourceError, StoreError


class Processor(ABC):
    """큐 프로세서 인터페이스.

    프로세서는 상태를 갖지 않는다. 큐 이름과 페이로드는 호출마다 인자로 받으므로
    하나의 인스턴스를 여러 큐와 스레드가 공유해도 안전하다.

    세 가지 규칙을 공통으로 따른다.

    - 저장소 명령이 실패하면 재시도 없이 `StoreError`로 감싸 올린다.
    - `pull`/`pull_to`는 저장소가 데이터 없음(None)을 돌려주면 조용히 None을 반환한다.
    - `concat`은 원본이 비어 있으면 `EmptySourceError`를 발생시킨다.
    """

    __slots__ = ()

    name: str = ""

    @abstractmethod
    def push(self, client: ListStore, source: str, payload: bytes) -> None:
        """source 큐에 페이로드를 넣는다."""

    def pull(
        self,
        client: ListStore,
        source: str,
        timeout: Optional[float] = SharedConst.BLOCK_FOREVER,
    ) -> Optional[bytes]:
        """source 꼬리에서 블로킹 팝으로 아이템을 꺼낸다.

        Args:
            client: 리스트 저장소 커넥션.
            source: 원본 큐 이름.
            timeout: 대기 시간(초). 0 또는 None이면 무기한 대기한다.

        Returns:
            꺼낸 페이로드. 저장소가 데이터 없음을 알리면 None.

        Raises:
            StoreError: 저장소 명령이 실패한 경우.
        """

        result = self._execute(
            "BRPOP",
            [source],
            client.brpop,
            [source],
            timeout=self._resolve_timeout(timeout),
        )
        if result is None:
            return None
        return _to_bytes(result[1])

    def pull_to(
        self,
        client: ListStore,
        source: str,
        dest: str,
        timeout: Optional[float] = SharedConst.BLOCK_FOREVER,
    ) -> Optional[bytes]:
        """source 꼬리 아이템을 dest 머리로 원자적으로 옮기고 그 값을 반환한다.

        처리 전에 아이템을 처리 중 리스트로 옮겨 두면, 처리 도중 프로세스가 죽어도
        아이템은 dest에 남아 복구할 수 있다.

        Raises:
            StoreError: 저장소 명령이 실패한 경우.
        """

        value = self._execute(
            "BRPOPLPUSH",
            [source, dest],
            client.brpoplpush,
            source,
            dest,
            timeout=self._resolve_timeout(timeout),
        )
        if value is None:
            return None
        return _to_bytes(value)

    def concat(self, client: ListStore, source: str, dest: str) -> None:
        """source 꼬리 아이템 하나를 dest 머리로 즉시 옮긴다.

        Raises:
            EmptySourceError: source가 비어 있는 경우. dest는 변경되지 않는다.
            StoreError: 저장소 명령이 실패한 경우.
        """

        value = self._execute("RPOPLPUSH", [source, dest], client.rpoplpush, source, dest)
        if value is None:
            raise EmptySourceError(source, dest)

    def _execute(
        self,
        command: str,
        keys: Sequence[str],
        func: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        try:
            return func(*args, **kwargs)
        except RedisError as exc:
            raise StoreError(command, keys, exc) from exc

    def _resolve_timeout(self, timeout: Optional[float]) -> float:
        if timeout is None:
            return SharedConst.BLOCK_FOREVER
        if timeout < 0:
            raise ValueError("timeout은 0 이상이어야 합니다.")
        return timeout

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode(SharedConst.DEFAULT_ENCODING)
    raise ValueError("저장소 응답 형식이 올바르지 않습니다.")
