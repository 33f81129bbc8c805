"""
목적: 이름 있는 순서 큐를 제공한다.
설명: 커넥션 풀과 큐 이름을 보관하고, 모든 작업을 현재 프로세서에 위임한다. 프로세서 참조는 읽기/쓰기 잠금으로 보호한다.
디자인 패턴: 전략 패턴(위임), 어댑터 패턴
참조: src/queue_processor/core/processor/base.py, src/queue_processor/integrations/store/base.py, src/queue_processor/shared/runtime/sync.py
"""

from __future__ import annotations

from typing import Optional

from redis.exceptions import RedisError

from queue_processor.core.processor import FIFO, Processor, get_processor
from queue_processor.integrations.store import BaseConnectionPool, RedisConnectionPool
from queue_processor.shared.config import QueueSettings
from queue_processor.shared.const import SharedConst
from queue_processor.shared.exceptions import EmptySourceError, StoreError
from queue_processor.shared.logging import LogContext, LogLevel, Logger, create_default_logger
from queue_processor.shared.runtime.sync import ReadWriteLock


class BaseQueue:
    """프로세서에 작업을 위임하는 기본 큐 구현체.

    각 작업은 풀에서 커넥션 하나를 빌려 현재 프로세서에 넘기고, 작업이 끝나면
    오류 여부와 관계없이 커넥션을 반환한다. 작업은 시작 시점에 읽은 프로세서를
    끝까지 사용하므로, 도중에 프로세서가 교체되어도 섞이지 않는다.

    Args:
        pool: 리스트 저장소 커넥션 풀.
        source: 큐 이름.
        processor: 초기 프로세서. 기본값은 FIFO.
        logger: 주입 가능한 로거.
        default_timeout: pull/pull_to의 기본 대기 시간(초). 0이면 무기한 대기.
    """

    def __init__(
        self,
        pool: BaseConnectionPool,
        source: str,
        processor: Processor = FIFO,
        logger: Optional[Logger] = None,
        default_timeout: float = SharedConst.BLOCK_FOREVER,
    ) -> None:
        if not source:
            raise ValueError("source는 비어 있을 수 없습니다.")
        if processor is None:
            raise ValueError("processor는 None일 수 없습니다.")
        if default_timeout < 0:
            raise ValueError("default_timeout은 0 이상이어야 합니다.")
        self._pool = pool
        self._source = source
        self._default_timeout = default_timeout
        self._lock = ReadWriteLock()
        self._processor = processor
        self._logger = (logger or create_default_logger(f"BaseQueue[{source}]")).with_context(
            LogContext(source=source)
        )
        self._logger.info("큐가 생성되었습니다.", LogContext(processor=processor.name))

    @classmethod
    def from_settings(
        cls,
        settings: QueueSettings,
        pool: Optional[BaseConnectionPool] = None,
        logger: Optional[Logger] = None,
    ) -> "BaseQueue":
        """설정 모델로 큐를 생성한다. 풀을 주지 않으면 redis_url로 새 풀을 만든다."""

        if pool is None:
            pool = RedisConnectionPool(
                url=settings.redis_url,
                max_connections=settings.max_connections,
                logger=logger,
            )
        return cls(
            pool=pool,
            source=settings.source,
            processor=get_processor(settings.processor),
            logger=logger,
            default_timeout=settings.default_timeout,
        )

    @property
    def source(self) -> str:
        """큐 이름을 반환한다."""

        return self._source

    @property
    def processor(self) -> Processor:
        """현재 프로세서를 공유 잠금 아래에서 읽어 반환한다."""

        with self._lock.read():
            return self._processor

    def set_processor(self, processor: Processor) -> None:
        """프로세서를 배타 잠금 아래에서 원자적으로 교체한다."""

        if processor is None:
            raise ValueError("processor는 None일 수 없습니다.")
        with self._lock.write():
            previous = self._processor
            self._processor = processor
        self._logger.info(
            f"프로세서가 교체되었습니다: {previous.name} -> {processor.name}",
            LogContext(processor=processor.name, operation="set_processor"),
        )

    def push(self, payload: bytes) -> None:
        """페이로드를 큐에 넣는다.

        예외가 발생하면 페이로드는 저장소에 없다고 간주할 수 있다.

        Raises:
            TypeError: 페이로드가 바이트가 아닌 경우.
            StoreError: 저장소 명령이 실패한 경우.
        """

        if not isinstance(payload, (bytes, bytearray)):
            raise TypeError("payload는 bytes여야 합니다.")
        processor = self.processor
        with self._pool.connection() as client:
            self._guard(processor, "push", processor.push, client, self._source, bytes(payload))

    def pull(self, timeout: Optional[float] = None) -> Optional[bytes]:
        """큐에서 아이템을 꺼낸다. 데이터가 없으면 None을 반환한다."""

        processor = self.processor
        with self._pool.connection() as client:
            return self._guard(
                processor,
                "pull",
                processor.pull,
                client,
                self._source,
                self._resolve_timeout(timeout),
            )

    def pull_to(self, dest: str, timeout: Optional[float] = None) -> Optional[bytes]:
        """아이템을 dest로 원자적으로 옮기고 그 값을 반환한다. 데이터가 없으면 None을 반환한다."""

        if not dest:
            raise ValueError("dest는 비어 있을 수 없습니다.")
        processor = self.processor
        with self._pool.connection() as client:
            return self._guard(
                processor,
                "pull_to",
                processor.pull_to,
                client,
                self._source,
                dest,
                self._resolve_timeout(timeout),
                dest=dest,
            )

    def concat(self, dest: str) -> None:
        """아이템 하나를 dest로 즉시 옮긴다.

        Raises:
            EmptySourceError: 큐가 비어 있는 경우.
            StoreError: 저장소 명령이 실패한 경우.
        """

        if not dest:
            raise ValueError("dest는 비어 있을 수 없습니다.")
        processor = self.processor
        with self._pool.connection() as client:
            self._guard(processor, "concat", processor.concat, client, self._source, dest, dest=dest)

    def recover(self, processing: str) -> int:
        """처리 중 리스트에 남은 아이템을 모두 이 큐로 되돌리고 옮긴 개수를 반환한다."""

        if not processing:
            raise ValueError("processing은 비어 있을 수 없습니다.")
        processor = self.processor
        moved = 0
        with self._pool.connection() as client:
            while True:
                try:
                    processor.concat(client, processing, self._source)
                except EmptySourceError:
                    break
                except StoreError as exc:
                    self._log_store_error(exc, processor, "recover", processing)
                    raise
                moved += 1
        self._logger.info(
            f"처리 중 아이템을 복구했습니다: {moved}건",
            LogContext(destination=processing, processor=processor.name, operation="recover"),
        )
        return moved

    def size(self) -> int:
        """현재 큐 길이를 반환한다."""

        processor = self.processor
        with self._pool.connection() as client:
            return self._guard(processor, "size", self._length, client)

    def close(self) -> None:
        """커넥션 풀을 닫는다. 블로킹 중이던 호출은 StoreError로 깨어난다."""

        self._pool.close()
        self._logger.info("큐가 닫혔습니다.", LogContext(operation="close"))

    def _guard(self, processor: Processor, operation: str, func, *args, dest: Optional[str] = None):
        try:
            return func(*args)
        except StoreError as exc:
            self._log_store_error(exc, processor, operation, dest)
            raise

    def _length(self, client) -> int:
        try:
            return int(client.llen(self._source))
        except RedisError as exc:
            raise StoreError("LLEN", [self._source], exc) from exc

    def _log_store_error(
        self,
        error: StoreError,
        processor: Processor,
        operation: str,
        dest: Optional[str],
    ) -> None:
        self._logger.log(
            level=LogLevel.ERROR,
            message=f"저장소 작업 실패: {error.message}",
            context=LogContext(destination=dest, processor=processor.name, operation=operation),
            metadata=error.detail.metadata,
        )

    def _resolve_timeout(self, timeout: Optional[float]) -> float:
        if timeout is None:
            return self._default_timeout
        return timeout
