"""
목적: 큐 소비용 백그라운드 워커를 제공한다.
설명: 데코레이터와 with 문을 모두 지원하며, pull 루프에서 빈 결과는 건너뛰고 핸들러 오류는 로깅 후 재시도한다.
디자인 패턴: 템플릿 메서드, 커맨드 패턴
참조: src/queue_processor/core/queue/base_queue.py, src/queue_processor/shared/runtime/worker/model.py
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from queue_processor.core.queue import BaseQueue
from queue_processor.shared.exceptions import StoreError
from queue_processor.shared.logging import LogContext, Logger, create_default_logger
from queue_processor.shared.runtime.worker.model import WorkerConfig, WorkerState

Handler = Callable[[bytes], None]


class Worker:
    """큐를 소비하는 워커 구현체."""

    def __init__(
        self,
        queue: BaseQueue,
        config: Optional[WorkerConfig] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self._queue = queue
        self._config = config or WorkerConfig()
        self._logger = (logger or create_default_logger(self._config.name)).with_context(
            LogContext(source=queue.source)
        )
        self._handler: Optional[Handler] = None
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._state = WorkerState.IDLE

    @property
    def state(self) -> WorkerState:
        """현재 워커 상태를 반환한다."""

        return self._state

    def __call__(self, handler: Handler) -> Handler:
        """데코레이터로 핸들러를 등록한다."""

        self._handler = handler
        return handler

    def start(self) -> None:
        """워커 스레드를 시작한다."""

        if self._thread and self._thread.is_alive():
            return
        if self._handler is None:
            raise ValueError("워커 핸들러가 등록되지 않았습니다.")
        self._stop_event.clear()
        self._state = WorkerState.RUNNING
        self._thread = threading.Thread(target=self._run, name=self._config.name, daemon=True)
        self._thread.start()
        self._logger.info("워커가 시작되었습니다.")

    def stop(self, timeout: Optional[float] = None) -> None:
        """워커를 중지하고 스레드 종료를 기다린다.

        진행 중인 pull은 poll_timeout이 지나야 끝나므로 기본 대기 시간은 그보다 길게 잡는다.
        """

        self._stop_event.set()
        if self._thread:
            self._thread.join(timeout=timeout if timeout is not None else self._config.poll_timeout + 2)
        if self._state != WorkerState.ERROR:
            self._state = WorkerState.STOPPED
        self._logger.info("워커가 중지되었습니다.")

    def __enter__(self) -> "Worker":
        """with 문 진입 시 워커를 시작한다."""

        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        """with 문 종료 시 워커를 중지한다."""

        self.stop()

    def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                payload = self._queue.pull(timeout=self._config.poll_timeout)
            except StoreError as error:
                self._logger.error(f"큐 pull 실패로 워커를 중단합니다: {error.message}")
                self._state = WorkerState.ERROR
                self._stop_event.set()
                return
            if payload is None:
                continue
            self._process_item(payload)

    def _process_item(self, payload: bytes) -> None:
        retries = 0
        while True:
            try:
                if self._handler is None:
                    raise ValueError("워커 핸들러가 없습니다.")
                self._handler(payload)
                return
            except Exception as error:  # noqa: BLE001 - 로깅을 위해 포괄 처리
                retries += 1
                self._logger.error(f"워커 처리 실패({retries}회): {error}")
                if retries > self._config.max_retries:
                    # 중단하지 않으면 아이템을 버리고 RUNNING 상태로 계속 소비한다.
                    if self._config.stop_on_error:
                        self._state = WorkerState.ERROR
                        self._stop_event.set()
                    return
