"""
목적: 읽기/쓰기 잠금을 제공한다.
설명: 다수의 동시 읽기와 단일 배타 쓰기를 허용하며, 대기 중인 쓰기가 있으면 새 읽기를 막는다.
디자인 패턴: 읽기-쓰기 잠금
참조: src/queue_processor/core/queue/base_queue.py
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """쓰기 우선 읽기/쓰기 잠금."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        """공유 잠금 구간을 제공한다."""

        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        """배타 잠금 구간을 제공한다."""

        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
