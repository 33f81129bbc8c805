"""
목적: 읽기/쓰기 잠금 동작을 검증한다.
설명: 읽기 동시 진입, 쓰기 배타성, 대기 중 쓰기의 새 읽기 차단을 확인한다.
디자인 패턴: 읽기-쓰기 잠금
참조: src/queue_processor/shared/runtime/sync.py
"""

from __future__ import annotations

import threading

from queue_processor.shared.runtime import ReadWriteLock


def test_readers_share_the_lock() -> None:
    """여러 읽기가 동시에 잠금 안에 있을 수 있는지 확인한다."""

    lock = ReadWriteLock()
    barrier = threading.Barrier(3, timeout=2.0)
    results: list[bool] = []

    def reader() -> None:
        with lock.read():
            barrier.wait()
            results.append(True)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(2.0)

    assert results == [True, True, True]


def test_writer_waits_for_readers_and_blocks_new_readers() -> None:
    """쓰기는 읽기가 끝날 때까지 기다리고, 대기 중에는 새 읽기를 막는지 확인한다."""

    lock = ReadWriteLock()
    order: list[str] = []
    writer_waiting = threading.Event()

    lock.acquire_read()

    def writer() -> None:
        writer_waiting.set()
        with lock.write():
            order.append("write")

    def late_reader() -> None:
        with lock.read():
            order.append("late-read")

    writer_thread = threading.Thread(target=writer)
    writer_thread.start()
    assert writer_waiting.wait(2.0)
    writer_thread.join(0.1)
    assert order == []

    reader_thread = threading.Thread(target=late_reader)
    reader_thread.start()
    reader_thread.join(0.1)
    assert order == []

    lock.release_read()
    writer_thread.join(2.0)
    reader_thread.join(2.0)

    assert order == ["write", "late-read"]
