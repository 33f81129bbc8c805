"""
목적: 선입선출(FIFO) 프로세서를 제공한다.
설명: 머리에 넣고(LPUSH) 꼬리에서 꺼내므로 가장 오래된 아이템이 먼저 나온다.
디자인 패턴: 전략 패턴, 싱글턴
참조: src/queue_processor/core/processor/base.py
"""

from __future__ import annotations

from queue_processor.core.processor.base import Processor
from queue_processor.integrations.store import ListStore


class FifoProcessor(Processor):
    """선입선출 프로세서."""

    __slots__ = ()

    name = "fifo"

    def push(self, client: ListStore, source: str, payload: bytes) -> None:
        """LPUSH로 source 머리에 넣는다."""

        self._execute("LPUSH", [source], client.lpush, source, payload)


FIFO: Processor = FifoProcessor()
