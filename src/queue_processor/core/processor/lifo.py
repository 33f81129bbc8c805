"""
목적: 후입선출(LIFO) 프로세서를 제공한다.
설명: 꼬리에 넣고(RPUSH) 꼬리에서 꺼내므로 가장 최근 아이템이 먼저 나온다.
디자인 패턴: 전략 패턴, 싱글턴
참조: src/queue_processor/core/processor/base.py
"""

from __future__ import annotations

from queue_processor.core.processor.base import Processor
from queue_processor.integrations.store import ListStore


class LifoProcessor(Processor):
    """후입선출 프로세서.

    pull_to와 concat은 FIFO와 같은 원자적 이동 계약을 따른다.
    """

    __slots__ = ()

    name = "lifo"

    def push(self, client: ListStore, source: str, payload: bytes) -> None:
        """RPUSH로 source 꼬리에 넣는다."""

        self._execute("RPUSH", [source], client.rpush, source, payload)


LIFO: Processor = LifoProcessor()
