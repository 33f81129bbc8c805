"""
목적: 이름으로 프로세서를 조회하는 기능을 제공한다.
설명: 설정 값(fifo/lifo)을 공유 프로세서 인스턴스로 변환한다.
디자인 패턴: 레지스트리
참조: src/queue_processor/core/processor/fifo.py, src/queue_processor/core/processor/lifo.py, src/queue_processor/shared/config/settings.py
"""

from __future__ import annotations

from typing import Dict

from queue_processor.core.processor.base import Processor
from queue_processor.core.processor.fifo import FIFO
from queue_processor.core.processor.lifo import LIFO

_PROCESSORS: Dict[str, Processor] = {FIFO.name: FIFO, LIFO.name: LIFO}


def get_processor(name: str) -> Processor:
    """이름에 해당하는 프로세서를 반환한다. 대소문자를 구분하지 않는다."""

    processor = _PROCESSORS.get(name.strip().lower())
    if processor is None:
        supported = ", ".join(sorted(_PROCESSORS))
        raise ValueError(f"지원하지 않는 프로세서입니다: {name}. 허용값: {supported}")
    return processor
