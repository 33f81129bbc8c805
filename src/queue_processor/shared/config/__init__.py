"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 병합 로더와 큐 설정 모델/로딩 함수를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/queue_processor/shared/config/loader.py, src/queue_processor/shared/config/settings.py
"""

from queue_processor.shared.config.loader import ConfigLoader
from queue_processor.shared.config.settings import QueueSettings, load_queue_settings

__all__ = ["ConfigLoader", "QueueSettings", "load_queue_settings"]
