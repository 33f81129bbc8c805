"""
목적: 공통 상수 집합을 제공한다.
설명: 설정 로더와 큐 구현체가 함께 사용하는 기본 상수 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/queue_processor/shared/config/loader.py, src/queue_processor/shared/config/settings.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        ENV_NESTED_DELIMITER: 환경 변수 키를 중첩 경로로 해석하는 구분자.
        ENV_PREFIX: 큐 설정 환경 변수 접두사.
        DEFAULT_REDIS_URL: 기본 Redis 접속 URL.
        DEFAULT_SOURCE: 기본 큐 이름.
        BLOCK_FOREVER: 블로킹 팝을 무기한 대기시키는 타임아웃 값.
    """

    DEFAULT_ENCODING = "utf-8"
    ENV_NESTED_DELIMITER = "__"
    ENV_PREFIX = "QUEUE_PROCESSOR_"
    DEFAULT_REDIS_URL = "redis://127.0.0.1:6379/0"
    DEFAULT_SOURCE = "default"
    BLOCK_FOREVER = 0


__all__ = ["SharedConst"]
