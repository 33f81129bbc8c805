"""
목적: 큐 핵심 모듈 패키지를 정의한다.
설명: 프로세서 전략과 큐 구현을 포함한다.
디자인 패턴: 패키지 구성
참조: src/queue_processor/core/processor/__init__.py, src/queue_processor/core/queue/__init__.py
"""
