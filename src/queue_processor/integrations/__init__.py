"""
목적: 외부 시스템 연동 패키지를 정의한다.
설명: 리스트 저장소(Redis) 어댑터를 포함한다.
디자인 패턴: 패키지 구성
참조: src/queue_processor/integrations/store/__init__.py
"""
