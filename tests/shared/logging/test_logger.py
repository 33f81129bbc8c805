"""
목적: 인메모리 로거와 로그 모델 동작을 검증한다.
설명: 로그 기록, 큐 컨텍스트 병합, 저장소 공유, 표준 출력 기록을 확인한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/queue_processor/shared/logging/logger.py, src/queue_processor/shared/logging/models.py
"""

from __future__ import annotations

import json

from queue_processor.shared.logging import (
    InMemoryLogger,
    LogContext,
    LogLevel,
    create_default_logger,
)


def test_inmemory_logger_records_log() -> None:
    """기본 로거가 로그를 기록하는지 확인한다."""

    logger = create_default_logger("unit-test")
    logger.info("시작 로그")

    records = logger.repository.list()

    assert len(records) == 1
    assert records[0].level == LogLevel.INFO
    assert records[0].message == "시작 로그"
    assert records[0].logger_name == "unit-test"


def test_logger_with_context_merges_queue_fields() -> None:
    """큐 컨텍스트 병합 규칙이 올바른지 확인한다."""

    logger = InMemoryLogger(
        name="ctx-test",
        base_context=LogContext(source="jobs", processor="fifo", tags={"env": "dev"}),
    )
    child = logger.with_context(LogContext(processor="lifo", tags={"env": "prod", "team": "q"}))
    child.error("교체 후 실패", LogContext(operation="pull", destination="processing"))

    record = logger.repository.list()[0]

    assert record.context is not None
    assert record.context.source == "jobs"
    assert record.context.processor == "lifo"
    assert record.context.operation == "pull"
    assert record.context.destination == "processing"
    assert record.context.tags == {"env": "prod", "team": "q"}


def test_logger_writes_json_line_when_enabled(capsys) -> None:
    """표준 출력 기록이 켜지면 JSON 한 줄을 출력하는지 확인한다."""

    logger = InMemoryLogger(name="stdout-test", emit_stdout=True)
    logger.warning("경고", LogContext(source="jobs"))

    line = capsys.readouterr().out.strip()
    payload = json.loads(line)

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "stdout-test"
    assert payload["context"] == {"source": "jobs", "tags": {}}


def test_log_stdout_env_enables_output(monkeypatch, capsys) -> None:
    """LOG_STDOUT 환경 변수로 표준 출력 기록을 켤 수 있는지 확인한다."""

    monkeypatch.setenv("LOG_STDOUT", "yes")
    logger = create_default_logger("env-test")
    logger.debug("디버그")

    assert "디버그" in capsys.readouterr().out
