"""
목적: 설정 로더와 큐 설정 모델을 검증한다.
설명: 원천 병합 우선순위, 접두사 환경 변수 해석, .env 로딩, 값 검증을 확인한다.
디자인 패턴: 빌더 패턴, DTO
참조: src/queue_processor/shared/config/loader.py, src/queue_processor/shared/config/settings.py
"""

from __future__ import annotations

import json
import os

import pytest
from pydantic import ValidationError

from queue_processor.shared.config import ConfigLoader, QueueSettings, load_queue_settings
from queue_processor.shared.const import SharedConst


def test_defaults_block_forever_with_fifo(monkeypatch, tmp_path) -> None:
    """아무 설정이 없으면 기본값을 사용하는지 확인한다."""

    for key in list(os.environ):
        if key.startswith(SharedConst.ENV_PREFIX):
            monkeypatch.delenv(key)

    settings = load_queue_settings(env_file=tmp_path / "missing.env")

    assert settings.redis_url == SharedConst.DEFAULT_REDIS_URL
    assert settings.source == "default"
    assert settings.processor == "fifo"
    assert settings.default_timeout == 0
    assert settings.max_connections is None


def test_env_overrides_dotenv_and_overrides_win(monkeypatch, tmp_path) -> None:
    """.env < 환경 변수 < overrides 순으로 적용되는지 확인한다."""

    env_file = tmp_path / ".env"
    env_file.write_text(
        "QUEUE_PROCESSOR_SOURCE=from-dotenv\n"
        "QUEUE_PROCESSOR_PROCESSOR=lifo\n"
        "QUEUE_PROCESSOR_DEFAULT_TIMEOUT=2.5\n"
        "UNRELATED=1\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("QUEUE_PROCESSOR_SOURCE", "from-env")
    monkeypatch.setenv("QUEUE_PROCESSOR_MAX_CONNECTIONS", "8")

    settings = load_queue_settings(env_file=env_file, overrides={"default_timeout": 1})

    assert settings.source == "from-env"
    assert settings.processor == "lifo"
    assert settings.max_connections == 8
    assert settings.default_timeout == 1


def test_numeric_source_name_is_kept_as_text(monkeypatch) -> None:
    """숫자로만 된 큐 이름도 문자열로 유지되는지 확인한다."""

    monkeypatch.setenv("QUEUE_PROCESSOR_SOURCE", "42")

    settings = load_queue_settings(env_file=None)

    assert settings.source == "42"


def test_invalid_settings_are_rejected() -> None:
    """지원하지 않는 프로세서와 잘못된 값을 거부하는지 확인한다."""

    with pytest.raises(ValidationError):
        QueueSettings(processor="priority")
    with pytest.raises(ValidationError):
        QueueSettings(default_timeout=-1)
    with pytest.raises(ValidationError):
        QueueSettings(source="  ")
    assert QueueSettings(processor=" LIFO ").processor == "lifo"


def test_config_loader_merges_json_and_nested_env(monkeypatch, tmp_path) -> None:
    """JSON 파일과 중첩 환경 변수가 병합되는지 확인한다."""

    config_path = tmp_path / "queue.json"
    config_path.write_text(json.dumps({"pool": {"size": 2, "name": "main"}}), encoding="utf-8")
    monkeypatch.setenv("QUEUE_PROCESSOR_POOL__SIZE", "4")
    monkeypatch.setenv("QUEUE_PROCESSOR_POOL__READONLY", "true")

    merged = ConfigLoader().add_json_file(config_path).add_env().build()

    assert merged["pool"] == {"size": 4, "name": "main", "readonly": True}


def test_config_loader_requires_existing_json_when_asked(tmp_path) -> None:
    """required 파일이 없으면 오류가 나는지 확인한다."""

    with pytest.raises(FileNotFoundError):
        ConfigLoader().add_json_file(tmp_path / "none.json", required=True)
