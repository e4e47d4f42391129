"""Configuration loading and startup validation."""

from __future__ import annotations

import logging
import sys

import pytest
import uvicorn
from pydantic import ValidationError

from chat_relay import server
from chat_relay.core.config import Settings


def test_missing_api_key_fails_validation(monkeypatch):
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_api_key_fails_validation(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "   ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_server_exits_with_status_1_without_api_key(monkeypatch, tmp_path, caplog):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    # Force settings and the app to be built again from the current environment
    monkeypatch.delitem(sys.modules, "chat_relay.core.config", raising=False)
    monkeypatch.delitem(sys.modules, "chat_relay.main", raising=False)
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: pytest.fail("server must not start"))

    with caplog.at_level(logging.CRITICAL, logger="chat_relay"):
        with pytest.raises(SystemExit) as excinfo:
            server.main()

    assert excinfo.value.code == 1
    assert "GROQ_API_KEY" in caplog.text


def test_defaults(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "k")
    monkeypatch.delenv("MEMORY_CAPACITY", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    cfg = Settings(_env_file=None)

    assert cfg.memory_capacity == 6
    assert cfg.port == 3000
    assert cfg.llm_model == "llama-3.1-8b-instant"
    assert (cfg.llm_temperature, cfg.llm_max_tokens, cfg.llm_top_p) == (0.45, 900, 0.9)
    assert cfg.max_body_bytes == 1024 * 1024
