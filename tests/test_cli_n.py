# tests/test_cli_n.py

"""서버 실행 명령줄 인터페이스(typer)에 대한 테스트 모듈입니다."""

import pytest
from typer.testing import CliRunner

from inventory_service import cli as cli_module
from inventory_service.core.config import settings

runner = CliRunner()


@pytest.fixture
def captured_run(monkeypatch):
    """uvicorn.run 호출을 가로채고, 테스트 후 설정 값을 복원합니다."""
    calls = []
    monkeypatch.setattr(cli_module.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    for key in ("HOST", "PORT", "CACHE_DIR"):
        monkeypatch.setattr(settings, key, getattr(settings, key))
    return calls


def test_cli_prepares_cache_and_runs_server(tmp_path, captured_run):
    cache_dir = tmp_path / "cache"
    result = runner.invoke(cli_module.cli, ["-h", "0.0.0.0", "-p", "8080", "-c", str(cache_dir)])

    assert result.exit_code == 0, result.output
    assert cache_dir.is_dir()
    assert settings.CACHE_DIR == str(cache_dir)

    (args, kwargs), = captured_run
    assert args == ("inventory_service.main:app",)
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 8080


def test_cli_exits_when_cache_is_unusable(tmp_path, captured_run):
    blocker = tmp_path / "cache"
    blocker.write_text("not a directory")

    result = runner.invoke(cli_module.cli, ["--host", "127.0.0.1", "--port", "3000", "--cache", str(blocker)])

    assert result.exit_code == 1
    assert captured_run == []
