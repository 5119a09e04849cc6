# tests/test_main.py

"""
FastAPI 애플리케이션의 메인 엔드포인트와 공통 오류 처리에 대한 통합 테스트 모듈입니다.

- 루트(`/`), 헬스 체크(`/health-check`) 응답
- 매칭되지 않는 경로(404)와 허용되지 않는 메서드(405)의 {"error": ...} 응답
- lifespan에서의 캐시 디렉토리 생성 및 실패 처리
"""

import pytest
from httpx import AsyncClient

from inventory_service.core.config import settings
from inventory_service.core.exceptions import StorageError
from inventory_service.main import app as main_app, lifespan


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    assert "/docs" in response.json()["message"]


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient, photo_store):
    response = await client.get("/health-check")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "cache_dir": str(photo_store.directory)}


@pytest.mark.asyncio
async def test_unmatched_route_returns_endpoint_not_found(client: AsyncClient):
    response = await client.get("/no/such/route")
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}


@pytest.mark.asyncio
async def test_allowed_method_on_wrong_route_is_not_found(client: AsyncClient):
    """허용 목록의 메서드(DELETE)지만 라우트가 없으면 404입니다."""
    response = await client.delete("/register")
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/inventory/1", "/nowhere"])
async def test_unknown_method_returns_405(client: AsyncClient, path: str):
    response = await client.request("PATCH", path)
    assert response.status_code == 405
    assert response.json() == {"error": "Method PATCH not allowed"}


@pytest.mark.asyncio
async def test_cors_preflight_is_method_not_allowed(client: AsyncClient):
    """브라우저 preflight(OPTIONS)도 다른 미지원 메서드와 같이 405로 응답합니다."""
    response = await client.options(
        "/inventory",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 405
    assert response.json() == {"error": "Method OPTIONS not allowed"}
    assert "access-control-allow-origin" not in response.headers


@pytest.mark.asyncio
async def test_lifespan_creates_cache_dir_and_state(tmp_path, monkeypatch):
    cache_dir = tmp_path / "nested" / "cache"
    monkeypatch.setattr(settings, "CACHE_DIR", str(cache_dir))

    async with lifespan(main_app):
        assert cache_dir.is_dir()
        assert main_app.state.catalog.next_id == 1
        assert main_app.state.photo_store.directory == cache_dir


@pytest.mark.asyncio
async def test_lifespan_fails_when_cache_path_is_a_file(tmp_path, monkeypatch):
    not_a_dir = tmp_path / "cache"
    not_a_dir.write_text("occupied")
    monkeypatch.setattr(settings, "CACHE_DIR", str(not_a_dir))

    with pytest.raises(StorageError):
        async with lifespan(main_app):
            pass
