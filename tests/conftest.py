# tests/conftest.py

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# inventory_service.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from inventory_service.main import app as main_app
from inventory_service.core import dependencies as deps
from inventory_service.domains.inv import crud as inv_crud
from inventory_service.utils.files import PhotoStore


# --- 카탈로그 / 사진 저장소 픽스처 ---
# 테스트마다 새 카탈로그(ID 1부터 시작)와 임시 캐시 디렉토리를 사용합니다.
@pytest.fixture(scope="function")
def cache_dir(tmp_path: Path) -> Path:
    """테스트용 임시 캐시 디렉토리 경로 (아직 생성되지 않은 상태)."""
    return tmp_path / "cache"


@pytest.fixture(scope="function")
def photo_store(cache_dir: Path) -> PhotoStore:
    store = PhotoStore(cache_dir)
    store.ensure_directory()
    return store


@pytest.fixture(scope="function")
def catalog() -> inv_crud.CRUDInventoryItem:
    return inv_crud.create_catalog()


# --- 비동기 테스트 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(
    catalog: inv_crud.CRUDInventoryItem, photo_store: PhotoStore
) -> AsyncGenerator[AsyncClient, None]:
    """
    테스트용 카탈로그와 사진 저장소를 주입한 AsyncClient 인스턴스를 생성합니다.
    ASGITransport는 lifespan을 실행하지 않으므로 의존성 오버라이드로 상태를 제공합니다.
    """
    original_overrides = main_app.dependency_overrides.copy()

    try:
        main_app.dependency_overrides[deps.get_catalog] = lambda: catalog
        main_app.dependency_overrides[deps.get_photo_store] = lambda: photo_store

        async with AsyncClient(transport=ASGITransport(app=main_app), base_url="http://test") as async_client:
            yield async_client

    finally:
        # 클라이언트 픽스처가 끝나면 오버라이드를 반드시 복원해야 합니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


@pytest.fixture(scope="function")
def cached_files(photo_store: PhotoStore):
    """캐시 디렉토리에 있는 파일 이름 목록(정렬)을 반환하는 함수를 제공합니다."""
    def _list() -> list[str]:
        return sorted(p.name for p in photo_store.directory.iterdir())
    return _list
