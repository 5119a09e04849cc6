# inventory_service/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 카탈로그와 사진 저장소는 lifespan에서 생성되어 app.state에 보관됩니다.
- 테스트에서는 app.dependency_overrides로 새 인스턴스를 주입합니다.
"""

from fastapi import Request

from inventory_service.domains.inv.crud import CRUDInventoryItem
from inventory_service.utils.files import PhotoStore


def get_catalog(request: Request) -> CRUDInventoryItem:
    """현재 애플리케이션의 물품 카탈로그를 반환합니다."""
    return request.app.state.catalog


def get_photo_store(request: Request) -> PhotoStore:
    """현재 애플리케이션의 사진 저장소를 반환합니다."""
    return request.app.state.photo_store
