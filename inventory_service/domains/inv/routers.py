# inventory_service/domains/inv/routers.py

"""
'inv' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- 물품 등록/목록/조회/수정/삭제
- 물품 사진 조회/교체
- HTML 폼(RegisterForm.html, SearchForm.html) 및 검색 폼 처리(POST /search)

모든 엔드포인트는 버전 접두사 없이 루트에 등록됩니다.
"""
import os
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status
from fastapi.responses import FileResponse

from inventory_service.core import dependencies as deps
from inventory_service.core.config import settings
from inventory_service.core.exceptions import NotFound
from inventory_service.utils.files import PhotoStore
from . import crud as inv_crud
from . import schemas as inv_schemas
from . import services as inv_services

REGISTERED_MESSAGE = "Інвентар успішно зареєстровано"

router = APIRouter(
    tags=["Inventory"],
    responses={404: {"model": inv_schemas.ErrorResponse, "description": "Річ не знайдена"}},
)

forms_router = APIRouter(tags=["Forms"])


def path_item_id(item_id: str) -> int:
    """
    경로의 {item_id}를 정수 ID로 해석합니다 ("3abc" -> 3).
    정수로 시작하지 않는 값은 '찾을 수 없음'으로 처리합니다.
    """
    parsed = inv_crud.parse_item_id(item_id)
    if parsed is None:
        raise NotFound(inv_crud.item_not_found_message(item_id))
    return parsed


# =============================================================================
# 1. 물품 등록 및 조회
# =============================================================================
@router.post(
    "/register",
    response_model=inv_schemas.InventoryItemMessage,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": inv_schemas.ErrorResponse, "description": "Невірний запит"}},
    summary="Реєстрація нового пристрою",
)
async def register_item(
    inventory_name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    catalog: inv_crud.CRUDInventoryItem = Depends(deps.get_catalog),
    store: PhotoStore = Depends(deps.get_photo_store),
):
    """새 물품을 등록합니다. inventory_name은 필수이며 사진은 선택입니다."""
    db_item = await inv_services.register_item(
        catalog, store, name=inventory_name, description=description, photo=photo
    )
    return inv_schemas.InventoryItemMessage(
        message=REGISTERED_MESSAGE,
        item=inv_schemas.InventoryItemRead.from_item(db_item),
    )


@router.get(
    "/inventory",
    response_model=List[inv_schemas.InventoryItemRead],
    summary="Отримання списку всіх інвентаризованих речей",
)
async def read_items(catalog: inv_crud.CRUDInventoryItem = Depends(deps.get_catalog)):
    """등록된 모든 물품 목록을 조회합니다."""
    items = await inv_services.list_items(catalog)
    return [inv_schemas.InventoryItemRead.from_item(item) for item in items]


@router.get(
    "/inventory/{item_id}",
    response_model=inv_schemas.InventoryItemRead,
    summary="Отримання інформації про конкретну річ",
)
async def read_item(
    item_id: int = Depends(path_item_id),
    catalog: inv_crud.CRUDInventoryItem = Depends(deps.get_catalog),
):
    db_item = await catalog.get_or_404(item_id)
    return inv_schemas.InventoryItemRead.from_item(db_item)


@router.put(
    "/inventory/{item_id}",
    response_model=inv_schemas.InventoryItemRead,
    summary="Оновлення імені або опису",
)
async def update_item(
    item_id: int = Depends(path_item_id),
    item_update: Optional[inv_schemas.InventoryItemUpdate] = None,
    catalog: inv_crud.CRUDInventoryItem = Depends(deps.get_catalog),
):
    """물품 이름/설명을 업데이트합니다. 본문에 포함된 필드만 변경됩니다."""
    if item_update is None:
        item_update = inv_schemas.InventoryItemUpdate()
    db_item = await catalog.update_or_404(id=item_id, obj_in=item_update)
    return inv_schemas.InventoryItemRead.from_item(db_item)


@router.delete(
    "/inventory/{item_id}",
    response_model=inv_schemas.MessageResponse,
    summary="Видалення інвентаризованої речі",
)
async def delete_item(
    item_id: int = Depends(path_item_id),
    catalog: inv_crud.CRUDInventoryItem = Depends(deps.get_catalog),
    store: PhotoStore = Depends(deps.get_photo_store),
):
    """물품을 삭제합니다. 사진 파일도 함께 삭제됩니다."""
    db_item = await inv_services.delete_item(catalog, store, item_id=item_id)
    return inv_schemas.MessageResponse(message=f"Річ з ID {db_item.id} успішно видалена")


# =============================================================================
# 2. 물품 사진
# =============================================================================
@router.get(
    "/inventory/{item_id}/photo",
    response_class=Response,
    responses={
        200: {"content": {"image/jpeg": {}}, "description": "Зображення у форматі image/jpeg"},
        500: {"model": inv_schemas.ErrorResponse},
    },
    summary="Отримання фото зображення",
)
async def read_item_photo(
    item_id: int = Depends(path_item_id),
    catalog: inv_crud.CRUDInventoryItem = Depends(deps.get_catalog),
    store: PhotoStore = Depends(deps.get_photo_store),
):
    """저장된 형식과 관계없이 image/jpeg로 사진을 반환합니다."""
    content = await inv_services.read_photo(catalog, store, item_id=item_id)
    return Response(content=content, media_type="image/jpeg")


@router.put(
    "/inventory/{item_id}/photo",
    response_model=inv_schemas.InventoryItemMessage,
    responses={400: {"model": inv_schemas.ErrorResponse, "description": "Файл не надано"}},
    summary="Оновлення фото зображення",
)
async def update_item_photo(
    item_id: int = Depends(path_item_id),
    photo: Optional[UploadFile] = File(None),
    catalog: inv_crud.CRUDInventoryItem = Depends(deps.get_catalog),
    store: PhotoStore = Depends(deps.get_photo_store),
):
    db_item = await inv_services.replace_photo(catalog, store, item_id=item_id, photo=photo)
    return inv_schemas.InventoryItemMessage(
        message=f"Фото для ID {db_item.id} успішно оновлено",
        item=inv_schemas.InventoryItemRead.from_item(db_item),
    )


# =============================================================================
# 3. 검색 폼 처리
# =============================================================================
@forms_router.post(
    "/search",
    response_model=inv_schemas.InventorySearchRead,
    response_model_exclude_none=True,
    responses={404: {"model": inv_schemas.ErrorResponse, "description": "Річ не знайдена"}},
    summary="Обробка запиту пошуку пристрою за ID",
)
async def search_item(
    id: Optional[str] = Form(None),
    has_photo: Optional[str] = Form(None),
    catalog: inv_crud.CRUDInventoryItem = Depends(deps.get_catalog),
):
    """ID로 물품을 찾습니다. has_photo가 체크되어 있고 사진이 있을 때만 PhotoLink를 포함합니다."""
    return await inv_services.search_item(catalog, raw_id=id, has_photo=has_photo)


# =============================================================================
# 4. HTML 폼
# =============================================================================
def _form_response(filename: str) -> FileResponse:
    path = os.path.join(settings.STATIC_DIR, filename)
    if not os.path.isfile(path):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return FileResponse(path, media_type="text/html")


@forms_router.get("/RegisterForm.html", response_class=FileResponse, summary="Веб форма для реєстрації пристрою")
async def register_form():
    return _form_response("RegisterForm.html")


@forms_router.get("/SearchForm.html", response_class=FileResponse, summary="Веб форма для пошуку пристрою")
async def search_form():
    return _form_response("SearchForm.html")
