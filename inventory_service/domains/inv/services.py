# inventory_service/domains/inv/services.py

"""
카탈로그(crud)와 사진 저장소(PhotoStore)를 함께 다루는 'inv' 도메인 서비스 모듈입니다.

사진 참조와 실제 파일은 항상 짝을 이루도록 관리합니다.
- 등록 검증에 실패하면 먼저 저장해 둔 사진을 지웁니다.
- 사진을 교체하거나 물품을 삭제하면 이전 사진 파일을 지웁니다 (실패 시 로그만 남김).
"""

import logging
from typing import List, Optional

from fastapi import UploadFile

from inventory_service.core.exceptions import NotFound, StorageError, ValidationError
from inventory_service.utils.files import PhotoStore
from . import crud as inv_crud
from . import models as inv_models
from . import schemas as inv_schemas

logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = "Файл фото не надано"

# 검색 폼 체크박스가 "켜짐"으로 간주되는 값
CHECKBOX_ON_VALUES = {"on", "true", "1", "yes"}


def has_upload(upload_file: Optional[UploadFile]) -> bool:
    """파일 파트가 실제로 전송되었는지 확인합니다 (파일명이 빈 파트는 '파일 없음')."""
    return upload_file is not None and bool(upload_file.filename)


async def _stage_photo(store: PhotoStore, upload_file: Optional[UploadFile]) -> Optional[str]:
    """업로드된 사진을 저장소에 저장하고 참조를 반환합니다. 파일이 없으면 None."""
    if not has_upload(upload_file):
        return None
    try:
        content = await upload_file.read()
    finally:
        await upload_file.close()
    return await store.store(content, upload_file.filename)


async def register_item(
    catalog: inv_crud.CRUDInventoryItem, store: PhotoStore, *,
    name: Optional[str], description: Optional[str], photo: Optional[UploadFile],
) -> inv_models.InventoryItem:
    """새 물품을 등록합니다. 이름이 없으면 저장해 둔 사진을 지우고 ValidationError."""
    staged_photo = await _stage_photo(store, photo)

    item_in = inv_schemas.InventoryItemCreate(
        name=name,
        description=description or "",
        photo=staged_photo,
    )
    try:
        return await catalog.create(obj_in=item_in)
    except ValidationError:
        if staged_photo:
            await store.delete(staged_photo)
        raise


async def list_items(catalog: inv_crud.CRUDInventoryItem) -> List[inv_models.InventoryItem]:
    return await catalog.get_multi()


async def delete_item(
    catalog: inv_crud.CRUDInventoryItem, store: PhotoStore, *, item_id: int
) -> inv_models.InventoryItem:
    """물품을 삭제하고, 사진이 있으면 파일도 지웁니다. ID는 재사용되지 않습니다."""
    db_item = await catalog.remove(id=item_id)
    if db_item.photo:
        await store.delete(db_item.photo)
    return db_item


async def read_photo(
    catalog: inv_crud.CRUDInventoryItem, store: PhotoStore, *, item_id: int
) -> bytes:
    """
    물품 사진의 바이트를 반환합니다.
    물품이 없거나 사진이 없으면 NotFound, 파일을 읽지 못하면 StorageError.

    읽는 도중 사진이 교체되어 이전 파일이 지워졌다면 새 참조로 다시 읽습니다.
    참조가 그대로인데 읽기에 실패한 경우에만 StorageError를 전달합니다.
    """
    db_item = await catalog.get(item_id)
    if db_item is None or not db_item.photo:
        raise NotFound(inv_crud.photo_not_found_message(item_id))

    reference = db_item.photo
    while True:
        try:
            return await store.read(reference)
        except StorageError:
            current = await catalog.get(item_id)
            if current is None or not current.photo:
                # 읽는 사이 물품이 삭제됨
                raise NotFound(inv_crud.photo_not_found_message(item_id))
            if current.photo == reference:
                raise
            logger.debug("사진이 교체되어 다시 읽음: ID=%d, %s -> %s", item_id, reference, current.photo)
            reference = current.photo


async def replace_photo(
    catalog: inv_crud.CRUDInventoryItem, store: PhotoStore, *,
    item_id: int, photo: Optional[UploadFile],
) -> inv_models.InventoryItem:
    """물품 사진을 새 파일로 교체하고 이전 파일을 지웁니다."""
    await catalog.get_or_404(item_id)
    if not has_upload(photo):
        raise ValidationError(NO_FILE_MESSAGE)

    new_photo = await _stage_photo(store, photo)
    try:
        db_item, old_photo = await catalog.set_photo(id=item_id, photo=new_photo)
    except NotFound:
        # 파일을 저장하는 사이 물품이 삭제된 경우
        await store.delete(new_photo)
        raise

    if old_photo:
        await store.delete(old_photo)
    logger.info("사진 교체: ID=%d, %s -> %s", item_id, old_photo, new_photo)
    return db_item


def is_checked(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in CHECKBOX_ON_VALUES


async def search_item(
    catalog: inv_crud.CRUDInventoryItem, *, raw_id: Optional[str], has_photo: Optional[str]
) -> inv_schemas.InventorySearchRead:
    """
    검색 폼(POST /search) 처리. ID는 앞부분의 정수만 사용하며 ("1abc" -> 1),
    정수로 시작하지 않는 ID는 '찾을 수 없음'으로 처리합니다.
    """
    item_id = inv_crud.parse_item_id(raw_id)
    if item_id is None:
        raise NotFound(inv_crud.item_not_found_message(raw_id if raw_id is not None else ""))

    db_item = await catalog.get(item_id)
    if db_item is None:
        raise NotFound(inv_crud.item_not_found_message(raw_id))

    return inv_schemas.InventorySearchRead.from_item(db_item, include_photo_link=is_checked(has_photo))
