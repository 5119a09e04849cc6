# inventory_service/domains/inv/crud.py

"""
'inv' 도메인의 물품 카탈로그(CRUD)를 정의하는 모듈입니다.

카탈로그는 애플리케이션마다 하나씩 생성되어 app.state에 보관되며,
요청 핸들러에는 의존성(deps.get_catalog)으로 주입됩니다.
사진 파일 자체는 다루지 않고 파일명(참조)만 보관합니다. 파일 처리는 services.py 참고.
"""

import logging
import re
from typing import Optional, Tuple

from inventory_service.core.crud_base import CRUDBase
from inventory_service.core.exceptions import NotFound, ValidationError
from . import models as inv_models
from . import schemas as inv_schemas

logger = logging.getLogger(__name__)

NAME_REQUIRED_MESSAGE = "Поле inventory_name є обов'язковим."

# 앞쪽 공백 뒤에 오는 정수 부분 ("12abc" -> 12, "1.5" -> 1)
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def item_not_found_message(item_id) -> str:
    return f"Річ з ID {item_id} не знайдена"


def photo_not_found_message(item_id) -> str:
    return f"Фото для ID {item_id} не знайдено"


def parse_item_id(raw_id: Optional[str]) -> Optional[int]:
    """
    요청으로 받은 ID 문자열의 앞부분 정수를 ID로 해석합니다.
    정수로 시작하지 않으면 None을 반환합니다.
    """
    match = _LEADING_INT.match(raw_id or "")
    return int(match.group(1)) if match else None


class CRUDInventoryItem(
    CRUDBase[
        inv_models.InventoryItem,
        inv_schemas.InventoryItemCreate,
        inv_schemas.InventoryItemUpdate,
    ]
):
    def __init__(self):
        super().__init__(model=inv_models.InventoryItem)

    async def create(self, *, obj_in: inv_schemas.InventoryItemCreate) -> inv_models.InventoryItem:
        """이름이 비어 있으면 ID를 소비하지 않고 ValidationError를 발생시킵니다."""
        if not obj_in.name:
            raise ValidationError(NAME_REQUIRED_MESSAGE)
        db_item = await super().create(obj_in=obj_in)
        logger.info("물품 등록: ID=%d, name=%r, photo=%s", db_item.id, db_item.name, db_item.photo)
        return db_item

    async def get_or_404(self, id: int) -> inv_models.InventoryItem:
        db_item = await self.get(id)
        if db_item is None:
            raise NotFound(item_not_found_message(id))
        return db_item

    async def update_or_404(
        self, *, id: int, obj_in: inv_schemas.InventoryItemUpdate
    ) -> inv_models.InventoryItem:
        # 이름을 빈 문자열로 바꾸는 것도 허용합니다 (생성 시에만 검사).
        db_item = await self.update(id=id, obj_in=obj_in)
        if db_item is None:
            raise NotFound(item_not_found_message(id))
        return db_item

    async def remove(self, *, id: int) -> inv_models.InventoryItem:
        db_item = await self.delete(id=id)
        if db_item is None:
            raise NotFound(item_not_found_message(id))
        logger.info("물품 삭제: ID=%d", id)
        return db_item

    async def set_photo(
        self, *, id: int, photo: Optional[str]
    ) -> Tuple[inv_models.InventoryItem, Optional[str]]:
        """
        물품의 사진 참조를 교체합니다.

        Returns:
            (업데이트된 물품 스냅샷, 이전 사진 참조)
        """
        async with self._lock:
            db_item = self._records.get(id)
            if db_item is None:
                raise NotFound(item_not_found_message(id))
            old_photo = db_item.photo
            db_item.photo = photo
            return db_item.model_copy(), old_photo


def create_catalog() -> CRUDInventoryItem:
    """새 (빈) 카탈로그를 생성합니다. ID는 1부터 시작합니다."""
    return CRUDInventoryItem()
