# inventory_service/domains/inv/schemas.py

"""
'inv' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

외부 JSON 필드명(ID, InventoryName, Description, PhotoLink)은 기존 클라이언트와의
호환을 위해 그대로 유지합니다.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import SQLModel

from .models import InventoryItem


# =============================================================================
# 1. 요청 스키마
# =============================================================================
class InventoryItemCreate(SQLModel):
    """
    물품 등록용 모델입니다.
    name의 필수 여부는 카탈로그가 직접 검사하므로 여기서는 Optional로 둡니다.
    """
    name: Optional[str] = None
    description: str = ""
    photo: Optional[str] = None


class InventoryItemUpdate(BaseModel):
    """
    물품 정보 부분 업데이트 모델입니다 (PUT /inventory/{id}).
    요청 본문에 포함된 필드만 변경되며, 생략된 필드와 null은 기존 값을 유지합니다.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, alias="InventoryName")
    description: Optional[str] = Field(None, alias="Description")


# =============================================================================
# 2. 응답 스키마
# =============================================================================
class InventoryItemRead(SQLModel):
    """표준 물품 뷰(item view). PhotoLink는 사진이 없으면 null로 항상 포함됩니다."""
    ID: int
    InventoryName: str
    Description: str
    PhotoLink: Optional[str] = None

    @classmethod
    def from_item(cls, item: InventoryItem) -> "InventoryItemRead":
        return cls(
            ID=item.id,
            InventoryName=item.name,
            Description=item.description,
            PhotoLink=item.photo_link,
        )


class InventorySearchRead(SQLModel):
    """
    검색용 축약 뷰(reduced view).
    PhotoLink가 None이면 응답에서 필드 자체가 빠집니다 (response_model_exclude_none).
    """
    ID: int
    InventoryName: str
    Description: str
    PhotoLink: Optional[str] = None

    @classmethod
    def from_item(cls, item: InventoryItem, *, include_photo_link: bool) -> "InventorySearchRead":
        return cls(
            ID=item.id,
            InventoryName=item.name,
            Description=item.description,
            PhotoLink=item.photo_link if include_photo_link else None,
        )


class InventoryItemMessage(SQLModel):
    """메시지와 물품 뷰를 함께 반환하는 응답 (등록, 사진 교체)."""
    message: str
    item: InventoryItemRead


class MessageResponse(SQLModel):
    message: str


class ErrorResponse(SQLModel):
    error: str
