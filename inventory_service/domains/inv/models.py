# inventory_service/domains/inv/models.py

"""
'inv' 도메인의 데이터 모델을 정의하는 모듈입니다.

데이터베이스 테이블이 아닌 프로세스 메모리에만 존재하는 모델입니다 (table=False).
"""

from typing import Optional
from sqlmodel import Field, SQLModel


# =============================================================================
# 1. 인벤토리 물품 (InventoryItem)
# =============================================================================
class InventoryItem(SQLModel):
    """
    카탈로그에 저장되는 물품 레코드입니다.
    `photo`는 사진 저장소의 파일명(참조)이며, 외부에는 그대로 노출하지 않습니다.
    """
    id: int = Field(..., gt=0, description="카탈로그가 할당한 고유 ID (재사용 안 함)")
    name: str = Field(..., description="물품 이름")
    description: str = Field("", description="물품 설명")
    photo: Optional[str] = Field(None, description="저장된 사진 파일명")

    @property
    def photo_link(self) -> Optional[str]:
        """사진 다운로드 경로. 사진이 없으면 None."""
        return f"/inventory/{self.id}/photo" if self.photo else None
