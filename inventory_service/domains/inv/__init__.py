# inventory_service/domains/inv/__init__.py

"""
FastAPI 애플리케이션의 'inv' 도메인 패키지입니다.

'inv' 도메인은 인벤토리 물품(InventoryItem)의 메타데이터와
물품별 사진 첨부를 관리하는 역할을 합니다.

주요 서브모듈:
- `models.py`: 메모리에 저장되는 물품 모델 (SQLModel).
- `schemas.py`: 요청 및 응답 유효성 검사용 모델 (item view, reduced view 등).
- `crud.py`: 물품 카탈로그 (메모리 기반 CRUD, ID 카운터, 사진 참조 교체).
- `services.py`: 카탈로그와 사진 저장소를 함께 다루는 비즈니스 로직.
- `routers.py`: HTTP 엔드포인트 및 HTML 폼 제공.
"""

__all__ = []
