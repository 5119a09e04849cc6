# inventory_service/__init__.py

"""
인벤토리 카탈로그 서비스(Inventory Catalog Service)의 메인 패키지입니다.

이 패키지는 물품(inventory item) 등록/조회/수정/삭제와 사진 첨부 관리를 위한
FastAPI 애플리케이션으로 구성됩니다.
- main.py: FastAPI 애플리케이션 진입점
- cli.py: 서버 실행용 명령줄 인터페이스 (typer)
- core: 설정, 예외, 공통 CRUD 기반 클래스, 의존성
- utils: 사진 파일(blob) 저장소
- domains: 비즈니스 도메인 (inv: 인벤토리)
"""

APP_NAME = "Inventory Service API"
APP_VERSION = "1.0.0"

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "In-memory inventory catalog with photo attachments."
__all__ = []
