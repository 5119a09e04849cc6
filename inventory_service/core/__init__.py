# inventory_service/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `exceptions.py`: 카탈로그 도메인 예외 (ValidationError, NotFound, StorageError).
- `crud_base.py`: 메모리 기반 공통 CRUD 클래스.
- `dependencies.py`: FastAPI의 의존성 주입 시스템에서 사용될 공통 의존성 함수들.
"""

__all__ = []
