# tests/__init__.py

"""
인벤토리 서비스의 테스트 스위트 패키지입니다.

- `domains/`: 도메인별 API 통합 테스트 및 카탈로그 테스트
- `core/`: 공통 CRUD 기반 클래스 테스트
- `utils/`: 사진 저장소 테스트
- `conftest.py`: 테스트 클라이언트, 임시 캐시 디렉토리 등 공용 픽스처
"""

__all__ = []
