# inventory_service/core/exceptions.py

"""
카탈로그 연산에서 발생하는 도메인 예외를 정의하는 모듈입니다.

- ValidationError: 필수 필드/파일 누락 (400)
- NotFound: 존재하지 않는 ID 또는 사진이 없는 물품 (404)
- StorageError: 사진 파일 읽기/쓰기 실패, 캐시 디렉토리 접근 불가 (500)

main.py의 예외 핸들러가 이 예외들을 {"error": message} 형태의 응답으로 변환합니다.
"""
from fastapi import status


class CatalogError(Exception):
    """모든 카탈로그 예외의 기본 클래스입니다."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(CatalogError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
