# inventory_service/utils/files.py

"""
물품 사진을 캐시 디렉토리에 저장/조회/삭제하는 파일 저장소(blob store) 모듈입니다.

- 파일명은 `{epoch 밀리초}-{원본 파일명(공백은 '_'로 치환)}` 형식으로 생성합니다.
  충돌 회피가 목적이며 내용 기반 중복 제거는 하지 않습니다.
- 카탈로그에는 이 파일명(참조)만 저장됩니다.
"""

import logging
import os
import re
import time
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os

from inventory_service.core.exceptions import StorageError

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


def make_photo_filename(original_name: Optional[str], timestamp_ms: Optional[int] = None) -> str:
    """
    업로드된 원본 파일명으로부터 저장용 파일명을 만듭니다.

    Args:
        original_name (str): 클라이언트가 보낸 원본 파일명 (경로 부분은 무시)
        timestamp_ms (int): 접두사로 사용할 epoch 밀리초. 생략하면 현재 시각.

    Returns:
        str: 예) "1718000000000-my_photo.jpg"
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    base_name = Path((original_name or "").replace("\\", "/")).name or "photo"
    return f"{timestamp_ms}-{_WHITESPACE.sub('_', base_name)}"


class PhotoStore:
    """캐시 디렉토리 하나를 감싸는 사진 파일 저장소입니다."""

    def __init__(self, directory: str | os.PathLike):
        self.directory = Path(directory)

    def ensure_directory(self) -> None:
        """
        캐시 디렉토리가 없으면 생성합니다.
        디렉토리가 아닌 경로이거나 접근할 수 없으면 StorageError를 발생시킵니다 (시작 시 치명적 오류).
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            if not os.access(self.directory, os.R_OK | os.W_OK | os.X_OK):
                raise PermissionError(f"Permission denied: '{self.directory}'")
        except OSError as e:
            raise StorageError(f"Помилка доступу до кешу: {e}") from e

    def path_for(self, reference: str) -> Path:
        """저장된 참조(파일명)의 전체 경로를 반환합니다. 디렉토리 밖으로 벗어날 수 없습니다."""
        return self.directory / Path(reference).name

    async def store(self, data: bytes, original_name: Optional[str]) -> str:
        """
        사진 데이터를 새 파일로 저장하고 참조(파일명)를 반환합니다.
        같은 이름의 파일이 이미 있으면 타임스탬프를 1씩 올려 빈 이름을 찾습니다.
        """
        timestamp_ms = int(time.time() * 1000)
        while True:
            reference = make_photo_filename(original_name, timestamp_ms)
            try:
                async with aiofiles.open(self.path_for(reference), "xb") as f:
                    await f.write(data)
            except FileExistsError:
                timestamp_ms += 1
                continue
            except OSError as e:
                logger.error("사진 저장 실패 (%s): %s", reference, e)
                raise StorageError("Помилка сервера") from e
            return reference

    async def read(self, reference: str) -> bytes:
        """저장된 사진을 읽어 반환합니다. 파일이 없거나 읽을 수 없으면 StorageError."""
        try:
            async with aiofiles.open(self.path_for(reference), "rb") as f:
                return await f.read()
        except OSError as e:
            logger.error("사진 읽기 실패 (%s): %s", reference, e)
            raise StorageError("Помилка сервера") from e

    async def delete(self, reference: Optional[str]) -> bool:
        """
        사진 파일을 삭제합니다 (best-effort).
        파일이 이미 없으면 조용히 넘어가고, 그 밖의 실패는 경고 로그만 남깁니다.

        Returns:
            bool: 실제로 파일을 삭제했으면 True
        """
        if not reference:
            return False
        try:
            await aiofiles.os.remove(self.path_for(reference))
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning("사진 파일 삭제 실패 (%s): %s", reference, e)
            return False
        return True
