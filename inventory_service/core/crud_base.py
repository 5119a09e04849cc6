# inventory_service/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.

레코드는 프로세스 메모리(dict)에만 보관되며, 재시작하면 사라집니다.
모든 접근은 인스턴스마다 하나씩 있는 asyncio.Lock으로 직렬화되므로
동시에 처리되는 요청이 같은 레코드의 필드를 섞어서 보거나 쓰지 않습니다.
조회 메서드는 저장된 객체의 복사본(스냅샷)을 반환합니다.
"""

import asyncio
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlmodel import SQLModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.

    ID는 1부터 시작하여 생성에 성공할 때마다 1씩 증가하며, 삭제 후에도 재사용하지 않습니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model
        self._records: Dict[int, ModelType] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    @property
    def next_id(self) -> int:
        """다음 생성 시 할당될 ID (테스트 및 진단용)."""
        return self._next_id

    async def get(self, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        async with self._lock:
            db_obj = self._records.get(id)
            return db_obj.model_copy() if db_obj is not None else None

    async def get_multi(self) -> List[ModelType]:
        """
        모든 레코드를 생성 순서대로 조회합니다.
        """
        async with self._lock:
            return [r.model_copy() for r in self._records.values()]

    async def create(self, *, obj_in: CreateSchemaType) -> ModelType:
        """
        새로운 레코드를 생성합니다. ID 카운터는 이 시점에만 증가합니다.
        """
        async with self._lock:
            new_id = self._next_id
            db_obj = self.model.model_validate({**obj_in.model_dump(), "id": new_id})
            self._records[new_id] = db_obj
            self._next_id += 1
            return db_obj.model_copy()

    async def update(self, *, id: Any, obj_in: UpdateSchemaType) -> Optional[ModelType]:
        """
        기존 레코드를 업데이트합니다. 요청에 명시된 필드만 변경합니다.
        레코드가 없으면 None을 반환합니다.
        """
        update_data = obj_in.model_dump(exclude_unset=True, exclude_none=True)
        async with self._lock:
            db_obj = self._records.get(id)
            if db_obj is None:
                return None
            for key, value in update_data.items():
                setattr(db_obj, key, value)
            return db_obj.model_copy()

    async def delete(self, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 삭제하고, 삭제된 레코드를 반환합니다.
        """
        async with self._lock:
            return self._records.pop(id, None)
