# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.

- 단건 조회는 레코드가 없으면 None을 반환합니다. (빈 값과 구분되는 'not found' 신호)
- `updated_at` 필드를 가진 모델은 수정 시 같은 쓰기에서 현재 시각으로 갱신됩니다.
- 쓰기 중 발생한 SQLAlchemyError는 롤백 후 PersistenceError로 변환됩니다. (재시도 없음)
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, UTC
from typing import AsyncGenerator, Generic, List, Optional, Sequence, Type, TypeVar, Any, Dict, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


@asynccontextmanager
async def transactional(db: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """
    블록 전체를 하나의 트랜잭션으로 커밋합니다.
    블록 안에서 예외가 발생하면 롤백하고, 저장소 오류는 PersistenceError로 변환합니다.
    """
    try:
        yield db
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("트랜잭션 롤백: %s", e)
        raise PersistenceError(f"Database write failed: {e.__class__.__name__}") from e
    except Exception:
        await db.rollback()
        raise


def utcnow() -> datetime:
    return datetime.now(UTC)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    `default_order`를 지정하면 get_multi의 기본 정렬로 사용됩니다.
    """
    default_order: Sequence[Any] = ()

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        기본 키를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: Optional[int] = None, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        """
        query = select(self.model)

        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        if self.default_order:
            query = query.order_by(*self.default_order)
        query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        async with transactional(db):
            db.add(db_obj)
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        기존 레코드를 업데이트합니다. `updated_at`이 있으면 함께 갱신합니다.
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(db_obj, key, value)
        if hasattr(db_obj, "updated_at"):
            db_obj.updated_at = utcnow()

        async with transactional(db):
            db.add(db_obj)
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> bool:
        """
        기본 키를 기준으로 레코드를 삭제합니다.
        레코드가 없으면 예외 없이 False를 반환합니다.
        """
        db_obj = await db.get(self.model, id)
        if db_obj is None:
            return False
        async with transactional(db):
            await db.delete(db_obj)
        return True
