# app/domains/inq/crud.py

from typing import Any, List, Optional

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase, transactional
from . import models, schemas


class CRUDInquiry(CRUDBase[models.Inquiry, schemas.InquiryCreate, schemas.InquiryStatusUpdate]):
    default_order = (models.Inquiry.created_at.desc(),)

    async def get(self, db: AsyncSession, id: Any) -> Optional[models.Inquiry]:
        # mark_all_read는 세션 동기화 없이 일괄 갱신하므로 항상 DB 값으로 다시 채웁니다.
        return await db.get(self.model, id, populate_existing=True)

    async def get_multi_latest(self, db: AsyncSession) -> List[models.Inquiry]:
        """
        접수 일시 내림차순(최신 먼저)으로 전체 문의를 조회합니다.
        """
        statement = (
            select(self.model)
            .order_by(*self.default_order)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def count_unread(self, db: AsyncSession) -> int:
        statement = select(func.count()).select_from(self.model).where(self.model.is_read.is_(False))
        result = await db.execute(statement)
        return result.scalar_one()

    async def mark_all_read(self, db: AsyncSession) -> int:
        """
        읽지 않은 문의만 읽음으로 바꾸고 실제로 변경된 행 수를 반환합니다.
        상태(status)는 변경하지 않습니다.
        """
        statement = (
            update(self.model)
            .where(self.model.is_read.is_(False))
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        async with transactional(db):
            result = await db.execute(statement)
        return result.rowcount or 0


inquiry = CRUDInquiry(models.Inquiry)
