# app/domains/site/crud.py

"""
'site' 도메인의 저장소 접근 계층입니다.

싱글톤 문서 조회는 행이 없으면 None을 반환하며, 서비스 계층이 NotFoundError로 변환합니다.
컬렉션 교체(replace_all)와 싱글톤 upsert는 커밋하지 않습니다.
호출하는 서비스가 transactional() 블록 안에서 하나의 트랜잭션으로 묶습니다.
"""

from datetime import datetime, UTC
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import delete, insert
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from . import models, schemas


class CRUDMainPageSettings(CRUDBase[models.MainPageSettings, schemas.MainPageSettingsBase, schemas.MainPageSettingsBase]):
    async def get_singleton(self, db: AsyncSession) -> Optional[models.MainPageSettings]:
        statement = (
            select(self.model)
            .where(self.model.id == models.SINGLETON_ID)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return result.scalars().first()

    async def upsert(self, db: AsyncSession, *, values: Dict[str, Any]) -> models.MainPageSettings:
        """
        설정 행을 제자리에서 갱신하거나 없으면 생성합니다. (커밋하지 않음)
        """
        db_obj = await db.get(self.model, models.SINGLETON_ID)
        if db_obj is None:
            db_obj = self.model(id=models.SINGLETON_ID, **values)
        else:
            for key, value in values.items():
                setattr(db_obj, key, value)
        db_obj.updated_at = datetime.now(UTC)
        db.add(db_obj)
        return db_obj


class CRUDOrderedCollection(CRUDBase[SQLModel, SQLModel, SQLModel]):
    """
    sort_order로 정렬되는 메인 페이지 컬렉션 (슬라이드, 어플리케이션 카드) 공용 CRUD.
    """

    async def get_ordered(self, db: AsyncSession) -> List[SQLModel]:
        statement = (
            select(self.model)
            .order_by(self.model.sort_order.asc(), self.model.created_at.asc())
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return list(result.scalars().all())

    async def replace_all(self, db: AsyncSession, *, rows: Sequence[Dict[str, Any]]) -> None:
        """
        컬렉션 전체를 삭제한 뒤 rows로 다시 채웁니다. (커밋하지 않음)
        """
        await db.execute(delete(self.model).execution_options(synchronize_session=False))
        if rows:
            await db.execute(insert(self.model), list(rows))


class CRUDJsonDocument(CRUDBase[SQLModel, SQLModel, SQLModel]):
    """
    id=1 한 행에 JSON 문서(data)를 보관하는 싱글톤 테이블 공용 CRUD.
    """

    async def get_singleton(self, db: AsyncSession) -> Optional[SQLModel]:
        statement = (
            select(self.model)
            .where(self.model.id == models.SINGLETON_ID)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(statement)
        return result.scalars().first()

    async def put_document(self, db: AsyncSession, *, data: Dict[str, Any]) -> SQLModel:
        """
        문서 전체를 교체합니다. (부분 병합 없음, 커밋하지 않음)
        """
        db_obj = await db.get(self.model, models.SINGLETON_ID)
        if db_obj is None:
            db_obj = self.model(id=models.SINGLETON_ID, data=data)
        else:
            db_obj.data = data
        db_obj.updated_at = datetime.now(UTC)
        db.add(db_obj)
        return db_obj


main_page_settings = CRUDMainPageSettings(models.MainPageSettings)
main_page_slide = CRUDOrderedCollection(models.MainPageSlide)
main_page_card = CRUDOrderedCollection(models.MainPageApplicationCard)
public_site_settings = CRUDJsonDocument(models.PublicSiteSettings)
site_content = CRUDJsonDocument(models.SiteContent)
