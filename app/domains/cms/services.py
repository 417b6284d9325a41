# app/domains/cms/services.py

import logging
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from . import crud, defaults, models, schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 자료실
# =============================================================================
async def list_resources(db: AsyncSession) -> List[models.Resource]:
    return await crud.resource.get_multi(db)


async def create_resource(db: AsyncSession, payload: schemas.ResourceCreate) -> models.Resource:
    return await crud.resource.create(db, obj_in=payload.model_dump(mode="json"))


async def update_resource(db: AsyncSession, resource_id: str, payload: schemas.ResourceUpdate) -> models.Resource:
    db_obj = await crud.resource.get(db, resource_id)
    if db_obj is None:
        raise NotFoundError(f"Resource '{resource_id}' not found")
    return await crud.resource.update(db, db_obj=db_obj, obj_in=payload.model_dump(mode="json"))


async def delete_resource(db: AsyncSession, resource_id: str) -> bool:
    return await crud.resource.delete(db, id=resource_id)


# =============================================================================
# 2. 공지사항
# =============================================================================
async def list_notices(db: AsyncSession) -> List[models.Notice]:
    return await crud.notice.get_multi(db)


async def create_notice(db: AsyncSession, payload: schemas.NoticeCreate) -> models.Notice:
    return await crud.notice.create(db, obj_in=payload.model_dump())


async def update_notice(db: AsyncSession, notice_id: str, payload: schemas.NoticeUpdate) -> models.Notice:
    db_obj = await crud.notice.get(db, notice_id)
    if db_obj is None:
        raise NotFoundError(f"Notice '{notice_id}' not found")
    return await crud.notice.update(db, db_obj=db_obj, obj_in=payload.model_dump())


async def delete_notice(db: AsyncSession, notice_id: str) -> bool:
    return await crud.notice.delete(db, id=notice_id)


# =============================================================================
# 3. CMS 페이지
# =============================================================================
async def list_cms_pages(db: AsyncSession) -> List[models.CmsPage]:
    return await crud.cms_page.get_multi(db)


async def get_cms_page(db: AsyncSession, slug: str) -> models.CmsPage:
    db_obj = await crud.cms_page.get(db, slug)
    if db_obj is None:
        raise NotFoundError(f"CMS page '{slug}' not found")
    return db_obj


async def create_cms_page(db: AsyncSession, payload: schemas.CmsPageCreate) -> models.CmsPage:
    if await crud.cms_page.get(db, payload.slug) is not None:
        raise ValidationError(
            f"CMS page '{payload.slug}' already exists",
            issues=[{"path": "slug", "message": "Slug already exists"}],
        )
    return await crud.cms_page.create(db, obj_in=payload.model_dump())


async def update_cms_page(db: AsyncSession, slug: str, payload: schemas.CmsPageUpdate) -> models.CmsPage:
    db_obj = await get_cms_page(db, slug)
    return await crud.cms_page.update(db, db_obj=db_obj, obj_in=payload.model_dump())


async def delete_cms_page(db: AsyncSession, slug: str) -> bool:
    return await crud.cms_page.delete(db, id=slug)


async def seed_cms_defaults(db: AsyncSession) -> List[str]:
    """cms_pages가 비어 있을 때만 기본 페이지를 생성합니다."""
    if await crud.cms_page.get_multi(db, limit=1):
        return []
    for page in defaults.DEFAULT_CMS_PAGES:
        await crud.cms_page.create(db, obj_in=page)
    logger.info("기본 CMS 페이지 %d개 생성", len(defaults.DEFAULT_CMS_PAGES))
    return ["cms_pages"]
