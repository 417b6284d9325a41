# app/domains/cms/routers.py

"""
'cms' 도메인 (자료실, 공지사항, CMS 페이지)의 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from . import schemas
from . import services as cms_services


router = APIRouter(
    tags=["CMS (자료실 / 공지사항 / 페이지)"],
    responses={404: {"description": "Not found"}},
)

admin_router = APIRouter(
    tags=["Admin - CMS (자료실 / 공지사항 / 페이지 관리)"],
    dependencies=[Depends(deps.get_current_admin)],
    responses={401: {"description": "Unauthorized"}, 404: {"description": "Not found"}},
)


# =============================================================================
# 1. 자료실
# =============================================================================
@router.get("/resources", response_model=List[schemas.ResourceRead], summary="자료 목록")
async def read_resources(db: AsyncSession = Depends(deps.get_db_session)):
    """최근 수정 순으로 자료 목록을 조회합니다."""
    return await cms_services.list_resources(db)


@admin_router.post("/resources", response_model=schemas.ResourceRead, status_code=status.HTTP_201_CREATED)
async def create_resource(
    resource_in: schemas.ResourceCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await cms_services.create_resource(db, resource_in)


@admin_router.put("/resources/{resource_id}", response_model=schemas.ResourceRead)
async def update_resource(
    resource_id: str,
    resource_in: schemas.ResourceUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await cms_services.update_resource(db, resource_id, resource_in)


@admin_router.delete("/resources/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(resource_id: str, db: AsyncSession = Depends(deps.get_db_session)):
    if not await cms_services.delete_resource(db, resource_id):
        raise HTTPException(status_code=404, detail="Resource not found")


# =============================================================================
# 2. 공지사항
# =============================================================================
@router.get("/notices", response_model=List[schemas.NoticeRead], summary="공지사항 목록")
async def read_notices(db: AsyncSession = Depends(deps.get_db_session)):
    """게시일 내림차순으로 공지사항을 조회합니다."""
    return await cms_services.list_notices(db)


@admin_router.post("/notices", response_model=schemas.NoticeRead, status_code=status.HTTP_201_CREATED)
async def create_notice(
    notice_in: schemas.NoticeCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await cms_services.create_notice(db, notice_in)


@admin_router.put("/notices/{notice_id}", response_model=schemas.NoticeRead)
async def update_notice(
    notice_id: str,
    notice_in: schemas.NoticeUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await cms_services.update_notice(db, notice_id, notice_in)


@admin_router.delete("/notices/{notice_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notice(notice_id: str, db: AsyncSession = Depends(deps.get_db_session)):
    if not await cms_services.delete_notice(db, notice_id):
        raise HTTPException(status_code=404, detail="Notice not found")


# =============================================================================
# 3. CMS 페이지
# =============================================================================
@router.get("/cms-pages/{slug}", response_model=schemas.CmsPageRead, summary="CMS 페이지 조회")
async def read_cms_page(slug: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await cms_services.get_cms_page(db, slug)


@admin_router.get("/cms-pages", response_model=List[schemas.CmsPageRead], summary="CMS 페이지 목록")
async def read_cms_pages(db: AsyncSession = Depends(deps.get_db_session)):
    return await cms_services.list_cms_pages(db)


@admin_router.post("/cms-pages", response_model=schemas.CmsPageRead, status_code=status.HTTP_201_CREATED)
async def create_cms_page(
    page_in: schemas.CmsPageCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새 CMS 페이지를 생성합니다. 이미 존재하는 slug이면 400을 반환합니다.
    """
    return await cms_services.create_cms_page(db, page_in)


@admin_router.put("/cms-pages/{slug}", response_model=schemas.CmsPageRead)
async def update_cms_page(
    slug: str,
    page_in: schemas.CmsPageUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await cms_services.update_cms_page(db, slug, page_in)


@admin_router.delete("/cms-pages/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cms_page(slug: str, db: AsyncSession = Depends(deps.get_db_session)):
    if not await cms_services.delete_cms_page(db, slug):
        raise HTTPException(status_code=404, detail="CMS page not found")
