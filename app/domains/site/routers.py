# app/domains/site/routers.py

"""
'site' 도메인 (홈페이지 구성 데이터)의 API 엔드포인트를 정의하는 모듈입니다.

- router: 공개 홈페이지가 읽는 조회 엔드포인트.
- admin_router: 관리자 토큰이 필요한 저장 엔드포인트. (main.py에서 /admin 접두사로 등록)
"""

from fastapi import APIRouter, Depends, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from . import schemas
from . import services as site_services


router = APIRouter(
    tags=["Site Content (홈페이지 구성)"],
    responses={404: {"description": "Not found"}},
)

admin_router = APIRouter(
    tags=["Admin - Site Content (홈페이지 구성 관리)"],
    dependencies=[Depends(deps.get_current_admin)],
    responses={401: {"description": "Unauthorized"}, 404: {"description": "Not found"}},
)


# =============================================================================
# 1. 공개 조회
# =============================================================================
@router.get("/main-page", response_model=schemas.MainPageContentRead, summary="메인 페이지 조회")
async def read_main_page(db: AsyncSession = Depends(deps.get_db_session)):
    """
    메인 페이지 설정, 슬라이드, 어플리케이션 카드를 한 번에 조회합니다.
    슬라이드와 카드는 sort_order 오름차순으로 정렬됩니다.
    """
    return await site_services.get_main_page_content(db)


@router.get("/settings/public", response_model=schemas.PublicSiteSettingsRead, summary="공개 사이트 설정 조회")
async def read_public_site_settings(db: AsyncSession = Depends(deps.get_db_session)):
    return await site_services.get_public_site_settings(db)


@router.get("/settings/public/route-meta", response_model=schemas.RouteMetaSetting, summary="경로 메타데이터 해석")
async def read_route_meta(
    path: str = Query("/", description="메타데이터를 찾을 요청 경로"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    가장 구체적인(가장 긴) route부터 비교하여 경로에 적용할 타이틀/파비콘/OG 이미지를 반환합니다.
    """
    return await site_services.resolve_route_meta_for_path(db, path)


@router.get("/content", response_model=schemas.SiteContentRead, summary="레거시 사이트 콘텐츠 조회")
async def read_site_content(db: AsyncSession = Depends(deps.get_db_session)):
    return await site_services.get_site_content(db)


# =============================================================================
# 2. 관리자 - 메인 페이지
# =============================================================================
@admin_router.get("/main-page", response_model=schemas.MainPageContentRead, summary="메인 페이지 조회 (관리자)")
async def admin_read_main_page(db: AsyncSession = Depends(deps.get_db_session)):
    return await site_services.get_main_page_content(db)


@admin_router.put("/main-page", response_model=schemas.MainPageContentRead, summary="메인 페이지 전체 저장")
async def admin_save_main_page(
    payload: schemas.MainPageContentUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    설정, 슬라이드, 카드를 하나의 트랜잭션으로 저장합니다.
    슬라이드/카드의 sort_order는 요청 배열 순서로 다시 매겨집니다.
    """
    return await site_services.save_main_page_content(db, payload)


@admin_router.post("/main-page/slides", response_model=schemas.MainPageContentRead, summary="슬라이드 추가")
async def admin_add_slide(db: AsyncSession = Depends(deps.get_db_session)):
    return await site_services.add_slide(db)


@admin_router.delete("/main-page/slides/{slide_id}", response_model=schemas.MainPageContentRead, summary="슬라이드 삭제")
async def admin_remove_slide(slide_id: str, db: AsyncSession = Depends(deps.get_db_session)):
    """
    슬라이드를 삭제합니다. 마지막 남은 슬라이드는 삭제할 수 없습니다. (400)
    """
    return await site_services.remove_slide(db, slide_id)


@admin_router.post(
    "/main-page/application-cards", response_model=schemas.MainPageContentRead, summary="어플리케이션 카드 추가"
)
async def admin_add_application_card(db: AsyncSession = Depends(deps.get_db_session)):
    return await site_services.add_application_card(db)


@admin_router.delete(
    "/main-page/application-cards/{card_id}",
    response_model=schemas.MainPageContentRead,
    summary="어플리케이션 카드 삭제",
)
async def admin_remove_application_card(card_id: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await site_services.remove_application_card(db, card_id)


# =============================================================================
# 3. 관리자 - 공개 사이트 설정 / 레거시 콘텐츠
# =============================================================================
@admin_router.get("/settings/public", response_model=schemas.PublicSiteSettingsRead, summary="공개 사이트 설정 조회 (관리자)")
async def admin_read_public_site_settings(db: AsyncSession = Depends(deps.get_db_session)):
    return await site_services.get_public_site_settings(db)


@admin_router.put("/settings/public", response_model=schemas.PublicSiteSettingsRead, summary="공개 사이트 설정 저장")
async def admin_save_public_site_settings(
    payload: schemas.PublicSiteSettingsUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    문서 전체를 교체합니다.
    견적요청 / TEST 및 DEMO 메뉴에 하위 메뉴가 있으면 400과 위반 위치 목록을 반환합니다.
    """
    return await site_services.save_public_site_settings(db, payload)


@admin_router.put("/content", response_model=schemas.SiteContentRead, summary="레거시 사이트 콘텐츠 저장")
async def admin_save_site_content(
    payload: schemas.SiteContentUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await site_services.save_site_content(db, payload)
