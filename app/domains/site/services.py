# app/domains/site/services.py

"""
'site' 도메인의 비즈니스 로직입니다.

메인 페이지 복합 문서 저장 순서 (단일 트랜잭션):
    1. 슬라이드/카드의 sort_order를 배열 순서(0..N-1)로 정규화하고, 비어 있는 id를 생성합니다.
    2. 설정 싱글톤을 제자리에서 갱신합니다. (updated_at 갱신)
    3. 슬라이드 전체 삭제 후 재삽입.
    4. 카드 전체 삭제 후 재삽입.
    5. 커밋. 어느 단계든 실패하면 롤백되어 이전 상태가 그대로 보이고 PersistenceError가 발생합니다.

동시 저장은 마지막 쓰기가 이깁니다. (버전 토큰 없음)
"""

import logging
import uuid
from datetime import datetime, UTC
from typing import Any, Dict, List, Sequence, TypeVar

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import transactional
from app.core.exceptions import NotFoundError, ValidationError
from . import crud, defaults, schemas
from .route_meta import resolve_route_meta, validate_header_menu

logger = logging.getLogger(__name__)

OrderedItem = TypeVar("OrderedItem", schemas.MainPageSlideBase, schemas.MainPageApplicationCardBase)

SLIDE_ID_PREFIX = "slide"
CARD_ID_PREFIX = "card"


# =============================================================================
# 1. 정렬 정규화
# =============================================================================
def normalize_sort_order(items: Sequence[OrderedItem], id_prefix: str = "item") -> List[OrderedItem]:
    """
    배열 위치를 기준으로 sort_order를 0..N-1로 다시 매깁니다. 기존 sort_order 값은 무시합니다.
    예) [A(5), B(2), C(2)] -> [A(0), B(1), C(2)]
    """
    normalized = []
    for index, item in enumerate(items):
        normalized.append(item.model_copy(update={
            "sort_order": index,
            "id": item.id or f"{id_prefix}-{uuid.uuid4().hex[:12]}",
        }))
    return normalized


# =============================================================================
# 2. 메인 페이지 복합 문서
# =============================================================================
async def get_main_page_content(db: AsyncSession) -> schemas.MainPageContentRead:
    settings_row = await crud.main_page_settings.get_singleton(db)
    if settings_row is None:
        raise NotFoundError("Main page settings not found")

    slides = await crud.main_page_slide.get_ordered(db)
    cards = await crud.main_page_card.get_ordered(db)
    return schemas.MainPageContentRead(
        settings=schemas.MainPageSettingsRead.model_validate(settings_row),
        slides=[schemas.MainPageSlideRead.model_validate(s) for s in slides],
        application_cards=[schemas.MainPageApplicationCardRead.model_validate(c) for c in cards],
    )


async def save_main_page_content(
    db: AsyncSession, payload: schemas.MainPageContentUpdate
) -> schemas.MainPageContentRead:
    if not payload.slides:
        raise ValidationError(issues=[{"path": "slides", "message": "At least one slide is required"}])
    if not payload.application_cards:
        raise ValidationError(
            issues=[{"path": "application_cards", "message": "At least one application card is required"}]
        )

    slides = normalize_sort_order(payload.slides, SLIDE_ID_PREFIX)
    cards = normalize_sort_order(payload.application_cards, CARD_ID_PREFIX)
    now = datetime.now(UTC)

    async with transactional(db):
        await crud.main_page_settings.upsert(db, values=payload.settings.model_dump())
        await crud.main_page_slide.replace_all(db, rows=[
            {"id": s.id, "image_url": s.image_url, "sort_order": s.sort_order, "created_at": now}
            for s in slides
        ])
        await crud.main_page_card.replace_all(db, rows=[
            {
                "id": c.id, "label": c.label, "image_url": c.image_url,
                "link_url": c.link_url, "sort_order": c.sort_order, "created_at": now,
            }
            for c in cards
        ])

    logger.info("메인 페이지 저장 완료: 슬라이드 %d개, 카드 %d개", len(slides), len(cards))
    return await get_main_page_content(db)


def _as_update(content: schemas.MainPageContentRead) -> schemas.MainPageContentUpdate:
    return schemas.MainPageContentUpdate(
        settings=schemas.MainPageSettingsBase.model_validate(content.settings.model_dump()),
        slides=[schemas.MainPageSlideBase.model_validate(s.model_dump()) for s in content.slides],
        application_cards=[
            schemas.MainPageApplicationCardBase.model_validate(c.model_dump()) for c in content.application_cards
        ],
    )


def _remove_by_id(items: List[OrderedItem], item_id: str, kind: str) -> List[OrderedItem]:
    if not any(item.id == item_id for item in items):
        raise NotFoundError(f"{kind} '{item_id}' not found")
    # 마지막 남은 항목은 삭제할 수 없습니다.
    if len(items) <= 1:
        raise ValidationError(
            f"At least one {kind} must remain",
            issues=[{"path": item_id, "message": f"At least one {kind} must remain"}],
        )
    return [item for item in items if item.id != item_id]


async def add_slide(db: AsyncSession) -> schemas.MainPageContentRead:
    """빈 이미지의 새 슬라이드를 맨 끝에 추가합니다."""
    current = _as_update(await get_main_page_content(db))
    current.slides.append(schemas.MainPageSlideBase(image_url="", sort_order=len(current.slides)))
    return await save_main_page_content(db, current)


async def remove_slide(db: AsyncSession, slide_id: str) -> schemas.MainPageContentRead:
    current = _as_update(await get_main_page_content(db))
    current.slides = _remove_by_id(current.slides, slide_id, "slide")
    return await save_main_page_content(db, current)


async def add_application_card(db: AsyncSession) -> schemas.MainPageContentRead:
    current = _as_update(await get_main_page_content(db))
    current.application_cards.append(
        schemas.MainPageApplicationCardBase(sort_order=len(current.application_cards))
    )
    return await save_main_page_content(db, current)


async def remove_application_card(db: AsyncSession, card_id: str) -> schemas.MainPageContentRead:
    current = _as_update(await get_main_page_content(db))
    current.application_cards = _remove_by_id(current.application_cards, card_id, "application card")
    return await save_main_page_content(db, current)


# =============================================================================
# 3. 공개 사이트 설정
# =============================================================================
def _settings_read(db_obj: Any) -> schemas.PublicSiteSettingsRead:
    return schemas.PublicSiteSettingsRead.model_validate({**db_obj.data, "updated_at": db_obj.updated_at})


async def get_public_site_settings(db: AsyncSession) -> schemas.PublicSiteSettingsRead:
    db_obj = await crud.public_site_settings.get_singleton(db)
    if db_obj is None:
        raise NotFoundError("Public site settings not found")
    return _settings_read(db_obj)


async def save_public_site_settings(
    db: AsyncSession, payload: schemas.PublicSiteSettingsUpdate
) -> schemas.PublicSiteSettingsRead:
    violations = validate_header_menu(payload.header_top_menu)
    if violations:
        raise ValidationError(issues=[{"path": v.path, "message": v.message} for v in violations])

    data = payload.model_dump(mode="json", exclude_none=True)
    async with transactional(db):
        db_obj = await crud.public_site_settings.put_document(db, data=data)
    logger.info("공개 사이트 설정 저장 완료: route_meta %d개", len(payload.route_meta))
    return _settings_read(db_obj)


async def resolve_route_meta_for_path(db: AsyncSession, path: str) -> schemas.RouteMetaSetting:
    db_obj = await crud.public_site_settings.get_singleton(db)
    route_meta: List[schemas.RouteMetaSetting] = []
    if db_obj is not None:
        route_meta = [schemas.RouteMetaSetting.model_validate(item) for item in db_obj.data.get("route_meta", [])]
    return resolve_route_meta(path, route_meta)


# =============================================================================
# 4. 레거시 사이트 콘텐츠
# =============================================================================
async def get_site_content(db: AsyncSession) -> schemas.SiteContentRead:
    db_obj = await crud.site_content.get_singleton(db)
    if db_obj is None:
        raise NotFoundError("Site content not found")
    return schemas.SiteContentRead.model_validate({**db_obj.data, "updated_at": db_obj.updated_at})


async def save_site_content(db: AsyncSession, payload: schemas.SiteContentUpdate) -> schemas.SiteContentRead:
    data: Dict[str, Any] = payload.model_dump(mode="json")
    async with transactional(db):
        db_obj = await crud.site_content.put_document(db, data=data)
    return schemas.SiteContentRead.model_validate({**db_obj.data, "updated_at": db_obj.updated_at})


# =============================================================================
# 5. 기본 콘텐츠 시드
# =============================================================================
async def seed_site_defaults(db: AsyncSession) -> List[str]:
    """
    비어 있는 site 테이블만 기본 콘텐츠로 채웁니다. 채운 항목 이름 목록을 반환합니다.
    """
    seeded: List[str] = []

    if await crud.main_page_settings.get_singleton(db) is None:
        await save_main_page_content(db, schemas.MainPageContentUpdate(
            settings=schemas.MainPageSettingsBase(**defaults.DEFAULT_MAIN_PAGE_SETTINGS),
            slides=[schemas.MainPageSlideBase(**s) for s in defaults.DEFAULT_MAIN_PAGE_SLIDES],
            application_cards=[schemas.MainPageApplicationCardBase(**c) for c in defaults.DEFAULT_APPLICATION_CARDS],
        ))
        seeded.append("main_page")

    if await crud.public_site_settings.get_singleton(db) is None:
        await save_public_site_settings(
            db, schemas.PublicSiteSettingsUpdate.model_validate(defaults.DEFAULT_PUBLIC_SITE_SETTINGS)
        )
        seeded.append("public_site_settings")

    if await crud.site_content.get_singleton(db) is None:
        await save_site_content(db, schemas.SiteContentUpdate.model_validate(defaults.DEFAULT_SITE_CONTENT))
        seeded.append("site_content")

    return seeded
