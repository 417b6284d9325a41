# app/domains/inq/services.py

import logging
from datetime import datetime, UTC
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import NotFoundError, ValidationError
from . import crud, models, schemas

logger = logging.getLogger(__name__)


def mark_read_on_status_change(db_obj: models.Inquiry, status: models.InquiryStatus) -> None:
    """
    상태 변경 규칙: 관리자가 상태를 바꾸면 '확인함'으로 간주하여 읽음 여부도 항상 True가 됩니다.
    done은 종료 상태이므로 in-review로 되돌릴 수 없습니다.
    """
    if db_obj.status == models.InquiryStatus.DONE.value and status != models.InquiryStatus.DONE:
        raise ValidationError(
            "Inquiry status cannot leave 'done'",
            issues=[{"path": "status", "message": "Inquiry status cannot leave 'done'"}],
        )
    db_obj.status = status.value
    db_obj.is_read = True


async def create_inquiry(db: AsyncSession, payload: schemas.InquiryCreate) -> models.Inquiry:
    """
    공개 문의를 접수합니다. 동의(consent)가 없거나 이름이 비어 있으면 ValidationError를 발생시킵니다.
    """
    issues = []
    if payload.consent is not True:
        issues.append({"path": "consent", "message": "Consent is required"})
    if not payload.name.strip():
        issues.append({"path": "name", "message": "Name is required"})
    if issues:
        raise ValidationError(issues=issues)

    # 서버 지정 필드는 클라이언트 값과 무관하게 여기서 결정합니다.
    values = payload.model_dump(mode="json")
    values.update(
        status=models.InquiryStatus.IN_REVIEW.value,
        is_read=False,
        created_at=datetime.now(UTC),
    )
    db_obj = await crud.inquiry.create(db, obj_in=values)
    logger.info("문의 접수: id=%s, type=%s", db_obj.id, db_obj.inquiry_type)
    return db_obj


async def list_inquiries(db: AsyncSession) -> List[models.Inquiry]:
    return await crud.inquiry.get_multi_latest(db)


async def update_inquiry_status(
    db: AsyncSession, inquiry_id: str, status: models.InquiryStatus
) -> models.Inquiry:
    db_obj = await crud.inquiry.get(db, inquiry_id)
    if db_obj is None:
        raise NotFoundError(f"Inquiry '{inquiry_id}' not found")

    mark_read_on_status_change(db_obj, status)
    return await crud.inquiry.update(db, db_obj=db_obj, obj_in={})


async def count_unread_inquiries(db: AsyncSession) -> int:
    return await crud.inquiry.count_unread(db)


async def mark_all_inquiries_read(db: AsyncSession) -> int:
    updated = await crud.inquiry.mark_all_read(db)
    logger.info("문의 모두 읽음 처리: %d건", updated)
    return updated
