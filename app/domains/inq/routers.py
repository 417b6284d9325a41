# app/domains/inq/routers.py

"""
'inq' 도메인 (제품 문의)의 API 엔드포인트를 정의하는 모듈입니다.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from . import schemas
from . import services as inq_services


router = APIRouter(
    tags=["Inquiry (제품 문의)"],
)

admin_router = APIRouter(
    tags=["Admin - Inquiry (제품 문의 관리)"],
    dependencies=[Depends(deps.get_current_admin)],
    responses={401: {"description": "Unauthorized"}, 404: {"description": "Not found"}},
)


@router.post("/inquiries", response_model=schemas.InquiryRead, status_code=status.HTTP_201_CREATED, summary="문의 접수")
async def create_inquiry(
    inquiry_in: schemas.InquiryCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    공개 문의를 접수합니다. 개인정보 수집 동의(consent=true)가 없으면 400을 반환합니다.
    상태는 항상 in-review, 읽음 여부는 False로 저장됩니다.
    """
    return await inq_services.create_inquiry(db, inquiry_in)


@admin_router.get("/inquiries", response_model=List[schemas.InquiryRead], summary="문의 목록 조회")
async def read_inquiries(db: AsyncSession = Depends(deps.get_db_session)):
    """최신 접수 순으로 전체 문의를 조회합니다."""
    return await inq_services.list_inquiries(db)


@admin_router.get("/inquiries/unread-count", response_model=schemas.UnreadCountRead, summary="읽지 않은 문의 수")
async def read_unread_count(db: AsyncSession = Depends(deps.get_db_session)):
    return {"unread_count": await inq_services.count_unread_inquiries(db)}


@admin_router.put("/inquiries/read-all", response_model=schemas.ReadAllResult, summary="문의 모두 읽음 처리")
async def mark_all_read(db: AsyncSession = Depends(deps.get_db_session)):
    """
    읽지 않은 문의를 모두 읽음으로 표시하고 실제로 변경된 건수를 반환합니다.
    """
    return {"updated_count": await inq_services.mark_all_inquiries_read(db)}


@admin_router.put("/inquiries/{inquiry_id}/status", response_model=schemas.InquiryRead, summary="문의 상태 변경")
async def update_inquiry_status(
    inquiry_id: str,
    status_in: schemas.InquiryStatusUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    문의 상태를 변경합니다. 상태 변경 시 읽음 여부도 함께 True가 됩니다.
    """
    return await inq_services.update_inquiry_status(db, inquiry_id, status_in.status)
