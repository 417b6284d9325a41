# app/domains/shared/routers.py

"""
'shared' 도메인 (업로드 파일)의 API 엔드포인트를 정의하는 모듈입니다.

- POST /uploads/inquiry: 공개 문의 첨부파일 업로드 (최대 10MB 기본)
- POST /admin/uploads/resource: 자료실 파일 업로드 (관리자, 최대 30MB 기본)
"""

from fastapi import APIRouter, Depends, File, UploadFile, status

from app.core import dependencies as deps
from . import schemas
from . import services as shared_services


router = APIRouter(
    tags=["Shared (업로드 파일)"],
    responses={400: {"description": "Unsupported or empty file"}, 413: {"description": "File too large"}},
)

admin_router = APIRouter(
    tags=["Admin - Shared (업로드 파일)"],
    dependencies=[Depends(deps.get_current_admin)],
    responses={401: {"description": "Unauthorized"}, 413: {"description": "File too large"}},
)


@router.post(
    "/uploads/inquiry",
    response_model=schemas.StoredUploadFile,
    status_code=status.HTTP_201_CREATED,
    summary="문의 첨부파일 업로드",
)
async def upload_inquiry_file(file: UploadFile = File(...)):
    """
    문의 첨부파일을 저장하고 URL과 메타데이터를 반환합니다.
    반환된 값은 문의 접수 요청의 attachment_* 필드에 사용합니다.
    """
    return await shared_services.store_uploaded_file(schemas.UploadKind.INQUIRY, file)


@admin_router.post(
    "/uploads/resource",
    response_model=schemas.StoredUploadFile,
    status_code=status.HTTP_201_CREATED,
    summary="자료실 파일 업로드",
)
async def upload_resource_file(file: UploadFile = File(...)):
    return await shared_services.store_uploaded_file(schemas.UploadKind.RESOURCE, file)
