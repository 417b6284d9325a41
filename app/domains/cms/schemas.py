# app/domains/cms/schemas.py

from datetime import date, datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from .models import ResourceType


# =============================================================================
# 1. 자료실
# =============================================================================
class ResourceBase(SQLModel):
    title: str = Field(..., min_length=1, description="자료 제목")
    type: ResourceType = Field(..., description="Catalog | White Paper | Certificate | Case Study")
    file_url: str = Field("", description="업로드된 파일 URL")
    markdown: str = Field("", description="본문 (마크다운)")

    class Config:
        from_attributes = True


class ResourceCreate(ResourceBase):
    pass


class ResourceUpdate(ResourceBase):
    pass


class ResourceRead(ResourceBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# 2. 공지사항
# =============================================================================
class NoticeBase(SQLModel):
    title: str = Field(..., min_length=1, description="공지 제목")
    published_at: date = Field(..., description="게시일 (YYYY-MM-DD)")
    markdown: str = Field("", description="본문 (마크다운)")

    class Config:
        from_attributes = True


class NoticeCreate(NoticeBase):
    pass


class NoticeUpdate(NoticeBase):
    pass


class NoticeRead(NoticeBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =============================================================================
# 3. CMS 페이지
# =============================================================================
class CmsPageBase(SQLModel):
    title: str = Field(..., min_length=1, description="페이지 제목")
    image_url: str = Field(..., min_length=1, description="대표 이미지 URL")
    markdown: str = Field("", description="본문 (마크다운)")

    class Config:
        from_attributes = True


class CmsPageCreate(CmsPageBase):
    slug: str = Field(..., min_length=1, max_length=200, description="페이지 식별자")


class CmsPageUpdate(CmsPageBase):
    """slug는 변경할 수 없으므로 수정 요청에 포함하지 않습니다."""
    pass


class CmsPageRead(CmsPageBase):
    slug: str
    updated_at: Optional[datetime] = None
