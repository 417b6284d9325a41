# app/domains/inq/schemas.py

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, StrictBool
from sqlmodel import SQLModel, Field

from .models import InquiryStatus, InquiryType


class InquiryCreate(SQLModel):
    """
    공개 문의 접수 요청입니다.
    id / status / is_read / created_at은 스키마에 없으므로 클라이언트가 보내도 무시됩니다.
    """
    inquiry_type: InquiryType = Field(..., description="quote | test-demo")
    company: str = Field("", description="회사명")
    position: str = Field("", description="직책")
    name: str = Field(..., min_length=1, description="이름 (필수)")
    email: EmailStr = Field(..., description="이메일 (필수)")
    contact_number: str = Field("", description="연락처")
    requirements: str = Field("", description="요청 사항")
    consent: StrictBool = Field(False, description="개인정보 수집 동의 (JSON true만 허용)")
    attachment_url: str = ""
    attachment_name: str = ""
    attachment_size: int = Field(0, ge=0)
    attachment_mime_type: str = ""


class InquiryStatusUpdate(SQLModel):
    status: InquiryStatus


class InquiryRead(SQLModel):
    id: str
    inquiry_type: InquiryType
    company: str
    position: str
    name: str
    email: str
    contact_number: str
    requirements: str
    consent: bool
    attachment_url: str
    attachment_name: str
    attachment_size: int
    attachment_mime_type: str
    status: InquiryStatus
    is_read: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UnreadCountRead(SQLModel):
    unread_count: int


class ReadAllResult(SQLModel):
    updated_count: int
