# app/domains/inq/models.py

import uuid
from datetime import datetime, UTC
from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlmodel import Field, SQLModel


class InquiryType(str, Enum):
    QUOTE = "quote"
    TEST_DEMO = "test-demo"


class InquiryStatus(str, Enum):
    """
    문의 처리 상태. in-review가 유일한 초기 상태이며 done은 종료 상태입니다.
    """
    IN_REVIEW = "in-review"
    DONE = "done"


class Inquiry(SQLModel, table=True):
    """
    inquiries 테이블 모델을 정의하는 클래스입니다.
    enum 값은 문자열(value)로 저장합니다.
    """
    __tablename__ = "inquiries"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    inquiry_type: str = Field(sa_column=Column(String(20), nullable=False), description="문의 유형")
    company: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    position: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    name: str = Field(sa_column=Column(Text, nullable=False), description="문의자 이름")
    email: str = Field(sa_column=Column(Text, nullable=False), description="문의자 이메일")
    contact_number: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    requirements: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    consent: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False))

    # 첨부파일 메타데이터 (파일 자체는 업로드 저장소에 있음)
    attachment_url: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    attachment_name: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    attachment_size: int = Field(default=0, ge=0)
    attachment_mime_type: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))

    status: str = Field(
        default=InquiryStatus.IN_REVIEW.value,
        sa_column=Column(String(20), nullable=False, default=InquiryStatus.IN_REVIEW.value),
    )
    is_read: bool = Field(default=False, sa_column=Column(Boolean, nullable=False, default=False, index=True))
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="접수 일시 (변경 불가)",
    )
