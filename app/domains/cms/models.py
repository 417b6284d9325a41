# app/domains/cms/models.py

import uuid
from datetime import date, datetime, UTC
from enum import Enum

from sqlalchemy import Column, Date, DateTime, String, Text
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ResourceType(str, Enum):
    CATALOG = "Catalog"
    WHITE_PAPER = "White Paper"
    CERTIFICATE = "Certificate"
    CASE_STUDY = "Case Study"


class Resource(SQLModel, table=True):
    """
    resources 테이블 모델입니다. (자료실)
    """
    __tablename__ = "resources"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    title: str = Field(sa_column=Column(Text, nullable=False))
    type: str = Field(sa_column=Column(String(20), nullable=False), description="자료 유형")
    file_url: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    markdown: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    created_at: datetime = Field(default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))


class Notice(SQLModel, table=True):
    """
    notices 테이블 모델입니다. (공지사항)
    """
    __tablename__ = "notices"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    title: str = Field(sa_column=Column(Text, nullable=False))
    published_at: date = Field(sa_column=Column(Date, nullable=False), description="게시일")
    markdown: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    created_at: datetime = Field(default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))


class CmsPage(SQLModel, table=True):
    """
    cms_pages 테이블 모델입니다. slug가 기본 키이며 생성 후 변경할 수 없습니다.
    """
    __tablename__ = "cms_pages"

    slug: str = Field(primary_key=True, max_length=200, description="페이지 식별자 (예: company-ceo)")
    title: str = Field(sa_column=Column(Text, nullable=False))
    image_url: str = Field(sa_column=Column(Text, nullable=False))
    markdown: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    updated_at: datetime = Field(default_factory=_utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
