# app/domains/site/models.py

from datetime import datetime, UTC
from typing import Any, Dict

from sqlalchemy import JSON, Column, DateTime, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

# PostgreSQL에서는 JSONB, 그 외(테스트용 sqlite)에서는 일반 JSON으로 저장합니다.
JSONDocument = JSON().with_variant(JSONB(), "postgresql")

SINGLETON_ID = 1


def _utcnow() -> datetime:
    return datetime.now(UTC)


class MainPageSettings(SQLModel, table=True):
    """
    main_page_settings 테이블 모델입니다.
    이 테이블은 항상 단 하나의 행(id=1)만 유지하며, 복합 저장으로만 수정됩니다.
    """
    __tablename__ = "main_page_settings"

    id: int = Field(default=SINGLETON_ID, primary_key=True, description="고유 ID (항상 1)")
    hero_copy_top: str = Field(sa_column=Column(Text, nullable=False))
    hero_copy_mid: str = Field(sa_column=Column(Text, nullable=False))
    hero_copy_bottom: str = Field(sa_column=Column(Text, nullable=False))
    hero_cta_label: str = Field(sa_column=Column(Text, nullable=False))
    hero_cta_href: str = Field(sa_column=Column(Text, nullable=False))
    about_title: str = Field(sa_column=Column(Text, nullable=False))
    about_body_1: str = Field(sa_column=Column(Text, nullable=False))
    about_body_2: str = Field(sa_column=Column(Text, nullable=False))
    about_image_url: str = Field(sa_column=Column(Text, nullable=False))
    solution_title: str = Field(sa_column=Column(Text, nullable=False))
    solution_body_1: str = Field(sa_column=Column(Text, nullable=False))
    solution_body_2: str = Field(sa_column=Column(Text, nullable=False))
    solution_step_image_1: str = Field(sa_column=Column(Text, nullable=False))
    solution_step_image_2: str = Field(sa_column=Column(Text, nullable=False))
    solution_step_image_3: str = Field(sa_column=Column(Text, nullable=False))
    footer_address: str = Field(sa_column=Column(Text, nullable=False))
    footer_copyright: str = Field(sa_column=Column(Text, nullable=False))
    updated_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="최종 수정 일시",
    )


class MainPageSlide(SQLModel, table=True):
    """
    main_page_slides 테이블 모델입니다.
    저장할 때마다 전체 컬렉션이 삭제 후 재삽입되며, sort_order는 0..N-1로 연속됩니다.
    """
    __tablename__ = "main_page_slides"

    id: str = Field(primary_key=True, max_length=100, description="슬라이드 ID")
    image_url: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    sort_order: int = Field(default=0, ge=0, description="표시 순서 (0부터)")
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


class MainPageApplicationCard(SQLModel, table=True):
    """
    main_page_application_cards 테이블 모델입니다. 정렬 / 최소 1개 규칙은 슬라이드와 같습니다.
    """
    __tablename__ = "main_page_application_cards"

    id: str = Field(primary_key=True, max_length=100, description="카드 ID")
    label: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    image_url: str = Field(default="", sa_column=Column(Text, nullable=False, default=""))
    link_url: str = Field(default="/product", sa_column=Column(Text, nullable=False, default="/product"))
    sort_order: int = Field(default=0, ge=0, description="표시 순서 (0부터)")
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


class PublicSiteSettings(SQLModel, table=True):
    """
    public_site_settings 테이블 모델입니다. (싱글톤 JSON 문서)
    data: {"route_meta": [...], "header_top_menu": [...], "header_product_mega": [...]}
    """
    __tablename__ = "public_site_settings"

    id: int = Field(default=SINGLETON_ID, primary_key=True)
    data: Dict[str, Any] = Field(sa_column=Column(JSONDocument, nullable=False))
    updated_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


class SiteContent(SQLModel, table=True):
    """
    site_content 테이블 모델입니다. 레거시 홈페이지 콘텐츠 전체를 하나의 JSON 문서로 보관합니다.
    """
    __tablename__ = "site_content"

    id: int = Field(default=SINGLETON_ID, primary_key=True)
    data: Dict[str, Any] = Field(sa_column=Column(JSONDocument, nullable=False))
    updated_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
