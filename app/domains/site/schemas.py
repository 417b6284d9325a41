# app/domains/site/schemas.py

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import AnyHttpUrl, BaseModel, EmailStr
from pydantic import Field as PydanticField
from sqlmodel import SQLModel, Field


# =============================================================================
# 1. 메인 페이지 복합 문서
# =============================================================================
class MainPageSettingsBase(SQLModel):
    """
    메인 페이지 설정 싱글톤의 17개 텍스트 필드입니다. 모든 필드는 비어 있을 수 없습니다.
    """
    hero_copy_top: str = Field(..., min_length=1, description="히어로 상단 문구")
    hero_copy_mid: str = Field(..., min_length=1, description="히어로 중간 문구")
    hero_copy_bottom: str = Field(..., min_length=1, description="히어로 하단 문구")
    hero_cta_label: str = Field(..., min_length=1, description="히어로 CTA 버튼 라벨")
    hero_cta_href: str = Field(..., min_length=1, description="히어로 CTA 링크")
    about_title: str = Field(..., min_length=1)
    about_body_1: str = Field(..., min_length=1)
    about_body_2: str = Field(..., min_length=1)
    about_image_url: str = Field(..., min_length=1)
    solution_title: str = Field(..., min_length=1)
    solution_body_1: str = Field(..., min_length=1)
    solution_body_2: str = Field(..., min_length=1)
    solution_step_image_1: str = Field(..., min_length=1)
    solution_step_image_2: str = Field(..., min_length=1)
    solution_step_image_3: str = Field(..., min_length=1)
    footer_address: str = Field(..., min_length=1)
    footer_copyright: str = Field(..., min_length=1)

    class Config:
        from_attributes = True


class MainPageSettingsRead(MainPageSettingsBase):
    updated_at: Optional[datetime] = None


class MainPageSlideBase(SQLModel):
    # id가 비어 있으면 저장 시 서버에서 생성합니다.
    id: Optional[str] = Field(None, max_length=100, description="슬라이드 ID")
    image_url: str = Field("", description="슬라이드 이미지 URL (새 슬라이드는 빈 값)")
    sort_order: int = Field(0, ge=0, description="표시 순서, 저장 시 배열 순서로 재계산")


class MainPageSlideRead(MainPageSlideBase):
    id: str


class MainPageApplicationCardBase(SQLModel):
    id: Optional[str] = Field(None, max_length=100, description="카드 ID")
    label: str = Field("", description="카드 라벨")
    image_url: str = Field("", description="카드 이미지 URL")
    link_url: str = Field("/product", min_length=1, description="카드 클릭 시 이동 경로")
    sort_order: int = Field(0, ge=0)


class MainPageApplicationCardRead(MainPageApplicationCardBase):
    id: str


class MainPageContentUpdate(SQLModel):
    """
    메인 페이지 전체 저장 요청입니다. 슬라이드와 카드는 각각 1개 이상이어야 합니다.
    """
    settings: MainPageSettingsBase
    slides: List[MainPageSlideBase] = Field(..., min_length=1)
    application_cards: List[MainPageApplicationCardBase] = Field(..., min_length=1)


class MainPageContentRead(SQLModel):
    settings: MainPageSettingsRead
    slides: List[MainPageSlideRead]
    application_cards: List[MainPageApplicationCardRead]


# =============================================================================
# 2. 공개 사이트 설정 (JSON 문서)
# =============================================================================
class RouteMetaSetting(BaseModel):
    route: str = PydanticField(..., min_length=1, description="경로 접두사, '/'는 전체 경로에 일치")
    title: str = PydanticField(..., min_length=1)
    favicon_url: str = PydanticField(..., min_length=1)
    og_image_url: str = PydanticField(..., min_length=1)
    sub_banner_image_url: Optional[str] = None


class HeaderMenuItem(BaseModel):
    id: str = PydanticField(..., min_length=1)
    label: str = PydanticField(..., min_length=1)
    href: str = PydanticField(..., min_length=1)
    target: Optional[Literal["_self", "_blank"]] = None
    children: Optional[List["HeaderMenuItem"]] = None


HeaderMenuItem.model_rebuild()


class PublicSiteSettingsBase(BaseModel):
    route_meta: List[RouteMetaSetting] = PydanticField(..., min_length=1)
    header_top_menu: List[HeaderMenuItem] = PydanticField(..., min_length=1)
    header_product_mega: List[HeaderMenuItem] = PydanticField(..., min_length=1)


class PublicSiteSettingsUpdate(PublicSiteSettingsBase):
    pass


class PublicSiteSettingsRead(PublicSiteSettingsBase):
    updated_at: Optional[datetime] = None


# =============================================================================
# 3. 레거시 사이트 콘텐츠 (JSON 문서)
# =============================================================================
class PartnerCategory(str, Enum):
    LASER = "Laser"
    MEASUREMENT = "Measurement"
    OPTICS = "Optics"
    VISION = "Vision"


class HeroSlide(BaseModel):
    id: str = PydanticField(..., min_length=1)
    title: str = PydanticField(..., min_length=1)
    subtitle: str = PydanticField(..., min_length=1)
    cta_label: str = PydanticField(..., min_length=1)
    cta_target: str = PydanticField(..., min_length=1)


class ApplicationCategory(BaseModel):
    id: str = PydanticField(..., min_length=1)
    name: str = PydanticField(..., min_length=1)
    summary: str = PydanticField(..., min_length=1)
    process: str = PydanticField(..., min_length=1)
    recommended_product_category: str = PydanticField(..., min_length=1)


class Product(BaseModel):
    id: str = PydanticField(..., min_length=1)
    name: str = PydanticField(..., min_length=1)
    category: str = PydanticField(..., min_length=1)
    manufacturer: str = PydanticField(..., min_length=1)
    wavelength_nm: str = PydanticField(..., min_length=1)
    power_w: float = PydanticField(..., ge=0)
    interface: str = PydanticField(..., min_length=1)
    benefit: str = PydanticField(..., min_length=1)
    datasheet_url: str = PydanticField(..., min_length=1)
    cad_url: str = PydanticField(..., min_length=1)


class PartnerBrand(BaseModel):
    id: str = PydanticField(..., min_length=1)
    name: str = PydanticField(..., min_length=1)
    category: PartnerCategory
    url: AnyHttpUrl


class SolutionArea(BaseModel):
    id: str = PydanticField(..., min_length=1)
    title: str = PydanticField(..., min_length=1)
    overview: str = PydanticField(..., min_length=1)
    capabilities: List[str]


class QuickLink(BaseModel):
    label: str = PydanticField(..., min_length=1)
    url: AnyHttpUrl


class ContactInfo(BaseModel):
    headquarter: str = PydanticField(..., min_length=1)
    rd_center: str = PydanticField(..., min_length=1)
    tel: str = PydanticField(..., min_length=1)
    fax: str = PydanticField(..., min_length=1)
    email: EmailStr
    website: str = PydanticField(..., min_length=1)


class SiteContentBase(BaseModel):
    hero_slides: List[HeroSlide] = PydanticField(..., min_length=1)
    applications: List[ApplicationCategory] = PydanticField(..., min_length=1)
    products: List[Product] = PydanticField(..., min_length=1)
    partners: List[PartnerBrand] = PydanticField(..., min_length=1)
    solutions: List[SolutionArea] = PydanticField(..., min_length=1)
    quick_links: List[QuickLink] = []
    process_steps: List[str] = PydanticField(..., min_length=1)
    ceo_message: str = PydanticField(..., min_length=1)
    vision_items: List[str] = PydanticField(..., min_length=1)
    contact: ContactInfo


class SiteContentUpdate(SiteContentBase):
    pass


class SiteContentRead(SiteContentBase):
    updated_at: Optional[datetime] = None
