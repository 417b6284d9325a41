# app/domains/cms/__init__.py

"""
FastAPI 애플리케이션의 'cms' 도메인 패키지입니다.

관리자가 편집하는 단순 CRUD 콘텐츠를 다룹니다.

- 자료실(resources): 카탈로그, 백서, 인증서, 사례 파일과 마크다운 본문.
- 공지사항(notices): 게시일(날짜)과 마크다운 본문.
- CMS 페이지(cms_pages): slug로 식별되는 정적 페이지 (회사소개, 비전 등).

삭제는 대상이 없어도 예외 없이 False를 반환하며, 라우터가 404로 변환합니다.
"""

__title__ = "SHINHOTEK CMS Domain"
__description__ = "Resources, notices and slug-addressed CMS pages."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "crud", "services", "routers", "defaults"]
