# tests/__init__.py

"""
SHINHOTEK 홈페이지 CMS API의 테스트 스위트 패키지입니다.

- `conftest.py`: 테스트 DB(기본 sqlite), 세션, 비인증/관리자 클라이언트, 기본 콘텐츠 시드 픽스처.
- `domains/`: 도메인(site, inq, cms, shared, auth)별 통합 테스트.
- `test_main.py`, `test_database.py`: 애플리케이션 공통 엔드포인트와 DB 유틸리티 테스트.
"""

__title__ = "SHINHOTEK CMS API Tests"
__description__ = "Test suite for the SHINHOTEK homepage CMS API."
__version__ = "0.1.0"
__all__ = []
