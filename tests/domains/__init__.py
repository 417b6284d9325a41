# tests/domains/__init__.py

"""
도메인별 테스트 모듈 패키지입니다.

- `test_site_n.py`, `test_route_meta_n.py`: 메인 페이지 복합 문서, 공개 사이트 설정, 경로 메타데이터.
- `test_inq_n.py`: 제품 문의 접수와 관리자 처리.
- `test_cms_n.py`: 자료실, 공지사항, CMS 페이지.
- `test_shared_n.py`: 업로드 파일 저장과 정리.
- `test_auth_n.py`: 관리자 로그인과 토큰 검증.
"""

__title__ = "SHINHOTEK CMS Domain Tests"
__all__ = []
