# app/__init__.py

"""
신호테크(SHINHOTEK) 홈페이지 관리자 CMS 백엔드의 메인 패키지입니다.

FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 예외, 보안 유틸리티를 담는 core 서브패키지,
그리고 각 콘텐츠 도메인(site, inq, cms, shared, auth)을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "SHINHOTEK Homepage CMS API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Admin content-management backend for the SHINHOTEK homepage."
__all__ = []
