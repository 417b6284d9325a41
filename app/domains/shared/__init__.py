# app/domains/shared/__init__.py

"""
FastAPI 애플리케이션의 'shared' 도메인 패키지입니다.

여러 도메인이 함께 사용하는 업로드 파일 저장소를 제공합니다.

- 문의 첨부파일(inquiry)과 자료실 파일(resource)을 종류별 디렉토리에 저장합니다.
- 종류별 허용 확장자 / 최대 크기를 검사하고, 저장된 파일의 공개 URL과 메타데이터를 반환합니다.
- 어디에서도 참조하지 않는 업로드 파일은 ARQ 태스크가 주기적으로 정리합니다.
"""

__title__ = "SHINHOTEK Shared Upload Domain"
__description__ = "Upload file storage shared by the inquiry and cms domains."
__version__ = "0.1.0"
__all__ = ["schemas", "services", "routers", "tasks"]
