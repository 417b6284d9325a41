# app/domains/site/__init__.py

"""
FastAPI 애플리케이션의 'site' 도메인 패키지입니다.

'site' 도메인은 공개 홈페이지의 구성 데이터를 관리합니다.

- 메인 페이지 복합 문서: 설정 싱글톤 + 정렬된 슬라이드 + 정렬된 어플리케이션 카드.
  세 부분은 항상 하나의 트랜잭션으로 저장됩니다.
- 공개 사이트 설정: 경로별 메타데이터(route_meta)와 헤더 메뉴 JSON 문서.
- 레거시 사이트 콘텐츠: 초기 버전 홈페이지가 사용하던 단일 JSON 문서.

주요 서브모듈:
- `models.py`: 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 스키마.
- `crud.py`: 싱글톤 문서와 슬라이드/카드 컬렉션에 대한 저장소 접근.
- `route_meta.py`: 경로 메타데이터 해석과 헤더 메뉴 검증 (순수 함수).
- `services.py`: 복합 저장, 정렬 정규화, 항목 추가/삭제 규칙.
- `defaults.py`: 최초 기동 시 사용하는 기본 콘텐츠.
- `routers.py`: API 엔드포인트.
"""

__title__ = "SHINHOTEK Site Content Domain"
__description__ = "Main page composite document, public site settings and legacy site content."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "crud", "services", "routers", "route_meta", "defaults"]
