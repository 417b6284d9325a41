# app/domains/inq/__init__.py

"""
FastAPI 애플리케이션의 'inq' (제품 문의) 도메인 패키지입니다.

공개 홈페이지에서 접수되는 견적요청 / TEST 및 DEMO 문의를 저장하고,
관리자가 상태(검토중 -> 완료)와 읽음 여부를 관리합니다.

- 접수 시 id, 접수 일시, 상태(in-review), 읽음 여부(False)는 서버가 지정합니다.
- 관리자가 상태를 변경하면 읽음 여부도 항상 True가 됩니다.
- '모두 읽음' 처리는 실제로 변경된 건수를 반환합니다.
- 문의는 삭제되지 않습니다.
"""

__title__ = "SHINHOTEK Inquiry Domain"
__description__ = "Public inquiry submissions and the admin review lifecycle."
__version__ = "0.1.0"
__all__ = ["models", "schemas", "crud", "services", "routers"]
