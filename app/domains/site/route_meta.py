# app/domains/site/route_meta.py

"""
경로 메타데이터 해석과 헤더 메뉴 구조 검증을 담당하는 순수 함수 모듈입니다.

resolve_route_meta
    요청 경로에 적용할 RouteMetaSetting을 고릅니다.
    더 긴(구체적인) route가 상위 route보다 우선하므로, 관리자가 별도의 우선순위
    필드를 관리할 필요가 없습니다.

    1. 입력 경로와 각 route의 끝 '/' 하나를 제거합니다. (루트 '/'는 그대로)
    2. 정규화된 route 길이 내림차순으로 안정 정렬합니다. 길이가 같으면 원래 순서를 유지하므로
       중복 route는 목록에서 먼저 나온 항목이 이깁니다.
    3. '/'는 모든 경로에 일치합니다. 그 외 route는 경로와 같거나 경로가 `route + "/"`로
       시작할 때만 일치합니다. (`/company`는 `/companyx`에 일치하지 않음)
    4. 일치하는 항목이 없으면 (빈 목록이거나 '/' 항목이 없는 경우) 기본 설정의 첫 항목을 반환합니다.

validate_header_menu
    '견적요청'(/inquiry/quote), 'TEST 및 DEMO'(/inquiry/test-demo) 메뉴는 하위 메뉴를 가질 수 없습니다.
    트리를 깊이 우선(전위 순회)으로 탐색하며 위반 위치를 모두 모아 반환합니다.
"""

from typing import List, NamedTuple, Optional, Sequence

from .defaults import DEFAULT_ROUTE_META
from .schemas import HeaderMenuItem, RouteMetaSetting

LEAF_ONLY_HREFS = frozenset({"/inquiry/quote", "/inquiry/test-demo"})
LEAF_ONLY_MESSAGE = "견적요청 / TEST 및 DEMO 페이지는 하위 페이지를 둘 수 없습니다."


class MenuViolation(NamedTuple):
    path: str
    message: str


def normalize_route_path(path: str) -> str:
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path


def route_matches(route: str, path: str) -> bool:
    if route == "/":
        return True
    return path == route or path.startswith(route + "/")


def resolve_route_meta(path: str, route_meta: Sequence[RouteMetaSetting]) -> RouteMetaSetting:
    normalized_path = normalize_route_path(path or "/")
    # sorted()는 안정 정렬
    ordered = sorted(route_meta, key=lambda item: len(normalize_route_path(item.route)), reverse=True)
    for item in ordered:
        if route_matches(normalize_route_path(item.route), normalized_path):
            return item
    return RouteMetaSetting.model_validate(DEFAULT_ROUTE_META[0])


def validate_header_menu(
    items: Optional[Sequence[HeaderMenuItem]],
    path: str = "header_top_menu",
) -> List[MenuViolation]:
    violations: List[MenuViolation] = []
    _walk_menu(items or [], path, violations)
    return violations


def _walk_menu(items: Sequence[HeaderMenuItem], path: str, violations: List[MenuViolation]) -> None:
    for index, item in enumerate(items):
        current = f"{path}.{index}"
        if item.href in LEAF_ONLY_HREFS and item.children:
            violations.append(MenuViolation(f"{current}.children", LEAF_ONLY_MESSAGE))
        if item.children:
            _walk_menu(item.children, f"{current}.children", violations)
