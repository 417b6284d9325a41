# tests/domains/test_route_meta_n.py

"""
경로 메타데이터 해석(resolve_route_meta)과 헤더 메뉴 검증(validate_header_menu)에 대한 단위 테스트 모듈입니다.
DB 없이 순수 함수만 검증합니다.
"""

from app.domains.site import defaults
from app.domains.site.route_meta import (
    LEAF_ONLY_MESSAGE,
    normalize_route_path,
    resolve_route_meta,
    route_matches,
    validate_header_menu,
)
from app.domains.site.schemas import HeaderMenuItem, RouteMetaSetting


def _meta(route: str, title: str) -> RouteMetaSetting:
    return RouteMetaSetting(route=route, title=title, favicon_url="/favicon.ico", og_image_url="/og.png")


ROUTE_META = [
    _meta("/", "Home"),
    _meta("/company", "Company"),
    _meta("/company/introduce", "Introduce"),
    _meta("/product/", "Product"),
]


# --- 경로 정규화 / 일치 ---

def test_normalize_route_path_strips_single_trailing_slash():
    assert normalize_route_path("/company/") == "/company"
    assert normalize_route_path("/") == "/"
    assert normalize_route_path("/company") == "/company"


def test_route_matches_respects_segment_boundary():
    assert route_matches("/company", "/company")
    assert route_matches("/company", "/company/ceo")
    assert not route_matches("/company", "/companyx")
    assert route_matches("/", "/anything/at/all")


# --- resolve_route_meta ---

def test_longest_route_wins():
    """더 구체적인 route가 상위 route보다 우선합니다."""
    assert resolve_route_meta("/company/introduce", ROUTE_META).title == "Introduce"
    assert resolve_route_meta("/company/introduce/detail", ROUTE_META).title == "Introduce"
    assert resolve_route_meta("/company/ceo", ROUTE_META).title == "Company"


def test_prefix_without_segment_boundary_falls_back_to_root():
    assert resolve_route_meta("/companyx", ROUTE_META).title == "Home"


def test_trailing_slashes_are_ignored():
    assert resolve_route_meta("/company/", ROUTE_META).title == "Company"
    assert resolve_route_meta("/product/laser", ROUTE_META).title == "Product"
    assert resolve_route_meta("/product", ROUTE_META).title == "Product"


def test_equal_length_routes_keep_original_order():
    """같은 route가 중복되면 목록에서 먼저 나온 항목이 이깁니다."""
    route_meta = [_meta("/", "Home"), _meta("/notice", "First"), _meta("/notice", "Second")]

    assert resolve_route_meta("/notice", route_meta).title == "First"


def test_order_of_input_does_not_matter_for_specificity():
    reversed_meta = list(reversed(ROUTE_META))

    assert resolve_route_meta("/company/introduce", reversed_meta).title == "Introduce"
    assert resolve_route_meta("/", reversed_meta).title == "Home"


def test_no_match_falls_back_to_default_first_entry():
    """
    Given: '/' 항목이 없는 목록, 또는 빈 목록
    When:  일치하지 않는 경로를 해석하면
    Then:  기본 설정의 첫 번째 항목을 반환합니다.
    """
    fallback = RouteMetaSetting.model_validate(defaults.DEFAULT_ROUTE_META[0])

    assert resolve_route_meta("/unknown", [_meta("/company", "Company")]) == fallback
    assert resolve_route_meta("/company", []) == fallback


# --- validate_header_menu ---

def test_seeded_header_menu_is_valid():
    items = [HeaderMenuItem.model_validate(item) for item in defaults.DEFAULT_HEADER_TOP_MENU]

    assert validate_header_menu(items) == []


def test_leaf_only_menu_with_children_is_reported_with_path():
    items = [
        HeaderMenuItem(id="home", label="홈", href="/"),
        HeaderMenuItem(
            id="inquiry", label="제품문의", href="/inquiry",
            children=[
                HeaderMenuItem(
                    id="quote", label="견적요청", href="/inquiry/quote",
                    children=[HeaderMenuItem(id="x", label="하위", href="/inquiry/quote/x")],
                ),
            ],
        ),
    ]

    violations = validate_header_menu(items)

    assert len(violations) == 1
    assert violations[0].path == "header_top_menu.1.children.0.children"
    assert violations[0].message == LEAF_ONLY_MESSAGE


def test_all_violations_are_collected_in_depth_first_order():
    items = [
        HeaderMenuItem(
            id="demo", label="TEST 및 DEMO", href="/inquiry/test-demo",
            children=[
                HeaderMenuItem(
                    id="quote", label="견적요청", href="/inquiry/quote",
                    children=[HeaderMenuItem(id="leaf", label="leaf", href="/leaf")],
                ),
            ],
        ),
    ]

    violations = validate_header_menu(items)

    assert [v.path for v in violations] == [
        "header_top_menu.0.children",
        "header_top_menu.0.children.0.children",
    ]


def test_leaf_only_menu_with_empty_children_is_allowed():
    items = [HeaderMenuItem(id="quote", label="견적요청", href="/inquiry/quote", children=[])]

    assert validate_header_menu(items) == []
