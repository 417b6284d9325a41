# app/domains/site/defaults.py

"""
최초 기동 시(해당 테이블이 비어 있을 때) 저장되는 기본 사이트 콘텐츠입니다.
"""

LEGACY_ADDRESS = (
    "주소 : 서울특별시 금천구 가산디지털 1로 19 대륭테크노타운 18차 1306호 (우편번호 08594) "
    "T 02-852-0533 F 02-853-0537"
)

# =============================================================================
# 1. 메인 페이지
# =============================================================================
DEFAULT_MAIN_PAGE_SETTINGS = {
    "hero_copy_top": "SHINHOTEK",
    "hero_copy_mid": "Innovation Light Changes the World",
    "hero_copy_bottom": "BEST Technology Solution",
    "hero_cta_label": "ABOUT SHINHOTEK",
    "hero_cta_href": "/company/ceo",
    "about_title": "ABOUT SHINHOTEK",
    "about_body_1": (
        "광학은 앞으로 펼쳐질 미래 사회의 핵심 기술로서, 자율주행 자동차 등 광범위한 분야에 활용이 되고 있습니다."
    ),
    "about_body_2": (
        "신호텍은 고객사의 요구에 대한 광학 컨설팅을 통해 최적의 제품을 공급함으로써 "
        "국내의 레이저 산업 및 연구 분야의 발전에 앞장서고 있습니다."
    ),
    "about_image_url": "/assets/legacy/images/section/main_part01_img01.jpg",
    "solution_title": "SH SOLUTION",
    "solution_body_1": (
        "SHINHOTEK은 BPS(Business Partner System)을 기반으로 하여, 기성 광학 구성품 또는 모듈과 "
        "단품을 통합한 광학계 솔루션을 고객사에 제안합니다."
    ),
    "solution_body_2": (
        "가격과 미 경험에 의한 실패 확률을 줄여 최선의 효율을 추구하고, 향후 고객 application 및 "
        "사양에 맞는 맞춤화된 광학 솔루션을 제공하겠습니다."
    ),
    "solution_step_image_1": "/assets/legacy/images/section/main_part02_img01.png",
    "solution_step_image_2": "/assets/legacy/images/section/main_part02_img02.png",
    "solution_step_image_3": "/assets/legacy/images/section/main_part02_img03.png",
    "footer_address": LEGACY_ADDRESS,
    "footer_copyright": "Copyright 2017 SHINHOTEK. All Rights Reserved.",
}

DEFAULT_MAIN_PAGE_SLIDES = [
    {"id": "slide-1", "image_url": "/assets/legacy/images/hero/main_011498524747.jpg", "sort_order": 0},
    {"id": "slide-2", "image_url": "/assets/legacy/images/hero/main2_011498524728.jpg", "sort_order": 1},
    {"id": "slide-3", "image_url": "/assets/legacy/images/hero/main_011500862913.jpg", "sort_order": 2},
]

_APPLICATION_IMAGE_DIR = "/assets/legacy/images/application"

DEFAULT_APPLICATION_CARDS = [
    {"id": "semiconductor", "label": "Semiconductor",
     "image_url": f"{_APPLICATION_IMAGE_DIR}/main_part03_img011504858501.png", "link_url": "/product", "sort_order": 0},
    {"id": "solar-cell", "label": "Solar cell", "image_url": "", "link_url": "/product", "sort_order": 1},
    {"id": "aerospace", "label": "Aerospace",
     "image_url": f"{_APPLICATION_IMAGE_DIR}/main_part03_img031504858618.png", "link_url": "/product", "sort_order": 2},
    {"id": "medical", "label": "Medical",
     "image_url": f"{_APPLICATION_IMAGE_DIR}/main_part03_img041504858646.png", "link_url": "/product", "sort_order": 3},
    {"id": "automotive", "label": "Automotive",
     "image_url": f"{_APPLICATION_IMAGE_DIR}/main_part03_img051504858663.png", "link_url": "/product", "sort_order": 4},
    {"id": "oled-display", "label": "OLED display",
     "image_url": f"{_APPLICATION_IMAGE_DIR}/main_part03_img061504858679.png", "link_url": "/product", "sort_order": 5},
]

# =============================================================================
# 2. 공개 사이트 설정
# =============================================================================
DEFAULT_ROUTE_META = [
    {
        "route": "/",
        "title": "신호텍 주식회사",
        "favicon_url": "/favicon.ico",
        "og_image_url": "/assets/legacy/images/hero/main_011498524747.jpg",
        "sub_banner_image_url": "",
    },
    {
        "route": "/company",
        "title": "신호텍 주식회사 회사소개",
        "favicon_url": "/favicon.ico",
        "og_image_url": "/assets/legacy/images/sub01_-hoe-sa-so-gae_011499426360.jpg",
        "sub_banner_image_url": "/assets/legacy/images/sub01_-hoe-sa-so-gae_011499426360.jpg",
    },
    {
        "route": "/partner",
        "title": "신호텍 주식회사 파트너",
        "favicon_url": "/favicon.ico",
        "og_image_url": "/assets/legacy/images/seul-ra-i-deu11573621207.jpg",
        "sub_banner_image_url": "/assets/legacy/images/sub2_1_img011499513447.jpg",
    },
    {
        "route": "/product",
        "title": "신호텍 주식회사 제품",
        "favicon_url": "/favicon.ico",
        "og_image_url": "/assets/legacy/images/hero/main2_011498524728.jpg",
        "sub_banner_image_url": "/assets/legacy/images/sub01_-hoe-sa-so-gae_011499426360.jpg",
    },
    {
        "route": "/inquiry",
        "title": "신호텍 주식회사 제품문의",
        "favicon_url": "/favicon.ico",
        "og_image_url": "/assets/legacy/images/sub04_-je-pum-mun-ui_011499678045.jpg",
        "sub_banner_image_url": "/assets/legacy/images/sub04_-je-pum-mun-ui_011499678045.jpg",
    },
    {
        "route": "/notice",
        "title": "신호텍 주식회사 NOTICES",
        "favicon_url": "/favicon.ico",
        "og_image_url": "/assets/legacy/images/sub05_-gong-ji-sa-hang_011499515027.jpg",
        "sub_banner_image_url": "/assets/legacy/images/sub05_-gong-ji-sa-hang_011499515027.jpg",
    },
    {
        "route": "/asgasdg124af/admin",
        "title": "신호텍 관리자",
        "favicon_url": "/favicon.ico",
        "og_image_url": "/assets/legacy/images/hero/main_011498524747.jpg",
        "sub_banner_image_url": "",
    },
]

# '제품문의' 상위 메뉴는 하위 메뉴를 가지므로 /inquiry/quote가 아닌 /inquiry를 가리킵니다.
DEFAULT_HEADER_TOP_MENU = [
    {
        "id": "be21e5fa", "label": "회사소개", "href": "/company/ceo",
        "children": [
            {"id": "54ddbaf0", "label": "CEO 인사말", "href": "/company/ceo"},
            {"id": "a8efd0b7", "label": "회사 비전", "href": "/company/vision"},
            {"id": "f4984283", "label": "찾아오시는 길", "href": "/company/location"},
        ],
    },
    {
        "id": "cd917f17", "label": "파트너", "href": "/partner/core",
        "children": [{"id": "sub2_1", "label": "CORE PARTNER", "href": "/partner/core"}],
    },
    {"id": "db4958d7", "label": "제품", "href": "/product"},
    {
        "id": "02708bea", "label": "제품문의", "href": "/inquiry",
        "children": [
            {"id": "inquiry", "label": "견적요청", "href": "/inquiry/quote"},
            {"id": "testdemo", "label": "Test 및 Demo", "href": "/inquiry/test-demo"},
            {"id": "menual", "label": "자료실(매뉴얼)", "href": "/inquiry/library"},
        ],
    },
    {
        "id": "ff6078f4", "label": "공지사항", "href": "/notice",
        "children": [{"id": "b13e0b14", "label": "공지사항", "href": "/notice"}],
    },
]

_LEGACY_SHOP = "http://shinhotek.hmandoo.co.kr/shop_contents/myboard_read.htm"

DEFAULT_HEADER_PRODUCT_MEGA = [
    {
        "id": "6b5eebd7", "label": "Laser", "href": "/product/laser",
        "children": [
            {"id": "aa49a34a", "label": "Nanosecond", "href": "/product/laser/nanosecond"},
            {"id": "d9a8c320", "label": "Picosecond/ Femtosecond", "href": "/product/laser/picosecond-femtosecond"},
            {"id": "b8f82ab3", "label": "CO2", "href": "/product/laser/co2"},
            {"id": "336850dd", "label": "Excimer", "href": "/product/laser/excimer"},
            {"id": "5ea7cbd3", "label": "Diode laser", "href": "/product/laser/diode-laser"},
        ],
    },
    {
        "id": "1f638fd0", "label": "Optics", "href": "/product/optics",
        "children": [
            {"id": "b451fed3", "label": "모노클", "href": "/product/optics/monocle"},
            {"id": "23452345", "label": "ULO Optics", "href": "/product/optics/ulo-optics"},
            {"id": "pro6_3", "label": "그린광학", "href": "/product/optics/green-optics"},
            {"id": "pro6_4", "label": "옌옵틱", "href": "/product/optics/jenoptik"},
        ],
    },
    {
        "id": "1f969dbb", "label": "Laser scanner", "href": "/product/laser-scanner",
        "children": [{"id": "176a9c95", "label": "Scanlab", "href": "/product/laser-scanner/scanlab"}],
    },
    {
        "id": "e158d94e", "label": "Custom solution",
        "href": f"{_LEGACY_SHOP}?myboard_code=pro7_1&idx=862531", "target": "_blank",
        "children": [
            {"id": "28acbd82", "label": "Meopta",
             "href": f"{_LEGACY_SHOP}?myboard_code=pro7_1&idx=862531", "target": "_blank"},
            {"id": "13300bde", "label": "FEMTOPRINT®",
             "href": f"{_LEGACY_SHOP}?myboard_code=pro7_2&idx=86351", "target": "_blank"},
        ],
    },
    {
        "id": "965c17c3", "label": "Laser measurement", "href": "/product/laser-measurement",
        "children": [
            {"id": "ee3098e3", "label": "Laser point", "href": "/product/laser-measurement/laser-point"},
            {"id": "1b1dd59a", "label": "Metrolux", "href": "/product/laser-measurement/metrolux"},
            {"id": "pro4_3", "label": "SHINHOTEK", "href": "/product/laser-measurement/shinhotek"},
        ],
    },
    {
        "id": "pro8_1", "label": "Others", "href": "/product/others",
        "children": [{"id": "36bdb97f", "label": "Others", "href": "/product/others/others"}],
    },
    {
        "id": "6d145a0f", "label": "Beam shaper", "href": "/product/beam-shaper",
        "children": [
            {"id": "bf7f57c7", "label": "Adloptica", "href": "/product/beam-shaper/adloptica"},
            {"id": "6bea92d7", "label": "Power photonic", "href": "/product/beam-shaper/power-photonic"},
            {"id": "pro5_1", "label": "Silios", "href": "/product/beam-shaper/silios"},
        ],
    },
]

DEFAULT_PUBLIC_SITE_SETTINGS = {
    "route_meta": DEFAULT_ROUTE_META,
    "header_top_menu": DEFAULT_HEADER_TOP_MENU,
    "header_product_mega": DEFAULT_HEADER_PRODUCT_MEGA,
}

# =============================================================================
# 3. 레거시 사이트 콘텐츠
# =============================================================================
DEFAULT_SITE_CONTENT = {
    "hero_slides": [
        {"id": "slide-1", "title": "Innovation Light Changes the World",
         "subtitle": "Industrial process-ready laser and optics solutions by SHINHOTEK.",
         "cta_label": "About SHINHOTEK", "cta_target": "partners"},
        {"id": "slide-2", "title": "BEST Technology Solution",
         "subtitle": "Find products quickly with integrated search and filter.",
         "cta_label": "Find Products", "cta_target": "products"},
        {"id": "slide-3", "title": "From Consultation to Verification",
         "subtitle": "Consulting -> Design -> Simulation -> Build -> Verification",
         "cta_label": "Request Quote", "cta_target": "inquiry"},
    ],
    "applications": [
        {"id": "semiconductor", "name": "Semiconductor",
         "summary": "Precision optical systems for semiconductor process quality.",
         "process": "Process mapping with laser source + vision + beam control",
         "recommended_product_category": "Laser, Metrology"},
        {"id": "solar-cell", "name": "Solar Cell",
         "summary": "Optical process support for solar cell lines.",
         "process": "Wavelength and output optimization for cell process lines",
         "recommended_product_category": "Laser Scanner, Optics"},
        {"id": "oled-display", "name": "OLED Display",
         "summary": "Uniformity and precision support for display manufacturing.",
         "process": "Beam shaping and metrology feedback loops",
         "recommended_product_category": "Shaping, Optics"},
        {"id": "aoi", "name": "AOI (Automated Optical Inspection)",
         "summary": "AOI automation category.",
         "process": "High-speed capture + lighting optimization + analysis workflow",
         "recommended_product_category": "Vision, Metrology"},
    ],
    "products": [
        {"id": "laser-fiber-1", "name": "Fiber Laser FL-1000", "category": "Laser", "manufacturer": "TRUMPF",
         "wavelength_nm": "1064", "power_w": 1000, "interface": "EtherCAT / RS-485",
         "benefit": "High output stability and throughput", "datasheet_url": "#", "cad_url": "#"},
        {"id": "scanner-2d-1", "name": "2D Galvo Scanner GS-20", "category": "Laser Scanner",
         "manufacturer": "ScanLab", "wavelength_nm": "355-1064", "power_w": 500, "interface": "XY2-100 / EtherCAT",
         "benefit": "Fast path control for laser machining", "datasheet_url": "#", "cad_url": "#"},
        {"id": "optics-1", "name": "Precision F-Theta Lens", "category": "Optics", "manufacturer": "WizOptics",
         "wavelength_nm": "355 / 532 / 1064", "power_w": 300, "interface": "Mechanical Mount",
         "benefit": "Low distortion and focus stability", "datasheet_url": "#", "cad_url": "#"},
    ],
    "partners": [
        {"id": "p-1", "name": "Uniotech", "category": "Optics", "url": "https://uniotech.kr/"},
        {"id": "p-2", "name": "CoreRay", "category": "Vision", "url": "https://www.coreray.kr/"},
        {"id": "p-4", "name": "SMTech", "category": "Laser", "url": "http://www.smtech.co.kr/"},
        {"id": "p-6", "name": "Jinsung", "category": "Measurement", "url": "https://jinsunginst.com/"},
        {"id": "p-13", "name": "TRUMPF", "category": "Laser", "url": "https://www.trumpf.com/"},
    ],
    "solutions": [
        {"id": "optical-design", "title": "Optical Design",
         "overview": "Optical system design for process-specific requirements.",
         "capabilities": ["Ray tracing with Zemax", "Tolerance analysis", "Prototype validation"]},
        {"id": "mechanical-design", "title": "Mechanical Design",
         "overview": "Mechanical design considering thermal and alignment issues.",
         "capabilities": ["Thermal-aware housing", "Precision alignment jig", "Manufacturable design"]},
        {"id": "sw-design", "title": "SW Design",
         "overview": "Control and analysis automation for equipment and process data.",
         "capabilities": ["Equipment communication", "Inspection logs", "Auto report pipeline"]},
    ],
    "quick_links": [
        {"label": "KakaoTalk", "url": "https://open.kakao.com/"},
        {"label": "LinkedIn", "url": "https://www.linkedin.com/company/shinhotek/"},
    ],
    "process_steps": ["Consulting", "Design", "Simulation", "Build", "Verification"],
    "ceo_message": (
        "SHINHOTEK delivers process-focused optical engineering and supports execution from planning to validation."
    ),
    "vision_items": [
        "Mission: Provide practical optical solutions",
        "Vision: Trusted partner in industrial optics",
        "Core Values: Precision, Reliability, Speed, Scalability",
    ],
    "contact": {
        "headquarter": "#1306 Daerung Techno Town-18, 19 Gasan digital 1-ro, Geumcheon-gu, Seoul, Korea",
        "rd_center": "#1307 Daerung Techno Town-18, 19 Gasan digital 1-ro, Geumcheon-gu, Seoul, Korea",
        "tel": "+82 (0)2 852-0533",
        "fax": "+82 (0)2 853-0537",
        "email": "sales@shinhotek.com",
        "website": "www.shinhotek.com",
    },
}
