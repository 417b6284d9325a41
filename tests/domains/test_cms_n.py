# tests/domains/test_cms_n.py

"""
'cms' 도메인 (자료실, 공지사항, CMS 페이지)에 대한 통합 테스트 모듈입니다.
"""

import asyncio

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from app.domains.cms import defaults as cms_defaults
from app.domains.cms import schemas as cms_schemas
from app.domains.cms import services as cms_services

ADMIN = "/api/v1/admin"


# --- 자료실 ---

@pytest.mark.asyncio
async def test_resource_crud_flow(admin_client: AsyncClient):
    created = await admin_client.post(f"{ADMIN}/resources", json={
        "title": "2025 카탈로그", "type": "Catalog", "file_url": "/files/resource/a.pdf",
    })
    assert created.status_code == 201
    resource = created.json()
    assert resource["type"] == "Catalog"
    assert resource["markdown"] == ""

    await asyncio.sleep(0.01)
    updated = await admin_client.put(f"{ADMIN}/resources/{resource['id']}", json={
        "title": "2025 카탈로그 (개정)", "type": "White Paper", "file_url": resource["file_url"], "markdown": "본문",
    })
    assert updated.status_code == 200
    assert updated.json()["title"] == "2025 카탈로그 (개정)"
    assert updated.json()["type"] == "White Paper"
    assert updated.json()["updated_at"] > resource["updated_at"]

    deleted = await admin_client.delete(f"{ADMIN}/resources/{resource['id']}")
    assert deleted.status_code == 204
    assert (await admin_client.get("/api/v1/resources")).json() == []


@pytest.mark.asyncio
async def test_resources_are_listed_by_latest_update(admin_client: AsyncClient):
    older = (await admin_client.post(f"{ADMIN}/resources", json={"title": "A", "type": "Certificate"})).json()
    await asyncio.sleep(0.01)
    newer = (await admin_client.post(f"{ADMIN}/resources", json={"title": "B", "type": "Case Study"})).json()

    listed = (await admin_client.get("/api/v1/resources")).json()
    assert [r["id"] for r in listed] == [newer["id"], older["id"]]

    # 오래된 자료를 수정하면 맨 앞으로 옵니다.
    await asyncio.sleep(0.01)
    await admin_client.put(f"{ADMIN}/resources/{older['id']}", json={"title": "A2", "type": "Certificate"})
    listed = (await admin_client.get("/api/v1/resources")).json()
    assert [r["id"] for r in listed] == [older["id"], newer["id"]]


@pytest.mark.asyncio
async def test_resource_rejects_unknown_type(admin_client: AsyncClient):
    response = await admin_client.post(f"{ADMIN}/resources", json={"title": "A", "type": "Brochure"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_resource_update_and_delete_missing(admin_client: AsyncClient):
    updated = await admin_client.put(f"{ADMIN}/resources/missing", json={"title": "A", "type": "Catalog"})
    deleted = await admin_client.delete(f"{ADMIN}/resources/missing")

    assert updated.status_code == 404
    assert deleted.status_code == 404


@pytest.mark.asyncio
async def test_delete_resource_twice_reports_nothing_deleted(db_session: AsyncSession):
    resource = await cms_services.create_resource(
        db_session, cms_schemas.ResourceCreate(title="인증서", type="Certificate")
    )

    assert await cms_services.delete_resource(db_session, resource.id) is True
    assert await cms_services.delete_resource(db_session, resource.id) is False
    assert await cms_services.list_resources(db_session) == []


@pytest.mark.asyncio
async def test_resource_write_requires_token(client: AsyncClient):
    response = await client.post(f"{ADMIN}/resources", json={"title": "A", "type": "Catalog"})

    assert response.status_code == 401


# --- 공지사항 ---

@pytest.mark.asyncio
async def test_notices_are_listed_by_published_date_desc(admin_client: AsyncClient):
    for title, published_at in [("1월", "2025-01-10"), ("3월", "2025-03-01"), ("2월", "2025-02-15")]:
        response = await admin_client.post(f"{ADMIN}/notices", json={"title": title, "published_at": published_at})
        assert response.status_code == 201

    listed = (await admin_client.get("/api/v1/notices")).json()

    assert [n["title"] for n in listed] == ["3월", "2월", "1월"]
    assert listed[0]["published_at"] == "2025-03-01"


@pytest.mark.asyncio
async def test_notice_rejects_invalid_date(admin_client: AsyncClient):
    response = await admin_client.post(f"{ADMIN}/notices", json={"title": "공지", "published_at": "2025-13-40"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_notice_update_and_delete(admin_client: AsyncClient):
    notice = (await admin_client.post(f"{ADMIN}/notices", json={
        "title": "공지", "published_at": "2025-05-01", "markdown": "내용",
    })).json()

    updated = await admin_client.put(f"{ADMIN}/notices/{notice['id']}", json={
        "title": "공지 (수정)", "published_at": "2025-05-02", "markdown": "수정된 내용",
    })
    assert updated.status_code == 200
    assert updated.json()["published_at"] == "2025-05-02"

    assert (await admin_client.delete(f"{ADMIN}/notices/{notice['id']}")).status_code == 204
    assert (await admin_client.delete(f"{ADMIN}/notices/{notice['id']}")).status_code == 404


# --- CMS 페이지 ---

@pytest.mark.asyncio
async def test_read_seeded_cms_page(client: AsyncClient, seeded: AsyncSession):
    response = await client.get("/api/v1/cms-pages/company-ceo")

    assert response.status_code == 200
    assert response.json()["slug"] == "company-ceo"
    assert response.json()["title"] == cms_defaults.DEFAULT_CMS_PAGES[0]["title"]


@pytest.mark.asyncio
async def test_read_missing_cms_page_returns_404(client: AsyncClient):
    response = await client.get("/api/v1/cms-pages/unknown")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_cms_page_rejects_duplicate_slug(admin_client: AsyncClient, seeded: AsyncSession):
    response = await admin_client.post(f"{ADMIN}/cms-pages", json={
        "slug": "company-ceo", "title": "중복", "image_url": "/a.png",
    })

    assert response.status_code == 400
    assert response.json()["issues"][0]["path"] == "slug"


@pytest.mark.asyncio
async def test_cms_page_update_keeps_slug(admin_client: AsyncClient, seeded: AsyncSession):
    before = (await admin_client.get("/api/v1/cms-pages/company-vision")).json()
    await asyncio.sleep(0.01)

    response = await admin_client.put(f"{ADMIN}/cms-pages/company-vision", json={
        "slug": "renamed", "title": "비전 (수정)", "image_url": "/v.png", "markdown": "### VISION",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["slug"] == "company-vision"
    assert body["title"] == "비전 (수정)"
    assert body["updated_at"] > before["updated_at"]


@pytest.mark.asyncio
async def test_cms_page_list_create_and_delete(admin_client: AsyncClient, seeded: AsyncSession):
    created = await admin_client.post(f"{ADMIN}/cms-pages", json={
        "slug": "about-history", "title": "연혁", "image_url": "/h.png",
    })
    assert created.status_code == 201

    slugs = [p["slug"] for p in (await admin_client.get(f"{ADMIN}/cms-pages")).json()]
    assert slugs == sorted(slugs)
    assert "about-history" in slugs

    assert (await admin_client.delete(f"{ADMIN}/cms-pages/about-history")).status_code == 204
    assert (await admin_client.get("/api/v1/cms-pages/about-history")).status_code == 404


@pytest.mark.asyncio
async def test_seed_cms_defaults_only_when_empty(db_session: AsyncSession):
    assert await cms_services.seed_cms_defaults(db_session) == ["cms_pages"]
    assert await cms_services.seed_cms_defaults(db_session) == []
    assert len(await cms_services.list_cms_pages(db_session)) == len(cms_defaults.DEFAULT_CMS_PAGES)
