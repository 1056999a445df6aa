"""
Tests for the static pages endpoints
"""
import pytest
from fastapi import status

from app.apps.pages.utils import DEFAULT_PAGES, seed_default_pages


class TestReadPages:
    @pytest.mark.asyncio
    async def test_default_pages_are_listed_by_slug(self, client):
        response = await client.get("/api/pages")

        assert response.status_code == status.HTTP_200_OK
        slugs = [page["slug"] for page in response.json()]
        assert slugs == sorted(slug for slug, _ in DEFAULT_PAGES)
        assert set(response.json()[0]) == {"slug", "title"}

    @pytest.mark.asyncio
    async def test_get_page(self, client):
        response = await client.get("/api/pages/home")

        assert response.status_code == status.HTTP_200_OK
        page = response.json()
        assert page["slug"] == "home"
        assert page["title"] == "Welcome to Wesley High School"
        assert page["hero_video_is_local"] is False

    @pytest.mark.asyncio
    async def test_unknown_page_is_not_found(self, client):
        response = await client.get("/api/pages/does-not-exist")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Page not found"

    @pytest.mark.asyncio
    async def test_seeding_is_idempotent(self, test_session):
        assert await seed_default_pages(test_session) == []


class TestUpdatePage:
    @pytest.mark.asyncio
    async def test_update_changes_only_supplied_fields(self, client, auth_headers):
        response = await client.put(
            "/api/pages/about-us",
            json={"content": "<p>Founded in 1950.</p>"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Page updated successfully"

        page = (await client.get("/api/pages/about-us")).json()
        assert page["content"] == "<p>Founded in 1950.</p>"
        assert page["title"] == "About Us"

    @pytest.mark.asyncio
    async def test_hero_video_accepts_camel_case_fields(self, client, auth_headers):
        response = await client.put(
            "/api/pages/home",
            json={"heroVideoUrl": "/uploads/hero_videos/intro.mp4", "heroVideoIsLocal": True},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        page = (await client.get("/api/pages/home")).json()
        assert page["hero_video_url"] == "/uploads/hero_videos/intro.mp4"
        assert page["hero_video_is_local"] is True

    @pytest.mark.asyncio
    async def test_update_of_unknown_page_is_not_found(self, client, auth_headers):
        response = await client.put(
            "/api/pages/new-page",
            json={"title": "New"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_requires_token(self, client):
        response = await client.put("/api/pages/home", json={"title": "Hacked"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_unknown_fields_are_rejected(self, client, auth_headers):
        response = await client.put(
            "/api/pages/home",
            json={"layout": "wide"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"title": None}, {"hero_video_is_local": None}, {"heroVideoIsLocal": None}])
    async def test_null_for_required_field_is_rejected(self, client, auth_headers, body):
        response = await client.put("/api/pages/home", json=body, headers=auth_headers)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        page = (await client.get("/api/pages/home")).json()
        assert page["title"] == "Welcome to Wesley High School"

    @pytest.mark.asyncio
    async def test_null_clears_hero_video_url(self, client, auth_headers):
        await client.put("/api/pages/home", json={"heroVideoUrl": "https://videos.example/intro.mp4"}, headers=auth_headers)

        response = await client.put("/api/pages/home", json={"heroVideoUrl": None}, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert (await client.get("/api/pages/home")).json()["hero_video_url"] is None
