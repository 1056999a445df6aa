"""
Tests for the HTML site routes, rendered against the live API in-process
"""
import pytest
from fastapi import status


def auth_cookie(token: str) -> dict:
    return {"Cookie": f"auth_token={token}"}


class TestPublicPages:
    @pytest.mark.asyncio
    async def test_root_redirects_to_home(self, client):
        response = await client.get("/")

        assert response.status_code in (status.HTTP_302_FOUND, status.HTTP_307_TEMPORARY_REDIRECT)
        assert response.headers["location"] == "/site/home"

    @pytest.mark.asyncio
    async def test_home_page(self, client, auth_headers):
        await client.post(
            "/api/news",
            json={"title": "Sports Day", "content": "Results", "date": "2024-03-01"},
            headers=auth_headers,
        )

        response = await client.get("/site/home")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("text/html")
        assert "Welcome to Wesley High School" in response.text
        assert "Sports Day" in response.text

    @pytest.mark.asyncio
    async def test_detail_page(self, client, auth_headers):
        created = await client.post(
            "/api/events",
            json={"title": "Fair", "date": "2024-05-01", "location": "Gym"},
            headers=auth_headers,
        )

        response = await client.get(f"/site/events/{created.json()['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert "Fair" in response.text
        assert "Gym" in response.text

    @pytest.mark.asyncio
    async def test_missing_item_renders_not_found(self, client):
        response = await client.get("/site/news/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "Item not found" in response.text

    @pytest.mark.asyncio
    async def test_generic_page(self, client):
        response = await client.get("/site/student-life")

        assert response.status_code == status.HTTP_200_OK
        assert "Student Life" in response.text


class TestContactForm:
    @pytest.mark.asyncio
    async def test_submission_is_stored(self, client, auth_headers):
        response = await client.post(
            "/site/contact-us",
            data={"name": "A", "email": "a@x.com", "subject": "S", "message": "M"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert "Inquiry submitted successfully!" in response.text

        stored = (await client.get("/api/contact", headers=auth_headers)).json()
        assert stored[0]["email"] == "a@x.com"

    @pytest.mark.asyncio
    async def test_invalid_submission_keeps_form_values(self, client):
        response = await client.post(
            "/site/contact-us",
            data={"name": "Ann", "email": "bad-address", "subject": "S", "message": "M"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert 'class="message error"' in response.text
        assert 'value="Ann"' in response.text


class TestAdminSite:
    @pytest.mark.asyncio
    async def test_admin_without_cookie_shows_login(self, client):
        response = await client.get("/site/admin")

        assert response.status_code == status.HTTP_200_OK
        assert 'name="identifier"' in response.text

    @pytest.mark.asyncio
    async def test_login_sets_cookie(self, client, admin_user, admin_credentials):
        response = await client.post(
            "/site/admin/login",
            data={"identifier": admin_credentials["email"], "password": admin_credentials["password"]},
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/site/admin"
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("auth_token=")
        assert "httponly" in cookie.lower()

    @pytest.mark.asyncio
    async def test_bad_login_shows_message(self, client, admin_user):
        response = await client.post(
            "/site/admin/login",
            data={"identifier": "admin", "password": "wrong"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert "Invalid credentials" in response.text
        assert "set-cookie" not in response.headers

    @pytest.mark.asyncio
    async def test_dashboard_lists_pages(self, client, admin_token):
        response = await client.get("/site/admin", headers=auth_cookie(admin_token))

        assert "Admin Dashboard" in response.text
        assert "about-us" in response.text

    @pytest.mark.asyncio
    async def test_invalid_cookie_is_cleared(self, client):
        response = await client.get("/site/admin/inquiries", headers=auth_cookie("forged"))

        assert "session has expired" in response.text
        assert response.headers["set-cookie"].startswith('auth_token=""')

    @pytest.mark.asyncio
    async def test_create_and_delete_item(self, client, admin_token):
        response = await client.post(
            "/site/admin/events/save",
            data={"title": "Fair", "content": "", "date": "2024-05-01", "location": "Gym"},
            headers=auth_cookie(admin_token),
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"].startswith("/site/admin/events?message=")
        events = (await client.get("/api/events")).json()
        assert [(e["title"], e["location"]) for e in events] == [("Fair", "Gym")]

        response = await client.post(
            f"/site/admin/events/{events[0]['id']}/delete",
            headers=auth_cookie(admin_token),
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert (await client.get("/api/events")).json() == []

    @pytest.mark.asyncio
    async def test_save_error_returns_to_form(self, client, admin_token):
        response = await client.post(
            "/site/admin/news/save",
            data={"title": "No date"},
            headers=auth_cookie(admin_token),
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert "new=1" in response.headers["location"]
        assert "error=" in response.headers["location"]

    @pytest.mark.asyncio
    async def test_save_without_cookie_is_rejected_by_the_api(self, client):
        response = await client.post(
            "/site/admin/events/save",
            data={"title": "Fair", "date": "2024-05-01"},
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"].startswith("/site/admin?message=")
        assert (await client.get("/api/events")).json() == []

    @pytest.mark.asyncio
    async def test_update_page_with_inline_image(self, client, admin_token, upload_dir):
        response = await client.post(
            "/site/admin/pages/about-us",
            data={"title": "About Us", "content": "<p>History</p>"},
            files={"media": ("crest.png", b"png", "image/png")},
            headers=auth_cookie(admin_token),
        )

        assert response.status_code == status.HTTP_303_SEE_OTHER
        page = (await client.get("/api/pages/about-us")).json()
        assert page["content"].startswith("<p>History</p>\n<img src=\"/uploads/")
        assert len(list(upload_dir.iterdir())) == 1

    @pytest.mark.asyncio
    async def test_logout_clears_cookie(self, client, admin_token):
        response = await client.post("/site/admin/logout", headers=auth_cookie(admin_token))

        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/site/home"
        assert response.headers["set-cookie"].startswith('auth_token=""')
