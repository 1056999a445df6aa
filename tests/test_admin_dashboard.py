"""
Tests for the admin dashboard controller
"""
import pytest

from app.apps.site.admin import AdminDashboard, UploadedMedia, embed_media_fragment, splice_media
from app.apps.site.api_client import ApiError, TokenStore


class RecordingApi:
    """Records calls; uploads get sequential paths"""

    def __init__(self, token="valid-token", fail_with=None):
        self.token_store = TokenStore(token)
        self.requests = []
        self.uploads = []
        self.fail_with = fail_with

    async def fetch_data(self, endpoint, auth=False, method="GET", body=None):
        self.requests.append((method, endpoint, body, auth))
        if self.fail_with is not None:
            raise self.fail_with
        if endpoint == "admin/login":
            return {"token": "fresh-token"}
        return {"message": "ok"}

    async def upload_media(self, filename, content, content_type="application/octet-stream", upload_type=None):
        if self.fail_with is not None:
            raise self.fail_with
        self.uploads.append((filename, content_type, upload_type))
        prefix = f"/uploads/{upload_type}" if upload_type else "/uploads"
        return f"{prefix}/{len(self.uploads)}-{filename}"


@pytest.fixture
def api():
    return RecordingApi()


@pytest.fixture
def dashboard(api):
    return AdminDashboard(api)


class TestSession:
    @pytest.mark.asyncio
    async def test_login_with_email(self):
        api = RecordingApi(token=None)
        dashboard = AdminDashboard(api)
        assert dashboard.is_authenticated is False

        await dashboard.login("admin@wesleyhigh.edu", "pw")

        assert api.requests[0][:3] == ("POST", "admin/login", {"email": "admin@wesleyhigh.edu", "password": "pw"})
        assert dashboard.is_authenticated is True
        assert api.token_store.token == "fresh-token"

    @pytest.mark.asyncio
    async def test_login_with_username(self):
        api = RecordingApi(token=None)

        await AdminDashboard(api).login("admin", "pw")

        assert api.requests[0][2] == {"username": "admin", "password": "pw"}

    @pytest.mark.asyncio
    async def test_failed_login_keeps_logged_out(self):
        api = RecordingApi(token=None, fail_with=ApiError("Invalid credentials", status_code=401))
        dashboard = AdminDashboard(api)

        with pytest.raises(ApiError):
            await dashboard.login("admin", "wrong")

        assert dashboard.is_authenticated is False

    def test_logout(self, dashboard):
        dashboard.logout()

        assert dashboard.is_authenticated is False
        assert dashboard.token_store.changed is True

    @pytest.mark.asyncio
    async def test_auth_error_drops_token(self):
        api = RecordingApi(fail_with=ApiError("Invalid or expired token", status_code=403))
        dashboard = AdminDashboard(api)

        with pytest.raises(ApiError):
            await dashboard.delete_item("news", 3)

        assert dashboard.is_authenticated is False

    @pytest.mark.asyncio
    async def test_other_errors_keep_token(self):
        api = RecordingApi(fail_with=ApiError("Item not found", status_code=404))
        dashboard = AdminDashboard(api)

        with pytest.raises(ApiError):
            await dashboard.delete_item("news", 3)

        assert dashboard.is_authenticated is True


class TestBuildPayload:
    def test_only_form_fields_of_the_resource_are_sent(self, dashboard):
        form = {"title": " Fair ", "content": "Fun", "date": "2024-05-01", "location": "Gym", "views": "10", "id": "4"}

        payload = dashboard.build_payload("events", form)

        assert payload == {"title": "Fair", "content": "Fun", "date": "2024-05-01", "location": "Gym"}

    def test_blank_optional_values_are_omitted(self, dashboard):
        payload = dashboard.build_payload("events", {"title": "Fair", "content": "", "date": "2024-05-01", "location": ""})

        assert payload == {"title": "Fair", "content": "", "date": "2024-05-01"}

    def test_blank_optional_values_clear_on_update(self, dashboard):
        form = {"title": "Fair", "content": "", "date": "", "location": "  "}

        payload = dashboard.build_payload("events", form, partial=True)

        assert payload == {"title": "Fair", "content": "", "location": None}

    def test_blank_news_event_media_clears_on_update(self, dashboard):
        form = {"title": "Play", "content": "", "media_type": "", "media_path": "", "event_date": ""}

        payload = dashboard.build_payload("news-events", form, partial=True)

        assert payload["media_type"] is None
        assert payload["media_path"] is None
        assert payload["event_date"] is None
        assert "title" in payload

    def test_news_event_checkbox(self, dashboard):
        unchecked = dashboard.build_payload("news-events", {"title": "Play", "event_date": "2024-06-01"})
        checked = dashboard.build_payload("news-events", {"title": "Play", "is_news": "on", "event_date": "2024-06-01"})

        assert unchecked["is_news"] is False
        assert unchecked["event_date"] == "2024-06-01"
        assert checked["is_news"] is True
        assert checked["event_date"] is None

    def test_gallery_images_one_per_line(self, dashboard):
        payload = dashboard.build_payload("gallery", {"title": "Sports", "images": "/uploads/a.jpg\n\n  /uploads/b.jpg  \n"})

        assert payload["images"] == ["/uploads/a.jpg", "/uploads/b.jpg"]

    def test_image_url_is_added(self, dashboard):
        payload = dashboard.build_payload("news", {"title": "T", "date": "2024-01-01"}, image_url="/uploads/1-a.jpg")

        assert payload["image_url"] == "/uploads/1-a.jpg"

    def test_unknown_resource(self, dashboard):
        with pytest.raises(ValueError):
            dashboard.build_payload("reports", {})


class TestSaveAndDelete:
    @pytest.mark.asyncio
    async def test_create_uploads_image_first(self, dashboard, api):
        image = UploadedMedia("photo.jpg", b"jpeg", "image/jpeg")

        message = await dashboard.save_item("news", {"title": "T", "content": "", "date": "2024-01-01"}, image=image)

        assert message == "Item added successfully!"
        assert api.uploads == [("photo.jpg", "image/jpeg", None)]
        method, endpoint, body, auth = api.requests[-1]
        assert (method, endpoint, auth) == ("POST", "news", True)
        assert body["image_url"] == "/uploads/1-photo.jpg"

    @pytest.mark.asyncio
    async def test_update_uses_put(self, dashboard, api):
        message = await dashboard.save_item("events", {"title": "Fair", "date": "2024-05-01"}, item_id=4)

        assert message == "Item updated successfully!"
        assert api.requests[-1][:2] == ("PUT", "events/4")

    @pytest.mark.asyncio
    async def test_update_sends_null_for_cleared_location(self, dashboard, api):
        await dashboard.save_item("events", {"title": "Fair", "date": "2024-05-01", "location": ""}, item_id=4)

        assert api.requests[-1][2]["location"] is None

    @pytest.mark.asyncio
    async def test_create_omits_blank_location(self, dashboard, api):
        await dashboard.save_item("events", {"title": "Fair", "date": "2024-05-01", "location": ""})

        assert "location" not in api.requests[-1][2]

    @pytest.mark.asyncio
    async def test_image_is_ignored_for_resources_without_images(self, dashboard, api):
        image = UploadedMedia("photo.jpg", b"jpeg", "image/jpeg")

        await dashboard.save_item("events", {"title": "Fair", "date": "2024-05-01"}, image=image)

        assert api.uploads == []

    @pytest.mark.asyncio
    async def test_delete(self, dashboard, api):
        assert await dashboard.delete_item("blog", 9) == "Item deleted successfully!"
        assert api.requests[-1][:2] == ("DELETE", "blog/9")


class TestUpdatePage:
    def test_media_fragments(self):
        assert embed_media_fragment("/uploads/a.png", "image/png", "") == '<img src="/uploads/a.png" alt="Uploaded Image" style="max-width: 100%;">'
        assert embed_media_fragment("/uploads/v.mp4", "video/mp4", "") == '<video src="/uploads/v.mp4" controls style="max-width: 100%;"></video>'

    def test_splice_media(self):
        assert splice_media("<p>Hi</p>\n", "<img>") == "<p>Hi</p>\n<img>"
        assert splice_media("", "<img>") == "<img>"

    @pytest.mark.asyncio
    async def test_inline_media_is_appended_to_content(self, dashboard, api):
        media = UploadedMedia("pic.png", b"png", "image/png")

        await dashboard.update_page("about-us", "About Us", "<p>Hi</p>", media=media)

        method, endpoint, body, _ = api.requests[-1]
        assert (method, endpoint) == ("PUT", "pages/about-us")
        assert body["content"].startswith("<p>Hi</p>\n<img src=\"")
        assert "/uploads/1-pic.png" in body["content"]
        assert "hero_video_url" not in body

    @pytest.mark.asyncio
    async def test_hero_video_upload_is_local(self, dashboard, api):
        video = UploadedMedia("intro.mp4", b"mp4", "video/mp4")

        await dashboard.update_page("home", "Welcome", "", hero_video_url="https://youtube.com/x", hero_video=video)

        body = api.requests[-1][2]
        assert body["hero_video_url"] == "/uploads/hero_videos/1-intro.mp4"
        assert body["hero_video_is_local"] is True

    @pytest.mark.asyncio
    async def test_hero_video_url_is_external(self, dashboard, api):
        await dashboard.update_page("home", "Welcome", "", hero_video_url=" https://youtube.com/x ")

        body = api.requests[-1][2]
        assert body["hero_video_url"] == "https://youtube.com/x"
        assert body["hero_video_is_local"] is False

    @pytest.mark.asyncio
    async def test_no_hero_input_leaves_hero_alone(self, dashboard, api):
        await dashboard.update_page("home", "Welcome", "", hero_video_url="")

        assert set(api.requests[-1][2]) == {"title", "content"}
