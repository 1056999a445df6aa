"""
Admin dashboard controller

Drives the admin area through the JSON API. Holding a token only means the
dashboard is shown; every mutating call is still checked by the API, and a
401/403 from it drops the token.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional
import logging

from markupsafe import escape

from app.apps.content.registry import RESOURCE_TYPES, ResourceType, get_resource_type
from app.apps.site.api_client import ApiClient, ApiError, TokenStore
from app.apps.site.renderer import media_url

logger = logging.getLogger(__name__)

PAGES_TAB = "pages"
INQUIRIES_TAB = "inquiries"
ADMIN_TABS = (PAGES_TAB,) + tuple(RESOURCE_TYPES) + (INQUIRIES_TAB,)

HOME_SLUG = "home"
HERO_VIDEO_UPLOAD_TYPE = "hero_videos"
TRUE_VALUES = {"true", "on", "1", "yes"}

# Blank values for these fields are sent as empty strings instead of omitted
KEEP_BLANK_FIELDS = {"content", "description", "caption"}


@dataclass
class UploadedMedia:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")


def embed_media_fragment(path: str, content_type: str, base_url: Optional[str] = None) -> str:
    """Markup that shows an uploaded file inline: <img> for images, <video> otherwise"""
    src = escape(media_url(path, base_url))
    if content_type.startswith("image/"):
        return f'<img src="{src}" alt="Uploaded Image" style="max-width: 100%;">'
    return f'<video src="{src}" controls style="max-width: 100%;"></video>'


def splice_media(content: str, fragment: str) -> str:
    """Append a media fragment to page content on its own line"""
    content = (content or "").rstrip()
    return f"{content}\n{fragment}" if content else fragment


class AdminDashboard:
    def __init__(self, api: ApiClient, token_store: Optional[TokenStore] = None):
        self.api = api
        self.token_store = token_store or api.token_store
        self.api.token_store = self.token_store

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token_store.token)

    async def login(self, identifier: str, password: str) -> str:
        """Exchange credentials for a token; identifier is an email or a username"""
        identifier = (identifier or "").strip()
        body: Dict[str, Any] = {"password": password}
        if "@" in identifier:
            body["email"] = identifier
        else:
            body["username"] = identifier

        data = await self.api.fetch_data("admin/login", method="POST", body=body)
        self.token_store.set(data["token"])
        logger.info("Admin logged in")
        return data["token"]

    def logout(self):
        self.token_store.clear()

    async def _guarded(self, awaitable):
        try:
            return await awaitable
        except ApiError as e:
            if e.is_auth_error:
                logger.info("Admin token rejected by the API, logging out")
                self.logout()
            raise

    async def _request(self, endpoint: str, method: str = "GET", body: Optional[Any] = None) -> Any:
        return await self._guarded(self.api.fetch_data(endpoint, auth=True, method=method, body=body))

    async def _upload(self, media: UploadedMedia, upload_type: Optional[str] = None) -> str:
        return await self._guarded(
            self.api.upload_media(media.filename, media.content, media.content_type, upload_type=upload_type)
        )

    @staticmethod
    def resource(name: str) -> ResourceType:
        resource = get_resource_type(name)
        if resource is None:
            raise ValueError(f"Unknown resource type: {name}")
        return resource

    async def load_tab(self, tab: str) -> List[Dict[str, Any]]:
        """Rows for a dashboard tab: pages, a resource type or inquiries"""
        if tab == PAGES_TAB:
            return await self._request("pages") or []
        if tab == INQUIRIES_TAB:
            return await self._request("contact") or []
        resource = self.resource(tab)
        return await self._request(resource.name) or []

    async def load_item(self, resource_name: str, item_id: int) -> Dict[str, Any]:
        resource = self.resource(resource_name)
        return await self._request(f"{resource.name}/{int(item_id)}")

    async def load_page(self, slug: str) -> Dict[str, Any]:
        return await self._request(f"pages/{slug}")

    def build_payload(
        self,
        resource_name: str,
        form: Mapping[str, Any],
        image_url: Optional[str] = None,
        partial: bool = False,
    ) -> Dict[str, Any]:
        """
        JSON body for a create/update from submitted form values

        Only the fields the resource's admin form edits are read. Blank
        optional values are left out on create and sent as null on an update
        (partial), so an edit can clear them. Unchecked is_news boxes mean
        False, and gallery images are one path per line.
        """
        resource = self.resource(resource_name)
        required = getattr(resource.update_schema, "non_nullable", frozenset())
        payload: Dict[str, Any] = {}

        for field in resource.form_fields:
            if field == "is_news":
                payload[field] = str(form.get(field, "")).strip().lower() in TRUE_VALUES
                continue

            if field not in form or form[field] is None:
                continue
            value = form[field]

            if field == "images":
                lines = value if isinstance(value, list) else str(value).splitlines()
                payload[field] = [line.strip() for line in lines if line.strip()]
                continue

            if isinstance(value, str):
                value = value.strip()
                if not value and field not in KEEP_BLANK_FIELDS:
                    if partial and field not in required:
                        payload[field] = None
                    continue
            payload[field] = value

        if payload.get("is_news"):
            payload["event_date"] = None

        if image_url:
            payload["image_url"] = image_url
        return payload

    async def save_item(
        self,
        resource_name: str,
        form: Mapping[str, Any],
        image: Optional[UploadedMedia] = None,
        item_id: Optional[int] = None,
    ) -> str:
        """Create or update an item, uploading its image first when one is given"""
        resource = self.resource(resource_name)

        image_url = None
        if image is not None and resource.accepts_image:
            image_url = await self._upload(image)

        payload = self.build_payload(resource.name, form, image_url, partial=bool(item_id))
        if item_id:
            await self._request(f"{resource.name}/{int(item_id)}", method="PUT", body=payload)
            return "Item updated successfully!"

        await self._request(resource.name, method="POST", body=payload)
        return "Item added successfully!"

    async def delete_item(self, resource_name: str, item_id: int) -> str:
        resource = self.resource(resource_name)
        await self._request(f"{resource.name}/{int(item_id)}", method="DELETE")
        return "Item deleted successfully!"

    async def update_page(
        self,
        slug: str,
        title: str,
        content: str,
        hero_video_url: Optional[str] = None,
        media: Optional[UploadedMedia] = None,
        hero_video: Optional[UploadedMedia] = None,
    ) -> str:
        """
        Save a page. An inline media file is uploaded and appended to the
        content as <img>/<video> markup. A hero video file replaces the hero
        video and marks it local; a typed hero URL marks it external. With
        neither, the current hero video is left alone.
        """
        body: Dict[str, Any] = {"title": title, "content": content or ""}

        if media is not None:
            path = await self._upload(media)
            body["content"] = splice_media(body["content"], embed_media_fragment(path, media.content_type))

        if hero_video is not None:
            body["hero_video_url"] = await self._upload(hero_video, HERO_VIDEO_UPLOAD_TYPE)
            body["hero_video_is_local"] = True
        elif hero_video_url and hero_video_url.strip():
            body["hero_video_url"] = hero_video_url.strip()
            body["hero_video_is_local"] = False

        await self._request(f"pages/{slug}", method="PUT", body=body)
        return "Page updated successfully!"

    async def dashboard_context(
        self,
        tab: Optional[str] = None,
        edit: Optional[str] = None,
        new: bool = False,
        message: Optional[str] = None,
        error: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Everything the dashboard template needs for one tab"""
        tab = tab if tab in ADMIN_TABS else PAGES_TAB
        context: Dict[str, Any] = {
            "tabs": [(PAGES_TAB, "Pages")]
            + [(name, resource.label) for name, resource in RESOURCE_TYPES.items()]
            + [(INQUIRIES_TAB, "Inquiries")],
            "tab": tab,
            "message": message,
            "error": error,
            "resource": None,
            "item": None,
            "page": None,
            "show_form": False,
            "home_slug": HOME_SLUG,
        }
        context["rows"] = await self.load_tab(tab)

        if tab == PAGES_TAB:
            if edit:
                context["page"] = await self.load_page(edit)
        elif tab != INQUIRIES_TAB:
            context["resource"] = self.resource(tab)
            if edit:
                context["item"] = await self.load_item(tab, int(edit))
                context["show_form"] = True
            elif new:
                context["item"] = {}
                context["show_form"] = True
        return context
