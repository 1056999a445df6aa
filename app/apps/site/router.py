"""
Site router - HTML pages of the public site and the admin dashboard
"""
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.datastructures import UploadFile
from pathlib import Path
from typing import Optional
import logging

from app.config import JWT_EXPIRE_HOURS, MODE
from app.apps.site.admin import AdminDashboard, UploadedMedia
from app.apps.site.api_client import ApiError, TokenStore, build_api_client
from app.apps.site.navigator import Navigator
from app.apps.site.renderer import SiteRenderer
from app.apps.site.routing import route_href

logger = logging.getLogger(__name__)

router = APIRouter()

STATIC_DIR = Path(__file__).parent / "static"
AUTH_COOKIE = "auth_token"
SESSION_EXPIRED = "Your session has expired. Please log in again."

renderer = SiteRenderer()


async def get_navigator(request: Request):
    """Navigator bound to this request's admin token and an API client"""
    token_store = TokenStore(request.cookies.get(AUTH_COOKIE))
    api = build_api_client(app=request.app, token_store=token_store)
    async with api:
        yield Navigator(api, renderer, AdminDashboard(api, token_store))


def _sync_cookie(response, token_store: TokenStore):
    if not token_store.changed:
        return
    if token_store.token:
        response.set_cookie(
            AUTH_COOKIE,
            token_store.token,
            max_age=JWT_EXPIRE_HOURS * 3600,
            httponly=True,
            secure=MODE == "production",
            samesite="lax",
        )
    else:
        response.delete_cookie(AUTH_COOKIE)


def _page(navigator: Navigator, html: str, title: str, active: str = "", status_code: int = 200) -> HTMLResponse:
    response = HTMLResponse(renderer.render_document(html, title=title, active=active), status_code=status_code)
    _sync_cookie(response, navigator.dashboard.token_store)
    return response


def _redirect(navigator: Navigator, location: str, **params) -> RedirectResponse:
    response = RedirectResponse(route_href(location, **params), status_code=303)
    _sync_cookie(response, navigator.dashboard.token_store)
    return response


async def _read_media(value) -> Optional[UploadedMedia]:
    if not isinstance(value, UploadFile) or not value.filename:
        return None
    content = await value.read()
    return UploadedMedia(
        filename=value.filename,
        content=content,
        content_type=value.content_type or "application/octet-stream",
    )


@router.post("/contact-us", response_class=HTMLResponse)
async def submit_contact(
    name: str = Form(""),
    email: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
    navigator: Navigator = Depends(get_navigator),
):
    """Forward the contact form to the API and show the outcome inline"""
    form = {"name": name, "email": email, "subject": subject, "message": message}
    try:
        data = await navigator.api.fetch_data("contact", method="POST", body=form)
        html = renderer.render_contact(data.get("message"), "success")
    except ApiError as e:
        html = renderer.render_contact(e.message, "error", form)
    return _page(navigator, html, "Contact Us", "contact-us")


@router.post("/admin/login")
async def admin_login(
    identifier: str = Form(""),
    password: str = Form(""),
    navigator: Navigator = Depends(get_navigator),
):
    try:
        await navigator.dashboard.login(identifier, password)
    except ApiError as e:
        return _page(navigator, renderer.render_admin_login(e.message), "Admin", "admin")
    return _redirect(navigator, "admin")


@router.post("/admin/logout")
async def admin_logout(navigator: Navigator = Depends(get_navigator)):
    navigator.dashboard.logout()
    return _redirect(navigator, "home")


@router.post("/admin/pages/{slug}")
async def admin_update_page(slug: str, request: Request, navigator: Navigator = Depends(get_navigator)):
    """Save a page, with optional inline media and hero video uploads"""
    form = await request.form()
    try:
        message = await navigator.dashboard.update_page(
            slug,
            title=str(form.get("title", "")),
            content=str(form.get("content", "")),
            hero_video_url=form.get("hero_video_url") if isinstance(form.get("hero_video_url"), str) else None,
            media=await _read_media(form.get("media")),
            hero_video=await _read_media(form.get("hero_video")),
        )
    except ApiError as e:
        if e.is_auth_error:
            return _redirect(navigator, "admin", message=SESSION_EXPIRED)
        return _redirect(navigator, "admin/pages", edit=slug, error=e.message)
    return _redirect(navigator, "admin/pages", message=message)


@router.post("/admin/{resource}/save")
async def admin_save_item(resource: str, request: Request, navigator: Navigator = Depends(get_navigator)):
    """Create or update an item of a resource type from the dashboard form"""
    form = await request.form()
    fields = {key: value for key, value in form.multi_items() if isinstance(value, str)}
    if "images" in form:
        fields["images"] = "\n".join(value for value in form.getlist("images") if isinstance(value, str))
    item_id = fields.pop("id", "") or None

    try:
        message = await navigator.dashboard.save_item(
            resource,
            fields,
            image=await _read_media(form.get("image")),
            item_id=int(item_id) if item_id else None,
        )
    except ValueError as e:
        return _redirect(navigator, "admin", error=str(e))
    except ApiError as e:
        if e.is_auth_error:
            return _redirect(navigator, "admin", message=SESSION_EXPIRED)
        if item_id:
            return _redirect(navigator, f"admin/{resource}", edit=item_id, error=e.message)
        return _redirect(navigator, f"admin/{resource}", new="1", error=e.message)
    return _redirect(navigator, f"admin/{resource}", message=message)


@router.post("/admin/{resource}/{item_id}/delete")
async def admin_delete_item(resource: str, item_id: int, navigator: Navigator = Depends(get_navigator)):
    try:
        message = await navigator.dashboard.delete_item(resource, item_id)
    except ValueError as e:
        return _redirect(navigator, "admin", error=str(e))
    except ApiError as e:
        if e.is_auth_error:
            return _redirect(navigator, "admin", message=SESSION_EXPIRED)
        return _redirect(navigator, f"admin/{resource}", error=e.message)
    return _redirect(navigator, f"admin/{resource}", message=message)


@router.get("", response_class=HTMLResponse, include_in_schema=False)
@router.get("/{location:path}", response_class=HTMLResponse)
async def show_location(request: Request, location: str = "", navigator: Navigator = Depends(get_navigator)):
    """Render any site location, e.g. /site/home, /site/events/3, /site/admin/news?edit=3"""
    if request.url.query:
        location = f"{location}?{request.url.query}"
    view = await navigator.navigate(location)
    return _page(navigator, view.html, view.title, view.route.page_key, view.status_code)
